import io
import os
import struct
import sys
import zlib
from pathlib import Path

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Ensure project root is on sys.path so 'nano_studio' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("GEMINI_DISABLED", "1")


def _encode(arr: np.ndarray, fmt: str) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture()
def make_image_bytes():
    """Factory: solid-color image bytes, RGB or RGBA, in PNG/JPEG/WEBP."""

    def factory(w=8, h=6, color=(128, 64, 32), fmt="PNG") -> bytes:
        arr = np.zeros((h, w, len(color)), dtype=np.uint8)
        arr[:, :] = color
        return _encode(arr, fmt)

    return factory


@pytest.fixture()
def png_bytes(make_image_bytes) -> bytes:
    return make_image_bytes()


@pytest.fixture()
def transparent_png_bytes() -> bytes:
    # red square in the left half, fully transparent right half
    arr = np.zeros((10, 20, 4), dtype=np.uint8)
    arr[:, :10] = (255, 0, 0, 255)
    return _encode(arr, "PNG")


@pytest.fixture()
def oversized_png_bytes() -> bytes:
    """A valid PNG header declaring 30000x30000 pixels, with no pixel data."""

    def chunk(tag: bytes, data: bytes) -> bytes:
        return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data) & 0xFFFFFFFF)

    ihdr = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IDAT", zlib.compress(b"")) + chunk(b"IEND", b"")


@pytest.fixture()
def client():
    # lazy import after env configured
    from nano_studio.application.controllers.session_controller import StudioSessionController
    from nano_studio.infrastructure.api.dependencies import get_session_controller
    from nano_studio.infrastructure.gateway.generation_gateway import LocalEchoGateway
    from nano_studio.main import create_app

    app = create_app()
    controller = StudioSessionController(LocalEchoGateway())
    app.dependency_overrides[get_session_controller] = lambda: controller
    with TestClient(app) as test_client:
        test_client.controller = controller
        yield test_client
