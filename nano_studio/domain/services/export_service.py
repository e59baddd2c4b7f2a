from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum
from io import BytesIO

import numpy as np
from PIL import Image

from nano_studio.domain.entities.image_version import ImageVersion

EXPORT_SCALES = (1.0, 0.75, 0.5)
LOSSY_QUALITY = 92
DEFAULT_FILENAME_PREFIX = "nano-studio"
FILENAME_PREFIX_PATTERN = r"^[A-Za-z0-9._-]+$"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class ExportFormat(StrEnum):
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @property
    def mime_type(self) -> str:
        return f"image/{self.value}"


@dataclass(frozen=True)
class ExportedImage:
    data: bytes
    mime_type: str
    width: int
    height: int
    extension: str


class ExportService:
    """Re-encodes an image version for download. Stateless.

    - JPEG has no alpha channel: transparent pixels are blended onto opaque white.
    - PNG and WEBP keep transparency.
    - Lossy formats use a fixed quality of 92.
    """

    def encode(self, version: ImageVersion, fmt: ExportFormat | str, scale: float) -> ExportedImage:
        fmt = ExportFormat(fmt)
        scale = self.validate_scale(scale)
        with Image.open(BytesIO(version.data)) as src:
            src.load()
            img = self._resize(src, scale)
        if fmt is ExportFormat.JPEG:
            img = self.flatten_on_white(img)
            save_kwargs = {"quality": LOSSY_QUALITY}
        elif fmt is ExportFormat.WEBP:
            img = self._with_alpha_or_rgb(img)
            save_kwargs = {"quality": LOSSY_QUALITY}
        else:
            img = self._with_alpha_or_rgb(img)
            save_kwargs = {}
        buf = BytesIO()
        img.save(buf, format=fmt.value.upper(), **save_kwargs)
        return ExportedImage(
            data=buf.getvalue(),
            mime_type=fmt.mime_type,
            width=img.width,
            height=img.height,
            extension=fmt.value,
        )

    @staticmethod
    def validate_scale(scale: float) -> float:
        for allowed in EXPORT_SCALES:
            if math.isclose(float(scale), allowed):
                return allowed
        raise ValueError(f"Unsupported export scale {scale}; expected one of {EXPORT_SCALES}")

    # Blend onto white: out = rgb * a + 1 * (1 - a), on float32 arrays in [0, 1]
    @staticmethod
    def flatten_on_white(img: Image.Image) -> Image.Image:
        rgba = np.asarray(img.convert("RGBA")).astype(np.float32) / 255.0
        alpha = rgba[..., 3:4]
        out = np.clip(rgba[..., :3] * alpha + (1.0 - alpha), 0.0, 1.0)
        return Image.fromarray(np.rint(out * 255.0).astype("uint8"))

    # --------- helpers ---------
    @staticmethod
    def _resize(img: Image.Image, scale: float) -> Image.Image:
        if scale == 1.0:
            return img.copy()
        width = max(1, math.floor(img.width * scale))
        height = max(1, math.floor(img.height * scale))
        if img.mode not in ("RGB", "RGBA", "L", "LA"):
            img = img.convert("RGBA")
        return img.resize((width, height), Image.Resampling.LANCZOS)

    @staticmethod
    def _with_alpha_or_rgb(img: Image.Image) -> Image.Image:
        if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
            return img.convert("RGBA")
        return img.convert("RGB")


def export_filename(prefix: str, fmt: ExportFormat | str, today: date | None = None) -> str:
    """``<prefix>-<YYYY-MM-DD>.<ext>``; characters outside ``[A-Za-z0-9._-]`` in the prefix become ``-``."""
    prefix = _UNSAFE_FILENAME_CHARS.sub("-", prefix).strip("-.") or DEFAULT_FILENAME_PREFIX
    today = today or datetime.now(UTC).date()
    return f"{prefix}-{today.isoformat()}.{ExportFormat(fmt).value}"
