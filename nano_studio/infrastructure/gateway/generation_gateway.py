from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedImage:
    data: bytes
    mime_type: str


class GenerationGateway(Protocol):
    """Boundary to the external "edit this image as instructed" capability.

    ``generate`` returns the new image or raises ``GenerationError``.
    """

    async def generate(self, base_image: bytes, mime_type: str, instruction: str) -> GeneratedImage: ...


class LocalEchoGateway:
    """Offline stand-in used when ``GEMINI_DISABLED=1``: returns the base image unchanged."""

    async def generate(self, base_image: bytes, mime_type: str, instruction: str) -> GeneratedImage:
        logger.info("Echo gateway returning base image (instruction_len=%d)", len(instruction))
        return GeneratedImage(data=bytes(base_image), mime_type=mime_type)
