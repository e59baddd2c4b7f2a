"""Gemini image-editing gateway.

Sends the current image plus the instruction to a Gemini image model and
returns the first inline image of the response.

Dependencies: google-genai, asyncio
"""
from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from google import genai
from google.genai import types

from nano_studio.domain.errors import GenerationError, ImageReadError
from nano_studio.domain.services.media_service import inspect_image
from nano_studio.infrastructure.gateway.generation_gateway import GeneratedImage

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_TIMEOUT_SECONDS = 120.0


class GeminiGateway:
    """Single-call pass-through to Gemini. No retries."""

    def __init__(
        self,
        client: Any | None = None,
        *,
        model: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self.model = model or os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_MODEL)
        self.timeout = (
            timeout
            if timeout is not None
            else float(os.getenv("GEMINI_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
        )

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
            try:
                self._client = genai.Client(api_key=api_key)
            except Exception as exc:
                raise GenerationError(f"Image service is not configured: {exc}") from exc
        return self._client

    async def generate(self, base_image: bytes, mime_type: str, instruction: str) -> GeneratedImage:
        logger.info(
            "Gemini generate START model=%s mime_type=%s image_len=%d instruction_len=%d",
            self.model,
            mime_type,
            len(base_image),
            len(instruction),
        )
        client = self._get_client()
        contents = [types.Part.from_bytes(data=base_image, mime_type=mime_type), instruction]
        config = types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"])
        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(model=self.model, contents=contents, config=config),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("Gemini generate TIMEOUT after %.1fs", self.timeout)
            raise GenerationError(f"The image service timed out after {self.timeout:g} seconds") from exc
        except Exception as exc:
            logger.error("Gemini generate FAILED - %s: %s", type(exc).__name__, exc, exc_info=True)
            raise GenerationError(f"The image service failed: {exc}") from exc

        result = self._extract_image(response)
        try:
            inspect_image(result.data)
        except ImageReadError as exc:
            raise GenerationError("The image service returned an unreadable image") from exc
        logger.info("Gemini generate END mime_type=%s image_len=%d", result.mime_type, len(result.data))
        return result

    @staticmethod
    def _extract_image(response: Any) -> GeneratedImage:
        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if inline is None:
                    continue
                if not inline.data:
                    raise GenerationError("The image service returned an empty image")
                return GeneratedImage(data=bytes(inline.data), mime_type=inline.mime_type or "image/png")
        raise GenerationError("The image service did not return an image")
