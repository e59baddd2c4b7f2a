from __future__ import annotations

import os
from functools import lru_cache

from nano_studio.application.controllers.session_controller import StudioSessionController
from nano_studio.domain.services.export_service import ExportService
from nano_studio.infrastructure.gateway.gemini_gateway import GeminiGateway
from nano_studio.infrastructure.gateway.generation_gateway import GenerationGateway, LocalEchoGateway


def get_gateway() -> GenerationGateway:
    if os.getenv("GEMINI_DISABLED", "0") == "1":
        return LocalEchoGateway()
    return GeminiGateway()


# One live session per process
@lru_cache(maxsize=1)
def get_session_controller() -> StudioSessionController:
    return StudioSessionController(get_gateway(), exporter=ExportService())
