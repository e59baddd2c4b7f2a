"""Session controller for the photo studio.

:class:`StudioSessionController` turns user intents (upload, generate, undo,
redo, reset) into edit-session mutations and generation calls, and keeps the
coarse status shown by the front end. It owns its :class:`EditSession`, so the
whole state machine can be driven without any web framework.

Only one generation may be in flight. While it runs every other intent is
rejected with :class:`SessionBusyError` and nothing changes.
"""
from __future__ import annotations

import logging
from datetime import date

from nano_studio.application.use_cases.export_image import ExportImageUseCase
from nano_studio.application.use_cases.generate_edit import GenerateEditUseCase
from nano_studio.application.use_cases.upload_image import UploadImageUseCase
from nano_studio.domain.entities.edit_session import EditSession
from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.entities.studio_status import StudioStatus
from nano_studio.domain.errors import SessionBusyError, StudioError
from nano_studio.domain.services.export_service import (
    DEFAULT_FILENAME_PREFIX,
    ExportedImage,
    ExportFormat,
    ExportService,
)
from nano_studio.infrastructure.gateway.generation_gateway import GenerationGateway

logger = logging.getLogger(__name__)


class StudioSessionController:
    def __init__(
        self,
        gateway: GenerationGateway,
        *,
        session: EditSession | None = None,
        exporter: ExportService | None = None,
    ) -> None:
        self._gateway = gateway
        self._session = session or EditSession()
        self._exporter = exporter or ExportService()
        self._status = StudioStatus.IDLE
        self._error_message: str | None = None

    @property
    def session(self) -> EditSession:
        return self._session

    @property
    def status(self) -> StudioStatus:
        return self._status

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def is_processing(self) -> bool:
        return self._status is StudioStatus.PROCESSING

    # --------- intents ---------
    def upload(self, payload: bytes, media_type: str | None, filename: str | None = None) -> ImageVersion:
        self._ensure_idle("upload")
        self._error_message = None
        self._status = StudioStatus.UPLOADING
        logger.info("Upload started filename=%s media_type=%s size=%d", filename, media_type, len(payload))
        try:
            version = UploadImageUseCase(self._session).execute(payload, media_type, filename)
        except StudioError as exc:
            self._fail(exc)
            raise
        except Exception as exc:
            self._fail(StudioError(f"Unexpected error while reading the upload: {exc}"))
            raise
        self._status = StudioStatus.IDLE
        logger.info("Upload loaded %dx%d %s", version.width, version.height, version.mime_type)
        return version

    async def generate(self, instruction: str) -> ImageVersion:
        # no await between this check and the status switch: single-flight guard
        self._ensure_idle("generate")
        self._error_message = None
        self._status = StudioStatus.PROCESSING
        logger.info("Generation started cursor=%s instruction_len=%d", self._session.cursor, len(instruction or ""))
        try:
            version = await GenerateEditUseCase(self._session, self._gateway).execute(instruction)
        except StudioError as exc:
            self._fail(exc)
            raise
        except Exception as exc:
            # the status must never stay PROCESSING once the call has resolved
            self._fail(StudioError(f"Unexpected error while generating: {exc}"))
            raise
        self._status = StudioStatus.SUCCESS
        logger.info(
            "Generation committed cursor=%s history_len=%d", self._session.cursor, len(self._session.history)
        )
        return version

    def undo(self) -> bool:
        self._ensure_idle("undo")
        moved = self._session.undo()
        logger.debug("Undo moved=%s cursor=%s", moved, self._session.cursor)
        return moved

    def redo(self) -> bool:
        self._ensure_idle("redo")
        moved = self._session.redo()
        logger.debug("Redo moved=%s cursor=%s", moved, self._session.cursor)
        return moved

    def reset(self) -> None:
        self._ensure_idle("reset")
        self._session.reset()
        self._status = StudioStatus.IDLE
        self._error_message = None
        logger.info("Session reset")

    def dismiss_error(self) -> None:
        self._error_message = None
        if self._status is StudioStatus.ERROR:
            self._status = StudioStatus.IDLE

    def export(
        self,
        fmt: ExportFormat | str,
        scale: float,
        *,
        prefix: str = DEFAULT_FILENAME_PREFIX,
        today: date | None = None,
    ) -> tuple[ExportedImage, str]:
        return ExportImageUseCase(self._session, self._exporter).execute(fmt, scale, prefix=prefix, today=today)

    # --------- helpers ---------
    def _ensure_idle(self, intent: str) -> None:
        if self._status is StudioStatus.PROCESSING:
            logger.warning("Rejected %s: a generation is in progress", intent)
            raise SessionBusyError(f"Cannot {intent} while an image is being generated")

    def _fail(self, exc: StudioError) -> None:
        self._status = StudioStatus.ERROR
        self._error_message = exc.message
        logger.warning("%s: %s", type(exc).__name__, exc.message)
