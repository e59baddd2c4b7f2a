from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from nano_studio.domain.entities.edit_session import EditSession
from nano_studio.domain.errors import NoImageLoadedError
from nano_studio.domain.services.export_service import (
    DEFAULT_FILENAME_PREFIX,
    ExportedImage,
    ExportFormat,
    ExportService,
    export_filename,
)


@dataclass
class ExportImageUseCase:
    session: EditSession
    exporter: ExportService

    def execute(
        self,
        fmt: ExportFormat | str,
        scale: float,
        *,
        prefix: str = DEFAULT_FILENAME_PREFIX,
        today: date | None = None,
    ) -> tuple[ExportedImage, str]:
        """Encode the current version; returns the encoded file and its download name."""
        current = self.session.current()
        if current is None:
            raise NoImageLoadedError("No image to export")
        exported = self.exporter.encode(current, fmt, scale)
        return exported, export_filename(prefix, exported.extension, today)
