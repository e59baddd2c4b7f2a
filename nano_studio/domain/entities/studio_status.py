from __future__ import annotations

from enum import StrEnum


class StudioStatus(StrEnum):
    IDLE = "IDLE"
    UPLOADING = "UPLOADING"
    PROCESSING = "PROCESSING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"
