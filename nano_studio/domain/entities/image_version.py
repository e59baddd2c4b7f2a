from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class ImageVersion:
    data: bytes
    mime_type: str
    width: int
    height: int
    instruction: str | None = None  # None for the uploaded original
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    original_filename: str | None = None

    def __post_init__(self) -> None:
        # bytearray/memoryview payloads are copied so no caller keeps a mutable handle
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def size(self) -> int:
        return len(self.data)
