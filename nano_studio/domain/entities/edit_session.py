from __future__ import annotations

from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.errors import NoImageLoadedError


class EditSession:
    """Linear undo/redo history of the image versions produced in one session.

    Index 0 of the history is always the uploaded original. The cursor marks
    the current version. A commit made after an undo drops every version past
    the cursor, so there is a single timeline and never a branch.

    Versions are immutable, so ``history`` can be handed to readers as-is.
    """

    def __init__(self) -> None:
        self._history: list[ImageVersion] = []
        self._cursor: int | None = None
        self._mime_type: str | None = None
        self._revision = 0

    # --------- read model ---------
    @property
    def history(self) -> tuple[ImageVersion, ...]:
        return tuple(self._history)

    @property
    def cursor(self) -> int | None:
        return self._cursor

    @property
    def original(self) -> ImageVersion | None:
        return self._history[0] if self._history else None

    @property
    def mime_type(self) -> str | None:
        return self._mime_type

    @property
    def revision(self) -> int:
        """Counter bumped by every load and reset."""
        return self._revision

    @property
    def is_loaded(self) -> bool:
        return bool(self._history)

    @property
    def is_modified(self) -> bool:
        current = self.current()
        return current is not None and current is not self.original

    def current(self) -> ImageVersion | None:
        if self._cursor is None:
            return None
        return self._history[self._cursor]

    def version_at(self, index: int) -> ImageVersion:
        if index < 0 or index >= len(self._history):
            raise IndexError(f"No version at index {index}")
        return self._history[index]

    def can_undo(self) -> bool:
        return self._cursor is not None and self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor is not None and self._cursor < len(self._history) - 1

    # --------- mutations ---------
    def load(self, version: ImageVersion) -> None:
        """Start a new session with ``version`` as the original."""
        self._history = [version]
        self._cursor = 0
        self._mime_type = version.mime_type
        self._revision += 1

    def commit(self, version: ImageVersion, *, base_index: int | None = None) -> None:
        """Append ``version`` after ``base_index``, discarding any redo branch.

        ``base_index`` defaults to the cursor. Callers that awaited something
        between reading the current version and committing pass the cursor they
        read, so the truncation point is where the edit started.
        """
        if not self._history:
            raise NoImageLoadedError("No image loaded")
        if base_index is None:
            base_index = self._cursor
        if base_index < 0 or base_index >= len(self._history):
            raise ValueError(f"base_index {base_index} is outside the history")
        del self._history[base_index + 1 :]
        self._history.append(version)
        self._cursor = len(self._history) - 1
        self._mime_type = version.mime_type

    def undo(self) -> bool:
        if not self.can_undo():
            return False
        self._cursor -= 1
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False
        self._cursor += 1
        return True

    def reset(self) -> None:
        self._history = []
        self._cursor = None
        self._mime_type = None
        self._revision += 1
