from __future__ import annotations


class StudioError(Exception):
    """Base class for errors surfaced to the user as a session message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedMediaTypeError(StudioError):
    """Raised when an upload is not PNG, JPEG or WEBP."""


class ImageReadError(StudioError):
    """Raised when an uploaded payload cannot be decoded as an image."""


class GenerationError(StudioError):
    """Raised when the generation service fails, times out or returns unusable data."""


class EmptyInstructionError(StudioError):
    """Raised when a generation is requested with a blank instruction."""


class NoImageLoadedError(StudioError):
    """Raised when an intent needs a loaded session and there is none."""


class SessionBusyError(StudioError):
    """Raised when an intent arrives while a generation is in flight."""
