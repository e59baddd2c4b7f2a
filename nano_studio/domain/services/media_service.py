from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from nano_studio.domain.errors import ImageReadError, UnsupportedMediaTypeError

ACCEPTED_MEDIA_TYPES = frozenset({"image/png", "image/jpeg", "image/webp"})

_ALIASES = {"image/jpg": "image/jpeg", "image/pjpeg": "image/jpeg", "image/x-png": "image/png"}

# Pillow format name -> media type; camera JPEGs often decode as MPO
_FORMAT_MEDIA_TYPES = {"PNG": "image/png", "JPEG": "image/jpeg", "MPO": "image/jpeg", "WEBP": "image/webp"}


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    format: str | None

    @property
    def mime_type(self) -> str | None:
        """Media type of the decoded format, or None when it is not accepted."""
        return _FORMAT_MEDIA_TYPES.get(self.format or "")


def normalize_media_type(value: str | None) -> str:
    """Lower-case a declared media type and drop parameters such as ``; charset=``."""
    if not value:
        return ""
    base = value.split(";", 1)[0].strip().lower()
    return _ALIASES.get(base, base)


def ensure_supported(media_type: str | None) -> str:
    mime = normalize_media_type(media_type)
    if mime not in ACCEPTED_MEDIA_TYPES:
        raise UnsupportedMediaTypeError(
            f"Unsupported file type '{media_type or 'unknown'}'. Please use PNG, JPG or WEBP."
        )
    return mime


def ensure_content_matches(declared: str, info: ImageInfo) -> str:
    """Reject content whose decoded format is not accepted or differs from ``declared``."""
    if info.mime_type is None or info.mime_type != declared:
        raise UnsupportedMediaTypeError(
            f"The file content is {info.format or 'unknown'}, not {declared}. Please use PNG, JPG or WEBP."
        )
    return info.mime_type


def inspect_image(payload: bytes) -> ImageInfo:
    """Decode ``payload`` and return its size and format."""
    if not payload:
        raise ImageReadError("Failed to read the file: it is empty")
    try:
        with Image.open(BytesIO(payload)) as img:
            img.verify()
        # verify() leaves the image unusable, reopen to read the size
        with Image.open(BytesIO(payload)) as img:
            img.load()
            return ImageInfo(width=img.width, height=img.height, format=img.format)
    except Image.DecompressionBombError as exc:
        raise ImageReadError("Failed to read the file: the image is too large") from exc
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise ImageReadError(f"Failed to read the file: {exc}") from exc
