from __future__ import annotations

from dataclasses import dataclass

from nano_studio.domain.entities.edit_session import EditSession
from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.services.media_service import ensure_content_matches, ensure_supported, inspect_image


@dataclass
class UploadImageUseCase:
    session: EditSession

    def execute(self, payload: bytes, media_type: str | None, filename: str | None = None) -> ImageVersion:
        """
        Start a new session from an uploaded file.

        The declared media type is checked before the payload is decoded, then
        the decoded format must be the same type. The session is only replaced
        once every check passes, so a rejected upload leaves the previous
        session as it was.

        Raises:
            UnsupportedMediaTypeError: declared or decoded type is not PNG, JPEG or WEBP, or they differ
            ImageReadError: payload is empty, too large or cannot be decoded
        """
        mime = ensure_supported(media_type)
        info = inspect_image(payload)
        mime = ensure_content_matches(mime, info)
        version = ImageVersion(
            data=payload,
            mime_type=mime,
            width=info.width,
            height=info.height,
            original_filename=filename,
        )
        self.session.load(version)
        return version
