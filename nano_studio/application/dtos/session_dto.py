from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.entities.studio_status import StudioStatus

if TYPE_CHECKING:
    from nano_studio.application.controllers.session_controller import StudioSessionController


class VersionMetadata(BaseModel):
    """Metadata of one image version in the session history."""
    index: int = Field(..., description="Position in the history (0 = uploaded original)", ge=0)
    id: str = Field(..., description="Unique identifier of the version")
    mime_type: str = Field(..., description="MIME type of the version", examples=["image/png"])
    width: int = Field(..., description="Width in pixels", gt=0)
    height: int = Field(..., description="Height in pixels", gt=0)
    file_size: int = Field(..., description="Encoded size in bytes", ge=0)
    instruction: str | None = Field(None, description="Instruction that produced this version; null for the original")
    original_filename: str | None = Field(None, description="Filename of the upload", examples=["lantern.png"])
    created_at: datetime = Field(..., description="When the version was created")
    url: str = Field(..., description="Path to download the version bytes", examples=["/session/versions/0"])

    @classmethod
    def from_entity(cls, index: int, version: ImageVersion) -> VersionMetadata:
        return cls(
            index=index,
            id=version.id,
            mime_type=version.mime_type,
            width=version.width,
            height=version.height,
            file_size=version.size,
            instruction=version.instruction,
            original_filename=version.original_filename,
            created_at=version.created_at,
            url=f"/session/versions/{index}",
        )


class SessionStateResponse(BaseModel):
    """Everything the front end needs to render the studio."""
    status: StudioStatus = Field(..., description="Coarse session status", examples=["IDLE"])
    error_message: str | None = Field(None, description="Message of the last failed action, if not dismissed")
    has_image: bool = Field(..., description="Whether an image is loaded")
    cursor: int | None = Field(None, description="History index of the current version")
    mime_type: str | None = Field(None, description="MIME type of the most recently produced version")
    can_undo: bool = Field(..., description="Whether undo would move the cursor")
    can_redo: bool = Field(..., description="Whether redo would move the cursor")
    is_modified: bool = Field(..., description="Whether the current version differs from the original (enables the comparison slider)")
    current: VersionMetadata | None = Field(None, description="The current version")
    history: list[VersionMetadata] = Field(default_factory=list, description="Every version, oldest first")

    @classmethod
    def from_controller(cls, controller: StudioSessionController) -> SessionStateResponse:
        session = controller.session
        history = [VersionMetadata.from_entity(i, v) for i, v in enumerate(session.history)]
        return cls(
            status=controller.status,
            error_message=controller.error_message,
            has_image=session.is_loaded,
            cursor=session.cursor,
            mime_type=session.mime_type,
            can_undo=session.can_undo(),
            can_redo=session.can_redo(),
            is_modified=session.is_modified,
            current=history[session.cursor] if session.cursor is not None else None,
            history=history,
        )


class GenerateRequest(BaseModel):
    """Request model for a generation."""
    instruction: str = Field(
        ...,
        description="Natural-language edit instruction applied to the current version",
        examples=["Add soft morning fog behind the product"],
    )
