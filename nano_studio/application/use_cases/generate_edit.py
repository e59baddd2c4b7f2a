from __future__ import annotations

from dataclasses import dataclass

from nano_studio.domain.entities.edit_session import EditSession
from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.errors import (
    EmptyInstructionError,
    GenerationError,
    ImageReadError,
    NoImageLoadedError,
)
from nano_studio.domain.services.media_service import inspect_image
from nano_studio.infrastructure.gateway.generation_gateway import GenerationGateway


@dataclass
class GenerateEditUseCase:
    session: EditSession
    gateway: GenerationGateway

    async def execute(self, instruction: str) -> ImageVersion:
        """
        Apply ``instruction`` to the current version and commit the result.

        Every edit is based on the CURRENT version, not the original, so edits
        compound. The base version, its history index and the session revision
        are read before the gateway is awaited; the commit truncates at that
        index no matter where the cursor is when the call returns.
        """
        if not instruction or not instruction.strip():
            raise EmptyInstructionError("Please enter an instruction")
        base = self.session.current()
        if base is None:
            raise NoImageLoadedError("Upload an image before generating")
        base_index = self.session.cursor
        revision = self.session.revision

        result = await self.gateway.generate(base.data, base.mime_type, instruction)

        if self.session.revision != revision:
            raise GenerationError("The session was replaced while the image was being generated")
        try:
            info = inspect_image(result.data)
        except ImageReadError as exc:
            raise GenerationError("The image service returned an unreadable image") from exc
        # the decoded format wins over the type the service reported
        if info.mime_type is None:
            raise GenerationError(f"The image service returned an unsupported format ({info.format or 'unknown'})")
        version = ImageVersion(
            data=result.data,
            mime_type=info.mime_type,
            width=info.width,
            height=info.height,
            instruction=instruction,
        )
        self.session.commit(version, base_index=base_index)
        return version
