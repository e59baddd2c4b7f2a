from __future__ import annotations

import os

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from fastapi.responses import Response

from nano_studio.application.controllers.session_controller import StudioSessionController
from nano_studio.application.dtos.common_dto import ErrorResponse
from nano_studio.application.dtos.session_dto import GenerateRequest, SessionStateResponse
from nano_studio.domain.entities.image_version import ImageVersion
from nano_studio.domain.errors import (
    EmptyInstructionError,
    GenerationError,
    ImageReadError,
    NoImageLoadedError,
    SessionBusyError,
    StudioError,
    UnsupportedMediaTypeError,
)
from nano_studio.domain.services.export_service import DEFAULT_FILENAME_PREFIX, FILENAME_PREFIX_PATTERN, ExportFormat
from nano_studio.infrastructure.api.dependencies import get_session_controller

router = APIRouter(
    prefix="/session",
    tags=["Edit Session"],
    responses={
        409: {"model": ErrorResponse, "description": "Conflict - A generation is in progress or no image is loaded"},
        422: {"description": "Validation Error - Invalid request format"},
    },
)

_HTTP_STATUS = {
    UnsupportedMediaTypeError: 415,
    ImageReadError: 400,
    EmptyInstructionError: 422,
    NoImageLoadedError: 409,
    SessionBusyError: 409,
    GenerationError: 502,
}


def _to_http(exc: StudioError) -> HTTPException:
    code = _HTTP_STATUS.get(type(exc), 500)
    return HTTPException(status_code=code, detail=exc.message)


def _image_response(version: ImageVersion) -> Response:
    return Response(content=version.data, media_type=version.mime_type, headers={"Cache-Control": "no-store"})


@router.get(
    "",
    response_model=SessionStateResponse,
    summary="Get Session State",
    description="""
    Return the status, the last error message, the cursor and the metadata of
    every version in the history.

    `is_modified` tells the front end whether the before/after comparison
    slider has two different images to compare.
    """,
)
async def get_session(controller: StudioSessionController = Depends(get_session_controller)):
    """Get the current session state."""
    return SessionStateResponse.from_controller(controller)


@router.post(
    "/upload",
    response_model=SessionStateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Product Image",
    description="""
    Start a new session from an uploaded image. Any previous session is discarded.

    **Supported formats**: PNG, JPEG, WEBP

    A rejected upload leaves the previous session untouched and sets the
    status to `ERROR` with a message.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - The file could not be read as an image"},
        415: {"model": ErrorResponse, "description": "Unsupported Media Type - Only PNG, JPEG and WEBP are accepted"},
    },
)
async def upload_image(
    file: UploadFile = File(..., description="Image file to upload"),
    controller: StudioSessionController = Depends(get_session_controller),
):
    """Upload an image and start a new session."""
    payload = await file.read()
    try:
        controller.upload(payload, file.content_type, file.filename)
    except StudioError as exc:
        raise _to_http(exc) from exc
    return SessionStateResponse.from_controller(controller)


@router.post(
    "/generate",
    response_model=SessionStateResponse,
    summary="Generate Edit",
    description="""
    Send the CURRENT version and the instruction to the image service and
    append the result to the history.

    If the cursor is not at the end of the history (after an undo), the
    versions after the cursor are discarded first.

    Only one generation runs at a time; a second request gets `409`.
    """,
    responses={
        502: {"model": ErrorResponse, "description": "Bad Gateway - The image service failed or returned unusable data"},
    },
)
async def generate(
    body: GenerateRequest,
    controller: StudioSessionController = Depends(get_session_controller),
):
    """Apply an instruction to the current version."""
    try:
        await controller.generate(body.instruction)
    except StudioError as exc:
        raise _to_http(exc) from exc
    return SessionStateResponse.from_controller(controller)


@router.post("/undo", response_model=SessionStateResponse, summary="Undo")
async def undo(controller: StudioSessionController = Depends(get_session_controller)):
    """Move the cursor one version back. Does nothing at the original."""
    try:
        controller.undo()
    except StudioError as exc:
        raise _to_http(exc) from exc
    return SessionStateResponse.from_controller(controller)


@router.post("/redo", response_model=SessionStateResponse, summary="Redo")
async def redo(controller: StudioSessionController = Depends(get_session_controller)):
    """Move the cursor one version forward. Does nothing at the latest version."""
    try:
        controller.redo()
    except StudioError as exc:
        raise _to_http(exc) from exc
    return SessionStateResponse.from_controller(controller)


@router.post("/reset", response_model=SessionStateResponse, summary="Reset Session")
async def reset(controller: StudioSessionController = Depends(get_session_controller)):
    """Discard the whole session and clear any error."""
    try:
        controller.reset()
    except StudioError as exc:
        raise _to_http(exc) from exc
    return SessionStateResponse.from_controller(controller)


@router.post("/dismiss-error", response_model=SessionStateResponse, summary="Dismiss Error")
async def dismiss_error(controller: StudioSessionController = Depends(get_session_controller)):
    """Clear the error message."""
    controller.dismiss_error()
    return SessionStateResponse.from_controller(controller)


@router.get(
    "/current",
    summary="Download Current Version",
    responses={200: {"content": {"image/*": {}}, "description": "Image file content"}},
)
async def current_image(controller: StudioSessionController = Depends(get_session_controller)):
    """Raw bytes of the current version."""
    version = controller.session.current()
    if version is None:
        raise HTTPException(status_code=404, detail="No image loaded")
    return _image_response(version)


@router.get(
    "/original",
    summary="Download Original",
    description="Raw bytes of the uploaded original, for the before/after comparison.",
    responses={200: {"content": {"image/*": {}}, "description": "Image file content"}},
)
async def original_image(controller: StudioSessionController = Depends(get_session_controller)):
    """Raw bytes of the uploaded original."""
    version = controller.session.original
    if version is None:
        raise HTTPException(status_code=404, detail="No image loaded")
    return _image_response(version)


@router.get(
    "/versions/{index}",
    summary="Download History Version",
    responses={200: {"content": {"image/*": {}}, "description": "Image file content"}},
)
async def version_image(index: int, controller: StudioSessionController = Depends(get_session_controller)):
    """Raw bytes of the version at ``index`` in the history."""
    try:
        version = controller.session.version_at(index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _image_response(version)


@router.get(
    "/export",
    summary="Export Current Version",
    description="""
    Re-encode the current version and return it as a download named
    `<prefix>-<YYYY-MM-DD>.<ext>`.

    - **format**: `png`, `jpeg` or `webp`
    - **scale**: `1.0`, `0.75` or `0.5`

    JPEG exports are flattened onto a white background; PNG and WEBP keep
    transparency. Lossy formats use quality 92.
    """,
    responses={200: {"content": {"image/*": {}}, "description": "Encoded image file"}},
)
async def export_image(
    format: ExportFormat = Query(ExportFormat.PNG, description="Output format"),
    scale: float = Query(1.0, description="Scale factor: 1.0, 0.75 or 0.5"),
    prefix: str | None = Query(
        None,
        description="Filename prefix (letters, digits, dot, dash, underscore)",
        max_length=64,
        pattern=FILENAME_PREFIX_PATTERN,
    ),
    controller: StudioSessionController = Depends(get_session_controller),
):
    """Download the current version in the requested format and scale."""
    prefix = prefix or os.getenv("EXPORT_FILENAME_PREFIX", DEFAULT_FILENAME_PREFIX)
    try:
        exported, filename = controller.export(format, scale, prefix=prefix)
    except NoImageLoadedError as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return Response(
        content=exported.data,
        media_type=exported.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
