"""Unit tests for the studio session controller."""
from __future__ import annotations

import asyncio

import pytest

from nano_studio.application.controllers.session_controller import StudioSessionController
from nano_studio.domain.entities.studio_status import StudioStatus
from nano_studio.domain.errors import (
    EmptyInstructionError,
    GenerationError,
    ImageReadError,
    NoImageLoadedError,
    SessionBusyError,
    UnsupportedMediaTypeError,
)
from nano_studio.infrastructure.gateway.generation_gateway import GeneratedImage


class ScriptedGateway:
    """Returns queued results in order; exceptions in the queue are raised."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls: list[tuple[bytes, str, str]] = []

    async def generate(self, base_image, mime_type, instruction):
        self.calls.append((base_image, mime_type, instruction))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class BlockingGateway:
    """Waits on an event so tests can act while a generation is in flight."""

    def __init__(self, result: GeneratedImage):
        self.result = result
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.calls = 0

    async def generate(self, base_image, mime_type, instruction):
        self.calls += 1
        self.started.set()
        await self.release.wait()
        return self.result


def test_upload_supported_type(png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    version = controller.upload(png_bytes, "image/png", "product.png")

    session = controller.session
    assert session.history == (version,)
    assert session.cursor == 0
    assert session.original is version
    assert version.width == 8 and version.height == 6
    assert version.original_filename == "product.png"
    assert controller.status is StudioStatus.IDLE
    assert controller.error_message is None


def test_upload_unsupported_type_sets_error(png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    with pytest.raises(UnsupportedMediaTypeError):
        controller.upload(png_bytes, "image/gif")
    assert controller.session.history == ()
    assert controller.status is StudioStatus.ERROR
    assert "PNG" in controller.error_message


def test_upload_unreadable_payload_keeps_previous_session(png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    original = controller.upload(png_bytes, "image/png")
    with pytest.raises(ImageReadError):
        controller.upload(b"not an image", "image/png")
    assert controller.session.history == (original,)
    assert controller.status is StudioStatus.ERROR


@pytest.mark.asyncio
async def test_generate_success_commits_and_sets_success(make_image_bytes):
    i0 = make_image_bytes(color=(10, 10, 10))
    i1 = make_image_bytes(color=(200, 10, 10), fmt="JPEG")
    gateway = ScriptedGateway(GeneratedImage(i1, "image/jpeg"))
    controller = StudioSessionController(gateway)
    controller.upload(i0, "image/png")

    version = await controller.generate("add fog")

    assert gateway.calls == [(i0, "image/png", "add fog")]
    assert controller.status is StudioStatus.SUCCESS
    assert controller.session.cursor == 1
    assert controller.session.current() is version
    assert version.instruction == "add fog"
    assert controller.session.mime_type == "image/jpeg"


@pytest.mark.asyncio
async def test_end_to_end_generate_undo_generate_discards_branch(make_image_bytes):
    i0 = make_image_bytes(color=(0, 0, 0))
    i1 = make_image_bytes(color=(1, 1, 1))
    i2 = make_image_bytes(color=(2, 2, 2))
    gateway = ScriptedGateway(GeneratedImage(i1, "image/png"), GeneratedImage(i2, "image/png"))
    controller = StudioSessionController(gateway)
    controller.upload(i0, "image/png")

    await controller.generate("add fog")
    assert [v.data for v in controller.session.history] == [i0, i1]
    assert controller.session.cursor == 1

    controller.undo()
    assert controller.session.current().data == i0
    assert controller.session.cursor == 0

    await controller.generate("add neon")
    assert [v.data for v in controller.session.history] == [i0, i2]
    assert controller.session.cursor == 1
    # the second edit was based on the version the cursor pointed at
    assert gateway.calls[1][0] == i0


@pytest.mark.asyncio
async def test_failed_generate_leaves_history_and_cursor(png_bytes):
    gateway = ScriptedGateway(GenerationError("model unavailable"))
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")
    before = controller.session.history

    with pytest.raises(GenerationError):
        await controller.generate("add fog")

    assert controller.session.history == before
    assert controller.session.cursor == 0
    assert controller.status is StudioStatus.ERROR
    assert controller.error_message == "model unavailable"


@pytest.mark.asyncio
async def test_unreadable_generated_image_is_generation_error(png_bytes):
    gateway = ScriptedGateway(GeneratedImage(b"garbage", "image/png"))
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")

    with pytest.raises(GenerationError):
        await controller.generate("add fog")
    assert len(controller.session.history) == 1


@pytest.mark.asyncio
async def test_blank_instruction_rejected_before_gateway(png_bytes):
    gateway = ScriptedGateway()
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")

    with pytest.raises(EmptyInstructionError):
        await controller.generate("   ")
    assert gateway.calls == []
    assert controller.status is StudioStatus.ERROR


@pytest.mark.asyncio
async def test_generate_without_image():
    gateway = ScriptedGateway()
    controller = StudioSessionController(gateway)
    with pytest.raises(NoImageLoadedError):
        await controller.generate("add fog")
    assert gateway.calls == []
    assert controller.status is StudioStatus.ERROR


@pytest.mark.asyncio
async def test_second_generate_while_processing_is_rejected(make_image_bytes):
    result = GeneratedImage(make_image_bytes(color=(9, 9, 9)), "image/png")
    gateway = BlockingGateway(result)
    controller = StudioSessionController(gateway)
    controller.upload(make_image_bytes(), "image/png")

    first = asyncio.create_task(controller.generate("add fog"))
    await gateway.started.wait()
    assert controller.status is StudioStatus.PROCESSING

    with pytest.raises(SessionBusyError):
        await controller.generate("add neon")
    assert gateway.calls == 1
    assert controller.status is StudioStatus.PROCESSING

    gateway.release.set()
    await first
    assert controller.status is StudioStatus.SUCCESS
    assert len(controller.session.history) == 2


@pytest.mark.asyncio
async def test_other_intents_rejected_while_processing(make_image_bytes):
    result = GeneratedImage(make_image_bytes(color=(9, 9, 9)), "image/png")
    gateway = BlockingGateway(result)
    controller = StudioSessionController(gateway)
    original_bytes = make_image_bytes()
    controller.upload(original_bytes, "image/png")

    task = asyncio.create_task(controller.generate("add fog"))
    await gateway.started.wait()

    for intent in (controller.undo, controller.redo, controller.reset):
        with pytest.raises(SessionBusyError):
            intent()
    with pytest.raises(SessionBusyError):
        controller.upload(original_bytes, "image/png")
    assert controller.session.cursor == 0
    assert controller.status is StudioStatus.PROCESSING

    gateway.release.set()
    await task
    assert [v.data for v in controller.session.history] == [original_bytes, result.data]


@pytest.mark.asyncio
async def test_undo_redo_do_not_change_status(make_image_bytes):
    gateway = ScriptedGateway(GeneratedImage(make_image_bytes(color=(5, 5, 5)), "image/png"))
    controller = StudioSessionController(gateway)
    controller.upload(make_image_bytes(), "image/png")
    await controller.generate("add fog")

    assert controller.undo() is True
    assert controller.status is StudioStatus.SUCCESS
    assert controller.undo() is False
    assert controller.redo() is True
    assert controller.redo() is False
    assert controller.status is StudioStatus.SUCCESS


def test_reset_from_error_state(png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    controller.upload(png_bytes, "image/png")
    with pytest.raises(UnsupportedMediaTypeError):
        controller.upload(png_bytes, "application/pdf")

    controller.reset()
    assert controller.session.history == ()
    assert controller.status is StudioStatus.IDLE
    assert controller.error_message is None


def test_dismiss_error(png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    with pytest.raises(UnsupportedMediaTypeError):
        controller.upload(png_bytes, "text/plain")
    controller.dismiss_error()
    assert controller.status is StudioStatus.IDLE
    assert controller.error_message is None


def test_export_without_image():
    controller = StudioSessionController(ScriptedGateway())
    with pytest.raises(NoImageLoadedError):
        controller.export("png", 1.0)


def test_upload_content_must_match_declared_type(png_bytes, make_image_bytes):
    controller = StudioSessionController(ScriptedGateway())
    original = controller.upload(png_bytes, "image/png")

    with pytest.raises(UnsupportedMediaTypeError, match="GIF"):
        controller.upload(make_image_bytes(fmt="GIF"), "image/png")
    assert controller.session.history == (original,)
    assert controller.status is StudioStatus.ERROR


def test_upload_oversized_image_is_read_error(oversized_png_bytes):
    controller = StudioSessionController(ScriptedGateway())
    with pytest.raises(ImageReadError):
        controller.upload(oversized_png_bytes, "image/png")
    assert controller.status is StudioStatus.ERROR
    assert "too large" in controller.error_message
    assert controller.session.history == ()


def test_upload_unexpected_error_never_leaves_uploading(png_bytes, monkeypatch):
    from nano_studio.application.use_cases import upload_image

    def explode(payload):
        raise RuntimeError("decoder crashed")

    monkeypatch.setattr(upload_image, "inspect_image", explode)
    controller = StudioSessionController(ScriptedGateway())
    with pytest.raises(RuntimeError):
        controller.upload(png_bytes, "image/png")
    assert controller.status is StudioStatus.ERROR
    assert "decoder crashed" in controller.error_message


@pytest.mark.asyncio
async def test_unexpected_gateway_error_resolves_to_error(png_bytes):
    gateway = ScriptedGateway(RuntimeError("boom"))
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")
    before = controller.session.history

    with pytest.raises(RuntimeError, match="boom"):
        await controller.generate("add fog")

    assert controller.status is StudioStatus.ERROR
    assert "boom" in controller.error_message
    assert controller.session.history == before
    assert controller.session.cursor == 0


@pytest.mark.asyncio
async def test_committed_mime_type_comes_from_decoded_bytes(png_bytes, make_image_bytes):
    gateway = ScriptedGateway(GeneratedImage(make_image_bytes(fmt="JPEG"), "application/octet-stream"))
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")

    version = await controller.generate("add fog")

    assert version.mime_type == "image/jpeg"
    assert controller.session.mime_type == "image/jpeg"


@pytest.mark.asyncio
async def test_generated_image_in_unaccepted_format_is_rejected(png_bytes, make_image_bytes):
    gateway = ScriptedGateway(GeneratedImage(make_image_bytes(fmt="GIF"), "image/gif"))
    controller = StudioSessionController(gateway)
    controller.upload(png_bytes, "image/png")

    with pytest.raises(GenerationError, match="unsupported format"):
        await controller.generate("add fog")
    assert len(controller.session.history) == 1
    assert controller.session.mime_type == "image/png"
