from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from nano_studio.application.dtos.common_dto import ErrorResponse
from nano_studio.application.dtos.preset_dto import (
    BackgroundSwatchItem,
    InstructionResponse,
    PresetCatalogResponse,
    PresetCategoryItem,
    PresetItem,
)
from nano_studio.domain.errors import EmptyInstructionError
from nano_studio.domain.services import prompt_catalog
from nano_studio.domain.services.prompt_catalog import BackgroundSwatch, Preset

router = APIRouter(
    prefix="/presets",
    tags=["Preset Instructions"],
    responses={422: {"description": "Validation Error - Invalid request format"}},
)


def _preset_item(preset: Preset) -> PresetItem:
    return PresetItem(id=preset.id, name=preset.name, prompt=preset.prompt, icon=preset.icon)


def _swatch_item(swatch: BackgroundSwatch) -> BackgroundSwatchItem:
    return BackgroundSwatchItem(name=swatch.name, value=swatch.value, prompt=swatch.prompt)


@router.get(
    "",
    response_model=PresetCatalogResponse,
    summary="List Preset Instructions",
    description="Every ready-made instruction grouped by category, plus background swatches.",
)
async def list_presets():
    """Return the full preset catalog."""
    return PresetCatalogResponse(
        categories=[
            PresetCategoryItem(
                id=category.id,
                name=category.name,
                presets=[_preset_item(p) for p in category.presets],
            )
            for category in prompt_catalog.CATEGORIES
        ],
        solid_colors=[_swatch_item(s) for s in prompt_catalog.SOLID_COLORS],
        gradients=[_swatch_item(s) for s in prompt_catalog.GRADIENTS],
    )


@router.get(
    "/bokeh",
    response_model=InstructionResponse,
    summary="Background Blur Instruction",
    description="""
    Map the background-blur slider to an instruction.

    Tiers: `0` removes blur, `1-25` light, `26-50` medium, `51-75` strong,
    `76-100` very strong.
    """,
)
async def bokeh_instruction(level: int = Query(..., ge=0, le=100, description="Slider value (0-100)")):
    """Build the background-blur instruction for a slider value."""
    return InstructionResponse(instruction=prompt_catalog.bokeh_prompt(level))


@router.get(
    "/texture",
    response_model=InstructionResponse,
    summary="Texture Detail Instruction",
    description="""
    Map the texture/detail slider to an instruction.

    Tiers: `0` softens, `1-25` subtle, `26-50` moderate, `51-75` strong,
    `76-100` maximum.
    """,
)
async def texture_instruction(level: int = Query(..., ge=0, le=100, description="Slider value (0-100)")):
    """Build the texture-detail instruction for a slider value."""
    return InstructionResponse(instruction=prompt_catalog.texture_prompt(level))


@router.get("/text-overlay", response_model=InstructionResponse, summary="Text Overlay Instruction")
async def text_overlay_instruction(text: str = Query(..., max_length=200, description="Text to overlay")):
    """Build the instruction that adds ``text`` as an overlay."""
    try:
        return InstructionResponse(instruction=prompt_catalog.text_overlay_prompt(text))
    except EmptyInstructionError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc


@router.get(
    "/{preset_id}",
    response_model=PresetItem,
    summary="Get Preset",
    responses={404: {"model": ErrorResponse, "description": "Not Found - Unknown preset id"}},
)
async def get_preset(preset_id: str):
    """Return one preset by id."""
    try:
        return _preset_item(prompt_catalog.find_preset(preset_id))
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown preset '{preset_id}'") from exc
