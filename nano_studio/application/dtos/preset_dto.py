from __future__ import annotations

from pydantic import BaseModel, Field


class PresetItem(BaseModel):
    """A ready-made instruction."""
    id: str = Field(..., description="Preset identifier", examples=["cinematic"])
    name: str = Field(..., description="Display label", examples=["Cinematic lighting"])
    prompt: str = Field(..., description="Instruction text sent when the preset is applied")
    icon: str = Field("", description="Emoji shown next to the label")


class PresetCategoryItem(BaseModel):
    id: str = Field(..., description="Category identifier", examples=["styles"])
    name: str = Field(..., description="Display label of the category")
    presets: list[PresetItem] = Field(..., description="Presets in display order")


class BackgroundSwatchItem(BaseModel):
    name: str = Field(..., description="Display label", examples=["White"])
    value: str = Field(..., description="Hex color, or comma-separated gradient stops", examples=["#FFFFFF"])
    prompt: str = Field(..., description="Instruction text for this background")


class PresetCatalogResponse(BaseModel):
    """Full preset catalog."""
    categories: list[PresetCategoryItem] = Field(..., description="Preset groups")
    solid_colors: list[BackgroundSwatchItem] = Field(..., description="Solid background colors")
    gradients: list[BackgroundSwatchItem] = Field(..., description="Gradient backgrounds")


class InstructionResponse(BaseModel):
    """An instruction built from a template."""
    instruction: str = Field(..., description="Instruction text to send to /session/generate")
