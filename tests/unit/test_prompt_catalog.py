import pytest

from nano_studio.domain.errors import EmptyInstructionError
from nano_studio.domain.services import prompt_catalog as pc


@pytest.mark.parametrize(
    "level, fragment",
    [
        (0, "Remove any background blur"),
        (1, "very subtle background blur (light bokeh at 1%)"),
        (25, "light bokeh at 25%"),
        (26, "medium bokeh at 26%"),
        (50, "medium bokeh at 50%"),
        (51, "strong bokeh at 51%"),
        (75, "strong bokeh at 75%"),
        (76, "very strong bokeh at 76%"),
        (100, "very strong bokeh at 100%"),
    ],
)
def test_bokeh_tiers(level, fragment):
    assert fragment in pc.bokeh_prompt(level)


@pytest.mark.parametrize(
    "level, fragment",
    [
        (0, "soften the product details"),
        (25, "Subtly enhance"),
        (26, "Enhance the product's texture details and sharpness"),
        (75, "Strongly enhance"),
        (76, "Maximally enhance"),
    ],
)
def test_texture_tiers(level, fragment):
    prompt = pc.texture_prompt(level)
    assert fragment in prompt
    if level:
        assert f"{level}%" in prompt


@pytest.mark.parametrize("level", [-1, 101])
def test_slider_levels_out_of_range(level):
    with pytest.raises(ValueError):
        pc.bokeh_prompt(level)
    with pytest.raises(ValueError):
        pc.texture_prompt(level)


def test_text_overlay_prompt():
    assert 'Add the text "Handmade"' in pc.text_overlay_prompt("Handmade")
    with pytest.raises(EmptyInstructionError):
        pc.text_overlay_prompt("  ")


def test_preset_ids_unique_and_lookup():
    ids = [p.id for c in pc.CATEGORIES for p in c.presets]
    assert len(ids) == len(set(ids))
    assert pc.find_preset("cinematic").prompt.startswith("Add cinematic studio lighting")
    with pytest.raises(KeyError):
        pc.find_preset("nope")
