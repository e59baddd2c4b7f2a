"""Static catalog of ready-made edit instructions.

Presets are plain data: picking one only fills in the instruction that the
generate intent sends. The two slider helpers map a 0-100 level onto one of
five instruction templates.
"""
from __future__ import annotations

from dataclasses import dataclass

from nano_studio.domain.errors import EmptyInstructionError


@dataclass(frozen=True)
class Preset:
    id: str
    name: str
    prompt: str
    icon: str = ""


@dataclass(frozen=True)
class BackgroundSwatch:
    name: str
    value: str  # hex color or gradient stops
    prompt: str


@dataclass(frozen=True)
class PresetCategory:
    id: str
    name: str
    presets: tuple[Preset, ...]


ETSY_PRESETS = (
    Preset("etsy_wood", "Etsy wood colors", "Professional e-commerce photography for a wooden product, suitable for Etsy. Place on a bright, clean, slightly off-white background. Use soft, diffused lighting to minimize harsh shadows and enhance the natural wood grain and texture. The image should have a warm, bright, and airy feel, with sharp focus and true-to-life colors.", "🪵"),
    Preset("natural_soft_glow", "Natural soft glow (window light)", 'Simulate a complete "zero-budget" professional photoshoot for a wooden product. The setup includes: 1. A soft key light from an indirect window. 2. A gentle fill light from a white reflector to lift shadows. 3. A subtle back light from a shiny surface to create a crisp rim light effect. 4. An eye-level camera angle. 5. A clean, simple composition. 6. A shallow depth of field (bokeh) to blur the background. 7. Natural, warm color grading. 8. Tack-sharp focus on the product texture. 9. A clean, neutral, out-of-focus background. 10. A final subtle boost in contrast and clarity. The final image must feel airy, premium, and naturally lit, perfect for an Etsy listing.', "🪟"),
    Preset("laser_engraving", "Laser engraving boost", "Apply professional lighting adjustments to the wooden product to make laser engravings stand out. Slightly brighten the overall image. Increase contrast for more pop. Recover detail in the brightest areas by lowering highlights. Reveal texture in dark areas by lifting shadows. Set clean white points and deep black points. The result should be sharp, clear engravings and a natural glow on the wood.", "✒️"),
    Preset("etsy_color_mix", "Etsy color mix", "Apply an expert color grade designed for Etsy wood products. Make the wood color rich, warm, and luxurious by enhancing its natural browns and oranges. Remove any unpleasant yellow color cast, replacing it with a sophisticated warm glow. The overall image should feel vibrant, high-quality, and appealing to an American e-commerce audience. Keep the background clean and bright.", "🌈"),
    Preset("laser_details", "Laser detail highlight", "Apply subtle but professional finishing effects to the wooden product. Slightly increase clarity to make laser-cut edges more defined. Significantly enhance the texture to bring out the fine details of the engraved patterns. Add a touch of dehaze to remove any atmospheric softness. The result should be a crisp, high-definition look that makes the craftsmanship stand out.", "💎"),
    Preset("etsy_glow", "Lantern glow edition", 'For an internally lit wooden lantern, create a magical "glow edition". Enhance the light source to emit a soft, beautiful, blooming glow that spills onto the surrounding surfaces. The light should be warm and inviting, not harsh. Increase the overall image contrast to make the glow pop against the darker wood, creating a dramatic, high-end look.', "🌟"),
    Preset("internal_glow", "Lantern internal light", "For an internally lit product, such as a wooden lantern, simulate a soft, diffused internal light source. The goal is to create a beautiful, warm glow from within, completely avoiding harsh hotspots or distracting bright points of light. The light should feel natural and inviting, gently illuminating the intricate details and engravings of the product. The final image should have a magical, premium quality, with a soft bloom effect from the internal light.", "🏮"),
    Preset("warm_internal_glow", "Warm internal glow", "Apply a soft, warm internal glow to the product, simulating an internal light source like a lantern. The light should look magical, soft, and inviting, ensuring it is not harsh or overexposed. Enhance the natural warmth of the light and create a gentle bloom effect around the light source, while keeping the product's details sharp and clear.", "🕯️"),
    Preset("light_diffusion", "Light diffusion", "Simulate the effect of diffusing a strong light source through a sheer white fabric, like a curtain or a professional diffuser. This creates a very soft, even light across the product, minimizing harsh shadows and glare. The light should gently wrap around the object, enhancing its texture and form. The final image should have a bright, clean, and professional e-commerce feel, perfect for showcasing natural materials like wood.", "☁️"),
    Preset("pro_angle_setup", "Professional shooting angle", "Recreate a professional, cinematic product photography setup. Use a single key light source positioned at a 45-degree angle to the right of the product. The camera should be positioned to create a 120-degree angle between the light source and the camera lens. The camera's vertical position should be at eye-level, aimed at the midpoint of the product's height. This setup should create soft, directional shadows that define the product's form, add depth, and result in a high-end, cinematic look. The background should remain clean and complementary.", "📐"),
    Preset("pro_wood_color_grade", "Professional wood color grade", "Apply a professional color grade to the wooden product, simulating these specific Lightroom adjustments to achieve a warm and sophisticated finish: Exposure +0.15, Contrast +10, Highlights -30, Shadows +20, Whites +10, Blacks -20, Temperature +4 (warm), Clarity -5, Texture +10, Vibrance +10. The result should be a rich, warm, and highly refined wood color, perfect for a premium product listing.", "🖌️"),
    Preset("night_glow_shot", "Night shot for lit products", "Create a professional night photography shot for an internally lit product. The scene should be completely dark with no ambient light, except for a single, very faint backlight to subtly define the product's silhouette. Place the product on a dark, matte, non-reflective surface to capture and emphasize the beautiful glow spilling from it. Simulate a high-end camera with a wide aperture lens (like f/1.8) and a low-noise sensor (like ISO 400-800) to produce a clean, sharp, and noise-free image. The final result should be dramatic and high-quality, focusing entirely on the product's self-illumination and creating a respectable, prominent glow effect.", "🌌"),
)

STYLE_PRESETS = (
    Preset("cinematic", "Cinematic lighting", "Add cinematic studio lighting, dramatic contrast, professional product photography style", "🎬"),
    Preset("softbox", "Soft softbox", "Place on a clean white background with softbox lighting, highly detailed, commercial look", "💡"),
    Preset("clean_background", "Clean background", "For a product on a white or light gray background, make the background extremely clean and bright. Increase the highlights by +10 and the whites by +20 to create a premium, high-key look perfect for Etsy home decor listings. Ensure the product itself remains well-exposed and doesn't get washed out.", "🧹"),
    Preset("premium_wood_bg", "Premium wood background", "For a product on a wooden background, enhance the premium feel. Apply a gentle noise reduction of +15 to smooth out any graininess, making the image look incredibly clean and high-end. Adjust the color temperature to be warm and inviting, but carefully avoid any unnatural yellow cast. The wood should look rich and natural.", "⭐"),
    Preset("daylight", "Natural daylight", "Transform the lighting to simulate bright, natural daylight coming from a large window. The light should be soft and diffused, creating gentle shadows. The overall mood should be clean, airy, and optimistic. Ensure colors are vibrant and true to life.", "☀️"),
    Preset("night_shot", "Dramatic night shot", "Create a dramatic night scene. Place the product in a dark, moody environment. Add a single, focused light source (a spotlight) to illuminate the product, creating strong highlights and deep shadows. The background should be nearly black but with subtle details visible. The overall aesthetic should be mysterious and luxurious.", "🌙"),
    Preset("cyberpunk", "Neon / cyberpunk", "Add neon lights, cyberpunk aesthetic, pink and blue rim lighting", "🌃"),
    Preset("nature", "Natural scene", "Place the object on a mossy rock in a forest, dappled sunlight, bokeh background", "🌿"),
    Preset("luxury", "Golden luxury", "Add gold accents, luxurious marble background, warm ambient lighting", "✨"),
    Preset("industrial", "Raw industrial", "Place object on raw concrete surface, brutalist architecture, industrial lighting, sharp shadows", "🏗️"),
    Preset("pastel", "Pastel colors", "Change the background to a soft pastel color palette with minimal geometric shapes, in a pop art style", "🎨"),
    Preset("golden", "Warm sunset", "Golden hour sunlight, warm glow, long soft shadows, outdoor natural atmosphere, lens flare", "🌅"),
    Preset("lantern_glow", "Lantern interior lighting", "Apply professional color grading for a product that is internally lit, like a lantern. Adjust the color temperature to be warmer (+4) and add a slight pink tint (+3). Increase the saturation of orange tones (+8) to create a natural, beautiful glow from the light source, ensuring the light is not harsh or overexposed.", "🎥"),
    Preset("monochrome", "Black and white", "High contrast black and white photography, dramatic noir lighting, sharp details, artistic composition", "🎱"),
    Preset("kitchen", "Modern kitchen", "Place on a clean marble kitchen counter, bright morning light, blurred modern kitchen background, lifestyle", "🍳"),
    Preset("minimalist", "Clean minimalist", "Place on a white pedestal, minimalist geometric background, high key lighting, soft shadows, architectural style", "🏛️"),
    Preset("vintage", "Retro classic", "Add 70s retro film look, warm faded colors, vintage furniture background, nostalgic atmosphere, grain texture", "🎞️"),
    Preset("mockup", "Mockup enhancement", "For an Etsy mockup image, enhance its realism and appeal. Adjust the lighting on the product to match the lighting of the mockup background perfectly. Sharpen the product details slightly to make it stand out. Apply a subtle color grade to unify the entire image, making it look like a single, cohesive photograph. Ensure the final result is clean, professional, and believable.", "🖼️"),
    Preset("tech", "Modern tech", "Place on a clean white glossy surface, cool white laboratory lighting, high-tech environment, sleek modern look", "🧪"),
    Preset("summer", "Summer vibes", "Place on sand, bright sunlight, blue sky background, beach atmosphere, refreshing look, hard shadows", "🏖️"),
    Preset("darkmode", "Dark mode", "Place on a matte black surface, dark grey background, sleek dim lighting, modern tech aesthetic", "🌑"),
)

CAMERA_MOVES = (
    Preset("dolly_in", "Dolly in", "Zoom in slightly on the subject, maintaining high detail and lighting", "🔍+"),
    Preset("dolly_out", "Dolly out", "Zoom out slightly to reveal more surroundings, maintaining consistency", "🔍-"),
    Preset("low_angle", "Low angle", "Change to a low camera angle looking up at the subject, dramatic view", "📐"),
    Preset("high_angle", "High angle", "Change to a high camera angle looking down at the subject, overview", "📏"),
    Preset("dutch", "Dutch tilt", "Add a dutch angle tilt for a dynamic, energetic look", "🔄"),
)

NATURAL_BACKGROUNDS = (
    Preset("dark_wood", "Dark wood", "Place the product on a dark, rustic wooden surface with a visible grain and a matte finish. Use soft, directional lighting to create a moody and luxurious atmosphere.", "🪵"),
    Preset("kraft_paper", "Kraft paper", "Place the product on a clean, slightly textured sheet of kraft paper. The lighting should be bright and even, creating a minimalist and eco-friendly aesthetic.", "📜"),
    Preset("linen_cloth", "Linen cloth", "Place the product on a draped piece of neutral-colored linen cloth with natural wrinkles and texture. Use soft, diffused daylight for a gentle, organic feel.", "☁️"),
    Preset("stone_surface", "Stone surface", "Place the product on a natural stone surface, like slate or rough granite. The lighting should be crisp, highlighting the texture of the stone for a sophisticated, earthy look.", "🪨"),
    Preset("matte_black", "Matte black card", "Place the product on a smooth, matte black background. Use a single key light to sculpt the product's shape, creating a dramatic, high-contrast look with deep shadows and no reflections.", "⚫"),
)

SCENES = (
    Preset("studio", "White studio", "Place object on a white infinity curve studio background with soft shadows", "🏞️"),
    Preset("desk", "Wooden desk", "Place object on a clean wooden desk with a blurred office background", "🏞️"),
    Preset("marble", "Luxury marble", "Place object on a luxury white marble surface with reflections", "🏞️"),
    Preset("misty_forest", "Misty nature", "Place object in a misty forest floor with shallow depth of field", "🏞️"),
)

ACCENT_LIGHTS = (
    Preset("candle_accent", "Candle backlight", "Add a subtle, warm accent light in the distant background, simulating the soft glow of a single candle. This should add depth and a cozy atmosphere without directly lighting the product.", "🕯️"),
    Preset("soft_lamp_accent", "Soft warm lamp", "Introduce a soft, diffused, warm accent light in the background, as if from a small, out-of-view table lamp. This should create a gentle pool of light that enhances the scene's depth and warmth.", "💡"),
    Preset("specular_reflection", "Specular glint", "Create a single, small, specular highlight in the background, simulating a glint of light reflected from a distant metallic or glass object. This should add a subtle, artistic point of interest and a touch of luxury.", "🪞"),
    Preset("cool_night_light", "Calm night light", "Add a very soft, cool-toned accent light in the background, like the gentle glow from a small LED night light. This should add a touch of modern, calm ambiance to the scene.", "🌙"),
)

VISUAL_EFFECTS = (
    Preset("frosted_glass", "Frosted glass background", "Apply a subtle frosted glass effect to the background of the image. This effect should gently blur and soften the background, making the product stand out more prominently while maintaining a clean and professional overall aesthetic. The main product must remain perfectly sharp and in focus.", "🧊"),
    Preset("professional_look", "Professional look", "Apply a subtle frosted glass effect to the background, making the product stand out more while maintaining a professional look. Ensure the product itself remains perfectly sharp and in focus.", "💼"),
    Preset("vignette", "Vignette", "Add a subtle, dark vignette effect around the edges for focus", "🎯"),
    Preset("retouch", "Blemish removal", "Remove any minor imperfections, dust, scratches, and blemishes from the product image for a clean, flawless, and polished finish. Retouch the product smoothly while preserving its natural texture.", "🪄"),
    Preset("grain", "Film grain", "Add a light, fine film grain texture for a vintage feel", "🎞️"),
    Preset("flare", "Lens flare", "Add a warm-toned cinematic anamorphic lens flare originating from the side of the image", "🌟"),
    Preset("color_grade", "Cinematic color grade", "Apply cinematic color grading with a slight cool tone and increased contrast.", "🎥"),
)

SOLID_COLORS = (
    BackgroundSwatch("White", "#FFFFFF", "Change background to pure white"),
    BackgroundSwatch("Black", "#000000", "Change background to pure black"),
    BackgroundSwatch("Gray", "#808080", "Change background to neutral gray"),
    BackgroundSwatch("Red", "#EF4444", "Change background to vibrant red"),
    BackgroundSwatch("Blue", "#3B82F6", "Change background to professional blue"),
    BackgroundSwatch("Green", "#10B981", "Change background to green screen style"),
)

GRADIENTS = (
    BackgroundSwatch("Warm", "#FB923C,#EF4444", "Change background to a warm orange to red gradient"),
    BackgroundSwatch("Cool", "#60A5FA,#06B6D4", "Change background to a cool blue to cyan gradient"),
    BackgroundSwatch("Luxury", "#0F172A,#334155", "Change background to a luxury dark gradient"),
)

CATEGORIES = (
    PresetCategory("etsy", "Etsy wood enhancements", ETSY_PRESETS),
    PresetCategory("styles", "Ready-made styles", STYLE_PRESETS),
    PresetCategory("camera_moves", "Camera moves", CAMERA_MOVES),
    PresetCategory("natural_backgrounds", "Natural backgrounds", NATURAL_BACKGROUNDS),
    PresetCategory("scenes", "Scenes", SCENES),
    PresetCategory("accent_lights", "Accent lights", ACCENT_LIGHTS),
    PresetCategory("visual_effects", "Visual effects", VISUAL_EFFECTS),
)

_PRESETS_BY_ID = {p.id: p for category in CATEGORIES for p in category.presets}


def find_preset(preset_id: str) -> Preset:
    try:
        return _PRESETS_BY_ID[preset_id]
    except KeyError:
        raise KeyError(f"Unknown preset '{preset_id}'") from None


def _check_level(level: int) -> int:
    level = int(level)
    if level < 0 or level > 100:
        raise ValueError("level must be between 0 and 100")
    return level


def bokeh_prompt(level: int) -> str:
    level = _check_level(level)
    if level == 0:
        return "Remove any background blur (bokeh effect)."
    if level <= 25:
        return f"Add a very subtle background blur (light bokeh at {level}%) to slightly separate the subject."
    if level <= 50:
        return f"Add a moderate background blur (medium bokeh at {level}%) for a professional look."
    if level <= 75:
        return f"Increase the background blur significantly (strong bokeh at {level}%) to make the subject pop."
    return (
        f"Add an extreme and creamy background blur (very strong bokeh at {level}%), "
        "simulating a wide aperture lens for maximum subject isolation."
    )


def texture_prompt(level: int) -> str:
    level = _check_level(level)
    if level == 0:
        return "Slightly soften the product details and textures for a smoother appearance."
    if level <= 25:
        return (
            "Subtly enhance the product's texture and micro-contrast details to make it look more refined. "
            f"Apply an effect intensity of {level}%."
        )
    if level <= 50:
        return (
            "Enhance the product's texture details and sharpness for a more defined, professional look. "
            f"Apply an effect intensity of {level}%."
        )
    if level <= 75:
        return (
            "Strongly enhance the texture details on the product, making its surfaces appear more tactile "
            f"and refined. Apply an effect intensity of {level}%."
        )
    return (
        "Maximally enhance the texture and fine details on the product for an ultra-sharp, high-definition "
        f"look, making the product appear extremely refined. Apply an effect intensity of {level}%."
    )


def text_overlay_prompt(text: str) -> str:
    if not text or not text.strip():
        raise EmptyInstructionError("Overlay text must not be empty")
    return (
        f'Add the text "{text}" to the image as an elegant overlay. Use a suitable font and color that '
        "complements the image. Apply a subtle drop shadow for readability. Place it in a visually "
        "pleasing location, like the bottom-left or bottom-right corner."
    )
