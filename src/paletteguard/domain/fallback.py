"""
Deterministic fallback palette, used when every generation attempt failed.

The primary/background/text triple is fixed and clears the AAA contrast
threshold, so the result passes validation for any request.
"""

from paletteguard.domain.color_math import contrast_ratio, format_color
from paletteguard.domain.models import Accessibility, OutputShape, Palette
from paletteguard.domain.request import RequestSpec

FALLBACK_PRIMARY = "#3B82F6"
FALLBACK_BACKGROUND = "#FFFFFF"
FALLBACK_TEXT = "#111827"
FALLBACK_TAG = "fallback"


def build_fallback_palette(spec: RequestSpec) -> Palette:
    """Build the minimal valid palette for a request."""
    ratio = contrast_ratio(FALLBACK_TEXT, FALLBACK_BACKGROUND)
    assert ratio is not None

    colors = {
        "primary": format_color(
            spec.base_color or FALLBACK_PRIMARY,
            name="Primary",
            usage="Main brand color",
        ),
        "background": format_color(
            FALLBACK_BACKGROUND, name="Background", usage="Main backgrounds"
        ),
        "text": format_color(FALLBACK_TEXT, name="Text", usage="Primary text content"),
    }
    # A base color equal to the background or text would duplicate a role
    if colors["primary"].hex in (FALLBACK_BACKGROUND, FALLBACK_TEXT):
        colors["primary"] = format_color(
            FALLBACK_PRIMARY, name="Primary", usage="Main brand color"
        )

    return Palette(
        name=f"{spec.mood} {spec.industry} Palette",
        description="Fallback palette generated due to processing error",
        mood=spec.mood,
        industry=spec.industry,
        palette_type=spec.palette_type,
        color_harmony=spec.color_harmony,
        colors=colors,
        accessibility=Accessibility(
            contrast_ratio=round(ratio, 2),
            wcag_compliant=True,
            level=spec.accessibility_level,
            color_blind_safe=True,
            notes="Fallback palette with verified text/background contrast",
        ),
        tags=(spec.mood, spec.industry, FALLBACK_TAG),
        output_shape=OutputShape.SIMPLE,
    )
