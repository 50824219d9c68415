"""Gradients derived from a user-supplied base color."""

from typing import Any

from paletteguard.domain.color_math import darken, lighten


def _linear(direction: str, *stops: str | None) -> dict[str, Any]:
    return {"type": "linear", "direction": direction, "colors": list(stops)}


def base_color_gradients(
    base_hex: str,
    primary: str | None = None,
    accent: str | None = None,
    neutral: str | None = None,
) -> dict[str, dict[str, Any]]:
    """
    Build the standard gradient set around ``base_hex``.

    Missing partner colors are replaced by lighter or darker mixes of the
    base color.
    """
    return {
        "primary": _linear(
            "135deg", lighten(base_hex, 0.25), base_hex, darken(base_hex, 0.25)
        ),
        "accent": _linear("45deg", base_hex, accent or lighten(base_hex, 0.35)),
        "neutral": {
            "type": "radial",
            "direction": "circle",
            "colors": [base_hex, neutral or darken(base_hex, 0.35)],
        },
        "complementary": _linear("90deg", base_hex, primary or lighten(base_hex, 0.5)),
    }
