"""
Color math: hex/RGB/HSL conversion, WCAG luminance and contrast.

Pure functions. Malformed hex input yields None rather than an exception,
except in format_color() which is the one strict entry point.
"""

import math
import re

from paletteguard.domain.exceptions import InvalidColorFormat
from paletteguard.domain.models import HSL, RGB, Color

HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
STRICT_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")

AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0

WHITE = "#FFFFFF"
BLACK = "#000000"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_value: str) -> RGB | None:
    """Parse ``#RRGGBB`` (leading ``#`` optional); None if malformed."""
    if not isinstance(hex_value, str):
        return None
    match = HEX_PATTERN.match(hex_value.strip())
    if not match:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r, g, b)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    channels = (max(0, min(255, _round_half_up(c))) for c in (r, g, b))
    return "#" + "".join(f"{c:02X}" for c in channels)


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Standard RGB to HSL, rounded to whole degrees and percents."""
    rn, gn, bn = r / 255, g / 255, b / 255
    high = max(rn, gn, bn)
    low = min(rn, gn, bn)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)
        if high == rn:
            hue = (gn - bn) / delta + (6 if gn < bn else 0)
        elif high == gn:
            hue = (bn - rn) / delta + 2
        else:
            hue = (rn - gn) / delta + 4
        hue /= 6

    return HSL(
        h=_round_half_up(hue * 360),
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def _linear_channel(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_value: str) -> float | None:
    """WCAG relative luminance in [0, 1]; None if malformed."""
    rgb = hex_to_rgb(hex_value)
    if rgb is None:
        return None
    return (
        0.2126 * _linear_channel(rgb.r)
        + 0.7152 * _linear_channel(rgb.g)
        + 0.0722 * _linear_channel(rgb.b)
    )


def contrast_ratio(hex_a: str, hex_b: str) -> float | None:
    """WCAG contrast ratio between two colors, 1.0 to 21.0."""
    lum_a = relative_luminance(hex_a)
    lum_b = relative_luminance(hex_b)
    if lum_a is None or lum_b is None:
        return None
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_threshold(level: str) -> float:
    """Minimum text/background contrast for a WCAG level."""
    return AAA_THRESHOLD if level == "AAA" else AA_THRESHOLD


def format_color(
    hex_value: str, name: str | None = None, usage: str | None = None
) -> Color:
    """
    Build a canonical Color from a ``#RRGGBB`` string.

    Raises:
        InvalidColorFormat: If the value is not exactly ``#`` plus 6 hex digits.
    """
    if not isinstance(hex_value, str) or not STRICT_HEX_PATTERN.match(hex_value):
        raise InvalidColorFormat(hex_value)
    canonical = hex_value.upper()
    rgb = hex_to_rgb(canonical)
    assert rgb is not None
    return Color(
        hex=canonical,
        rgb=rgb,
        hsl=rgb_to_hsl(rgb.r, rgb.g, rgb.b),
        name=name or canonical,
        usage=usage or "General use",
    )


def mix(hex_a: str, hex_b: str, weight: float) -> str | None:
    """Blend ``weight`` of hex_b into hex_a (0 keeps a, 1 gives b)."""
    a = hex_to_rgb(hex_a)
    b = hex_to_rgb(hex_b)
    if a is None or b is None:
        return None
    return rgb_to_hex(
        a.r + (b.r - a.r) * weight,
        a.g + (b.g - a.g) * weight,
        a.b + (b.b - a.b) * weight,
    )


def lighten(hex_value: str, amount: float) -> str | None:
    return mix(hex_value, WHITE, amount)


def darken(hex_value: str, amount: float) -> str | None:
    return mix(hex_value, BLACK, amount)
