"""WCAG text/background contrast guard."""

from paletteguard.domain.color_math import contrast_ratio, wcag_threshold
from paletteguard.domain.interfaces import PaletteGuardInterface
from paletteguard.domain.models import Palette, ValidationResult


class ContrastGuard(PaletteGuardInterface):
    """
    Text on background must meet the WCAG threshold.

    The threshold is the stricter of the palette's declared level and
    ``required_level`` (the level the request asked for).
    """

    def __init__(self, required_level: str = "AA"):
        self.required_level = required_level

    def threshold(self, palette: Palette) -> float:
        return max(
            wcag_threshold(palette.accessibility.level),
            wcag_threshold(self.required_level),
        )

    def validate(self, palette: Palette) -> ValidationResult:
        text = palette.colors.get("text")
        background = palette.colors.get("background")
        if text is None or background is None:
            # Reported by RequiredRolesGuard
            return ValidationResult()

        ratio = contrast_ratio(text.hex, background.hex)
        if ratio is None:
            return ValidationResult(
                errors=(
                    f"Cannot measure contrast between {text.hex!r} and "
                    f"{background.hex!r}",
                )
            )

        threshold = self.threshold(palette)
        if ratio < threshold:
            return ValidationResult(
                errors=(
                    f"Text/background contrast {ratio:.2f}:1 is below the "
                    f"required {threshold:g}:1",
                )
            )
        return ValidationResult()
