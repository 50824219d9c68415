"""Type check of the accessibility block via its JSON Schema."""

from paletteguard.domain.interfaces import PaletteGuardInterface
from paletteguard.domain.models import Palette, ValidationResult
from paletteguard.schemas import accessibility_errors


class AccessibilityBlockGuard(PaletteGuardInterface):
    """A malformed accessibility block means normalization went wrong."""

    def validate(self, palette: Palette) -> ValidationResult:
        messages = accessibility_errors(palette.accessibility.to_dict())
        return ValidationResult(
            errors=tuple(f"Invalid accessibility block: {m}" for m in messages)
        )
