"""
Structural guards: hex format, required roles and color count.

Pure checks over the palette's color map; no color math beyond the
format pattern.
"""

import re

from paletteguard.domain.interfaces import PaletteGuardInterface
from paletteguard.domain.models import Palette, ValidationResult

HEX_FORMAT = re.compile(r"^#[0-9A-F]{6}$", re.IGNORECASE)

REQUIRED_ROLES = ("primary", "background", "text")


class HexFormatGuard(PaletteGuardInterface):
    """Every color must be ``#RRGGBB``; name and description must be non-empty."""

    def validate(self, palette: Palette) -> ValidationResult:
        errors = [
            f"Color '{role}' has invalid hex value {color.hex!r}"
            for role, color in palette.colors.items()
            if not HEX_FORMAT.match(color.hex)
        ]
        if not palette.name.strip():
            errors.append("Palette name is empty")
        if not palette.description.strip():
            errors.append("Palette description is empty")
        return ValidationResult(errors=tuple(errors))


class RequiredRolesGuard(PaletteGuardInterface):
    """
    Checks the primary, background and text roles.

    A missing primary is only a warning; text and background are needed to
    measure contrast, so their absence is an error.
    """

    def validate(self, palette: Palette) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []
        for role in REQUIRED_ROLES:
            if role in palette.colors:
                continue
            if role == "primary":
                warnings.append("Missing required color role 'primary'")
            else:
                errors.append(f"Missing required color role '{role}'")
        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))


class ColorCountGuard(PaletteGuardInterface):
    """Warns when a requested exact color count was not honored."""

    def __init__(self, expected: int | None = None):
        self.expected = expected

    def validate(self, palette: Palette) -> ValidationResult:
        if self.expected is None or len(palette.colors) == self.expected:
            return ValidationResult()
        return ValidationResult(
            warnings=(
                f"Expected exactly {self.expected} colors, got {len(palette.colors)}",
            )
        )
