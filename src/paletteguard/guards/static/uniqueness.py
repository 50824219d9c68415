"""Duplicate-color detection across roles."""

from paletteguard.domain.interfaces import PaletteGuardInterface
from paletteguard.domain.models import Palette, ValidationResult


class DuplicateColorGuard(PaletteGuardInterface):
    """
    Flags roles sharing a hex value (case-insensitive).

    Duplicates are warnings, except text/background which would have zero
    contrast and is an error.
    """

    def validate(self, palette: Palette) -> ValidationResult:
        roles_by_hex: dict[str, list[str]] = {}
        for role, color in palette.colors.items():
            roles_by_hex.setdefault(color.hex.upper(), []).append(role)

        errors: list[str] = []
        warnings: list[str] = []
        for hex_value, roles in roles_by_hex.items():
            if len(roles) < 2:
                continue
            if "text" in roles and "background" in roles:
                errors.append(f"Text and background share the same color {hex_value}")
            else:
                warnings.append(
                    f"Duplicate color {hex_value} used by roles: {', '.join(roles)}"
                )
        return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
