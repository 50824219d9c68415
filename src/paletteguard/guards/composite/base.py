"""
Guard composition for palette validation.

Unlike a short-circuiting AND, PaletteValidator runs every guard so that
all errors and warnings of a draft are reported together.
"""

import logging

from paletteguard.domain.interfaces import PaletteGuardInterface
from paletteguard.domain.models import Palette, ValidationResult
from paletteguard.guards.accessibility import AccessibilityBlockGuard, ContrastGuard
from paletteguard.guards.static import (
    ColorCountGuard,
    DuplicateColorGuard,
    HexFormatGuard,
    RequiredRolesGuard,
)

logger = logging.getLogger(__name__)


class CompositeGuard(PaletteGuardInterface):
    """Runs guards in order and merges their results."""

    def __init__(self, *guards: PaletteGuardInterface):
        """
        Args:
            *guards: Guards to compose (evaluated in order)
        """
        self.guards = guards

    def validate(self, palette: Palette) -> ValidationResult:
        result = ValidationResult()
        for guard in self.guards:
            result = result.merge(guard.validate(palette))
        return result


class PaletteValidator(CompositeGuard):
    """
    The standard palette checks, in order: hex format, required roles,
    duplicates, contrast, accessibility block, requested color count.
    """

    def __init__(self, required_level: str = "AA", expected_count: int | None = None):
        super().__init__(
            HexFormatGuard(),
            RequiredRolesGuard(),
            DuplicateColorGuard(),
            ContrastGuard(required_level),
            AccessibilityBlockGuard(),
            ColorCountGuard(expected_count),
        )

    def validate(self, palette: Palette) -> ValidationResult:
        result = super().validate(palette)
        for warning in result.warnings:
            logger.warning("Palette %r: %s", palette.name, warning)
        return result
