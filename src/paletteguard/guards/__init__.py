"""
Guards for palette validation.

Guards are deterministic validators returning a ValidationResult; errors
block acceptance, warnings do not.

Organization by validation profile:
- static/: Structural checks over the color map
- accessibility/: Contrast and accessibility metadata
- composite/: Guard composition and the standard PaletteValidator
"""

from paletteguard.guards.accessibility import AccessibilityBlockGuard, ContrastGuard
from paletteguard.guards.composite import CompositeGuard, PaletteValidator
from paletteguard.guards.static import (
    ColorCountGuard,
    DuplicateColorGuard,
    HexFormatGuard,
    RequiredRolesGuard,
)

__all__ = [
    # Static guards
    "HexFormatGuard",
    "RequiredRolesGuard",
    "ColorCountGuard",
    "DuplicateColorGuard",
    # Accessibility guards
    "ContrastGuard",
    "AccessibilityBlockGuard",
    # Composition
    "CompositeGuard",
    "PaletteValidator",
]
