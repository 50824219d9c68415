"""
Static guards - pure checks over the palette structure.
"""

from paletteguard.guards.static.structure import (
    ColorCountGuard,
    HexFormatGuard,
    RequiredRolesGuard,
)
from paletteguard.guards.static.uniqueness import DuplicateColorGuard

__all__ = [
    "HexFormatGuard",
    "RequiredRolesGuard",
    "ColorCountGuard",
    "DuplicateColorGuard",
]
