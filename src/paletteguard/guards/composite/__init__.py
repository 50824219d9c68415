"""
Composite guards - combining guards into a single validator.
"""

from paletteguard.guards.composite.base import CompositeGuard, PaletteValidator

__all__ = ["CompositeGuard", "PaletteValidator"]
