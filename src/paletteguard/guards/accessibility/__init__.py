"""
Accessibility guards - contrast and accessibility metadata checks.
"""

from paletteguard.guards.accessibility.block import AccessibilityBlockGuard
from paletteguard.guards.accessibility.contrast import ContrastGuard

__all__ = ["ContrastGuard", "AccessibilityBlockGuard"]
