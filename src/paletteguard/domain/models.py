"""
Domain models for palette generation.

All models are immutable (frozen dataclasses); a palette draft is rebuilt
from scratch on every orchestrator attempt rather than patched in place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# =============================================================================
# COLOR VALUES
# =============================================================================


@dataclass(frozen=True)
class RGB:
    """sRGB triple, each channel 0-255."""

    r: int
    g: int
    b: int

    def to_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class HSL:
    """Hue in degrees (0-360), saturation and lightness in percent (0-100)."""

    h: int
    s: int
    l: int  # noqa: E741

    def to_dict(self) -> dict[str, int]:
        return {"h": self.h, "s": self.s, "l": self.l}


@dataclass(frozen=True)
class Color:
    """
    Canonical color: one hex value with its derived RGB and HSL forms.

    ``hex`` is always ``#RRGGBB`` upper-cased when produced by format_color();
    a draft may carry a malformed hex so that validation can report it.
    """

    hex: str
    rgb: RGB
    hsl: HSL
    name: str
    usage: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hsl": self.hsl.to_dict(),
            "name": self.name,
            "usage": self.usage,
        }


# =============================================================================
# PALETTE (the generated artifact)
# =============================================================================


class OutputShape(Enum):
    """Output contract requested from the model."""

    SIMPLE = "simple"  # 3-6 colors, flat list, minimal metadata
    FULL = "full"  # 8-15 colors across semantic roles, gradients, states


@dataclass(frozen=True)
class Accessibility:
    """Accessibility claims attached to a palette."""

    contrast_ratio: float
    wcag_compliant: bool
    level: str
    color_blind_safe: bool
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "contrastRatio": self.contrast_ratio,
            "wcagCompliant": self.wcag_compliant,
            "level": self.level,
            "colorBlindSafe": self.color_blind_safe,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class Palette:
    """
    Canonical palette artifact.

    ``colors`` maps role name (primary, background, text, accent, ...) to a
    Color and keeps the order the roles were produced in.
    """

    name: str
    description: str
    mood: str
    industry: str
    palette_type: str
    color_harmony: str
    colors: dict[str, Color]
    accessibility: Accessibility
    tags: tuple[str, ...]
    output_shape: OutputShape = OutputShape.FULL
    gradients: dict[str, Any] = field(default_factory=dict)
    interactive_states: dict[str, Any] = field(default_factory=dict)
    shadows: dict[str, Any] = field(default_factory=dict)

    def color(self, role: str) -> Color | None:
        return self.colors.get(role)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON document used by exporters."""
        return {
            "name": self.name,
            "description": self.description,
            "mood": self.mood,
            "industry": self.industry,
            "paletteType": self.palette_type,
            "colorHarmony": self.color_harmony,
            "outputShape": self.output_shape.value,
            "colors": {role: c.to_dict() for role, c in self.colors.items()},
            "gradients": dict(self.gradients),
            "interactiveStates": dict(self.interactive_states),
            "shadows": dict(self.shadows),
            "accessibility": self.accessibility.to_dict(),
            "tags": list(self.tags),
        }


# =============================================================================
# VALIDATION
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a palette draft.

    Errors block acceptance; warnings are reported but never block.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def feedback(self) -> str:
        """Human-readable summary of the errors."""
        return "; ".join(self.errors)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )


# =============================================================================
# ORCHESTRATION
# =============================================================================


class GenerationState(Enum):
    """States of the orchestrator loop."""

    COMPOSING = "composing"
    INVOKING = "invoking"
    NORMALIZING = "normalizing"
    VALIDATING = "validating"
    RETRYING = "retrying"
    ACCEPTED = "accepted"  # terminal
    FALLBACK_SYNTHESIS = "fallback_synthesis"  # terminal


@dataclass(frozen=True)
class AttemptRecord:
    """One failed pass through the pipeline."""

    attempt: int
    state: GenerationState  # state in which the attempt failed
    error: str


@dataclass(frozen=True)
class GenerationResult:
    """Palette plus the history that produced it."""

    palette: Palette
    status: GenerationState
    attempts: tuple[AttemptRecord, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_fallback(self) -> bool:
        return self.status is GenerationState.FALLBACK_SYNTHESIS
