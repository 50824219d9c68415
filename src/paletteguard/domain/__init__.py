"""
Domain layer for palette generation.

Contains the color math, request model, prompt composition, normalization
and fallback rules, with no dependencies outside the standard library.
"""

from paletteguard.domain.exceptions import (
    ConfigurationError,
    GenerationUnavailable,
    InvalidColorFormat,
    InvalidParameter,
    PaletteGuardError,
    UnparsableResponse,
)
from paletteguard.domain.fallback import build_fallback_palette
from paletteguard.domain.interfaces import (
    CompletionClientInterface,
    PaletteGuardInterface,
)
from paletteguard.domain.models import (
    HSL,
    RGB,
    Accessibility,
    AttemptRecord,
    Color,
    GenerationResult,
    GenerationState,
    OutputShape,
    Palette,
    ValidationResult,
)
from paletteguard.domain.normalization import ResponseNormalizer, extract_json
from paletteguard.domain.prompts import PalettePrompt, compose_prompt
from paletteguard.domain.request import Directives, RequestSpec, parse_directives

__all__ = [
    # Models
    "RGB",
    "HSL",
    "Color",
    "Accessibility",
    "Palette",
    "OutputShape",
    "ValidationResult",
    "GenerationState",
    "AttemptRecord",
    "GenerationResult",
    # Request and prompt
    "RequestSpec",
    "Directives",
    "parse_directives",
    "PalettePrompt",
    "compose_prompt",
    # Normalization and fallback
    "ResponseNormalizer",
    "extract_json",
    "build_fallback_palette",
    # Interfaces
    "CompletionClientInterface",
    "PaletteGuardInterface",
    # Exceptions
    "PaletteGuardError",
    "InvalidParameter",
    "InvalidColorFormat",
    "GenerationUnavailable",
    "UnparsableResponse",
    "ConfigurationError",
]
