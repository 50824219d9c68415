"""
paletteguard: validated, accessible color palettes from unreliable LLMs.

Turns a structured request plus free-text instructions into a palette by
composing a prompt, invoking a completion model with retries and model
fallback, normalizing the heterogeneous output, and validating it against
structural and WCAG contrast rules. If every attempt fails, a
deterministic fallback palette is returned instead of an error.

Example:
    from paletteguard import PaletteOrchestrator
    from paletteguard.infrastructure import OpenAICompletionClient

    client = OpenAICompletionClient()  # reads GEMINI_API_KEY
    palette = PaletteOrchestrator(client).generate(
        {"mood": "playful", "industry": "technology",
         "prompt": "Use #FF5733 as base. 5 colors."}
    )
    print(palette.colors["primary"].hex)
"""

# Application layer (orchestration)
from paletteguard.application import (
    GenerationInvoker,
    InvokerConfig,
    OrchestratorConfig,
    PaletteOrchestrator,
    generate,
    load_config,
)

# Domain color math
from paletteguard.domain.color_math import (
    contrast_ratio,
    format_color,
    hex_to_rgb,
    relative_luminance,
    rgb_to_hsl,
)

# Domain exceptions
from paletteguard.domain.exceptions import (
    ConfigurationError,
    GenerationUnavailable,
    InvalidColorFormat,
    InvalidParameter,
    PaletteGuardError,
    UnparsableResponse,
)

# Domain interfaces (for type hints and custom implementations)
from paletteguard.domain.interfaces import (
    CompletionClientInterface,
    PaletteGuardInterface,
)
from paletteguard.domain.models import (
    HSL,
    RGB,
    Accessibility,
    Color,
    GenerationResult,
    GenerationState,
    OutputShape,
    Palette,
    ValidationResult,
)
from paletteguard.domain.normalization import ResponseNormalizer
from paletteguard.domain.prompts import PalettePrompt, compose_prompt
from paletteguard.domain.request import RequestSpec

# Guards
from paletteguard.guards import PaletteValidator

# Infrastructure (explicit import encouraged for dependency injection)
from paletteguard.infrastructure.llm import MockCompletionClient

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "RGB",
    "HSL",
    "Color",
    "Accessibility",
    "Palette",
    "OutputShape",
    "ValidationResult",
    "GenerationState",
    "GenerationResult",
    # Request, prompt, normalization
    "RequestSpec",
    "PalettePrompt",
    "compose_prompt",
    "ResponseNormalizer",
    # Color math
    "hex_to_rgb",
    "rgb_to_hsl",
    "relative_luminance",
    "contrast_ratio",
    "format_color",
    # Domain interfaces
    "CompletionClientInterface",
    "PaletteGuardInterface",
    # Domain exceptions
    "PaletteGuardError",
    "InvalidParameter",
    "InvalidColorFormat",
    "GenerationUnavailable",
    "UnparsableResponse",
    "ConfigurationError",
    # Application layer
    "GenerationInvoker",
    "InvokerConfig",
    "OrchestratorConfig",
    "PaletteOrchestrator",
    "generate",
    "load_config",
    # Guards
    "PaletteValidator",
    # Infrastructure - LLM
    "MockCompletionClient",
]
