"""
Domain exceptions for the palette generation pipeline.

InvalidParameter is the only one that reaches callers of generate(); the
others are recovered inside the pipeline (normalizer or orchestrator loop).
"""

from typing import Any


class PaletteGuardError(Exception):
    """Base class for all paletteguard errors."""


class InvalidParameter(PaletteGuardError, ValueError):
    """
    Raised when a caller-supplied request field is outside its vocabulary
    or a free-text directive is out of bounds.

    Raised before any completion call is made and never retried.
    """

    def __init__(self, field: str, value: Any, reason: str | None = None):
        """
        Args:
            field: Name of the offending request field
            value: The rejected value
            reason: Optional human-readable explanation
        """
        message = reason or f"Invalid {field}: {value!r}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = message


class InvalidColorFormat(PaletteGuardError, ValueError):
    """Raised when a hex string does not match ``#RRGGBB``."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class GenerationUnavailable(PaletteGuardError):
    """
    Raised when both the primary and the fallback model failed.

    Carries the primary model's error, since that is the one operators
    need to see; the fallback error is kept for completeness.
    """

    def __init__(
        self,
        model: str,
        fallback_model: str,
        cause: BaseException,
        fallback_cause: BaseException | None = None,
    ):
        super().__init__(
            f"Generation unavailable for model {model!r} "
            f"(fallback {fallback_model!r}): {cause}"
        )
        self.model = model
        self.fallback_model = fallback_model
        self.cause = cause
        self.fallback_cause = fallback_cause


class UnparsableResponse(PaletteGuardError):
    """Raised when a completion holds no usable JSON palette."""

    MAX_RAW_CHARS = 200

    def __init__(self, reason: str, raw: str = ""):
        excerpt = raw[: self.MAX_RAW_CHARS]
        message = f"Unparsable response: {reason}"
        if excerpt:
            message += f" (got: {excerpt!r})"
        super().__init__(message)
        self.reason = reason
        self.raw = raw


class ConfigurationError(PaletteGuardError):
    """Raised when generation configuration is invalid."""
