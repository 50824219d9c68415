"""
Domain interfaces (ports) for palette generation.

The completion capability is external: adapters live in
paletteguard.infrastructure.llm and are injected into the application layer.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paletteguard.domain.models import Palette, ValidationResult


class CompletionClientInterface(ABC):
    """
    Port for the external text-completion service.

    Implementations may fail transiently or permanently; errors are
    classified by their message, so they need no particular type.
    """

    @abstractmethod
    def complete(self, model_id: str, prompt: str) -> str:
        """
        Submit a prompt and return the completion text.

        Args:
            model_id: Opaque model identifier, passed through to the service
            prompt: Fully rendered prompt text

        Returns:
            Raw completion text
        """


class PaletteGuardInterface(ABC):
    """
    Port for palette validation.

    Guards are deterministic: the same palette always yields the same result.
    """

    @abstractmethod
    def validate(self, palette: "Palette") -> "ValidationResult":
        """
        Validate a palette draft.

        Returns:
            ValidationResult with errors (blocking) and warnings
        """
