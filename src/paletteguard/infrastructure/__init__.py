"""
Infrastructure layer for palette generation.

Contains adapters for the external completion capability.
"""

from paletteguard.infrastructure.llm import (
    HuggingFaceCompletionClient,
    MockCompletionClient,
    OpenAICompletionClient,
)
from paletteguard.infrastructure.registry import CompletionClientRegistry

__all__ = [
    "CompletionClientRegistry",
    "HuggingFaceCompletionClient",
    "MockCompletionClient",
    "OpenAICompletionClient",
]
