"""
Completion client implementations.
"""

from paletteguard.infrastructure.llm.huggingface import (
    HuggingFaceClientConfig,
    HuggingFaceCompletionClient,
)
from paletteguard.infrastructure.llm.mock import MockCompletionClient
from paletteguard.infrastructure.llm.openai_client import (
    OpenAIClientConfig,
    OpenAICompletionClient,
)

__all__ = [
    "HuggingFaceClientConfig",
    "HuggingFaceCompletionClient",
    "MockCompletionClient",
    "OpenAIClientConfig",
    "OpenAICompletionClient",
]
