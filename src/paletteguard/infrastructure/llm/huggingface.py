"""
HuggingFace Inference API completion client.

Connects to HuggingFace Inference Providers via the huggingface_hub
InferenceClient for chat completion.
"""

import os
from dataclasses import dataclass
from typing import Any, cast

from paletteguard.domain.interfaces import CompletionClientInterface
from paletteguard.infrastructure.llm.openai_client import SYSTEM_MESSAGE


@dataclass
class HuggingFaceClientConfig:
    """Configuration for HuggingFaceCompletionClient.

    This typed config ensures unknown fields are rejected at construction time.
    """

    api_key: str | None = None  # Auto-detects from HF_TOKEN env var
    provider: str | None = None  # e.g. "auto", "hf-inference", "together"
    timeout: float = 120.0
    temperature: float = 0.7
    max_tokens: int = 4096


class HuggingFaceCompletionClient(CompletionClientInterface):
    """Connects to HuggingFace Inference API using huggingface_hub."""

    config_class = HuggingFaceClientConfig

    def __init__(
        self, config: HuggingFaceClientConfig | None = None, **kwargs: Any
    ) -> None:
        """
        Args:
            config: Typed configuration object (preferred)
            **kwargs: Fields of HuggingFaceClientConfig
        """
        if config is None:
            config = HuggingFaceClientConfig(**kwargs)

        try:
            from huggingface_hub import InferenceClient
        except ImportError as err:
            raise ImportError(
                "huggingface_hub library required: pip install huggingface_hub"
            ) from err

        api_key = config.api_key
        if api_key is None:
            api_key = os.environ.get("HF_TOKEN")
            if not api_key:
                raise ValueError(
                    "HuggingFace API key required: set HF_TOKEN environment "
                    "variable or pass api_key in config"
                )

        client_kwargs: dict[str, Any] = {
            "api_key": api_key,
            "timeout": config.timeout,
        }
        if config.provider is not None:
            client_kwargs["provider"] = config.provider

        self._client = InferenceClient(**client_kwargs)
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens

    def complete(self, model_id: str, prompt: str) -> str:
        messages: list[dict[str, str]] = [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": prompt},
        ]
        response = self._client.chat_completion(
            messages=cast(Any, messages),
            model=model_id,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content or ""
