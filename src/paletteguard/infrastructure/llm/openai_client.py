"""
OpenAI-compatible completion client.

Works with any endpoint speaking the OpenAI chat API; the default base URL
is Gemini's OpenAI-compatible endpoint. Ollama works as well by pointing
``base_url`` at ``http://localhost:11434/v1``.
"""

import os
from dataclasses import dataclass
from typing import Any, cast

from paletteguard.domain.interfaces import CompletionClientInterface

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "OPENAI_API_KEY")

SYSTEM_MESSAGE = (
    "You are a color palette generator. Respond with a single JSON document "
    "and nothing else."
)


@dataclass
class OpenAIClientConfig:
    """Configuration for OpenAICompletionClient.

    This typed config ensures unknown fields are rejected at construction time.
    """

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None  # Auto-detects from GEMINI_API_KEY / OPENAI_API_KEY
    timeout: float = 60.0
    temperature: float = 0.7
    json_mode: bool = True


class OpenAICompletionClient(CompletionClientInterface):
    """Completes prompts through the openai SDK."""

    config_class = OpenAIClientConfig

    def __init__(self, config: OpenAIClientConfig | None = None, **kwargs: Any):
        """
        Args:
            config: Typed configuration object (preferred)
            **kwargs: Fields of OpenAIClientConfig
        """
        if config is None:
            config = OpenAIClientConfig(**kwargs)

        try:
            from openai import OpenAI
        except ImportError as err:
            raise ImportError("openai library required: pip install openai") from err

        api_key = config.api_key
        if api_key is None:
            api_key = next(
                (os.environ[var] for var in API_KEY_ENV_VARS if os.environ.get(var)),
                None,
            )
            if not api_key:
                raise ValueError(
                    "API key required: set GEMINI_API_KEY or OPENAI_API_KEY "
                    "or pass api_key in config"
                )

        self._client = OpenAI(
            base_url=config.base_url,
            api_key=api_key,
            timeout=config.timeout,
        )
        self._temperature = config.temperature
        self._json_mode = config.json_mode

    def complete(self, model_id: str, prompt: str) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": prompt},
        ]
        request: dict[str, Any] = {
            "model": model_id,
            "messages": cast(Any, messages),
            "temperature": self._temperature,
        }
        if self._json_mode:
            request["response_format"] = {"type": "json_object"}

        response = self._client.chat.completions.create(**request)
        return response.choices[0].message.content or ""
