"""
Typed configuration for the generation pipeline.

Defaults match the documented retry policy; from_env() and load_config()
override them from environment variables or a JSON file.
"""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jsonschema

from paletteguard.domain.exceptions import ConfigurationError
from paletteguard.schemas import validate_generation_config

DEFAULT_FALLBACK_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class InvokerConfig:
    """Retry and model-escalation policy for a single completion."""

    fallback_model: str = DEFAULT_FALLBACK_MODEL
    retries: int = 2
    backoff_base: float = 2.0

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ConfigurationError(f"retries must be >= 0, got {self.retries}")
        if self.backoff_base < 0:
            raise ConfigurationError(
                f"backoff_base must be >= 0, got {self.backoff_base}"
            )
        if not self.fallback_model:
            raise ConfigurationError("fallback_model must not be empty")


@dataclass(frozen=True)
class OrchestratorConfig:
    """Whole-pipeline attempt policy."""

    max_attempts: int = 3
    retry_delay: float = 1.0
    backoff_factor: float = 1.5
    invoker: InvokerConfig = field(default_factory=InvokerConfig)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be >= 1, got {self.max_attempts}"
            )
        if self.retry_delay < 0:
            raise ConfigurationError(
                f"retry_delay must be >= 0, got {self.retry_delay}"
            )
        if self.backoff_factor < 1:
            raise ConfigurationError(
                f"backoff_factor must be >= 1, got {self.backoff_factor}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OrchestratorConfig":
        values = dict(data)
        invoker = InvokerConfig(**values.pop("invoker", {}))
        return cls(invoker=invoker, **values)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "OrchestratorConfig":
        """
        Build a config from environment variables.

        Reads PALETTEGUARD_FALLBACK_MODEL (or GEMINI_FALLBACK_MODEL),
        PALETTEGUARD_MAX_ATTEMPTS and PALETTEGUARD_RETRIES.

        Raises:
            ConfigurationError: If a numeric variable does not parse.
        """
        env = os.environ if environ is None else environ
        invoker: dict[str, Any] = {}
        fallback = env.get("PALETTEGUARD_FALLBACK_MODEL") or env.get(
            "GEMINI_FALLBACK_MODEL"
        )
        if fallback:
            invoker["fallback_model"] = fallback
        values: dict[str, Any] = {}
        for var, target, key in (
            ("PALETTEGUARD_RETRIES", invoker, "retries"),
            ("PALETTEGUARD_MAX_ATTEMPTS", values, "max_attempts"),
        ):
            raw = env.get(var)
            if raw is None:
                continue
            try:
                target[key] = int(raw)
            except ValueError as err:
                raise ConfigurationError(f"{var} must be an integer, got {raw!r}") from err
        return cls(invoker=InvokerConfig(**invoker), **values)


def load_config(path: str | Path) -> OrchestratorConfig:
    """
    Load an OrchestratorConfig from a JSON file.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as err:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {err}") from err
    try:
        validate_generation_config(data)
    except jsonschema.ValidationError as err:
        raise ConfigurationError(f"Invalid config {config_path}: {err.message}") from err
    return OrchestratorConfig.from_mapping(data)
