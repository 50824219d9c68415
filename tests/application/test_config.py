"""Tests for generation configuration."""

import json
from pathlib import Path

import pytest

from paletteguard.application.config import (
    DEFAULT_FALLBACK_MODEL,
    InvokerConfig,
    OrchestratorConfig,
    load_config,
)
from paletteguard.domain.exceptions import ConfigurationError


class TestDefaults:
    """Tests for the default retry policy."""

    def test_orchestrator_defaults(self) -> None:
        config = OrchestratorConfig()

        assert config.max_attempts == 3
        assert config.retry_delay == 1.0
        assert config.backoff_factor == 1.5

    def test_invoker_defaults(self) -> None:
        config = InvokerConfig()

        assert config.fallback_model == DEFAULT_FALLBACK_MODEL == "gemini-2.5-flash"
        assert config.retries == 2
        assert config.backoff_base == 2.0


class TestValidation:
    """Tests for __post_init__ checks."""

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_attempts": 0}, {"retry_delay": -1.0}, {"backoff_factor": 0.5}],
    )
    def test_orchestrator_rejects(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            OrchestratorConfig(**kwargs)

    @pytest.mark.parametrize(
        "kwargs",
        [{"retries": -1}, {"backoff_base": -2.0}, {"fallback_model": ""}],
    )
    def test_invoker_rejects(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            InvokerConfig(**kwargs)


class TestFromEnv:
    """Tests for OrchestratorConfig.from_env()."""

    def test_empty_environment(self) -> None:
        assert OrchestratorConfig.from_env({}) == OrchestratorConfig()

    def test_reads_variables(self) -> None:
        config = OrchestratorConfig.from_env(
            {
                "PALETTEGUARD_FALLBACK_MODEL": "backup-model",
                "PALETTEGUARD_RETRIES": "0",
                "PALETTEGUARD_MAX_ATTEMPTS": "5",
            }
        )

        assert config.invoker.fallback_model == "backup-model"
        assert config.invoker.retries == 0
        assert config.max_attempts == 5

    def test_gemini_fallback_variable(self) -> None:
        config = OrchestratorConfig.from_env({"GEMINI_FALLBACK_MODEL": "gemini-pro"})

        assert config.invoker.fallback_model == "gemini-pro"

    def test_bad_integer(self) -> None:
        with pytest.raises(ConfigurationError, match="PALETTEGUARD_RETRIES"):
            OrchestratorConfig.from_env({"PALETTEGUARD_RETRIES": "two"})


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "max_attempts": 2,
                    "retry_delay": 0.25,
                    "invoker": {"fallback_model": "backup", "retries": 1},
                }
            )
        )

        config = load_config(path)

        assert config.max_attempts == 2
        assert config.retry_delay == 0.25
        assert config.backoff_factor == 1.5
        assert config.invoker == InvokerConfig(fallback_model="backup", retries=1)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(path)

    @pytest.mark.parametrize(
        "data",
        [{"max_attemps": 2}, {"max_attempts": 0}, {"invoker": {"retries": "two"}}],
    )
    def test_schema_violations(self, tmp_path: Path, data: dict) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))

        with pytest.raises(ConfigurationError, match="Invalid config"):
            load_config(path)
