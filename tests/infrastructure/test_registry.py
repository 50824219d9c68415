"""Tests for CompletionClientRegistry - entry points-based client discovery."""

from collections.abc import Iterator

import pytest

from paletteguard.domain.interfaces import CompletionClientInterface
from paletteguard.infrastructure import (
    CompletionClientRegistry,
    HuggingFaceCompletionClient,
    MockCompletionClient,
    OpenAICompletionClient,
)


class _EchoClient(CompletionClientInterface):
    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def complete(self, model_id: str, prompt: str) -> str:
        return f"{self.prefix}{model_id}"


@pytest.fixture(autouse=True)
def fresh_registry() -> Iterator[None]:
    CompletionClientRegistry.clear()
    yield
    CompletionClientRegistry.clear()


class TestEntryPointsLoading:
    """Tests for entry points discovery and loading."""

    def test_available_lists_builtin_clients(self) -> None:
        available = CompletionClientRegistry.available()

        assert {"openai", "huggingface", "mock"} <= set(available)
        assert available == sorted(available)

    def test_load_idempotent(self) -> None:
        CompletionClientRegistry._load_entry_points()
        first = dict(CompletionClientRegistry._clients)

        CompletionClientRegistry._load_entry_points()

        assert CompletionClientRegistry._clients == first

    def test_lazy_loading(self) -> None:
        """Entry points are only loaded on first access."""
        assert CompletionClientRegistry._loaded is False
        assert len(CompletionClientRegistry._clients) == 0

        _ = CompletionClientRegistry.available()

        assert CompletionClientRegistry._loaded is True
        assert len(CompletionClientRegistry._clients) > 0


class TestRegistryOperations:
    """Tests for get/create/register."""

    @pytest.mark.parametrize(
        ("name", "cls"),
        [
            ("openai", OpenAICompletionClient),
            ("huggingface", HuggingFaceCompletionClient),
            ("mock", MockCompletionClient),
        ],
    )
    def test_get_builtin(self, name: str, cls: type) -> None:
        assert CompletionClientRegistry.get(name) is cls

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="not found"):
            CompletionClientRegistry.get("nonexistent")

    def test_create_passes_config(self) -> None:
        client = CompletionClientRegistry.create("mock", responses=["hello"])

        assert isinstance(client, MockCompletionClient)
        assert client.complete("m", "p") == "hello"

    def test_create_rejects_unknown_config(self) -> None:
        with pytest.raises(TypeError):
            CompletionClientRegistry.create("mock", temperature=0.2)

    def test_register_manual_client(self) -> None:
        CompletionClientRegistry.register("echo", _EchoClient)

        client = CompletionClientRegistry.create("echo", prefix="> ")

        assert client.complete("model-x", "p") == "> model-x"
        assert "echo" in CompletionClientRegistry.available()
