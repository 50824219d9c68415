"""
Completion client registry with entry points discovery.

Provides dynamic client loading via Python entry points
(paletteguard.clients group). External packages can register clients in
their pyproject.toml:

    [project.entry-points."paletteguard.clients"]
    myclient = "mypackage.clients:MyCompletionClient"
"""

import warnings
from importlib.metadata import entry_points
from typing import Any

from paletteguard.domain.interfaces import CompletionClientInterface

ENTRY_POINT_GROUP = "paletteguard.clients"


class CompletionClientRegistry:
    """
    Registry for CompletionClientInterface implementations.

    Discovers clients via the 'paletteguard.clients' entry point group.
    Entry points are only loaded on first access.

    Example usage:
        client = CompletionClientRegistry.create("openai", base_url="http://localhost:11434/v1")
    """

    _clients: dict[str, type[CompletionClientInterface]] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load clients from entry points (lazy, called once)."""
        if cls._loaded:
            return

        for ep in entry_points(group=ENTRY_POINT_GROUP):
            try:
                cls._clients.setdefault(ep.name, ep.load())
            except Exception as e:
                warnings.warn(
                    f"Failed to load completion client '{ep.name}' from entry point: {e}",
                    stacklevel=2,
                )

        cls._loaded = True

    @classmethod
    def register(
        cls, name: str, client_class: type[CompletionClientInterface]
    ) -> None:
        """
        Manually register a client class.

        Args:
            name: Client identifier (e.g., "openai")
            client_class: Class implementing CompletionClientInterface
        """
        cls._clients[name] = client_class

    @classmethod
    def get(cls, name: str) -> type[CompletionClientInterface]:
        """
        Raises:
            KeyError: If no client is registered under ``name``
        """
        cls._load_entry_points()
        if name not in cls._clients:
            available = ", ".join(sorted(cls._clients)) or "(none)"
            raise KeyError(
                f"Completion client '{name}' not found. Available clients: {available}"
            )
        return cls._clients[name]

    @classmethod
    def create(cls, name: str, **config: Any) -> CompletionClientInterface:
        """
        Create a client instance by name.

        Raises:
            KeyError: If the client is not found
            TypeError: If config doesn't match the constructor signature
        """
        return cls.get(name)(**config)

    @classmethod
    def available(cls) -> list[str]:
        cls._load_entry_points()
        return sorted(cls._clients)

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered clients (useful for testing).

        Also resets the loaded flag so entry points can be reloaded.
        """
        cls._clients.clear()
        cls._loaded = False
