"""
Application layer for palette generation.

Contains the invocation policy and the orchestration loop that coordinates
domain objects and guards.
"""

from paletteguard.application.config import (
    InvokerConfig,
    OrchestratorConfig,
    load_config,
)
from paletteguard.application.invoker import GenerationInvoker, is_transient
from paletteguard.application.orchestrator import PaletteOrchestrator, generate

__all__ = [
    "GenerationInvoker",
    "InvokerConfig",
    "OrchestratorConfig",
    "PaletteOrchestrator",
    "generate",
    "is_transient",
    "load_config",
]
