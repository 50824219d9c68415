"""Shared click options for paletteguard commands."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def request_options(func: F) -> F:
    """
    Decorator adding palette request options.

    Options added:
        --mood, --industry, --palette-type, --harmony, --level: vocabulary fields
        --prompt: Free-text instructions
        --model: Primary model identifier
    """

    @click.option("--mood", default=None, help="Palette mood (e.g. playful, calm)")
    @click.option("--industry", default=None, help="Target industry (e.g. technology)")
    @click.option("--palette-type", default=None, help="Palette type (e.g. analogous)")
    @click.option("--harmony", default=None, help="Color harmony (e.g. balanced)")
    @click.option("--level", default=None, help="WCAG level: AA or AAA")
    @click.option(
        "--prompt",
        default=None,
        help='Free-text instructions, e.g. "Use #FF5733 as base. 5 colors."',
    )
    @click.option("--model", default=None, help="Primary model identifier")
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def client_options(func: F) -> F:
    """
    Decorator adding completion-client and retry options.

    Options added:
        --client: Registered completion client name
        --base-url: Endpoint for OpenAI-compatible clients
        --timeout: Per-call timeout in seconds
        --fallback-model: Model used after the primary fails
        --max-attempts: Whole-pipeline attempts before fallback
        --config: Path to a generation config JSON file
    """

    @click.option(
        "--client",
        "client_name",
        default="openai",
        show_default=True,
        help="Completion client (see entry points 'paletteguard.clients')",
    )
    @click.option("--base-url", default=None, help="OpenAI-compatible endpoint URL")
    @click.option("--timeout", default=None, type=float, help="Per-call timeout (s)")
    @click.option("--fallback-model", default=None, help="Fallback model identifier")
    @click.option("--max-attempts", default=None, type=int, help="Pipeline attempts")
    @click.option(
        "--config",
        "config_path",
        default=None,
        type=click.Path(),
        help="Path to generation config JSON",
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def logging_options(func: F) -> F:
    """
    Decorator adding logging options.

    Options added:
        --log-file: Path to log file
        -v/--verbose: Enable verbose logging
    """

    @click.option("--log-file", default=None, type=click.Path(), help="Path to log file")
    @click.option(
        "-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging to console"
    )
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
