"""paletteguard command line interface."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from paletteguard import __version__
from paletteguard.application import (
    OrchestratorConfig,
    PaletteOrchestrator,
    load_config,
)
from paletteguard.cli.console import (
    error_console,
    print_contrast,
    print_error,
    print_palette,
    print_success,
)
from paletteguard.cli.logging_setup import setup_logging
from paletteguard.cli.options import client_options, logging_options, request_options
from paletteguard.domain.color_math import contrast_ratio
from paletteguard.domain.exceptions import ConfigurationError, InvalidParameter
from paletteguard.domain.interfaces import CompletionClientInterface
from paletteguard.domain.prompts import compose_prompt
from paletteguard.domain.request import RequestSpec
from paletteguard.export import FORMATS, export_palette
from paletteguard.infrastructure.registry import CompletionClientRegistry

logger = logging.getLogger(__name__)

USAGE_ERROR = 2


def _request(
    mood: str | None,
    industry: str | None,
    palette_type: str | None,
    harmony: str | None,
    level: str | None,
    prompt: str | None,
    model: str | None,
) -> RequestSpec:
    options = {
        "mood": mood,
        "industry": industry,
        "paletteType": palette_type,
        "colorHarmony": harmony,
        "accessibilityLevel": level,
        "prompt": prompt,
        "model": model,
    }
    return RequestSpec.from_options({k: v for k, v in options.items() if v is not None})


def _config(
    config_path: str | None, fallback_model: str | None, max_attempts: int | None
) -> OrchestratorConfig:
    config = load_config(config_path) if config_path else OrchestratorConfig.from_env()
    if fallback_model:
        config = replace(config, invoker=replace(config.invoker, fallback_model=fallback_model))
    if max_attempts is not None:
        config = replace(config, max_attempts=max_attempts)
    return config


def _client(
    name: str, base_url: str | None, timeout: float | None
) -> CompletionClientInterface:
    kwargs: dict[str, Any] = {}
    if base_url:
        kwargs["base_url"] = base_url
    if timeout is not None:
        kwargs["timeout"] = timeout
    return CompletionClientRegistry.create(name, **kwargs)


@click.group()
@click.version_option(__version__, prog_name="paletteguard")
def main() -> None:
    """Generate validated, accessible color palettes with an LLM."""


@main.command()
@request_options
@client_options
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    default="json",
    show_default=True,
    help="Export format",
)
@click.option("--output", default=None, type=click.Path(dir_okay=False), help="Write export here")
@logging_options
def generate(
    mood: str | None,
    industry: str | None,
    palette_type: str | None,
    harmony: str | None,
    level: str | None,
    prompt: str | None,
    model: str | None,
    client_name: str,
    base_url: str | None,
    timeout: float | None,
    fallback_model: str | None,
    max_attempts: int | None,
    config_path: str | None,
    fmt: str,
    output: str | None,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Generate a palette and export it."""
    setup_logging(verbose=verbose, log_file=log_file)

    try:
        spec = _request(mood, industry, palette_type, harmony, level, prompt, model)
        config = _config(config_path, fallback_model, max_attempts)
    except (InvalidParameter, ConfigurationError) as err:
        print_error(str(err))
        raise SystemExit(USAGE_ERROR) from err

    try:
        client = _client(client_name, base_url, timeout)
    except (KeyError, TypeError, ValueError) as err:
        print_error(
            str(err).strip("'\""),
            hint=f"Available clients: {', '.join(CompletionClientRegistry.available())}",
        )
        raise SystemExit(USAGE_ERROR) from err

    logger.debug("Using completion client %s with model %s", client_name, spec.model)
    result = PaletteOrchestrator(client, config).run(spec)
    rendered = export_palette(result.palette, fmt)

    if output:
        print_palette(result)
        Path(output).write_text(rendered, encoding="utf-8")
        print_success(f"Saved {fmt} export to {output}")
    else:
        print_palette(result, target=error_console)
        click.echo(rendered)


@main.command("prompt")
@request_options
def show_prompt(
    mood: str | None,
    industry: str | None,
    palette_type: str | None,
    harmony: str | None,
    level: str | None,
    prompt: str | None,
    model: str | None,
) -> None:
    """Print the prompt that would be sent, without calling any model."""
    try:
        spec = _request(mood, industry, palette_type, harmony, level, prompt, model)
    except InvalidParameter as err:
        print_error(str(err))
        raise SystemExit(USAGE_ERROR) from err
    click.echo(compose_prompt(spec).render())


@main.command()
@click.argument("foreground")
@click.argument("background")
def contrast(foreground: str, background: str) -> None:
    """Show the WCAG contrast ratio of FOREGROUND on BACKGROUND."""
    ratio = contrast_ratio(foreground, background)
    if ratio is None:
        print_error(
            f"Invalid color: {foreground!r} / {background!r}",
            hint="Use six-digit hex colors such as #1E40AF",
        )
        raise SystemExit(USAGE_ERROR)
    print_contrast(foreground.upper(), background.upper(), ratio)
