"""Rich console utilities for the paletteguard CLI."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from paletteguard.domain.models import GenerationResult

# Shared console instances
console = Console()
error_console = Console(stderr=True)


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_success(message: str, target: Console | None = None) -> None:
    """Print success message."""
    (target or console).print(Panel(message, title="Success", border_style="green"))


def print_palette(result: GenerationResult, target: Console | None = None) -> None:
    """Print the palette's colors and the attempt history."""
    out = target or console
    palette = result.palette

    title = Text(palette.name, style="bold blue")
    title.append(f"\n{palette.description}", style="dim")
    out.print(Panel(title, expand=False))

    table = Table(show_header=True, box=None)
    table.add_column("Role", style="cyan")
    table.add_column("Swatch")
    table.add_column("Hex")
    table.add_column("Name")
    table.add_column("Usage", style="dim")
    for role, color in palette.colors.items():
        table.add_row(role, Text("      ", style=f"on {color.hex}"), color.hex, color.name, color.usage)
    out.print(table)

    accessibility = palette.accessibility
    out.print(
        f"[bold]WCAG {accessibility.level}[/bold] · tags: {', '.join(palette.tags)}"
    )

    if result.is_fallback:
        out.print("[yellow]Generation failed; returned the fallback palette.[/yellow]")
    for warning in result.warnings:
        out.print(f"[yellow]warning:[/yellow] {warning}")
    for record in result.attempts:
        out.print(
            f"[red]attempt {record.attempt} failed while {record.state.value}:[/red] "
            f"{record.error}"
        )


def print_contrast(foreground: str, background: str, ratio: float) -> None:
    """Print a contrast ratio with WCAG pass/fail per level."""
    table = Table(show_header=True, box=None)
    table.add_column("Check", style="cyan")
    table.add_column("Required")
    table.add_column("Result")
    for label, required in (
        ("AA normal text", 4.5),
        ("AA large text", 3.0),
        ("AAA normal text", 7.0),
        ("AAA large text", 4.5),
    ):
        verdict = "[green]pass[/green]" if ratio >= required else "[red]fail[/red]"
        table.add_row(label, f"{required:g}:1", verdict)

    console.print(f"{foreground} on {background}: [bold]{ratio:.2f}:1[/bold]")
    console.print(table)
