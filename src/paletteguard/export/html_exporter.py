"""
HTML swatch sheet for a palette.

Renders a self-contained page (no external assets) showing each color
role with its hex, RGB and HSL values, the measured text/background
contrast, and any gradients.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from paletteguard.domain.color_math import contrast_ratio, relative_luminance
from paletteguard.domain.models import Palette

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )


def _gradient_css(gradient: Any) -> str | None:
    """CSS background for a gradient entry, if one can be derived."""
    if not isinstance(gradient, dict):
        return None
    if isinstance(gradient.get("linear"), str):
        return gradient["linear"]
    stops = [s for s in gradient.get("colors", []) if isinstance(s, str)]
    if len(stops) < 2:
        return None
    if gradient.get("type") == "radial":
        return f"radial-gradient(circle, {', '.join(stops)})"
    return f"linear-gradient({gradient.get('direction', '90deg')}, {', '.join(stops)})"


def render_html(palette: Palette) -> str:
    """Render the swatch sheet as an HTML string."""
    swatches = []
    for role, color in palette.colors.items():
        luminance = relative_luminance(color.hex)
        swatches.append(
            {
                "role": role,
                "color": color,
                "ink": "#111827" if luminance is not None and luminance > 0.5 else "#FFFFFF",
            }
        )

    text = palette.colors.get("text")
    background = palette.colors.get("background")
    measured = (
        contrast_ratio(text.hex, background.hex) if text and background else None
    )

    gradients = {
        name: css
        for name, css in ((n, _gradient_css(g)) for n, g in palette.gradients.items())
        if css
    }

    template = _environment().get_template("palette.html")
    return template.render(
        palette=palette,
        swatches=swatches,
        measured_contrast=measured,
        gradients=gradients,
        generated_at=datetime.now().isoformat(timespec="seconds"),
    )


def export_palette_html(palette: Palette, output_path: str | Path) -> Path:
    """Write the swatch sheet to ``output_path`` and return the path."""
    output = Path(output_path)
    output.write_text(render_html(palette), encoding="utf-8")
    return output
