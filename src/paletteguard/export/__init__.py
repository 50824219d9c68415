"""
Palette export formats.

export_palette() dispatches on a format name: css, scss, figma, json, html.
"""

import json
from collections.abc import Callable

from paletteguard.domain.models import Palette
from paletteguard.export.formats import (
    to_css_variables,
    to_figma_styles,
    to_json,
    to_scss_variables,
    variable_name,
)
from paletteguard.export.html_exporter import export_palette_html, render_html

EXPORTERS: dict[str, Callable[[Palette], str]] = {
    "json": to_json,
    "css": to_css_variables,
    "scss": to_scss_variables,
    "figma": lambda palette: json.dumps(to_figma_styles(palette), indent=2),
    "html": render_html,
}

FORMATS = tuple(EXPORTERS)


def export_palette(palette: Palette, fmt: str) -> str:
    """
    Render ``palette`` in the named format.

    Raises:
        ValueError: If the format is unknown.
    """
    try:
        exporter = EXPORTERS[fmt.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown export format {fmt!r}. Available: {', '.join(FORMATS)}"
        ) from None
    return exporter(palette)


__all__ = [
    "FORMATS",
    "export_palette",
    "export_palette_html",
    "render_html",
    "to_css_variables",
    "to_figma_styles",
    "to_json",
    "to_scss_variables",
    "variable_name",
]
