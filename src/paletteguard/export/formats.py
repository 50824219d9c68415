"""
Text exports of a palette: CSS custom properties, SCSS variables, Figma
style definitions and JSON.
"""

import json
import re
from typing import Any

from paletteguard.domain.models import Palette
from paletteguard.schemas import validate_palette

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INVALID_IDENT = re.compile(r"[^a-z0-9-]+")


def variable_name(role: str) -> str:
    """``primaryDark`` -> ``primary-dark``."""
    kebab = _CAMEL_BOUNDARY.sub("-", role).lower()
    return _INVALID_IDENT.sub("-", kebab).strip("-") or "color"


def to_css_variables(palette: Palette) -> str:
    lines = [f"  --color-{variable_name(role)}: {c.hex};" for role, c in palette.colors.items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"


def to_scss_variables(palette: Palette) -> str:
    return "".join(
        f"${variable_name(role)}: {c.hex};\n" for role, c in palette.colors.items()
    )


def to_figma_styles(palette: Palette) -> dict[str, dict[str, Any]]:
    return {
        role: {"name": color.name, "color": color.hex, "type": "SOLID"}
        for role, color in palette.colors.items()
    }


def to_json(palette: Palette) -> str:
    """
    Serialize a palette, checked against the palette schema first.

    Raises:
        jsonschema.ValidationError: If the palette is not exportable, e.g. a
            hand-built draft with a malformed hex or no text role.
    """
    data = palette.to_dict()
    validate_palette(data)
    return json.dumps(data, indent=2)
