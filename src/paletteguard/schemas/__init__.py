"""JSON Schema definitions and validation utilities.

Schemas:
    - palette.schema.json: Serialized palette (Palette.to_dict())
    - accessibility.schema.json: The palette accessibility block
    - generation_config.schema.json: Orchestrator/invoker configuration file

Usage:
    from paletteguard.schemas import validate_palette

    validate_palette(palette.to_dict())  # Raises jsonschema.ValidationError
"""

from __future__ import annotations

import json
from functools import cache
from importlib.resources import files
from typing import Any

import jsonschema


@cache
def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'palette.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("paletteguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_palette_schema() -> dict[str, Any]:
    return _load_schema("palette.schema.json")


def get_accessibility_schema() -> dict[str, Any]:
    return _load_schema("accessibility.schema.json")


def get_generation_config_schema() -> dict[str, Any]:
    return _load_schema("generation_config.schema.json")


def validate_palette(data: dict[str, Any]) -> None:
    """Validate a serialized palette against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_palette_schema())


def validate_accessibility(data: dict[str, Any]) -> None:
    """Validate an accessibility block against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_accessibility_schema())


def accessibility_errors(data: dict[str, Any]) -> list[str]:
    """Return every schema violation in an accessibility block as a message."""
    validator = jsonschema.Draft7Validator(get_accessibility_schema())
    messages = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        location = ".".join(str(p) for p in error.path) or "accessibility"
        messages.append(f"{location}: {error.message}")
    return messages


def validate_generation_config(data: dict[str, Any]) -> None:
    """Validate a generation config file against the schema.

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_generation_config_schema())


__all__ = [
    "get_palette_schema",
    "get_accessibility_schema",
    "get_generation_config_schema",
    "validate_palette",
    "validate_accessibility",
    "accessibility_errors",
    "validate_generation_config",
]
