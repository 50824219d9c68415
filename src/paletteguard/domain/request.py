"""
RequestSpec: the validated, immutable description of one generation request.

Construction validates every enumerated field and extracts the few
directives the free text may carry (hex base color, color count, keywords,
output-shape hint). A RequestSpec that exists is always valid.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from paletteguard.domain import vocabulary
from paletteguard.domain.exceptions import InvalidParameter
from paletteguard.domain.models import OutputShape

DEFAULT_MODEL = "gemini-2.0-flash"
MIN_COLORS = 3
MAX_COLORS = 20

# Only a six-digit literal is a base color; "#fff" or "#1234" are left as prose
HEX_LITERAL = re.compile(r"(?<![\w&])#([0-9a-f]{6})\b", re.IGNORECASE)
COLOR_COUNT = re.compile(r"(?:with\s+)?(\d+)\s+colou?rs?\b", re.IGNORECASE)
KEYWORDS = re.compile(r"keywords?:\s*([^.\n]+)", re.IGNORECASE)
KEYWORD_SEPARATOR = re.compile(r"[,;]")

# Option names accepted from callers, camelCase or snake_case
_OPTION_NAMES = {
    "mood": "mood",
    "industry": "industry",
    "paletteType": "palette_type",
    "palette_type": "palette_type",
    "colorHarmony": "color_harmony",
    "color_harmony": "color_harmony",
    "accessibilityLevel": "accessibility_level",
    "accessibility_level": "accessibility_level",
    "prompt": "free_text",
    "freeText": "free_text",
    "free_text": "free_text",
    "model": "model",
    "baseColor": "base_color",
    "base_color": "base_color",
    "colorCount": "color_count",
    "color_count": "color_count",
    "keywords": "keywords",
    "outputShape": "output_shape",
    "output_shape": "output_shape",
    "returnFormat": "output_shape",
    "includeGradients": "include_gradients",
    "include_gradients": "include_gradients",
}

_DEFAULTS = {
    "mood": "modern",
    "industry": "technology",
    "palette_type": "custom",
    "color_harmony": "balanced",
    "accessibility_level": "AA",
}


@dataclass(frozen=True)
class Directives:
    """Directives extracted from free text; None means 'not present'."""

    base_color: str | None = None
    color_count: int | None = None
    keywords: tuple[str, ...] = ()
    output_shape: OutputShape | None = None


def _hex_directive(text: str) -> str | None:
    match = HEX_LITERAL.search(text)
    return f"#{match.group(1).upper()}" if match else None


def _validate_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError) as err:
        raise InvalidParameter("colorCount", value) from err
    if not MIN_COLORS <= count <= MAX_COLORS:
        raise InvalidParameter(
            "colorCount",
            count,
            f"Color count must be between {MIN_COLORS} and {MAX_COLORS}",
        )
    return count


def parse_directives(free_text: str | None) -> Directives:
    """
    Extract directives from free text.

    Raises:
        InvalidParameter: For an out-of-range color count.
    """
    if not free_text:
        return Directives()

    base_color = _hex_directive(free_text)

    color_count = None
    count_match = COLOR_COUNT.search(free_text)
    if count_match:
        color_count = _validate_count(count_match.group(1))

    keywords: tuple[str, ...] = ()
    keyword_match = KEYWORDS.search(free_text)
    if keyword_match:
        keywords = tuple(
            k.strip()
            for k in KEYWORD_SEPARATOR.split(keyword_match.group(1))
            if k.strip()
        )

    lowered = free_text.lower()
    shape = None
    if "array" in lowered and "hex values" in lowered:
        shape = OutputShape.SIMPLE

    return Directives(
        base_color=base_color,
        color_count=color_count,
        keywords=keywords,
        output_shape=shape,
    )


def _parse_shape(value: Any) -> OutputShape:
    if isinstance(value, OutputShape):
        return value
    try:
        return OutputShape(str(value).strip().lower())
    except ValueError as err:
        raise InvalidParameter("outputShape", value) from err


@dataclass(frozen=True)
class RequestSpec:
    """
    Immutable generation request.

    Build it with from_options() so that every field is validated; the
    dataclass constructor itself trusts its arguments.
    """

    mood: str = "modern"
    industry: str = "technology"
    palette_type: str = "custom"
    color_harmony: str = "balanced"
    accessibility_level: str = "AA"
    free_text: str = ""
    model: str = DEFAULT_MODEL
    base_color: str | None = None
    color_count: int | None = None
    keywords: tuple[str, ...] = ()
    output_shape: OutputShape = OutputShape.FULL
    include_gradients: bool = True

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "RequestSpec":
        """
        Validate raw request options and build a RequestSpec.

        Raises:
            InvalidParameter: If any field is unknown, outside its vocabulary,
                or a free-text directive is malformed.
        """
        raw: dict[str, Any] = {}
        for key, value in (options or {}).items():
            if key not in _OPTION_NAMES:
                raise InvalidParameter(key, value, f"Unknown option: {key}")
            if value is not None:
                raw[_OPTION_NAMES[key]] = value

        fields: dict[str, Any] = {}
        for name, default in _DEFAULTS.items():
            value = raw.get(name, default)
            canonical = vocabulary.resolve(name, value)
            if canonical is None:
                raise InvalidParameter(name, value)
            fields[name] = canonical

        free_text = raw.get("free_text", "")
        if not isinstance(free_text, str):
            raise InvalidParameter("prompt", free_text)
        model = raw.get("model", DEFAULT_MODEL)
        if not isinstance(model, str) or not model.strip():
            raise InvalidParameter("model", model)

        base_color = raw.get("base_color")
        if base_color is not None:
            text = str(base_color).strip()
            if not text.startswith("#"):
                text = "#" + text
            base_color = _hex_directive(text)
            if base_color is None:
                raise InvalidParameter("baseColor", raw["base_color"])
        color_count = raw.get("color_count")
        if color_count is not None:
            color_count = _validate_count(color_count)
        keywords = raw.get("keywords", ())
        if isinstance(keywords, str):
            keywords = KEYWORD_SEPARATOR.split(keywords)
        keywords = tuple(str(k).strip() for k in keywords if str(k).strip())
        shape = _parse_shape(raw.get("output_shape", OutputShape.FULL))

        # Directives in the free text win over structured options
        directives = parse_directives(free_text)

        return cls(
            free_text=free_text.strip(),
            model=model,
            base_color=directives.base_color or base_color,
            color_count=directives.color_count or color_count,
            keywords=directives.keywords or keywords,
            output_shape=directives.output_shape or shape,
            include_gradients=bool(raw.get("include_gradients", True)),
            **fields,
        )
