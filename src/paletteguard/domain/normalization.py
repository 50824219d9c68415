"""
Response normalization: raw completion text to a canonical Palette draft.

Model output varies in shape (fenced or bare JSON, colors as an array or
a keyed map, rgb/hsl as strings or objects). Every variant is converted
here, through a fixed sequence of named rules, so nothing downstream ever
sees anything but a Palette.
"""

import json
import logging
import re
from collections.abc import Mapping
from typing import Any

from paletteguard.domain.color_math import (
    contrast_ratio,
    format_color,
    relative_luminance,
    wcag_threshold,
)
from paletteguard.domain.exceptions import InvalidColorFormat, UnparsableResponse
from paletteguard.domain.models import HSL, RGB, Accessibility, Color, Palette
from paletteguard.domain.request import RequestSpec

logger = logging.getLogger(__name__)

FENCED_BLOCK = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
FENCE_OPEN = re.compile(r"```json\s*", re.IGNORECASE)
RGB_STRING = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE)
HSL_STRING = re.compile(
    r"hsl\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)", re.IGNORECASE
)
BARE_HEX = re.compile(r"^[0-9A-Fa-f]{6}$")
WHITESPACE = re.compile(r"\s+")

DEFAULT_PRIMARY = "#3B82F6"
DEFAULT_BACKGROUND = "#FFFFFF"
DARK_TEXT = "#111827"
LIGHT_TEXT = "#FFFFFF"

# Roles that are re-synthesized when the model supplies a malformed hex
SYNTHESIZED_ROLES = ("background", "text")


def extract_json(completion: str) -> Any:
    """
    Parse the JSON payload of a completion.

    Tries, in order: the first fenced block, the text with fence markers
    removed, and the outermost ``{...}``/``[...]`` span.

    Raises:
        UnparsableResponse: If none of these parse.
    """
    if not isinstance(completion, str) or not completion.strip():
        raise UnparsableResponse("empty completion")

    stripped = FENCE_OPEN.sub("", completion).replace("```", "").strip()
    candidates = []
    fenced = FENCED_BLOCK.search(completion)
    if fenced:
        candidates.append(fenced.group(1).strip())
    candidates.append(stripped)

    starts = [i for i in (stripped.find("{"), stripped.find("[")) if i >= 0]
    end = max(stripped.rfind("}"), stripped.rfind("]"))
    if starts and end > min(starts):
        candidates.append(stripped[min(starts) : end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
        except RecursionError as err:
            raise UnparsableResponse("JSON nested too deeply", completion) from err
    raise UnparsableResponse("no JSON found", completion)


def _coerce_hex(value: Any) -> str:
    text = str(value).strip()
    if BARE_HEX.match(text):
        text = "#" + text
    return text.upper()


def _parse_rgb(value: Any) -> RGB | None:
    channels: tuple[Any, ...] = ()
    if isinstance(value, str):
        match = RGB_STRING.search(value)
        if match:
            channels = match.groups()
    elif isinstance(value, Mapping):
        channels = (value.get("r"), value.get("g"), value.get("b"))
    try:
        r, g, b = (int(c) for c in channels)
    except (TypeError, ValueError, OverflowError):
        return None
    if all(0 <= c <= 255 for c in (r, g, b)):
        return RGB(r, g, b)
    return None


def _parse_hsl(value: Any) -> HSL | None:
    parts: tuple[Any, ...] = ()
    if isinstance(value, str):
        match = HSL_STRING.search(value)
        if match:
            parts = match.groups()
    elif isinstance(value, Mapping):
        parts = (value.get("h"), value.get("s"), value.get("l"))
    try:
        h, s, lightness = (int(p) for p in parts)
    except (TypeError, ValueError, OverflowError):
        return None
    if 0 <= h <= 360 and 0 <= s <= 100 and 0 <= lightness <= 100:
        return HSL(h, s, lightness)
    return None


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


class ResponseNormalizer:
    """
    Converts completion text into a Palette draft.

    The draft is not guaranteed valid; malformed colors that cannot be
    synthesized are kept so the validator can report them.
    """

    def normalize(self, completion: str, spec: RequestSpec) -> Palette:
        """
        Raises:
            UnparsableResponse: If no JSON can be extracted, there are no
                colors, or a color has no hex value.
        """
        document = self.unwrap_document(extract_json(completion), completion)
        entries = self.colors_to_map(document.get("colors"), completion)
        colors = self.normalize_colors(entries, completion)
        colors = self.designate_primary(colors, spec)
        colors = self.synthesize_background(colors)
        colors = self.synthesize_text(colors)

        mood = _text(document.get("mood"), spec.mood)
        industry = _text(document.get("industry"), spec.industry)

        return Palette(
            name=_text(document.get("name"), f"{mood} {industry} Palette"),
            description=_text(
                document.get("description"),
                f"A {mood} color palette for {industry} applications",
            ),
            mood=mood,
            industry=industry,
            palette_type=_text(document.get("paletteType"), spec.palette_type),
            color_harmony=_text(document.get("colorHarmony"), spec.color_harmony),
            colors=colors,
            accessibility=self.fill_accessibility(document.get("accessibility"), colors, spec),
            tags=self.fill_tags(document.get("tags"), spec),
            output_shape=spec.output_shape,
            gradients=_mapping(document.get("gradients")),
            interactive_states=_mapping(
                document.get("interactiveStates", document.get("interactive_states"))
            ),
            shadows=_mapping(document.get("shadows")),
        )

    # -- shape reconciliation ------------------------------------------------

    def unwrap_document(self, parsed: Any, raw: str) -> Mapping[str, Any]:
        """A bare array is the color list; ``{"palette": {...}}`` is unwrapped."""
        if isinstance(parsed, list):
            return {"colors": parsed}
        if not isinstance(parsed, Mapping):
            raise UnparsableResponse("JSON is neither an object nor an array", raw)
        if "colors" not in parsed and isinstance(parsed.get("palette"), Mapping):
            return parsed["palette"]
        return parsed

    def colors_to_map(self, colors: Any, raw: str) -> dict[str, Any]:
        """Key array entries by lower-cased, space-free name, else ``colorN``."""
        if isinstance(colors, Mapping):
            if not colors:
                raise UnparsableResponse("colors object is empty", raw)
            return {str(role): entry for role, entry in colors.items()}

        if not isinstance(colors, list) or not colors:
            raise UnparsableResponse("no colors in response", raw)

        mapped: dict[str, Any] = {}
        for index, entry in enumerate(colors):
            key = ""
            if isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
                key = WHITESPACE.sub("", entry["name"].lower())
            if not key or key in mapped:
                number = index + 1
                key = f"color{number}"
                while key in mapped:
                    number += 1
                    key = f"color{number}"
            mapped[key] = entry
        return mapped

    # -- per-color rules -----------------------------------------------------

    def normalize_color(self, role: str, entry: Any, raw: str = "") -> Color:
        """
        Raises:
            UnparsableResponse: If the entry has no hex value.
            InvalidColorFormat: If the hex value is malformed.
        """
        if isinstance(entry, str):
            entry = {"hex": entry}
        if not isinstance(entry, Mapping):
            raise UnparsableResponse(f"color {role!r} is not an object", raw)

        hex_value = entry.get("hex")
        if hex_value is None or not str(hex_value).strip():
            raise UnparsableResponse(f"color {role!r} has no hex value", raw)

        color = format_color(
            _coerce_hex(hex_value),
            name=_text(entry.get("name"), role),
            usage=_text(entry.get("usage"), "General use"),
        )
        rgb = _parse_rgb(entry.get("rgb")) or color.rgb
        hsl = _parse_hsl(entry.get("hsl")) or color.hsl
        return Color(hex=color.hex, rgb=rgb, hsl=hsl, name=color.name, usage=color.usage)

    def normalize_colors(self, entries: Mapping[str, Any], raw: str = "") -> dict[str, Color]:
        colors: dict[str, Color] = {}
        for role, entry in entries.items():
            try:
                colors[role] = self.normalize_color(role, entry, raw)
            except InvalidColorFormat as err:
                details = entry if isinstance(entry, Mapping) else {}
                if role in SYNTHESIZED_ROLES:
                    logger.debug("Discarding malformed %s color %r", role, err.value)
                    continue
                # Kept so validation reports it
                colors[role] = Color(
                    hex=_coerce_hex(err.value),
                    rgb=RGB(0, 0, 0),
                    hsl=HSL(0, 0, 0),
                    name=_text(details.get("name"), role),
                    usage=_text(details.get("usage"), "General use"),
                )
        return colors

    # -- synthesis rules -----------------------------------------------------

    def designate_primary(self, colors: dict[str, Color], spec: RequestSpec) -> dict[str, Color]:
        """
        Ensure a ``primary`` role.

        Renames the role holding the base color, else the first role that is
        not background/text; synthesizes one only if no such role exists.
        """
        if "primary" in colors:
            return colors

        candidates = [role for role in colors if role not in SYNTHESIZED_ROLES]
        chosen = None
        if spec.base_color:
            chosen = next(
                (r for r in candidates if colors[r].hex == spec.base_color), None
            )
        if chosen is None and candidates:
            chosen = candidates[0]

        if chosen is None:
            logger.debug("Synthesizing primary color")
            primary = format_color(
                spec.base_color or DEFAULT_PRIMARY,
                name="Primary",
                usage="Main brand color",
            )
            return {"primary": primary, **colors}

        logger.debug("Designating %r as primary color", chosen)
        return {
            ("primary" if role == chosen else role): color
            for role, color in colors.items()
        }

    def synthesize_background(self, colors: dict[str, Color]) -> dict[str, Color]:
        if "background" in colors:
            return colors
        logger.debug("Synthesizing background color")
        return {
            **colors,
            "background": format_color(
                DEFAULT_BACKGROUND, name="Background", usage="Main backgrounds"
            ),
        }

    def synthesize_text(self, colors: dict[str, Color]) -> dict[str, Color]:
        """Dark text on light backgrounds, light text otherwise."""
        if "text" in colors:
            return colors
        luminance = relative_luminance(colors["background"].hex) or 0.0
        hex_value = DARK_TEXT if luminance > 0.5 else LIGHT_TEXT
        logger.debug("Synthesizing text color %s", hex_value)
        return {
            **colors,
            "text": format_color(hex_value, name="Text", usage="Primary text content"),
        }

    def fill_tags(self, tags: Any, spec: RequestSpec) -> tuple[str, ...]:
        if isinstance(tags, list):
            cleaned = tuple(str(t).strip() for t in tags if str(t).strip())
            if cleaned:
                return cleaned
        return (spec.mood, spec.industry)

    def fill_accessibility(
        self, block: Any, colors: Mapping[str, Color], spec: RequestSpec
    ) -> Accessibility:
        """
        Fill absent accessibility fields from measured contrast.

        Numeric strings are converted; other wrong-typed values are kept for
        the validator to reject.
        """
        block = _mapping(block)
        measured = contrast_ratio(colors["text"].hex, colors["background"].hex) or 1.0

        level = block.get("level", block.get("wcagLevel"))
        if level is None:
            level = spec.accessibility_level
        elif isinstance(level, str):
            level = level.strip().upper()

        ratio = block.get("contrastRatio")
        if ratio is None:
            ratio = round(measured, 2)
        elif isinstance(ratio, str):
            try:
                ratio = float(ratio.strip().removesuffix(":1"))
            except ValueError:
                logger.debug("Non-numeric contrastRatio %r", ratio)

        compliant = block.get("wcagCompliant")
        if compliant is None:
            threshold_level = level if level in ("AA", "AAA") else spec.accessibility_level
            compliant = measured >= wcag_threshold(threshold_level)

        color_blind_safe = block.get("colorBlindSafe")
        if color_blind_safe is None:
            color_blind_safe = False

        notes = block.get("notes")
        if notes is None:
            notes = f"Text/background contrast {measured:.2f}:1"

        return Accessibility(
            contrast_ratio=ratio,
            wcag_compliant=compliant,
            level=level,
            color_blind_safe=color_blind_safe,
            notes=notes,
        )
