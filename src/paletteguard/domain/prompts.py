"""
Prompt composition for palette generation.

compose_prompt() is a pure function of a RequestSpec: the same request
always renders to the same text, so retries may re-render freely.
"""

import json
from dataclasses import dataclass
from typing import Any

from paletteguard.domain import vocabulary
from paletteguard.domain.color_math import hex_to_rgb, rgb_to_hsl, wcag_threshold
from paletteguard.domain.models import OutputShape
from paletteguard.domain.request import RequestSpec

SIMPLE_RANGE = "3-6"
FULL_RANGE = "8-15"

# Exemplar placeholders; never treated as required values
SIMPLE_EXAMPLE_COLORS = ("#3B82F6", "#10B981", "#F59E0B", "#EF4444")
SIMPLE_EXAMPLE_COLORS_WITH_BASE = ("#2563EB", "#059669", "#DC2626")

FULL_EXAMPLE_ROLES: tuple[tuple[str, str, str, str], ...] = (
    ("primary", "#3B82F6", "Primary Blue", "Main brand color, primary buttons"),
    ("primaryDark", "#1E40AF", "Deep Blue", "Hover states, darker accents"),
    ("secondary", "#10B981", "Success Green", "Secondary actions, positive feedback"),
    ("accent", "#F59E0B", "Warning Amber", "Highlights, calls-to-action"),
    ("neutral", "#6B7280", "Cool Gray", "Secondary text, borders"),
    ("background", "#FFFFFF", "Pure White", "Main backgrounds"),
    ("text", "#111827", "Rich Black", "Primary text content"),
    ("error", "#EF4444", "Error Red", "Error states, validation"),
)


@dataclass(frozen=True)
class PalettePrompt:
    """Rendered prompt sections; render() joins them in order."""

    system: str
    specifications: str
    color_requirements: str
    structure: str
    additional: str = ""

    def render(self) -> str:
        parts = [self.system, self.specifications, self.color_requirements]
        if self.additional:
            parts.append(self.additional)
        parts.append(self.structure)
        return "\n\n".join(parts)


def _count_constraint(spec: RequestSpec) -> str:
    if spec.color_count:
        return f"exactly {spec.color_count}"
    return SIMPLE_RANGE if spec.output_shape is OutputShape.SIMPLE else FULL_RANGE


def _ratio_text(level: str) -> str:
    return f"{wcag_threshold(level):g}:1"


def _triples(hex_value: str) -> tuple[str, str]:
    rgb = hex_to_rgb(hex_value)
    assert rgb is not None
    hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
    return (
        f"rgb({rgb.r},{rgb.g},{rgb.b})",
        f"hsl({hsl.h},{hsl.s}%,{hsl.l}%)",
    )


def _system_block(spec: RequestSpec) -> str:
    simple = spec.output_shape is OutputShape.SIMPLE
    scope = (
        "Focus on core colors only"
        if simple
        else "Include comprehensive color system with states and variants"
    )
    industry = vocabulary.describe("industry", spec.industry)
    return (
        "You are a world-class color theory expert and UI/UX designer "
        "specializing in accessible color palette creation.\n\n"
        f"TASK: Generate a {spec.mood} color palette for {industry} "
        "with modern design principles.\n\n"
        "CRITICAL RULES:\n"
        "1. Return ONLY valid JSON - no markdown blocks, explanations, "
        "or additional text\n"
        f"2. Use {_count_constraint(spec)} colors with distinct HEX values "
        "(no duplicates or near-duplicates)\n"
        f"3. Ensure WCAG {spec.accessibility_level} accessibility compliance\n"
        '4. Provide meaningful, descriptive color names (e.g., "Ocean Blue", '
        '"Forest Green")\n'
        f"5. {scope}"
    )


def _specification_block(spec: RequestSpec) -> str:
    lines = [
        "PALETTE SPECIFICATIONS:",
        f"- Mood: {vocabulary.describe('mood', spec.mood)}",
        f"- Industry: {vocabulary.describe('industry', spec.industry)}",
        f"- Palette Type: {vocabulary.describe('palette_type', spec.palette_type)}",
        f"- Color Harmony: {vocabulary.describe('color_harmony', spec.color_harmony)}",
        f"- Accessibility: Minimum {_ratio_text(spec.accessibility_level)} "
        "contrast ratio for text",
    ]
    if spec.base_color:
        lines.append(f"- MUST include base color {spec.base_color} as the primary color")
    if spec.keywords:
        lines.append(f"- Incorporate themes: {', '.join(spec.keywords)}")
    return "\n".join(lines)


def _color_requirements_block(spec: RequestSpec) -> str:
    if spec.output_shape is OutputShape.SIMPLE:
        return (
            "COLOR REQUIREMENTS:\n"
            f"- Generate {_count_constraint(spec)} UNIQUE colors "
            "(no duplicate hex values)\n"
            "- MUST include: primary, secondary, accent colors\n"
            "- Include a background and a text color that meet the contrast target\n"
            "- Each color must have a unique hex value"
        )
    return (
        "COLOR SYSTEM REQUIREMENTS:\n"
        "- Primary colors: Main brand color with light/dark variations (REQUIRED)\n"
        "- Secondary: Supporting colors that complement primary\n"
        "- Accent: High-contrast colors for CTAs and highlights\n"
        "- Neutrals: Text, backgrounds, and subtle elements\n"
        "- Semantic: Success (green), warning (yellow/orange), error (red), "
        "info (blue)\n"
        "- Interactive states: Hover, active, focus, disabled variations\n"
        "- CRITICAL: All hex values must be unique - no duplicates allowed\n"
        "- CRITICAL: Must include 'primary', 'background' and 'text' color roles"
    )


def _simple_structure(spec: RequestSpec) -> dict[str, Any]:
    if spec.base_color:
        hexes = (spec.base_color, *SIMPLE_EXAMPLE_COLORS_WITH_BASE)
    else:
        hexes = SIMPLE_EXAMPLE_COLORS
    labels = (
        ("Primary Color Name", "Main brand/primary use case"),
        ("Secondary Color Name", "Supporting elements"),
        ("Accent Color Name", "Highlights and CTAs"),
        ("Additional Color Name", "Specific use case"),
    )
    return {
        "name": "Descriptive palette name",
        "description": "Brief description of the palette's unique characteristics",
        "colors": [
            {"hex": hex_value, "name": name, "usage": usage}
            for hex_value, (name, usage) in zip(hexes, labels, strict=True)
        ],
        "accessibility": {
            "level": spec.accessibility_level,
            "notes": "Accessibility compliance details",
        },
    }


def _full_structure(spec: RequestSpec) -> dict[str, Any]:
    colors: dict[str, Any] = {}
    for role, hex_value, name, usage in FULL_EXAMPLE_ROLES:
        if role == "primary" and spec.base_color:
            hex_value = spec.base_color
        rgb, hsl = _triples(hex_value)
        colors[role] = {
            "hex": hex_value,
            "rgb": rgb,
            "hsl": hsl,
            "name": name,
            "usage": usage,
        }

    structure: dict[str, Any] = {
        "name": "Educational Energy Palette",
        "description": "Bold, energetic colors designed for educational platforms",
        "mood": spec.mood,
        "industry": spec.industry,
        "paletteType": spec.palette_type,
        "colorHarmony": spec.color_harmony,
        "colors": colors,
    }
    if spec.include_gradients:
        primary = colors["primary"]["hex"]
        structure["gradients"] = {
            "primary": {
                "linear": f"linear-gradient(135deg, {primary} 0%, #1E40AF 100%)",
                "usage": "Hero sections, feature cards",
            },
            "accent": {
                "linear": "linear-gradient(45deg, #F59E0B 0%, #D97706 100%)",
                "usage": "Call-to-action buttons, highlights",
            },
        }
    structure["interactiveStates"] = {
        "primary": {"hover": "#2563EB", "active": "#1D4ED8", "disabled": "#93C5FD"},
    }
    structure["shadows"] = {
        "small": "0 1px 2px rgba(0, 0, 0, 0.05)",
        "medium": "0 4px 6px rgba(0, 0, 0, 0.1)",
    }
    structure["accessibility"] = {
        "contrastRatio": wcag_threshold(spec.accessibility_level),
        "wcagCompliant": True,
        "level": spec.accessibility_level,
        "colorBlindSafe": True,
        "notes": (
            "All text-background combinations meet "
            f"{spec.accessibility_level} standards"
        ),
    }
    structure["tags"] = [spec.mood, spec.industry]
    return structure


def _structure_block(spec: RequestSpec) -> str:
    if spec.output_shape is OutputShape.SIMPLE:
        exemplar = _simple_structure(spec)
    else:
        exemplar = _full_structure(spec)
    return (
        "REQUIRED JSON STRUCTURE (ALL HEX VALUES MUST BE UNIQUE):\n"
        f"{json.dumps(exemplar, indent=2)}\n\n"
        "IMPORTANT: The example hex values above only illustrate the format. "
        "Each color must have a unique hex value."
    )


def compose_prompt(spec: RequestSpec) -> PalettePrompt:
    """Render a RequestSpec into prompt sections."""
    additional = ""
    if spec.free_text:
        additional = f"ADDITIONAL REQUIREMENTS:\n{spec.free_text}"
    return PalettePrompt(
        system=_system_block(spec),
        specifications=_specification_block(spec),
        color_requirements=_color_requirements_block(spec),
        structure=_structure_block(spec),
        additional=additional,
    )
