"""Shared pytest fixtures for paletteguard tests."""

import json
from collections.abc import Callable

import pytest

from paletteguard.domain.color_math import format_color
from paletteguard.domain.interfaces import CompletionClientInterface
from paletteguard.domain.models import Accessibility, Palette
from paletteguard.domain.request import RequestSpec
from paletteguard.infrastructure.llm.mock import MockCompletionClient

FULL_COLORS = {
    "primary": ("#3B82F6", "Primary Blue", "Main brand color"),
    "primaryDark": ("#1E40AF", "Deep Blue", "Hover states"),
    "secondary": ("#10B981", "Success Green", "Secondary actions"),
    "accent": ("#F59E0B", "Warning Amber", "Highlights"),
    "neutral": ("#6B7280", "Cool Gray", "Borders"),
    "background": ("#FFFFFF", "Pure White", "Main backgrounds"),
    "text": ("#111827", "Rich Black", "Primary text content"),
    "error": ("#EF4444", "Error Red", "Error states"),
}

SIMPLE_COLORS = (
    ("#FF5733", "Primary"),
    ("#2563EB", "Secondary"),
    ("#059669", "Accent"),
    ("#FFFFFF", "Background"),
    ("#111827", "Text"),
)


class SleepRecorder:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FailingClient(CompletionClientInterface):
    """Completion client whose every call raises the same error."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls: list[str] = []

    def complete(self, model_id: str, prompt: str) -> str:
        self.calls.append(model_id)
        raise self.error


@pytest.fixture
def spec() -> RequestSpec:
    """Default request with no directives."""
    return RequestSpec.from_options({"mood": "playful", "industry": "technology"})


@pytest.fixture
def base_color_spec() -> RequestSpec:
    """Request carrying a base color and an exact count in its free text."""
    return RequestSpec.from_options(
        {
            "mood": "playful",
            "industry": "technology",
            "prompt": "Use #FF5733 as base. 5 colors.",
        }
    )


@pytest.fixture
def full_document() -> dict:
    """A complete, valid full-shape palette document."""
    return {
        "name": "Bright Tech Palette",
        "description": "Cheerful colors for a developer tool",
        "mood": "playful",
        "industry": "technology",
        "paletteType": "custom",
        "colorHarmony": "balanced",
        "colors": {
            role: {"hex": hex_value, "name": name, "usage": usage}
            for role, (hex_value, name, usage) in FULL_COLORS.items()
        },
        "accessibility": {
            "contrastRatio": 17.74,
            "wcagCompliant": True,
            "level": "AA",
            "colorBlindSafe": True,
            "notes": "Text on background exceeds AAA",
        },
        "tags": ["playful", "technology"],
    }


@pytest.fixture
def full_response(full_document: dict) -> str:
    """The full document as raw completion text."""
    return json.dumps(full_document)


@pytest.fixture
def simple_array_response() -> str:
    """A fenced bare array of five named colors, #FF5733 first."""
    colors = [{"hex": hex_value, "name": name} for hex_value, name in SIMPLE_COLORS]
    return "Here you go:\n```json\n" + json.dumps(colors, indent=2) + "\n```"


@pytest.fixture
def mock_client() -> Callable[..., MockCompletionClient]:
    """Factory for MockCompletionClient with the given responses."""

    def _make(*responses: str | Exception) -> MockCompletionClient:
        return MockCompletionClient(responses=list(responses))

    return _make


@pytest.fixture
def failing_client() -> Callable[[Exception], FailingClient]:
    """Factory for a client that always raises ``error``."""
    return FailingClient


@pytest.fixture
def sleep() -> SleepRecorder:
    """Sleep recorder injected instead of time.sleep."""
    return SleepRecorder()


@pytest.fixture
def make_palette() -> Callable[..., Palette]:
    """Factory for palettes from a role -> hex mapping."""

    def _make(
        colors: dict[str, str] | None = None,
        level: str = "AA",
        name: str = "Test Palette",
        description: str = "A palette for tests",
        **accessibility: object,
    ) -> Palette:
        if colors is None:
            colors = {
                "primary": "#3B82F6",
                "background": "#FFFFFF",
                "text": "#111827",
            }
        block = {
            "contrast_ratio": 17.74,
            "wcag_compliant": True,
            "level": level,
            "color_blind_safe": True,
            "notes": "test",
        }
        block.update(accessibility)
        return Palette(
            name=name,
            description=description,
            mood="modern",
            industry="technology",
            palette_type="custom",
            color_harmony="balanced",
            colors={role: format_color(hex_value) for role, hex_value in colors.items()},
            accessibility=Accessibility(**block),  # type: ignore[arg-type]
            tags=("modern", "technology"),
        )

    return _make
