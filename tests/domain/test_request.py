"""Tests for RequestSpec construction and free-text directives."""

import dataclasses

import pytest

from paletteguard.domain.exceptions import InvalidParameter
from paletteguard.domain.models import OutputShape
from paletteguard.domain.request import (
    DEFAULT_MODEL,
    Directives,
    RequestSpec,
    parse_directives,
)


class TestRequestSpecDefaults:
    """Tests for defaults applied when options are omitted."""

    def test_no_options(self) -> None:
        """An empty request uses the documented defaults."""
        spec = RequestSpec.from_options()

        assert spec.mood == "modern"
        assert spec.industry == "technology"
        assert spec.palette_type == "custom"
        assert spec.color_harmony == "balanced"
        assert spec.accessibility_level == "AA"
        assert spec.model == DEFAULT_MODEL
        assert spec.base_color is None
        assert spec.color_count is None
        assert spec.keywords == ()
        assert spec.output_shape is OutputShape.FULL
        assert spec.include_gradients is True

    def test_none_values_are_ignored(self) -> None:
        """Options explicitly set to None fall back to defaults."""
        spec = RequestSpec.from_options({"mood": None, "industry": "finance"})

        assert spec.mood == "modern"
        assert spec.industry == "finance"

    def test_is_immutable(self) -> None:
        """RequestSpec is frozen."""
        spec = RequestSpec.from_options()

        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.mood = "calm"  # type: ignore[misc]


class TestRequestSpecVocabulary:
    """Tests for vocabulary validation of enumerated fields."""

    def test_unknown_mood_rejected(self) -> None:
        """A mood outside the vocabulary raises InvalidParameter naming the field."""
        with pytest.raises(InvalidParameter) as exc_info:
            RequestSpec.from_options({"mood": "nonexistent"})

        assert exc_info.value.field == "mood"
        assert exc_info.value.value == "nonexistent"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("industry", "aerospace"),
            ("paletteType", "rainbow"),
            ("colorHarmony", "chaotic"),
            ("accessibilityLevel", "A"),
        ],
    )
    def test_other_fields_rejected(self, field: str, value: str) -> None:
        """Every enumerated field is validated."""
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({field: value})

    def test_case_insensitive(self) -> None:
        """Canonical values match regardless of case."""
        spec = RequestSpec.from_options(
            {"mood": "PLAYFUL", "paletteType": "splitcomplementary", "accessibilityLevel": "aaa"}
        )

        assert spec.mood == "playful"
        assert spec.palette_type == "splitComplementary"
        assert spec.accessibility_level == "AAA"

    def test_aliases(self) -> None:
        """Known synonyms map onto canonical values."""
        spec = RequestSpec.from_options(
            {"mood": "fun", "industry": "Tech", "paletteType": "split"}
        )

        assert spec.mood == "playful"
        assert spec.industry == "technology"
        assert spec.palette_type == "splitComplementary"

    def test_snake_case_option_names(self) -> None:
        """snake_case option names are accepted alongside camelCase."""
        spec = RequestSpec.from_options({"palette_type": "triadic", "color_harmony": "subtle"})

        assert spec.palette_type == "triadic"
        assert spec.color_harmony == "subtle"

    def test_unknown_option_rejected(self) -> None:
        """Misspelled option names are reported rather than ignored."""
        with pytest.raises(InvalidParameter, match="Unknown option: moood"):
            RequestSpec.from_options({"moood": "calm"})

    def test_invalid_parameter_is_value_error(self) -> None:
        """InvalidParameter can be caught as ValueError."""
        with pytest.raises(ValueError):
            RequestSpec.from_options({"industry": "aerospace"})


class TestStructuredOptions:
    """Tests for options that mirror free-text directives."""

    def test_base_color_without_hash(self) -> None:
        """A structured base color gets its '#' and is upper-cased."""
        spec = RequestSpec.from_options({"baseColor": "ff5733"})

        assert spec.base_color == "#FF5733"

    def test_malformed_base_color(self) -> None:
        """A structured base color must be six hex digits."""
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"baseColor": "#12"})

    def test_color_count_bounds(self) -> None:
        """Counts outside 3..20 are rejected."""
        assert RequestSpec.from_options({"colorCount": 3}).color_count == 3
        assert RequestSpec.from_options({"colorCount": "20"}).color_count == 20
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"colorCount": 2})
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"colorCount": "many"})

    def test_keywords_string_or_list(self) -> None:
        """Keywords accept a separated string or a list."""
        assert RequestSpec.from_options({"keywords": "sunset, ocean"}).keywords == (
            "sunset",
            "ocean",
        )
        assert RequestSpec.from_options({"keywords": ["a", " ", "b"]}).keywords == ("a", "b")

    def test_output_shape(self) -> None:
        """Output shape accepts the enum or its value."""
        assert RequestSpec.from_options({"outputShape": "simple"}).output_shape is (
            OutputShape.SIMPLE
        )
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"outputShape": "tiny"})

    def test_empty_model_rejected(self) -> None:
        """The model identifier must be a non-empty string."""
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"model": "  "})


class TestFreeTextDirectives:
    """Tests for directives extracted from the free-text prompt."""

    def test_base_color_and_count(self) -> None:
        """The canonical example yields base color and count."""
        spec = RequestSpec.from_options({"prompt": "Use #FF5733 as base. 5 colors."})

        assert spec.base_color == "#FF5733"
        assert spec.color_count == 5
        assert spec.free_text == "Use #FF5733 as base. 5 colors."

    def test_lowercase_hex_is_canonicalized(self) -> None:
        """Hex digits in free text are upper-cased."""
        assert parse_directives("start from #ff5733").base_color == "#FF5733"

    @pytest.mark.parametrize(
        "text",
        [
            "Refresh the brand for ticket #1234. 5 colors.",
            "use #FFF as base",
            "#FF5733AA",
        ],
    )
    def test_other_hash_tokens_are_prose(self, text: str) -> None:
        """Only a six-digit literal sets the base color; other '#' tokens are ignored."""
        spec = RequestSpec.from_options({"prompt": text})

        assert spec.base_color is None
        assert spec.free_text == text

    def test_first_six_digit_literal_wins(self) -> None:
        """A six-digit literal is found after an unrelated '#' token."""
        assert parse_directives("ticket #12, use #00aa88").base_color == "#00AA88"

    def test_non_hex_hash_ignored(self) -> None:
        """'#' followed by non-hex text is not a color directive."""
        assert parse_directives("make it #1 in the market").base_color is None
        assert parse_directives("use tag #sunset").base_color is None

    @pytest.mark.parametrize(
        ("text", "count"),
        [("5 colors", 5), ("with 8 colours", 8), ("just 3 color", 3), ("20 COLORS", 20)],
    )
    def test_color_count(self, text: str, count: int) -> None:
        """Counts are read with optional 'with' and British spelling."""
        assert parse_directives(text).color_count == count

    @pytest.mark.parametrize("text", ["2 colors", "with 21 colors", "0 colours"])
    def test_color_count_out_of_range(self, text: str) -> None:
        """Counts outside 3..20 fail construction."""
        with pytest.raises(InvalidParameter):
            RequestSpec.from_options({"prompt": text})

    def test_keywords(self) -> None:
        """Keywords are split on commas and semicolons, up to the sentence end."""
        directives = parse_directives("Keywords: sunset, ocean; warmth. Then more text")

        assert directives.keywords == ("sunset", "ocean", "warmth")

    def test_simple_shape_hint(self) -> None:
        """Asking for an array of hex values selects the simple shape."""
        spec = RequestSpec.from_options(
            {"prompt": "Return an array of hex values for a logo"}
        )

        assert spec.output_shape is OutputShape.SIMPLE

    def test_no_text_no_directives(self) -> None:
        """Empty free text has no directives."""
        assert parse_directives("") == Directives()
        assert parse_directives(None) == Directives()

    def test_free_text_wins_over_structured(self) -> None:
        """Directives in the prompt override structured options."""
        spec = RequestSpec.from_options(
            {"baseColor": "#000000", "colorCount": 10, "prompt": "Use #FF5733. 5 colors."}
        )

        assert spec.base_color == "#FF5733"
        assert spec.color_count == 5

    def test_structured_kept_without_directives(self) -> None:
        """Structured options survive free text that carries no directives."""
        spec = RequestSpec.from_options(
            {"baseColor": "#000000", "colorCount": 10, "prompt": "Something calm"}
        )

        assert spec.base_color == "#000000"
        assert spec.color_count == 10
