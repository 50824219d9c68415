"""Tests for contrast and accessibility-block guards."""

import pytest

from paletteguard.guards import AccessibilityBlockGuard, ContrastGuard


class TestContrastGuard:
    """Tests for ContrastGuard."""

    def test_sufficient_contrast_passes(self, make_palette) -> None:  # noqa: ANN001
        assert ContrastGuard().validate(make_palette()).valid

    def test_low_contrast_rejected(self, make_palette) -> None:  # noqa: ANN001
        """#777777 on white is 4.48:1, just below AA."""
        palette = make_palette({"primary": "#3B82F6", "background": "#FFFFFF", "text": "#777777"})

        result = ContrastGuard().validate(palette)

        assert not result.valid
        assert result.errors == (
            "Text/background contrast 4.48:1 is below the required 4.5:1",
        )

    def test_requested_level_applies(self, make_palette) -> None:  # noqa: ANN001
        """A palette claiming AA is still held to a requested AAA."""
        palette = make_palette(
            {"primary": "#3B82F6", "background": "#FFFFFF", "text": "#6B6B6B"}, level="AA"
        )

        assert ContrastGuard("AA").validate(palette).valid
        assert not ContrastGuard("AAA").validate(palette).valid

    def test_declared_level_applies(self, make_palette) -> None:  # noqa: ANN001
        """A palette declaring AAA is held to AAA."""
        palette = make_palette(
            {"primary": "#3B82F6", "background": "#FFFFFF", "text": "#6B6B6B"}, level="AAA"
        )

        assert ContrastGuard("AA").threshold(palette) == 7.0
        assert not ContrastGuard("AA").validate(palette).valid

    def test_missing_roles_left_to_required_roles(self, make_palette) -> None:  # noqa: ANN001
        palette = make_palette({"primary": "#3B82F6"})

        assert ContrastGuard().validate(palette).errors == ()


class TestAccessibilityBlockGuard:
    """Tests for AccessibilityBlockGuard."""

    def test_well_formed_block_passes(self, make_palette) -> None:  # noqa: ANN001
        assert AccessibilityBlockGuard().validate(make_palette()).valid

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("contrast_ratio", "high"),
            ("contrast_ratio", 42),
            ("wcag_compliant", "yes"),
            ("color_blind_safe", None),
            ("notes", 7),
        ],
    )
    def test_wrong_types_rejected(self, make_palette, field: str, value: object) -> None:  # noqa: ANN001
        palette = make_palette(**{field: value})

        result = AccessibilityBlockGuard().validate(palette)

        assert not result.valid
        assert result.errors[0].startswith("Invalid accessibility block: ")

    def test_unknown_level_rejected(self, make_palette) -> None:  # noqa: ANN001
        result = AccessibilityBlockGuard().validate(make_palette(level="A"))

        assert any("level" in error for error in result.errors)
