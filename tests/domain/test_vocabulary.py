"""Tests for the request vocabularies."""

import pytest

from paletteguard.domain import vocabulary


class TestResolve:
    """Tests for vocabulary.resolve()."""

    @pytest.mark.parametrize("field", list(vocabulary.VOCABULARIES))
    def test_every_canonical_value_resolves_to_itself(self, field: str) -> None:
        for value in vocabulary.VOCABULARIES[field]:
            assert vocabulary.resolve(field, value) == value
            assert vocabulary.resolve(field, value.upper()) == value

    @pytest.mark.parametrize("field", list(vocabulary.ALIASES))
    def test_aliases_point_into_vocabulary(self, field: str) -> None:
        for target in vocabulary.ALIASES[field].values():
            assert target in vocabulary.VOCABULARIES[field]

    def test_unknown_value(self) -> None:
        assert vocabulary.resolve("mood", "nonexistent") is None
        assert vocabulary.resolve("mood", 3) is None  # type: ignore[arg-type]

    def test_no_fuzzy_matching(self) -> None:
        """Near misses are not guessed."""
        assert vocabulary.resolve("mood", "playfull") is None


class TestDescribe:
    """Tests for vocabulary.describe()."""

    def test_description(self) -> None:
        assert vocabulary.describe("accessibility_level", "AAA") == (
            "Minimum 7:1 contrast ratio for text"
        )

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            vocabulary.MOODS["grim"] = "Dark"  # type: ignore[index]
