# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Tests for deck definition validation."""

import pytest
from deckstrings.deck import DeckDefinition
from deckstrings.errors import ValidationError
from deckstrings.validation import (
    validate_cards,
    validate_count,
    validate_dbf_id,
    validate_definition,
    validate_format,
    validate_heroes,
)
from deckstrings.varint import MAX_VARINT

NAN = float("nan")
INF = float("inf")


class TestValidateFormat:
    """Tests for validate_format."""

    @pytest.mark.parametrize("value", [1, 2])
    def test_valid(self, value):
        """Wild and standard are accepted."""
        validate_format(value)

    @pytest.mark.parametrize("value", [0, 3, -1, "1", [1], 2.0, True, None])
    def test_invalid(self, value):
        """Anything else is rejected."""
        with pytest.raises(ValidationError, match="format must be 1 or 2"):
            validate_format(value)


class TestValidateDbfId:
    """Tests for validate_dbf_id."""

    @pytest.mark.parametrize("value", [0, 1, 1662, MAX_VARINT])
    def test_valid(self, value):
        """Non-negative 32-bit integers are accepted."""
        validate_dbf_id(value)

    @pytest.mark.parametrize("value", ["a", "1", NAN, INF, 1.5, None, False])
    def test_not_integer(self, value):
        """Non-integers are rejected."""
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_dbf_id(value)

    @pytest.mark.parametrize("value", [-42, -1, MAX_VARINT + 1])
    def test_out_of_range(self, value):
        """Negative and oversized ids are rejected."""
        with pytest.raises(ValidationError, match="out of range"):
            validate_dbf_id(value)

    def test_error_names_field(self):
        """The field name is part of the message."""
        with pytest.raises(ValidationError, match=r"heroes\[1\]"):
            validate_dbf_id(-1, "heroes[1]")


class TestValidateCount:
    """Tests for validate_count."""

    @pytest.mark.parametrize("value", [1, 2, 5, MAX_VARINT])
    def test_valid(self, value):
        """Positive integers are accepted."""
        validate_count(value)

    @pytest.mark.parametrize("value", [0, -5])
    def test_not_positive(self, value):
        """Zero and negative counts are rejected."""
        with pytest.raises(ValidationError, match="out of range"):
            validate_count(value)

    @pytest.mark.parametrize("value", [NAN, INF, "a", 2.0])
    def test_not_integer(self, value):
        """Non-integer counts are rejected."""
        with pytest.raises(ValidationError, match="must be an integer"):
            validate_count(value)


class TestValidateHeroes:
    """Tests for validate_heroes."""

    def test_valid(self):
        """A list or tuple of ids is accepted."""
        validate_heroes([31])
        validate_heroes((31, 7))
        validate_heroes([])

    @pytest.mark.parametrize("value", [42, "[]", None, {31: 1}])
    def test_not_a_list(self, value):
        """Scalars, strings and mappings are rejected."""
        with pytest.raises(ValidationError, match="heroes must be a list"):
            validate_heroes(value)

    @pytest.mark.parametrize("value", [["a"], [42, "a"], [42, "1"], [-42]])
    def test_bad_entry(self, value):
        """Any invalid id fails the whole list."""
        with pytest.raises(ValidationError, match=r"heroes\[\d\]"):
            validate_heroes(value)


class TestValidateCards:
    """Tests for validate_cards."""

    def test_valid(self):
        """Lists of pairs are accepted."""
        validate_cards([(1, 1), [2, 2], (3, 30)])
        validate_cards([])

    @pytest.mark.parametrize("value", [2, "[]", None])
    def test_not_a_list(self, value):
        """Non-sequences are rejected."""
        with pytest.raises(ValidationError, match="cards must be a list"):
            validate_cards(value)

    @pytest.mark.parametrize("value", [[3], [(1, 2), 3], ["a"], [(1, 2, 3)], [(1,)]])
    def test_not_pairs(self, value):
        """Every entry must be a two-item pair."""
        with pytest.raises(ValidationError, match="pair"):
            validate_cards(value)

    @pytest.mark.parametrize("value", [[(1, "a")], [(1, -5)], [(1, 0)], [(1, NAN)], [(1, INF)]])
    def test_bad_count(self, value):
        """Invalid counts name the count field."""
        with pytest.raises(ValidationError, match=r"cards\[0\]\.count"):
            validate_cards(value)

    @pytest.mark.parametrize("value", [[("a", 1)], [(-4, 1)], [(NAN, 1)], [(INF, 1)]])
    def test_bad_id(self, value):
        """Invalid ids name the id field."""
        with pytest.raises(ValidationError, match=r"cards\[0\]\.dbf_id"):
            validate_cards(value)

    def test_duplicate_id(self):
        """A card listed twice is rejected, whatever the counts."""
        with pytest.raises(ValidationError, match="already listed at cards\\[0\\]"):
            validate_cards([(141, 2), (455, 1), (141, 1)])


class TestValidateDefinition:
    """Tests for validate_definition."""

    def test_valid(self, example_definition):
        """The example deck passes."""
        validate_definition(example_definition)

    @pytest.mark.parametrize("value", [477, "somestring", [1, 2, 3], None, {"format": 2}])
    def test_not_a_definition(self, value):
        """Only DeckDefinition instances are accepted."""
        with pytest.raises(ValidationError, match="Expected DeckDefinition"):
            validate_definition(value)

    def test_heroes_none(self):
        """A definition without a hero list is rejected."""
        deck = DeckDefinition(format=2, heroes=None, cards=[])
        with pytest.raises(ValidationError, match="heroes must be a list"):
            validate_definition(deck)
