# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deck definition validation.

The same rules guard both directions: the encoder checks a definition
before writing anything, and the decoder checks what it parsed before
returning it.
"""

import logging
from typing import Any

from .deck import DeckDefinition, FormatType
from .errors import ValidationError
from .varint import MAX_VARINT

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid id or count
    return isinstance(value, int) and not isinstance(value, bool)


def validate_format(value: Any) -> None:
    """Check that value is the integer 1 (wild) or 2 (standard)."""
    if not _is_int(value) or value not in (FormatType.WILD, FormatType.STANDARD):
        raise ValidationError(f"format must be 1 or 2, got {value!r}")


def validate_dbf_id(value: Any, name: str = "dbf_id") -> None:
    """
    Check a card or hero id.

    Args:
        value: Id to check
        name: Field name used in the error message

    Raises:
        ValidationError: If value is not an integer in 0..MAX_VARINT
    """
    if not _is_int(value):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 0 or value > MAX_VARINT:
        raise ValidationError(f"{name} out of range: {value}")


def validate_count(value: Any, name: str = "count") -> None:
    """
    Check a copy count.

    Args:
        value: Count to check
        name: Field name used in the error message

    Raises:
        ValidationError: If value is not an integer in 1..MAX_VARINT
    """
    if not _is_int(value):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if value < 1 or value > MAX_VARINT:
        raise ValidationError(f"{name} out of range: {value}")


def validate_heroes(heroes: Any) -> None:
    """Check that heroes is a list of valid ids."""
    if not isinstance(heroes, (list, tuple)):
        raise ValidationError(
            f"heroes must be a list, got {type(heroes).__name__}"
        )
    for i, hero in enumerate(heroes):
        validate_dbf_id(hero, f"heroes[{i}]")


def validate_cards(cards: Any) -> None:
    """
    Check that cards is a list of (id, count) pairs with unique ids.

    Raises:
        ValidationError: On a malformed pair, an invalid value or a
            card id listed more than once
    """
    if not isinstance(cards, (list, tuple)):
        raise ValidationError(
            f"cards must be a list, got {type(cards).__name__}"
        )

    seen = {}
    for i, card in enumerate(cards):
        if not isinstance(card, (list, tuple)) or len(card) != 2:
            raise ValidationError(
                f"cards[{i}] must be a (dbf_id, count) pair, got {card!r}"
            )
        dbf_id, count = card
        validate_dbf_id(dbf_id, f"cards[{i}].dbf_id")
        validate_count(count, f"cards[{i}].count")

        if dbf_id in seen:
            raise ValidationError(
                f"cards[{i}].dbf_id: card {dbf_id} already listed at cards[{seen[dbf_id]}]"
            )
        seen[dbf_id] = i


def validate_definition(definition: Any) -> None:
    """
    Check a whole deck definition.

    Args:
        definition: DeckDefinition to check

    Raises:
        ValidationError: Naming the first offending field
    """
    if not isinstance(definition, DeckDefinition):
        raise ValidationError(
            f"Expected DeckDefinition, got {type(definition).__name__}"
        )

    validate_format(definition.format)
    validate_heroes(definition.heroes)
    validate_cards(definition.cards)

    logger.debug(
        "Validated deck: format=%s, %d heroes, %d cards",
        definition.format,
        len(definition.heroes),
        len(definition.cards),
    )

