# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deck definition types.

A deck definition is what callers hand to the encoder and what the
decoder gives back: a game format, hero card ids and (card id, count)
pairs. Card ids are the numeric DBF ids from the game database.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Tuple

from .errors import ValidationError

# Version byte written after the reserved byte of every deckstring
DECKSTRING_VERSION = 1


class FormatType(IntEnum):
    """Game formats a deck can be built for."""
    WILD = 1
    STANDARD = 2

    def __str__(self) -> str:
        return self.name


CardEntry = Tuple[int, int]


@dataclass
class DeckDefinition:
    """A deck: game format, hero ids and (card id, count) pairs."""
    format: int
    heroes: List[int] = field(default_factory=list)
    cards: List[CardEntry] = field(default_factory=list)

    @property
    def format_name(self) -> str:
        """Name of the game format, or UNKNOWN."""
        try:
            return str(FormatType(self.format))
        except ValueError:
            return "UNKNOWN"

    @property
    def card_total(self) -> int:
        """Total number of cards, counting every copy."""
        return sum(count for _, count in self.cards)

    def card_counts(self) -> Dict[int, int]:
        """Return a mapping of card id to copy count."""
        return {dbf_id: count for dbf_id, count in self.cards}

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "format": int(self.format),
            "heroes": list(self.heroes),
            "cards": [[dbf_id, count] for dbf_id, count in self.cards],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeckDefinition":
        """
        Build a definition from a loosely typed mapping (e.g. parsed JSON).

        Only the shape is checked here. Values are copied as-is so that
        type and range problems are reported by the validator.

        Args:
            data: Mapping with "format", "heroes" and "cards" keys

        Returns:
            DeckDefinition

        Raises:
            ValidationError: If a key is missing or has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Deck definition must be a mapping, got {type(data).__name__}"
            )

        for key in ("format", "heroes", "cards"):
            if key not in data:
                raise ValidationError(f"Deck definition is missing '{key}'")

        heroes = data["heroes"]
        if not isinstance(heroes, (list, tuple)):
            raise ValidationError(
                f"heroes must be a list, got {type(heroes).__name__}"
            )

        cards = data["cards"]
        if not isinstance(cards, (list, tuple)):
            raise ValidationError(
                f"cards must be a list, got {type(cards).__name__}"
            )

        entries = []
        for i, card in enumerate(cards):
            if not isinstance(card, (list, tuple)) or len(card) != 2:
                raise ValidationError(
                    f"cards[{i}] must be a [dbf_id, count] pair, got {card!r}"
                )
            entries.append((card[0], card[1]))

        return cls(format=data["format"], heroes=list(heroes), cards=entries)
