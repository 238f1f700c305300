# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures for deckstring tests."""

import pytest

from deckstrings import DeckDefinition

EXAMPLE_DECKSTRING = "AAECAR8GxwPJBLsFmQfZB/gIDI0B2AGoArUDhwSSBe0G6wfbCe0JgQr+DAA="

# Rexxar, standard, classic hunter list
EXAMPLE_CARDS = [
    (141, 2),   # Hunter's Mark
    (216, 2),   # Bloodfen Raptor
    (296, 2),   # Kill Command
    (437, 2),   # Animal Companion
    (455, 1),   # Snake Trap
    (519, 2),   # Freezing Trap
    (585, 1),   # Explosive Trap
    (658, 2),   # Leper Gnome
    (699, 1),   # Tundra Rhino
    (877, 2),   # Arcane Shot
    (921, 1),   # Jungle Panther
    (1003, 2),  # Houndmaster
    (985, 1),   # Dire Wolf Alpha
    (1144, 1),  # King Krush
    (1243, 2),  # Unleash the Hounds
    (1261, 2),  # Savannah Highmane
    (1281, 2),  # Scavenging Hyena
    (1662, 2),  # Eaglehorn Bow
]


@pytest.fixture
def example_deckstring():
    """Deckstring of the example deck."""
    return EXAMPLE_DECKSTRING


@pytest.fixture
def example_cards():
    """(card id, count) pairs of the example deck."""
    return list(EXAMPLE_CARDS)


@pytest.fixture
def example_definition():
    """Example deck definition (fresh copy per test)."""
    return DeckDefinition(format=2, heroes=[31], cards=list(EXAMPLE_CARDS))


@pytest.fixture
def example_dict():
    """Example deck as parsed JSON."""
    return {
        "format": 2,
        "heroes": [31],
        "cards": [[dbf_id, count] for dbf_id, count in EXAMPLE_CARDS],
    }
