# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deckstring encoder.

Layout of the binary record (all integers are varints):

    0x00 | version | format | heroes | x1 cards | x2 cards | xN cards

Cards are split by copy count. Single and double copies only store the
card id, everything else stores (id, count) pairs.
"""

import base64
import logging
from typing import List, Tuple

from .deck import DECKSTRING_VERSION, CardEntry, DeckDefinition
from .validation import validate_definition
from .varint import encode_varint

logger = logging.getLogger(__name__)


def split_by_count(
    cards: List[CardEntry],
) -> Tuple[List[int], List[int], List[CardEntry]]:
    """
    Partition cards into single, double and other copy counts.

    Input order is kept within each bucket.

    Returns:
        Tuple of (ids with 1 copy, ids with 2 copies, other (id, count) pairs)
    """
    singles = []
    doubles = []
    others = []
    for dbf_id, count in cards:
        if count == 1:
            singles.append(dbf_id)
        elif count == 2:
            doubles.append(dbf_id)
        else:
            others.append((dbf_id, count))
    return singles, doubles, others


def _encode_id_list(ids: List[int]) -> bytes:
    """Encode a length-prefixed list of ids."""
    return encode_varint(len(ids)) + b"".join(encode_varint(i) for i in ids)


def encode_bytes(definition: DeckDefinition) -> bytes:
    """
    Encode a deck definition to the binary record.

    Args:
        definition: Deck to encode

    Returns:
        Binary record (before base64)

    Raises:
        ValidationError: If the definition is malformed
    """
    validate_definition(definition)

    singles, doubles, others = split_by_count(definition.cards)

    payload = bytearray([0, DECKSTRING_VERSION])
    payload += encode_varint(int(definition.format))
    payload += _encode_id_list(definition.heroes)
    payload += _encode_id_list(singles)
    payload += _encode_id_list(doubles)
    payload += encode_varint(len(others))
    for dbf_id, count in others:
        payload += encode_varint(dbf_id) + encode_varint(count)

    logger.debug(
        "Encoded deck: %d x1, %d x2, %d xN cards in %d bytes",
        len(singles),
        len(doubles),
        len(others),
        len(payload),
    )
    return bytes(payload)


def encode(definition: DeckDefinition) -> str:
    """
    Encode a deck definition as a deckstring.

    Args:
        definition: Deck to encode

    Returns:
        Base64 deckstring

    Raises:
        ValidationError: If the definition is malformed
    """
    return base64.b64encode(encode_bytes(definition)).decode("ascii")
