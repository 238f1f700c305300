# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deckstrings - encode and decode card-game deck codes.

A deckstring is a base64 token holding a game format, hero card ids and
(card id, count) pairs, packed as varints.

Example usage:
    from deckstrings import DeckDefinition, FormatType, encode, decode

    deck = DeckDefinition(
        format=FormatType.STANDARD,
        heroes=[31],
        cards=[(141, 2), (455, 1)],
    )
    deckstring = encode(deck)

    decoded = decode(deckstring)
    print(f"Format: {decoded.format_name}, {decoded.card_total} cards")
"""

from .deck import DECKSTRING_VERSION, DeckDefinition, FormatType
from .decoder import decode, decode_bytes
from .encoder import encode, encode_bytes
from .errors import DeckstringError, DecodeError, ValidationError
from .varint import MAX_VARINT, encode_varint, decode_varint

__version__ = "0.1.0"

__all__ = [
    # Deck types
    "DeckDefinition",
    "FormatType",
    "DECKSTRING_VERSION",
    # Codec
    "encode",
    "encode_bytes",
    "decode",
    "decode_bytes",
    # Errors
    "DeckstringError",
    "ValidationError",
    "DecodeError",
    # Varint
    "encode_varint",
    "decode_varint",
    "MAX_VARINT",
]
