# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Deckstring decoder.

Reads the record written by the encoder. Missing bytes are always an
error, bytes after the last card section are ignored.
"""

import base64
import binascii
import logging
from typing import List, Tuple

from .deck import DECKSTRING_VERSION, CardEntry, DeckDefinition, FormatType
from .errors import DecodeError, ValidationError
from .validation import validate_definition
from .varint import decode_varint

logger = logging.getLogger(__name__)


def _decode_id_list(data: bytes, offset: int) -> Tuple[List[int], int]:
    """Decode a length-prefixed list of ids."""
    length, offset = decode_varint(data, offset)
    ids = []
    for _ in range(length):
        value, offset = decode_varint(data, offset)
        ids.append(value)
    return ids, offset


def decode_bytes(data: bytes, strict: bool = True) -> DeckDefinition:
    """
    Decode a binary deck record.

    Args:
        data: Binary record (after base64 decoding)
        strict: Reject a nonzero reserved byte or an unknown version byte

    Returns:
        Decoded DeckDefinition

    Raises:
        DecodeError: If the record is truncated, malformed or holds
            invalid values
    """
    if len(data) < 2:
        raise DecodeError("Truncated deckstring: missing header")

    reserved, version = data[0], data[1]
    if strict:
        if reserved != 0:
            raise DecodeError(f"Invalid deckstring: reserved byte is {reserved:#04x}")
        if version != DECKSTRING_VERSION:
            raise DecodeError(f"Unsupported deckstring version: {version}")
    elif reserved != 0 or version != DECKSTRING_VERSION:
        logger.debug(
            "Ignoring unexpected header bytes: reserved=%#04x, version=%d",
            reserved,
            version,
        )
    offset = 2

    fmt, offset = decode_varint(data, offset)
    if fmt not in (FormatType.WILD, FormatType.STANDARD):
        raise DecodeError(f"Invalid format in deckstring: {fmt}")

    heroes, offset = _decode_id_list(data, offset)

    singles, offset = _decode_id_list(data, offset)
    doubles, offset = _decode_id_list(data, offset)

    cards: List[CardEntry] = [(dbf_id, 1) for dbf_id in singles]
    cards += [(dbf_id, 2) for dbf_id in doubles]

    num_others, offset = decode_varint(data, offset)
    for _ in range(num_others):
        dbf_id, offset = decode_varint(data, offset)
        count, offset = decode_varint(data, offset)
        cards.append((dbf_id, count))

    if offset < len(data):
        logger.debug("Ignoring %d trailing bytes", len(data) - offset)

    definition = DeckDefinition(format=fmt, heroes=heroes, cards=cards)
    try:
        validate_definition(definition)
    except ValidationError as e:
        raise DecodeError(f"Invalid deck in deckstring: {e}") from e

    return definition


def decode(deckstring: str, strict: bool = True) -> DeckDefinition:
    """
    Decode a deckstring.

    Args:
        deckstring: Base64 deckstring (surrounding whitespace is ignored)
        strict: Reject a nonzero reserved byte or an unknown version byte

    Returns:
        Decoded DeckDefinition

    Raises:
        DecodeError: If the deckstring is empty, not valid base64, or
            does not hold a valid deck
    """
    if not isinstance(deckstring, str):
        raise DecodeError(
            f"Deckstring must be a str, got {type(deckstring).__name__}"
        )

    deckstring = deckstring.strip()
    if not deckstring:
        raise DecodeError("Empty deckstring")

    try:
        # non-ASCII input raises a plain ValueError before any base64 check
        data = base64.b64decode(deckstring, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 in deckstring: {e}") from e

    return decode_bytes(data, strict=strict)
