# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (unsigned LEB128).

Each byte carries 7 bits of the value, least significant group first.
The high bit is set on every byte except the last. Values are limited
to the unsigned 32-bit range.
"""

from typing import Tuple

from .errors import DecodeError, ValidationError

MAX_VARINT = 0xFFFFFFFF

# A 32-bit value never needs more than 5 groups of 7 bits
MAX_VARINT_BYTES = 5


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Integer in the range 0..MAX_VARINT

    Returns:
        Varint-encoded bytes

    Raises:
        ValidationError: If value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Cannot encode {type(value).__name__} as varint"
        )
    if value < 0:
        raise ValidationError("Cannot encode negative value as varint")
    if value > MAX_VARINT:
        raise ValidationError(f"Cannot encode {value} as varint: exceeds 32 bits")

    result = []
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        DecodeError: If varint is truncated or does not fit in 32 bits
    """
    value = 0
    shift = 0

    for _ in range(MAX_VARINT_BYTES):
        if offset >= len(data):
            raise DecodeError("Varint decode: unexpected end of data")

        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift

        if not (byte & 0x80):
            if value > MAX_VARINT:
                raise DecodeError("Varint decode: value too large")
            return value, offset

        shift += 7

    raise DecodeError("Varint decode: value too large")
