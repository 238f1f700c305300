# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the deckstring codec.
"""


class DeckstringError(ValueError):
    """Base exception for deckstring errors."""
    pass


class ValidationError(DeckstringError):
    """Deck definition is malformed and cannot be encoded."""
    pass


class DecodeError(DeckstringError):
    """Deckstring is malformed, truncated or holds invalid values."""
    pass
