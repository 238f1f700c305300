#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Command-line tool for deckstrings.

Usage:
    python deckstring_tool.py encode '{"format": 2, "heroes": [31], "cards": [[141, 2]]}'
    python deckstring_tool.py decode AAECAR8AAAA=
    python deckstring_tool.py inspect AAECAR8AAAA=
"""

import argparse
import json
import logging
import sys

from deckstrings import DeckDefinition, DeckstringError, decode, encode
from deckstrings.encoder import split_by_count


def _read_argument(value: str) -> str:
    """Return value, or stdin contents when value is '-'."""
    if value == "-":
        return sys.stdin.read()
    return value


def cmd_encode(deck_json: str) -> None:
    """Encode a JSON deck definition."""
    try:
        data = json.loads(deck_json)
    except json.JSONDecodeError as e:
        raise DeckstringError(f"Invalid JSON deck: {e}") from e

    print(encode(DeckDefinition.from_dict(data)))


def cmd_decode(deckstring: str, strict: bool, indent: int) -> None:
    """Decode a deckstring to JSON."""
    deck = decode(deckstring, strict=strict)
    print(json.dumps(deck.to_dict(), indent=indent or None))


def cmd_inspect(deckstring: str, strict: bool) -> None:
    """Print a summary of a deckstring."""
    deck = decode(deckstring, strict=strict)
    singles, doubles, others = split_by_count(deck.cards)

    print("Deck:")
    print(f"  Format:  {deck.format} ({deck.format_name})")
    print(f"  Heroes:  {', '.join(str(h) for h in deck.heroes) or '-'}")
    print(f"  Cards:   {deck.card_total} ({len(deck.cards)} distinct)")
    print(f"    x1:    {len(singles)}")
    print(f"    x2:    {len(doubles)}")
    print(f"    other: {len(others)}")
    for dbf_id, count in deck.cards:
        print(f"  {count:>3} x {dbf_id}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Encode and decode deckstrings"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # encode command
    encode_parser = subparsers.add_parser("encode", help="Encode a JSON deck definition")
    encode_parser.add_argument("deck", help="JSON deck definition, or - for stdin")

    # decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a deckstring to JSON")
    decode_parser.add_argument("deckstring", help="Deckstring, or - for stdin")
    decode_parser.add_argument("--lenient", action="store_true",
                               help="Do not check the header bytes")
    decode_parser.add_argument("--indent", type=int, default=0,
                               help="Indent JSON output by this many spaces")

    # inspect command
    inspect_parser = subparsers.add_parser("inspect", help="Summarize a deckstring")
    inspect_parser.add_argument("deckstring", help="Deckstring, or - for stdin")
    inspect_parser.add_argument("--lenient", action="store_true",
                                help="Do not check the header bytes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            cmd_encode(_read_argument(args.deck))
        elif args.command == "decode":
            cmd_decode(_read_argument(args.deckstring), not args.lenient, args.indent)
        elif args.command == "inspect":
            cmd_inspect(_read_argument(args.deckstring), not args.lenient)
    except DeckstringError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
