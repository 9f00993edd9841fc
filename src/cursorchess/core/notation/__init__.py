"""Notation package: positional record parsing and serialisation."""

from cursorchess.core.notation.fen import (
    STARTING_FEN,
    FenRecord,
    ParseError,
    format_fen,
    parse_fen,
)

__all__ = [
    "STARTING_FEN",
    "FenRecord",
    "ParseError",
    "format_fen",
    "parse_fen",
]
