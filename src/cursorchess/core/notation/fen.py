"""FEN-like positional record parsing and serialisation.

Record shape::

    <row 0>/<row 1>/.../<row 7> <w|b> <[KQkq]+|-> <-|XY>

Unlike standard FEN, the en-passant field holds the raw grid coordinates of
the target square (column digit, then row digit). An algebraic square such as
``e3`` is also accepted on input. Halfmove/fullmove counters may follow and
are validated but not kept.

Output is always canonical: adjacent digit runs are merged, castling letters
are written in ``KQkq`` order and no counters are emitted. Only canonical
records therefore survive a parse and serialise round trip unchanged; other
accepted records come back normalised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cursorchess.core.enums import CastlingRights, Color
from cursorchess.core.piece import Square
from cursorchess.core.types import BOARD_SIZE, OFF_BOARD, Point, parse_square

if TYPE_CHECKING:
    from cursorchess.core.board import Board

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"
_DIGITS = "0123456789"

_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


class ParseError(ValueError):
    """Raised for a malformed positional record."""


@dataclass(frozen=True, slots=True)
class FenRecord:
    """Decoded positional record."""

    grid: tuple[tuple[Square, ...], ...]
    turn: Color
    castling: CastlingRights
    en_passant: Point


def parse_fen(fen: str) -> FenRecord:
    """Parse a positional record, raising :class:`ParseError` when malformed."""
    parts = fen.split()
    if not parts:
        raise ParseError("Empty positional record")

    placement, metadata = parts[0], parts[1:]
    if len(metadata) < 3:
        raise ParseError(
            f"Invalid record (need side, castling and en-passant fields): {fen!r}"
        )
    if len(metadata) > 5:
        raise ParseError(f"Invalid record (too many fields): {fen!r}")

    grid = _parse_placement(placement, fen)
    turn = _parse_side(metadata[0])
    castling = _parse_castling(metadata[1])
    en_passant = _parse_en_passant(metadata[2])

    for counter in metadata[3:]:
        if not counter or any(ch not in _DIGITS for ch in counter):
            raise ParseError(f"Invalid move counter: {counter!r}")

    return FenRecord(grid, turn, castling, en_passant)


def _parse_placement(placement: str, fen: str) -> tuple[tuple[Square, ...], ...]:
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ParseError(
            f"Invalid board (must contain 8 ranks, got {len(ranks)}): {fen!r}"
        )

    rows: list[tuple[Square, ...]] = []
    for y, rank_text in enumerate(ranks):
        row: list[Square] = []
        for ch in rank_text:
            if ch in _DIGITS:
                run = int(ch)
                if not (1 <= run <= BOARD_SIZE):
                    raise ParseError(f"Invalid empty-run digit {ch!r} in rank {y}")
                start = len(row)
                row.extend(Square.empty(Point(x, y)) for x in range(start, start + run))
            else:
                try:
                    row.append(Square.from_char(ch, Point(len(row), y)))
                except ValueError:
                    raise ParseError(
                        f"Unknown piece letter {ch!r} in rank {y}"
                    ) from None
            if len(row) > BOARD_SIZE:
                break
        if len(row) != BOARD_SIZE:
            raise ParseError(
                f"Invalid rank width in rank {y} ({rank_text!r}): "
                f"expected 8 columns"
            )
        rows.append(tuple(row))
    return tuple(rows)


def _parse_side(side_part: str) -> Color:
    if side_part == "w":
        return Color.WHITE
    if side_part == "b":
        return Color.BLACK
    raise ParseError(f"Invalid side-to-move field: {side_part!r}")


def _parse_castling(castling_part: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if castling_part == "-":
        return castling

    rights = dict(_CASTLING_LETTERS)
    seen: set[str] = set()
    for ch in castling_part:
        right = rights.get(ch)
        if right is None or ch in seen:
            raise ParseError(f"Invalid castling field: {castling_part!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(ep_part: str) -> Point:
    if ep_part == "-":
        return OFF_BOARD

    if len(ep_part) == 2 and all(ch in _DIGITS for ch in ep_part):
        target = Point(int(ep_part[0]), int(ep_part[1]))
        if not target.is_inside():
            raise ParseError(f"Invalid en-passant field: {ep_part!r}")
        return target

    try:
        return parse_square(ep_part)
    except ValueError:
        raise ParseError(f"Invalid en-passant field: {ep_part!r}") from None


# -- Serialisation ------------------------------------------------------------


def format_fen(board: Board) -> str:
    """Serialise *board* to a positional record."""
    rows: list[str] = []
    for y in range(BOARD_SIZE):
        empty = 0
        row = ""
        for x in range(BOARD_SIZE):
            square = board[Point(x, y)]
            if square.is_empty:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += square.fen_char
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if board.turn == Color.WHITE else "b"

    castling_str = "".join(
        letter for letter, right in _CASTLING_LETTERS if board.castling_rights & right
    )
    if not castling_str:
        castling_str = "-"

    target = board.en_passant_target
    ep_str = f"{target.x}{target.y}" if target.is_inside() else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str}"
