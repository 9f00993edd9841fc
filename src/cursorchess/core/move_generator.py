"""Pseudo-legal move generation.

Generated destinations obey piece movement and occupancy only; whether the
mover's own king is left in check is never examined.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from cursorchess.core.enums import Color, PieceKind
from cursorchess.core.piece import Square
from cursorchess.core.types import Point

if TYPE_CHECKING:
    from cursorchess.core.board import Board


KNIGHT_OFFSETS: tuple[Point, ...] = (
    Point(-2, -1),
    Point(-2, 1),
    Point(-1, -2),
    Point(-1, 2),
    Point(1, -2),
    Point(1, 2),
    Point(2, -1),
    Point(2, 1),
)

KING_OFFSETS: tuple[Point, ...] = (
    Point(-1, -1),
    Point(-1, 0),
    Point(-1, 1),
    Point(0, -1),
    Point(0, 1),
    Point(1, -1),
    Point(1, 0),
    Point(1, 1),
)

ROOK_DIRS: tuple[Point, ...] = (Point(0, 1), Point(0, -1), Point(1, 0), Point(-1, 0))
BISHOP_DIRS: tuple[Point, ...] = (
    Point(1, 1),
    Point(1, -1),
    Point(-1, -1),
    Point(-1, 1),
)
QUEEN_DIRS: tuple[Point, ...] = ROOK_DIRS + BISHOP_DIRS

# White advances toward row 0, Black toward row 7.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PAWN_LAST_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


def pawn_direction(color: Color) -> int:
    """Row delta of a single pawn step for *color*."""
    return _PAWN_DIRECTION[color]


def pawn_last_row(color: Color) -> int:
    """Row on which a pawn of *color* promotes."""
    return _PAWN_LAST_ROW[color]


# -- Per-kind generators ----------------------------------------------------


def _gen_pawn(square: Square, board: Board) -> list[Point]:
    moves: list[Point] = []
    origin = square.position
    step = _PAWN_DIRECTION[square.color]

    one = origin + Point(0, step)
    if one.is_inside() and board[one].is_empty:
        moves.append(one)
        two = one + Point(0, step)
        if (
            origin.y == _PAWN_START_ROW[square.color]
            and two.is_inside()
            and board[two].is_empty
        ):
            moves.append(two)

    for dx in (-1, 1):
        target = origin + Point(dx, step)
        if not target.is_inside():
            continue
        if board[target].is_enemy_of(square.color) or target == board.en_passant_target:
            moves.append(target)
    return moves


def _gen_sliding(
    square: Square, board: Board, directions: tuple[Point, ...]
) -> list[Point]:
    moves: list[Point] = []
    for direction in directions:
        target = square.position + direction
        while target.is_inside() and board[target].is_empty:
            moves.append(target)
            target += direction
        if target.is_inside() and board[target].is_enemy_of(square.color):
            moves.append(target)
    return moves


def _gen_leaper(
    square: Square, board: Board, offsets: tuple[Point, ...]
) -> list[Point]:
    moves: list[Point] = []
    for offset in offsets:
        target = square.position + offset
        if target.is_inside() and not board[target].is_friend_of(square.color):
            moves.append(target)
    return moves


_GENERATORS: dict[PieceKind, Callable[[Square, Board], list[Point]]] = {
    PieceKind.EMPTY: lambda _square, _board: [],
    PieceKind.PAWN: _gen_pawn,
    PieceKind.ROOK: lambda sq, board: _gen_sliding(sq, board, ROOK_DIRS),
    PieceKind.BISHOP: lambda sq, board: _gen_sliding(sq, board, BISHOP_DIRS),
    PieceKind.QUEEN: lambda sq, board: _gen_sliding(sq, board, QUEEN_DIRS),
    PieceKind.KNIGHT: lambda sq, board: _gen_leaper(sq, board, KNIGHT_OFFSETS),
    PieceKind.KING: lambda sq, board: _gen_leaper(sq, board, KING_OFFSETS),
}


# -- Public API -------------------------------------------------------------


def possible_moves(square: Square, board: Board) -> list[Point]:
    """Pseudo-legal destinations for the occupant of *square* on *board*.

    Order is deterministic: pawns list pushes before captures, sliders walk
    one direction to its end before the next, leapers follow their offset
    tables.
    """
    return _GENERATORS[square.kind](square, board)


def possible_moves_from(point: Point, board: Board) -> list[Point]:
    """Convenience wrapper: moves of whatever stands on *point*."""
    return possible_moves(board[point], board)
