"""Core domain layer - pure chess logic with zero external dependencies.

Quick start::

    from cursorchess.core import Board, Command, STARTING_FEN

    board = Board()
    board.from_fen(STARTING_FEN)
    board.update(Command.RIGHT)
    print(board.to_fen())
"""

from cursorchess.core.board import (
    KING_HOMES,
    PROMOTION_CHOICES,
    ROOK_HOMES,
    SIDE_RIGHTS,
    Board,
)
from cursorchess.core.enums import (
    CastlingRights,
    Color,
    Command,
    PieceKind,
    PromotionPhase,
    SelectionMode,
)
from cursorchess.core.move_generator import possible_moves, possible_moves_from
from cursorchess.core.notation import (
    STARTING_FEN,
    FenRecord,
    ParseError,
    format_fen,
    parse_fen,
)
from cursorchess.core.piece import Square
from cursorchess.core.types import (
    BOARD_SIZE,
    OFF_BOARD,
    Point,
    all_points,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "Command",
    "PieceKind",
    "PromotionPhase",
    "SelectionMode",
    # Types / helpers
    "BOARD_SIZE",
    "OFF_BOARD",
    "Point",
    "all_points",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "KING_HOMES",
    "PROMOTION_CHOICES",
    "ROOK_HOMES",
    "SIDE_RIGHTS",
    "Square",
    "possible_moves",
    "possible_moves_from",
    # Notation
    "STARTING_FEN",
    "FenRecord",
    "ParseError",
    "format_fen",
    "parse_fen",
]
