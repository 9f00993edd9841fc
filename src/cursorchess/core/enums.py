"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """What occupies a square. ``EMPTY`` stands in for "nothing here"."""

    EMPTY = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH


class Command(IntEnum):
    """Abstract input produced by an input source, one per tick."""

    NONE = 0
    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
    CONFIRM = auto()
    CANCEL = auto()

    @property
    def is_directional(self) -> bool:
        return self in (Command.RIGHT, Command.LEFT, Command.UP, Command.DOWN)


class SelectionMode(IntEnum):
    """Interaction phase of the board cursor."""

    BROWSING = auto()
    MOVE_CHOICE = auto()
    PROMOTION = auto()


class PromotionPhase(IntEnum):
    """Confirm debounce while choosing a promotion piece.

    The first CONFIRM arms the choice, the next consecutive one commits it.
    """

    ARMING = auto()
    ARMED = auto()
