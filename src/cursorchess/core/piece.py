"""Square value object: what stands on one grid cell."""

from __future__ import annotations

from dataclasses import dataclass

from cursorchess.core.enums import Color, PieceKind
from cursorchess.core.types import Point

EMPTY_CHAR = "."

# FEN character <-> (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "R": (Color.WHITE, PieceKind.ROOK),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "r": (Color.BLACK, PieceKind.ROOK),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable occupant of a grid cell.

    Empty cells are squares too (``PieceKind.EMPTY``), so grid lookups never
    need a null case. Their color is meaningless and always ``WHITE``.
    """

    kind: PieceKind
    color: Color
    position: Point

    @classmethod
    def empty(cls, position: Point) -> Square:
        return cls(PieceKind.EMPTY, Color.WHITE, position)

    @classmethod
    def from_char(cls, char: str, position: Point) -> Square:
        """Create a square from a FEN character, e.g. 'N' -> white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, position)

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    def is_enemy_of(self, color: Color) -> bool:
        """Occupied by the side opposite to *color*."""
        return not self.is_empty and self.color != color

    def is_friend_of(self, color: Color) -> bool:
        """Occupied by *color*."""
        return not self.is_empty and self.color == color

    def moved_to(self, position: Point) -> Square:
        return Square(self.kind, self.color, position)

    def promoted_to(self, kind: PieceKind) -> Square:
        return Square(kind, self.color, self.position)

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def fen_char(self) -> str:
        """Uppercase = white, lowercase = black, '.' = empty."""
        if self.is_empty:
            return EMPTY_CHAR
        return _FEN_CHARS[(self.color, self.kind)]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, or a blank for empty squares."""
        if self.is_empty:
            return " "
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        return self.fen_char
