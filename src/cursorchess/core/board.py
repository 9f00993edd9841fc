"""Board - 8x8 grid, side to move, castling/en-passant state and the cursor
state machine that turns abstract commands into moves."""

from __future__ import annotations

from cursorchess.core.enums import (
    CastlingRights,
    Color,
    Command,
    PieceKind,
    PromotionPhase,
    SelectionMode,
)
from cursorchess.core.move_generator import pawn_direction, pawn_last_row, possible_moves
from cursorchess.core.notation.fen import STARTING_FEN, format_fen, parse_fen
from cursorchess.core.piece import Square
from cursorchess.core.types import BOARD_SIZE, OFF_BOARD, Point

PROMOTION_CHOICES: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
)

_CURSOR_STEPS: dict[Command, Point] = {
    Command.LEFT: Point(-1, 0),
    Command.RIGHT: Point(1, 0),
    Command.UP: Point(0, -1),
    Command.DOWN: Point(0, 1),
}

KING_HOMES: dict[Color, Point] = {
    Color.WHITE: Point(4, 7),
    Color.BLACK: Point(4, 0),
}

SIDE_RIGHTS: dict[Color, CastlingRights] = {
    Color.WHITE: CastlingRights.WHITE_BOTH,
    Color.BLACK: CastlingRights.BLACK_BOTH,
}

# right -> (side, rook home)
ROOK_HOMES: dict[CastlingRights, tuple[Color, Point]] = {
    CastlingRights.WHITE_KINGSIDE: (Color.WHITE, Point(7, 7)),
    CastlingRights.WHITE_QUEENSIDE: (Color.WHITE, Point(0, 7)),
    CastlingRights.BLACK_KINGSIDE: (Color.BLACK, Point(7, 0)),
    CastlingRights.BLACK_QUEENSIDE: (Color.BLACK, Point(0, 0)),
}


class Board:
    """Aggregate root: piece grid, turn state and interaction state.

    The board is driven one :class:`Command` at a time through
    :meth:`update`. Between calls it is always fully settled, so a renderer
    may read any attribute.
    """

    __slots__ = (
        "grid",
        "turn",
        "castling_rights",
        "en_passant_target",
        "cursor",
        "selection_mode",
        "move_list",
        "move_cursor_index",
        "promotion_cursor_index",
        "promotion_phase",
        "just_moved",
        "_just_promoted",
    )

    def __init__(self) -> None:
        self.grid: list[list[Square]] = [
            [Square.empty(Point(x, y)) for x in range(BOARD_SIZE)]
            for y in range(BOARD_SIZE)
        ]
        self.turn = Color.WHITE
        self.castling_rights = CastlingRights.NONE
        self.en_passant_target = OFF_BOARD
        self.cursor = Point(0, 0)
        self.selection_mode = SelectionMode.BROWSING
        self.move_list: tuple[Point, ...] = ()
        self.move_cursor_index = 0
        self.promotion_cursor_index = 0
        self.promotion_phase = PromotionPhase.ARMING
        self.just_moved = False
        self._just_promoted = False

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        board = cls()
        board.from_fen(STARTING_FEN)
        return board

    # -- Element access -----------------------------------------------------

    def __getitem__(self, point: Point) -> Square:
        if not point.is_inside():
            raise IndexError(f"Point is off the board: {point}")
        return self.grid[point.y][point.x]

    def get(self, point: Point) -> Square | None:
        """Square at *point*, or ``None`` only when *point* is off the board."""
        if not point.is_inside():
            return None
        return self.grid[point.y][point.x]

    def _place(self, square: Square) -> None:
        pos = square.position
        self.grid[pos.y][pos.x] = square

    def _holds(self, point: Point, kind: PieceKind, color: Color) -> bool:
        square = self[point]
        return square.kind == kind and square.color == color

    # -- Positional record --------------------------------------------------

    def from_fen(self, fen: str) -> None:
        """Load grid, turn, castling and en passant from a record.

        Raises :class:`~cursorchess.core.notation.ParseError` and leaves the
        board untouched when the record is malformed. Interaction state is
        kept.
        """
        record = parse_fen(fen)
        self.grid = [list(row) for row in record.grid]
        self.turn = record.turn
        self.castling_rights = record.castling
        self.en_passant_target = record.en_passant

    def to_fen(self) -> str:
        return format_fen(self)

    # -- Read surface -------------------------------------------------------

    @property
    def selected_square(self) -> Square:
        return self[self.cursor]

    @property
    def selected_move(self) -> Point | None:
        """Destination under the move cursor while choosing a move."""
        if self.selection_mode != SelectionMode.MOVE_CHOICE or not self.move_list:
            return None
        return self.move_list[self.move_cursor_index]

    @property
    def promotion_choice(self) -> PieceKind:
        return PROMOTION_CHOICES[self.promotion_cursor_index]

    @property
    def just_promoted(self) -> bool:
        return self._just_promoted

    def acknowledge_promotion(self) -> bool:
        """Consume the one-shot promotion signal; return whether it was set."""
        was_set = self._just_promoted
        self._just_promoted = False
        return was_set

    def reset_selection(self) -> None:
        """Back to plain browsing with nothing cached."""
        self.selection_mode = SelectionMode.BROWSING
        self.move_list = ()
        self.move_cursor_index = 0
        self.promotion_cursor_index = 0
        self.promotion_phase = PromotionPhase.ARMING
        self.just_moved = False

    # -- State machine ------------------------------------------------------

    def update(self, command: Command) -> None:
        """Consume one command, then re-derive castling rights."""
        if self.selection_mode == SelectionMode.MOVE_CHOICE:
            self._update_move_choice(command)
        elif self.selection_mode == SelectionMode.PROMOTION:
            self._update_promotion(command)
        else:
            self._update_browsing(command)
        self.derive_castling_rights()

    def _update_browsing(self, command: Command) -> None:
        if command.is_directional:
            self.just_moved = False
            self.cursor = self._find_cursor_target(_CURSOR_STEPS[command])
        elif command == Command.CONFIRM and not self.just_moved:
            square = self.selected_square
            moves = possible_moves(square, self) if square.is_friend_of(self.turn) else []
            self.move_list = tuple(moves)
            self.move_cursor_index = 0
            self.selection_mode = SelectionMode.MOVE_CHOICE

    def _find_cursor_target(self, step: Point) -> Point:
        """Nearest square of the side to move along *step*.

        The cursor's own line is probed first, then the two lines offset by
        one on either side, then by two, and so on.
        """
        across = Point(0, 1) if step.x else Point(1, 0)
        origin = self.cursor
        for offset in range(BOARD_SIZE):
            low = Point(origin.x - across.x * offset, origin.y - across.y * offset)
            high = Point(origin.x + across.x * offset, origin.y + across.y * offset)
            for _ in range(BOARD_SIZE):
                low += step
                high += step
                for probe in (low, high):
                    square = self.get(probe)
                    if square is not None and square.is_friend_of(self.turn):
                        return probe
        return origin

    def _update_move_choice(self, command: Command) -> None:
        if command in (Command.LEFT, Command.RIGHT):
            if self.move_list:
                delta = 1 if command == Command.RIGHT else -1
                self.move_cursor_index = (self.move_cursor_index + delta) % len(
                    self.move_list
                )
        elif command == Command.CANCEL:
            self.selection_mode = SelectionMode.BROWSING
            self.move_list = ()
            self.move_cursor_index = 0
        elif command == Command.CONFIRM:
            self.selection_mode = SelectionMode.BROWSING
            if self.move_list:
                self._commit(self.move_list[self.move_cursor_index])
            self.move_list = ()
            self.move_cursor_index = 0

    def _commit(self, destination: Point) -> None:
        origin = self.cursor
        mover = self[origin]
        is_pawn = mover.kind == PieceKind.PAWN

        self._place(mover.moved_to(destination))
        self._place(Square.empty(origin))
        self.move_cursor_index = 0
        self.cursor = destination

        # En passant: the captured pawn sits behind the destination
        if is_pawn and destination == self.en_passant_target:
            victim = Point(destination.x, destination.y - pawn_direction(mover.color))
            if victim.is_inside():
                self._place(Square.empty(victim))

        if is_pawn and abs(destination.y - origin.y) == 2:
            self.en_passant_target = Point(origin.x, (origin.y + destination.y) // 2)
        else:
            self.en_passant_target = OFF_BOARD

        if is_pawn and destination.y == pawn_last_row(mover.color):
            self.selection_mode = SelectionMode.PROMOTION
            self.promotion_cursor_index = 0
            self.promotion_phase = PromotionPhase.ARMING

        self.turn = self.turn.opposite
        self.just_moved = True

    def _update_promotion(self, command: Command) -> None:
        if command == Command.UP:
            self.promotion_cursor_index = max(0, self.promotion_cursor_index - 1)
        elif command == Command.DOWN:
            self.promotion_cursor_index = min(
                len(PROMOTION_CHOICES) - 1, self.promotion_cursor_index + 1
            )
        elif command == Command.CONFIRM:
            if self.promotion_phase == PromotionPhase.ARMED:
                self._promote()
            else:
                self.promotion_phase = PromotionPhase.ARMED
            return

        if command != Command.NONE:
            self.promotion_phase = PromotionPhase.ARMING

    def _promote(self) -> None:
        self._place(self.selected_square.promoted_to(self.promotion_choice))
        self.selection_mode = SelectionMode.BROWSING
        self.promotion_cursor_index = 0
        self.promotion_phase = PromotionPhase.ARMING
        self._just_promoted = True

    # -- Castling bookkeeping -----------------------------------------------

    def derive_castling_rights(self) -> None:
        """Clear every right whose king or rook is off its home square."""
        rights = self.castling_rights
        for color, king_home in KING_HOMES.items():
            if not self._holds(king_home, PieceKind.KING, color):
                rights &= ~SIDE_RIGHTS[color]
        for right, (color, rook_home) in ROOK_HOMES.items():
            if not self._holds(rook_home, PieceKind.ROOK, color):
                rights &= ~right
        self.castling_rights = rights

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = " ".join(self.grid[y][x].fen_char for x in range(BOARD_SIZE))
            rows.append(f"{BOARD_SIZE - y} {row}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
