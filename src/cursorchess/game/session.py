"""GameSession - the control loop between an input source and the board.

Each tick re-parses the current positional record into the board, feeds it
one command and serialises the result again. Emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from cursorchess.core.board import Board
from cursorchess.core.enums import Color, Command, PieceKind, SelectionMode
from cursorchess.core.notation import STARTING_FEN, ParseError

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

UpdateCallback = Callable[[Command, Board], None]
TurnCallback = Callable[[Color, str], None]  # side to move, record
PromotionCallback = Callable[[PieceKind, Color], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_update: list[UpdateCallback] = field(default_factory=list)
    on_turn: list[TurnCallback] = field(default_factory=list)
    on_promotion: list[PromotionCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns the board and the current record, one command per :meth:`handle`.

    ``history`` holds the record at every turn boundary, oldest first, so a
    turn can be taken back with :meth:`undo_turn`.
    """

    __slots__ = ("_board", "_fen", "_history", "events")

    def __init__(self) -> None:
        self._board = Board()
        self._fen = ""
        self._history: list[str] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def fen(self) -> str:
        return self._fen

    @property
    def history(self) -> list[str]:
        return list(self._history)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self, fen: str | None = None) -> None:
        """Start over from *fen* (the standard start when omitted).

        Raises :class:`ParseError` when *fen* is malformed.
        """
        self._board = Board()
        self._board.from_fen(fen or STARTING_FEN)
        self._fen = self._board.to_fen()
        self._history = [self._fen]
        _LOGGER.info("New game: %s", self._fen)

    def load(self, fen: str) -> bool:
        """Replace the position, keeping the previous one if *fen* is invalid."""
        try:
            self._board.from_fen(fen)
        except ParseError as exc:
            _LOGGER.warning("Rejected positional record %r: %s", fen, exc)
            return False
        self._board.reset_selection()
        self._fen = self._board.to_fen()
        self._history = [self._fen]
        _LOGGER.info("Loaded position: %s", self._fen)
        return True

    # ── Tick ─────────────────────────────────────────────────────────────

    def handle(self, command: Command) -> str:
        """Process one command and return the resulting record."""
        if not self._fen:
            self.new_game()

        board = self._board
        turn_before = board.turn
        mode_before = board.selection_mode
        board.from_fen(self._fen)
        board.update(command)
        self._fen = board.to_fen()
        _LOGGER.debug("%s -> %s", command.name, self._fen)

        if board.turn != turn_before:
            self._history.append(self._fen)
            _LOGGER.info("Move committed, %s to move: %s", board.turn, self._fen)
            self._emit_turn(board.turn, self._fen)

        if (
            mode_before == SelectionMode.PROMOTION
            and board.selection_mode != SelectionMode.PROMOTION
        ):
            promoted = board.selected_square
            _LOGGER.info("Promoted to %s at %s", promoted.kind.name, promoted.position)
            self._emit_promotion(promoted.kind, promoted.color)
            # The promotion changed the position of the current turn
            self._history[-1] = self._fen

        self._emit_update(command)
        return self._fen

    def undo_turn(self) -> bool:
        """Restore the record from before the last committed move."""
        if len(self._history) < 2:
            return False
        if self._board.selection_mode == SelectionMode.PROMOTION:
            return False
        self._history.pop()
        self._fen = self._history[-1]
        self._board.from_fen(self._fen)
        self._board.reset_selection()
        _LOGGER.info("Turn undone: %s", self._fen)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_update(self, command: Command) -> None:
        for cb in self.events.on_update:
            cb(command, self._board)

    def _emit_turn(self, side: Color, fen: str) -> None:
        for cb in self.events.on_turn:
            cb(side, fen)

    def _emit_promotion(self, kind: PieceKind, color: Color) -> None:
        for cb in self.events.on_promotion:
            cb(kind, color)
