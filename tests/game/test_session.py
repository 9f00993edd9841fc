"""Tests for GameSession - the command loop."""

from cursorchess.core.enums import Color, Command, PieceKind, SelectionMode
from cursorchess.core.notation import STARTING_FEN
from cursorchess.core.types import Point
from cursorchess.game.session import GameSession

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq 45"


def _play(session: GameSession, *commands: Command) -> str:
    fen = session.fen
    for command in commands:
        fen = session.handle(command)
    return fen


def _play_e4(session: GameSession) -> str:
    return _play(
        session,
        Command.DOWN,
        *[Command.RIGHT] * 4,
        Command.CONFIRM,
        Command.RIGHT,
        Command.CONFIRM,
    )


class TestNewGame:
    def test_default_start(self) -> None:
        session = GameSession()
        session.new_game()
        assert session.fen == STARTING_FEN
        assert session.history == [STARTING_FEN]

    def test_custom_fen(self) -> None:
        session = GameSession()
        session.new_game(AFTER_E4)
        assert session.board.turn == Color.BLACK

    def test_handle_starts_game_lazily(self) -> None:
        session = GameSession()
        assert session.handle(Command.NONE) == STARTING_FEN


class TestHandle:
    def test_scenario_double_advance(self) -> None:
        session = GameSession()
        session.new_game()
        assert _play_e4(session) == AFTER_E4
        assert session.board.en_passant_target == Point(4, 5)
        assert session.history == [STARTING_FEN, AFTER_E4]

    def test_browsing_does_not_touch_history(self) -> None:
        session = GameSession()
        session.new_game()
        _play(session, Command.DOWN, Command.RIGHT, Command.CONFIRM, Command.CANCEL)
        assert session.history == [STARTING_FEN]
        assert session.board.selection_mode == SelectionMode.BROWSING

    def test_turn_event(self) -> None:
        session = GameSession()
        session.new_game()
        turns: list[tuple[Color, str]] = []
        session.events.on_turn.append(lambda side, fen: turns.append((side, fen)))
        _play_e4(session)
        assert turns == [(Color.BLACK, AFTER_E4)]

    def test_update_event_fires_per_command(self) -> None:
        session = GameSession()
        session.new_game()
        seen: list[Command] = []
        session.events.on_update.append(lambda cmd, board: seen.append(cmd))
        _play(session, Command.DOWN, Command.UP)
        assert seen == [Command.DOWN, Command.UP]

    def test_promotion_event_and_history(self) -> None:
        session = GameSession()
        session.new_game("8/P7/8/8/8/8/8/k6K w - -")
        session.board.cursor = Point(0, 1)
        promotions: list[tuple[PieceKind, Color]] = []
        session.events.on_promotion.append(lambda k, c: promotions.append((k, c)))

        _play(session, Command.CONFIRM, Command.CONFIRM)
        assert session.board.selection_mode == SelectionMode.PROMOTION
        assert promotions == []

        fen = _play(session, Command.DOWN, Command.DOWN, Command.DOWN)
        fen = _play(session, Command.CONFIRM, Command.CONFIRM)
        assert fen == "Q7/8/8/8/8/8/8/k6K b - -"
        assert promotions == [(PieceKind.QUEEN, Color.WHITE)]
        assert session.history[-1] == fen
        assert len(session.history) == 2


class TestLoadAndUndo:
    def test_load_valid(self) -> None:
        session = GameSession()
        session.new_game()
        assert session.load(AFTER_E4)
        assert session.fen == AFTER_E4
        assert session.history == [AFTER_E4]

    def test_load_invalid_keeps_state(self) -> None:
        session = GameSession()
        session.new_game()
        _play_e4(session)
        assert not session.load("8/8/8/8/8/8/8 w - -")
        assert session.fen == AFTER_E4
        assert len(session.history) == 2

    def test_load_normalises_record(self) -> None:
        session = GameSession()
        session.new_game()
        assert session.load(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert session.fen == AFTER_E4

    def test_undo_turn(self) -> None:
        session = GameSession()
        session.new_game()
        _play_e4(session)
        assert session.undo_turn()
        assert session.fen == STARTING_FEN
        assert session.board.turn == Color.WHITE
        assert session.board.selection_mode == SelectionMode.BROWSING

    def test_undo_without_history(self) -> None:
        session = GameSession()
        session.new_game()
        assert not session.undo_turn()

    def test_undo_blocked_during_promotion(self) -> None:
        session = GameSession()
        session.new_game("8/P7/8/8/8/8/8/k6K w - -")
        session.board.cursor = Point(0, 1)
        _play(session, Command.CONFIRM, Command.CONFIRM)
        assert not session.undo_turn()
