"""BoardWidget - read-only monospace view that drives a GameSession by keys."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import QPlainTextEdit

from cursorchess.core.enums import Command
from cursorchess.game.session import GameSession
from cursorchess.ui.input_map import command_for_key
from cursorchess.ui.settings import AppSettings
from cursorchess.ui.text_renderer import TextRenderer


class BoardWidget(QPlainTextEdit):
    """Renders the session's board and turns key presses into commands.

    Signals:
        fen_changed(str): The positional record after each handled command.
        promotion_finished(): A promotion was committed and its menu closed.
    """

    fen_changed = pyqtSignal(str)
    promotion_finished = pyqtSignal()

    def __init__(
        self,
        session: GameSession,
        settings: AppSettings | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._session = session
        self._renderer = TextRenderer()
        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.apply_settings(settings or AppSettings())

    @property
    def session(self) -> GameSession:
        return self._session

    def apply_settings(self, settings: AppSettings) -> None:
        font = QFont("Monospace", settings.font_size)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.setFont(font)
        self._renderer = TextRenderer(
            use_unicode=settings.use_unicode_symbols,
            show_coordinates=settings.show_coordinates,
            show_move_hints=settings.show_move_hints,
        )
        self.refresh()

    def refresh(self) -> None:
        """Repaint from the current board state."""
        board = self._session.board
        self.setPlainText(self._renderer.render(board))
        if board.acknowledge_promotion():
            self.promotion_finished.emit()

    def send_command(self, command: Command) -> None:
        fen = self._session.handle(command)
        self.refresh()
        self.fen_changed.emit(fen)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        command = command_for_key(event.key())
        if command == Command.NONE:
            super().keyPressEvent(event)
            return
        event.accept()
        self.send_command(command)
