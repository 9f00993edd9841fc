"""MainWindow - top-level window around the text board."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QGuiApplication
from PyQt6.QtWidgets import (
    QInputDialog,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QStatusBar,
)

from cursorchess.core.enums import Color
from cursorchess.core.notation import ParseError
from cursorchess.game.session import GameSession
from cursorchess.ui.board_widget import BoardWidget
from cursorchess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for cursorchess."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Cursor Chess")
        self.resize(520, 520)

        self._settings = settings or AppSettings()
        self._session = GameSession()
        self._start_game(self._settings.start_fen)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_widget = BoardWidget(self._session, self._settings)
        self.setCentralWidget(self._board_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        self._act_load = QAction("Load position...", self)
        self._act_load.setShortcut("Ctrl+L")
        self._act_load.triggered.connect(self._on_load_position)
        menu_game.addAction(self._act_load)

        self._act_copy = QAction("Copy position", self)
        self._act_copy.setShortcut("Ctrl+Shift+C")
        self._act_copy.triggered.connect(self._on_copy_position)
        menu_game.addAction(self._act_copy)

        self._act_undo = QAction("Take back turn", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        menu_game.addAction(self._act_undo)

        menu_game.addSeparator()
        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

        menu_view = menu_bar.addMenu("&View")
        assert menu_view is not None

        self._act_unicode = QAction("Unicode pieces", self)
        self._act_unicode.setCheckable(True)
        self._act_unicode.setChecked(self._settings.use_unicode_symbols)
        self._act_unicode.toggled.connect(self._on_toggle_unicode)
        menu_view.addAction(self._act_unicode)

        self._act_coords = QAction("Coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        menu_view.addAction(self._act_coords)

    def _connect_signals(self) -> None:
        self._board_widget.fen_changed.connect(lambda _fen: self._update_status())
        self._board_widget.promotion_finished.connect(
            lambda: self._status.showMessage("Promotion complete", 2000)
        )

    # ── Game actions ─────────────────────────────────────────────────────

    def _start_game(self, fen: str) -> None:
        try:
            self._session.new_game(fen)
        except ParseError as exc:
            _LOGGER.warning("Invalid start position %r (%s); using the default", fen, exc)
            self._session.new_game()

    def _on_new_game(self) -> None:
        self._start_game(self._settings.start_fen)
        self._board_widget.refresh()
        self._update_status()

    def _on_load_position(self) -> None:
        text, ok = QInputDialog.getText(
            self,
            "Load position",
            "Positional record:",
            QLineEdit.EchoMode.Normal,
            self._session.fen,
        )
        if ok and text.strip():
            self.load_position(text.strip())

    def load_position(self, fen: str) -> bool:
        if not self._session.load(fen):
            QMessageBox.warning(self, "Load position", f"Invalid position:\n{fen}")
            return False
        self._board_widget.refresh()
        self._update_status()
        return True

    def _on_copy_position(self) -> None:
        clipboard = QGuiApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(self._session.fen)
        self._status.showMessage("Position copied", 2000)

    def _on_undo(self) -> None:
        if self._session.undo_turn():
            self._board_widget.refresh()
            self._update_status()

    def _on_toggle_unicode(self, checked: bool) -> None:
        self._settings.use_unicode_symbols = checked
        self._board_widget.apply_settings(self._settings)

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._board_widget.apply_settings(self._settings)

    # ── Status ───────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        side = "White" if self._session.board.turn == Color.WHITE else "Black"
        self._status_label.setText(f"{side} to move | {self._session.fen}")
