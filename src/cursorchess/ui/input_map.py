"""Translation of Qt key codes into abstract board commands."""

from __future__ import annotations

from PyQt6.QtCore import Qt

from cursorchess.core.enums import Command

KEY_COMMANDS: dict[Qt.Key, Command] = {
    Qt.Key.Key_Right: Command.RIGHT,
    Qt.Key.Key_Left: Command.LEFT,
    Qt.Key.Key_Up: Command.UP,
    Qt.Key.Key_Down: Command.DOWN,
    Qt.Key.Key_Return: Command.CONFIRM,
    Qt.Key.Key_Enter: Command.CONFIRM,
    Qt.Key.Key_Escape: Command.CANCEL,
}


def command_for_key(key: int | Qt.Key) -> Command:
    """Command bound to *key*, or ``Command.NONE`` for unbound keys."""
    try:
        return KEY_COMMANDS.get(Qt.Key(key), Command.NONE)
    except ValueError:
        return Command.NONE
