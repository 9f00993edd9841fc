"""Game management layer - the session loop between input and board.

Quick start::

    from cursorchess.core import Command
    from cursorchess.game import GameSession

    session = GameSession()
    session.new_game()
    session.handle(Command.RIGHT)
"""

from cursorchess.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
