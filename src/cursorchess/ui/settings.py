"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from cursorchess.core.notation import STARTING_FEN

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    start_fen: str = STARTING_FEN

    # Board
    use_unicode_symbols: bool = False
    show_coordinates: bool = True
    show_move_hints: bool = True
    font_size: int = 14

    # Diagnostics
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        if self.font_size < 6:
            raise ValueError(f"Font size too small: {self.font_size}")
