"""TextRenderer - paints the board state as monospace text.

Each cell is four characters wide: a left marker, a two-character piece
label and a right marker. Markers show the cursor ``[..]``, the selected
move ``<..>`` and the other candidate moves ``(..)``.
"""

from __future__ import annotations

from cursorchess.core.board import PROMOTION_CHOICES, Board
from cursorchess.core.enums import Color, PromotionPhase, SelectionMode
from cursorchess.core.piece import Square
from cursorchess.core.types import BOARD_SIZE, Point

# FEN character -> two-character cell label
_LABELS: dict[str, str] = {
    ".": "  ",
    "P": "PN",
    "R": "RK",
    "N": "KN",
    "B": "BP",
    "Q": "QN",
    "K": "KG",
    "p": "pn",
    "r": "rk",
    "n": "kn",
    "b": "bp",
    "q": "qn",
    "k": "kg",
}

_MODE_NAMES: dict[SelectionMode, str] = {
    SelectionMode.BROWSING: "select a piece",
    SelectionMode.MOVE_CHOICE: "choose a move",
    SelectionMode.PROMOTION: "choose a promotion",
}

_MOVE_HINT = ".."


class TextRenderer:
    """Read-only visualizer over a :class:`Board`."""

    __slots__ = ("_use_unicode", "_show_coordinates", "_show_move_hints")

    def __init__(
        self,
        use_unicode: bool = False,
        show_coordinates: bool = True,
        show_move_hints: bool = True,
    ) -> None:
        self._use_unicode = use_unicode
        self._show_coordinates = show_coordinates
        self._show_move_hints = show_move_hints

    def cell_label(self, square: Square) -> str:
        """Two-character label for *square*."""
        if self._use_unicode and not square.is_empty:
            return square.symbol + " "
        return _LABELS[square.fen_char]

    def render(self, board: Board) -> str:
        lines: list[str] = []
        if self._show_coordinates:
            files = "".join(f" {chr(ord('a') + x)}  " for x in range(BOARD_SIZE))
            lines.append("  " + files.rstrip())

        targets: set[Point] = set()
        if self._show_move_hints and board.selection_mode == SelectionMode.MOVE_CHOICE:
            targets = set(board.move_list)
        selected = board.selected_move

        for y in range(BOARD_SIZE):
            cells: list[str] = []
            for x in range(BOARD_SIZE):
                point = Point(x, y)
                square = board[point]
                label = self.cell_label(square)
                if point in targets and square.is_empty:
                    label = _MOVE_HINT
                cells.append(self._wrap(label, point, board.cursor, selected, targets))
            row = "".join(cells).rstrip()
            if self._show_coordinates:
                row = f"{BOARD_SIZE - y} {row}"
            lines.append(row)

        if board.selection_mode == SelectionMode.PROMOTION:
            lines.append("")
            lines.extend(self.render_promotion_menu(board))

        lines.append("")
        lines.append(self.status_line(board))
        return "\n".join(lines)

    @staticmethod
    def _wrap(
        label: str,
        point: Point,
        cursor: Point,
        selected: Point | None,
        targets: set[Point],
    ) -> str:
        if point == selected:
            return f"<{label}>"
        if point == cursor:
            return f"[{label}]"
        if point in targets:
            return f"({label})"
        return f" {label} "

    def render_promotion_menu(self, board: Board) -> list[str]:
        color = board.selected_square.color
        lines = ["Promote to:"]
        for index, kind in enumerate(PROMOTION_CHOICES):
            label = self.cell_label(Square(kind, color, board.cursor))
            marker = ">" if index == board.promotion_cursor_index else " "
            lines.append(f" {marker} {label} {kind.name.capitalize()}")
        if board.promotion_phase == PromotionPhase.ARMED:
            lines.append("Press Enter again to confirm")
        else:
            lines.append("Press Enter to choose")
        return lines

    @staticmethod
    def status_line(board: Board) -> str:
        side = "White" if board.turn == Color.WHITE else "Black"
        text = f"{side} to move - {_MODE_NAMES[board.selection_mode]}"
        if board.selection_mode == SelectionMode.MOVE_CHOICE:
            if board.move_list:
                text += f" ({board.move_cursor_index + 1}/{len(board.move_list)})"
            else:
                text += " (no moves)"
        return text
