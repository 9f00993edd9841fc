"""Board coordinates and helpers.

Grid layout (row 0 is the top of the screen and the first rank of a record):
    (0, 0)=a8, (1, 0)=b8, ..., (7, 0)=h8
    ...
    (0, 7)=a1, (1, 7)=b1, ..., (7, 7)=h1
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable 2D integer coordinate (``x`` = column, ``y`` = row)."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def is_inside(self) -> bool:
        """Whether the point lies on the 8x8 board."""
        return 0 <= self.x < BOARD_SIZE and 0 <= self.y < BOARD_SIZE

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


OFF_BOARD = Point(-1, -1)


def square_name(point: Point) -> str:
    """Algebraic name, e.g. Point(4, 6) -> 'e2'."""
    if not point.is_inside():
        raise ValueError(f"Point is off the board: {point}")
    return chr(ord("a") + point.x) + str(BOARD_SIZE - point.y)


def parse_square(name: str) -> Point:
    """Parse an algebraic square name, e.g. 'e3' -> Point(4, 5)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Point(ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))


def all_points() -> list[Point]:
    """Every board point, row by row from the top."""
    return [Point(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]
