"""Tests for Point and square helpers."""

import pytest

from cursorchess.core.types import OFF_BOARD, Point, all_points, parse_square, square_name


class TestPoint:
    def test_structural_equality(self) -> None:
        assert Point(3, 4) == Point(3, 4)
        assert Point(3, 4) != Point(4, 3)

    def test_addition(self) -> None:
        assert Point(3, 4) + Point(-1, 2) == Point(2, 6)

    @pytest.mark.parametrize("point", [Point(0, 0), Point(7, 7), Point(0, 7), Point(4, 3)])
    def test_inside(self, point: Point) -> None:
        assert point.is_inside()

    @pytest.mark.parametrize("point", [Point(-1, 0), Point(0, 8), Point(8, 3), OFF_BOARD])
    def test_outside(self, point: Point) -> None:
        assert not point.is_inside()

    def test_hashable(self) -> None:
        assert len({Point(1, 1), Point(1, 1), Point(2, 1)}) == 2

    def test_all_points(self) -> None:
        points = all_points()
        assert len(points) == 64
        assert points[0] == Point(0, 0)
        assert points[-1] == Point(7, 7)


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name(Point(4, 6)) == "e2"
        assert square_name(Point(0, 0)) == "a8"

    def test_parse_square(self) -> None:
        assert parse_square("e3") == Point(4, 5)
        assert parse_square("h1") == Point(7, 7)

    def test_parse_square_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square("i9")

    def test_square_name_off_board(self) -> None:
        with pytest.raises(ValueError):
            square_name(OFF_BOARD)
