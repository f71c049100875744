"""Unit tests for /src/connect_four/board.py"""

import pytest

from src.connect_four.board import BOARD_DIMENSIONS, Board
from src.connect_four.players import PlayerId
from src.core.exceptions import CellOccupiedError


def test_empty_board_dimensions() -> None:
    board = Board.empty()
    assert (board.height, board.width) == BOARD_DIMENSIONS
    assert all(cell is None for row in board.grid for cell in row)


def test_custom_dimensions() -> None:
    board = Board.empty(height=5, width=4)
    assert board.height == 5
    assert board.width == 4


@pytest.mark.parametrize("column", range(7))
def test_lowest_empty_row_on_empty_board(column: int) -> None:
    """Pieces fall all the way down: bottom row is the last one (row 0 is the top)."""
    assert Board.empty().lowest_empty_row(column) == 5


def test_lowest_empty_row_stacks_up() -> None:
    board = Board.empty()
    board.place(5, 3, PlayerId.ONE)
    board.place(4, 3, PlayerId.TWO)
    assert board.lowest_empty_row(3) == 3
    # neighbouring columns are not affected
    assert board.lowest_empty_row(2) == 5
    assert board.lowest_empty_row(4) == 5


def test_full_column_has_no_empty_row() -> None:
    board = Board.empty()
    for row in range(board.height):
        board.place(row, 0, PlayerId.ONE if row % 2 else PlayerId.TWO)
    assert board.lowest_empty_row(0) is None


def test_place_marks_cell() -> None:
    board = Board.empty()
    board.place(5, 0, PlayerId.TWO)
    assert board.cell(5, 0) == PlayerId.TWO


def test_place_never_overwrites() -> None:
    board = Board.empty()
    board.place(5, 0, PlayerId.ONE)
    with pytest.raises(CellOccupiedError):
        board.place(5, 0, PlayerId.TWO)
    assert board.cell(5, 0) == PlayerId.ONE


def test_is_full() -> None:
    board = Board.empty(height=4, width=4)
    assert not board.is_full()
    for row in range(4):
        for column in range(4):
            assert not board.is_full()
            board.place(row, column, PlayerId.ONE)
    assert board.is_full()


@pytest.mark.parametrize(
    "row, column, expected",
    [
        (0, 0, True),
        (5, 6, True),
        (-1, 0, False),
        (0, -1, False),
        (6, 0, False),
        (0, 7, False),
    ],
)
def test_is_within_bounds(row: int, column: int, expected: bool) -> None:
    assert Board.empty().is_within_bounds(row, column) == expected


@pytest.mark.parametrize("column, expected", [(-1, False), (0, True), (6, True), (7, False)])
def test_is_valid_column(column: int, expected: bool) -> None:
    assert Board.empty().is_valid_column(column) == expected


def test_rows_conversion() -> None:
    board = Board.empty(height=4, width=4)
    board.place(3, 0, PlayerId.ONE)
    board.place(3, 1, PlayerId.TWO)
    rows = board.to_rows()
    assert rows[3] == ["one", "two", None, None]
    assert Board.from_rows(rows) == board


def test_mirrored() -> None:
    board = Board.empty()
    board.place(5, 0, PlayerId.ONE)
    board.place(5, 1, PlayerId.TWO)
    mirrored = board.mirrored()
    assert mirrored.cell(5, 6) == PlayerId.ONE
    assert mirrored.cell(5, 5) == PlayerId.TWO
    assert mirrored.cell(5, 0) is None
    # original untouched
    assert board.cell(5, 0) == PlayerId.ONE


def test_count() -> None:
    board = Board.empty()
    board.place(5, 0, PlayerId.ONE)
    board.place(5, 1, PlayerId.ONE)
    board.place(5, 2, PlayerId.TWO)
    assert board.count(PlayerId.ONE) == 2
    assert board.count(PlayerId.TWO) == 1
