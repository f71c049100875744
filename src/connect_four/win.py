"""
Win detection
----

Every cell of the grid is used as an anchor for four candidate lines (horizontal, vertical, and both diagonals).
A line wins when all four of its cells are on the board AND belong to the same player.

NOTE lines are not pre-filtered to fit on the board. Cells that fall off the grid simply make that line fail.
"""

from typing import Optional

from src.connect_four.board import Board
from src.connect_four.players import PlayerId

CONNECT = 4

Coordinate = tuple[int, int]  # (row, column)

# (row step, column step) for each orientation. Row 0 is the top row.
DIRECTIONS: dict[str, Coordinate] = {
    "horizontal": (0, 1),
    "vertical": (1, 0),
    "diagonal_down_right": (1, 1),
    "diagonal_down_left": (1, -1),
}


def candidate_line(anchor: Coordinate, direction: Coordinate) -> list[Coordinate]:
    row, column = anchor
    d_row, d_column = direction
    return [(row + i * d_row, column + i * d_column) for i in range(CONNECT)]


def _is_owned_line(board: Board, line: list[Coordinate], player: PlayerId) -> bool:
    return all(
        board.is_within_bounds(row, column) and board.cell(row, column) == player
        for row, column in line
    )


def winning_line(board: Board, player: PlayerId) -> Optional[list[Coordinate]]:
    """First line of four found for `player`, or None."""
    for row in range(board.height):
        for column in range(board.width):
            for direction in DIRECTIONS.values():
                line = candidate_line((row, column), direction)
                if _is_owned_line(board, line, player):
                    return line
    return None


def has_win(board: Board, player: PlayerId) -> bool:
    """Only the player who just moved needs checking: nothing changed for the opponent."""
    return winning_line(board, player) is not None
