"""The Game board holds the grid of cells. It knows nothing about turns or winning."""

from dataclasses import dataclass
from typing import Optional, Self

from src.connect_four.players import PlayerId
from src.core.exceptions import CellOccupiedError

# Standard Connect Four board: 6 rows, 7 columns. (height, width)
BOARD_DIMENSIONS = (6, 7)

# A cell is either empty (None) or holds the id of the player who dropped a piece there.
Cell = Optional[PlayerId]


@dataclass
class Board:
    """Row-major grid. Row 0 is the TOP row, pieces fall towards row `height - 1`."""

    grid: list[list[Cell]]

    @classmethod
    def empty(cls, height: int = BOARD_DIMENSIONS[0], width: int = BOARD_DIMENSIONS[1]) -> Self:
        return cls([[None] * width for _ in range(height)])

    @classmethod
    def from_rows(cls, rows: list[list[Optional[str]]]) -> Self:
        """Construct a board from the transport format: rows of "one" / "two" / None"""
        return cls(
            [[PlayerId(value) if value else None for value in row] for row in rows]
        )

    def to_rows(self) -> list[list[Optional[str]]]:
        return [[cell.value if cell else None for cell in row] for row in self.grid]

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def cell(self, row: int, column: int) -> Cell:
        return self.grid[row][column]

    def is_within_bounds(self, row: int, column: int) -> bool:
        return (0 <= row < self.height) and (0 <= column < self.width)

    def is_valid_column(self, column: int) -> bool:
        return 0 <= column < self.width

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """Scan the column from the bottom up. None means the column is full."""
        for row in range(self.height - 1, -1, -1):
            if self.grid[row][column] is None:
                return row
        return None

    def place(self, row: int, column: int, player: PlayerId) -> None:
        """Mark the cell as taken by `player`. Only call after lowest_empty_row confirmed the spot."""
        if self.grid[row][column] is not None:
            raise CellOccupiedError(
                f"Cell ({row}, {column}) already taken by player {self.grid[row][column]}."
            )
        self.grid[row][column] = player

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def count(self, player: PlayerId) -> int:
        """Number of pieces a player has on the board"""
        return sum(1 for row in self.grid for cell in row if cell == player)

    def mirrored(self) -> Self:
        """Horizontal reflection: column c becomes column width - 1 - c."""
        return type(self)([list(reversed(row)) for row in self.grid])
