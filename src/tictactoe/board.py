"""A single snapshot of the 3x3 grid.

Cells are indexed 0-8 row by row:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8

Snapshots never change once created. Placing a mark returns a new Board.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidArgumentError, InvalidBoardError
from src.tictactoe.cell import Cell

BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


def is_valid_cell_index(cell: object) -> bool:
    # bool is an int subclass, but True/False are not cell indices
    return (
        isinstance(cell, int)
        and not isinstance(cell, bool)
        and 0 <= cell < BOARD_SIZE
    )


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise InvalidBoardError(
                f"A board holds exactly {BOARD_SIZE} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple(Cell.EMPTY for _ in range(BOARD_SIZE)))

    @classmethod
    def from_string(cls, encoded: str) -> Board:
        """One character per cell, in index order: 'X', 'O' or '.' for empty.

        ex. 'X.O.X...O' means X on 0 and 4, O on 2 and 8.
        """
        if len(encoded) != BOARD_SIZE:
            raise InvalidBoardError(
                f"Encoded board must be {BOARD_SIZE} characters long: {encoded!r}"
            )
        return cls(tuple(Cell.from_char(char) for char in encoded))

    def to_string(self) -> str:
        return "".join(cell.to_char() for cell in self.cells)

    def cell(self, index: int) -> Cell:
        self._assert_valid_index(index)
        return self.cells[index]

    def is_empty(self, index: int) -> bool:
        return self.cell(index) == Cell.EMPTY

    def with_mark(self, index: int, mark: Cell) -> Board:
        """Copy of this board with `mark` placed on `index`."""
        self._assert_valid_index(index)
        if mark == Cell.EMPTY:
            raise InvalidArgumentError("Cannot place an empty mark.")
        new_cells = list(self.cells)
        new_cells[index] = mark
        return Board(tuple(new_cells))

    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell != Cell.EMPTY)

    def empty_cells(self) -> list[int]:
        return [index for index, cell in enumerate(self.cells) if cell == Cell.EMPTY]

    def is_full(self) -> bool:
        return self.filled_count() == BOARD_SIZE

    def rows(self) -> list[tuple[Cell, ...]]:
        width = BOARD_DIMENSIONS[0]
        return [self.cells[start : start + width] for start in range(0, BOARD_SIZE, width)]

    def _assert_valid_index(self, index: int) -> None:
        if not is_valid_cell_index(index):
            raise InvalidArgumentError(
                f"Cell index must be an integer in 0..{BOARD_SIZE - 1}, got {index!r}."
            )
