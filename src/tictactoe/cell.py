"""Defines the marks a single cell can hold"""

from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Mark


class Cell(Enum):
    EMPTY = auto()
    X = auto()
    O = auto()

    @classmethod
    def from_char(cls, char: str) -> Self:
        if char not in CHAR_TO_CELL:
            raise InvalidBoardError(
                f"Unknown cell character {char!r}. Pick one from {''.join(CHAR_TO_CELL)!r}"
            )
        return CHAR_TO_CELL[char]

    def to_char(self) -> str:
        return CELL_TO_CHAR[self]

    def to_mark(self) -> Optional[Mark]:
        """Boundary version: an empty cell has no mark."""
        if self == Cell.EMPTY:
            return None
        return Mark[self.name]

    @classmethod
    def from_mark(cls, mark: Mark) -> Self:
        return cls[mark.name]


CHAR_TO_CELL: dict[str, Cell] = {
    ".": Cell.EMPTY,
    "X": Cell.X,
    "O": Cell.O,
}

CELL_TO_CHAR: dict[Cell, str] = {value: key for key, value in CHAR_TO_CELL.items()}
