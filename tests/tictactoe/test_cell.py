"""Unit tests for /src/tictactoe/cell.py"""

import pytest

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Mark
from src.tictactoe.cell import CELL_TO_CHAR, Cell


@pytest.mark.parametrize(
    "char, expected",
    [(".", Cell.EMPTY), ("X", Cell.X), ("O", Cell.O)],
)
def test_from_char(char: str, expected: Cell) -> None:
    assert Cell.from_char(char) == expected
    assert expected.to_char() == char


@pytest.mark.parametrize("char", ["x", "o", "0", " ", "", "XO"])
def test_unknown_char(char: str) -> None:
    with pytest.raises(InvalidBoardError):
        Cell.from_char(char)


def test_every_cell_has_a_char() -> None:
    assert set(CELL_TO_CHAR) == set(Cell)


def test_boundary_marks() -> None:
    """Empty cells have no mark at the boundary."""
    assert Cell.EMPTY.to_mark() is None
    assert Cell.X.to_mark() == Mark.X
    assert Cell.O.to_mark() == Mark.O
    assert Cell.from_mark(Mark.O) == Cell.O
