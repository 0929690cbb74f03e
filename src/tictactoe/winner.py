"""Win detection over a single board snapshot"""

from typing import Optional

from src.tictactoe.board import Board
from src.tictactoe.cell import Cell

Line = tuple[int, int, int]

# Order matters: the first completed line is the one reported
WINNING_LINES: tuple[Line, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def winning_line(board: Board) -> Optional[Line]:
    """First line filled with three equal, non-empty marks."""
    for a, b, c in WINNING_LINES:
        mark = board.cells[a]
        if mark != Cell.EMPTY and mark == board.cells[b] == board.cells[c]:
            return (a, b, c)
    return None


def detect_winner(board: Board) -> Optional[Cell]:
    """
    Mark that completed a line, or None.

    NOTE a full board without a line is also None. There is no separate draw result.
    """
    line = winning_line(board)
    if line is None:
        return None
    return board.cells[line[0]]
