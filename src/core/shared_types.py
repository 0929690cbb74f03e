"""
Type definitions used across layers
"""

from enum import StrEnum


# --- Mark DOES NOT contain an option for empty cells. That one lives in src/tictactoe/cell.py
# --- NOTE at the boundary an empty cell is simply None


class Mark(StrEnum):
    X = "X"
    O = "O"
