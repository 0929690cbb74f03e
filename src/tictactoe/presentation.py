"""Labels and text a renderer shows for a game. Kept next to the domain so every renderer words things the same way."""

from src.tictactoe.board import Board
from src.tictactoe.cell import Cell
from src.tictactoe.history import GameHistory

ROW_SEPARATOR = "---------"


def status_label(game: GameHistory) -> str:
    winner = game.winner()
    if winner is not None:
        return f"Winner: {winner.name}"
    return f"Next player: {game.current_turn().name}"


def move_description(move: int) -> str:
    if move > 0:
        return f"Go to move #{move}"
    return "Go to game start"


def jump_list(game: GameHistory) -> list[tuple[int, str]]:
    """One selectable entry per history index."""
    return [(move, move_description(move)) for move in range(game.move_count())]


def render_board(board: Board) -> str:
    """
    Plain-text grid, ex.

    X | O |
    ---------
      | X |
    ---------
      |   | O
    """
    rows = [
        " | ".join(" " if cell == Cell.EMPTY else cell.name for cell in row).rstrip()
        for row in board.rows()
    ]
    return f"\n{ROW_SEPARATOR}\n".join(rows)
