"""
Contract for the Service layer.

Domain level data model of information representing a Game.

"""

from dataclasses import dataclass


@dataclass
class GameModel:
    """Tic-tac-toe session data: every snapshot played so far + the move currently shown."""

    history: list[str]
    current_move: int
