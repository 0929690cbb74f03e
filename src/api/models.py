"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Mark
from src.tictactoe.board import BOARD_SIZE


# --- REQUEST MODELS ---
class PlayRequest(BaseModel):
    game_id: UUID
    cell: int

    @field_validator("cell")
    @classmethod
    def validate_cell(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Cell must be in 0..{BOARD_SIZE - 1}, got {value!r}."
            )
        return value


class JumpToRequest(BaseModel):
    game_id: UUID
    move: int

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: int) -> int:
        # upper bound depends on the game's history, checked by the domain layer
        if value < 0:
            raise InvalidRequestError(f"Move cannot be negative, got {value!r}.")
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class MoveEntry(BaseModel):
    move: int
    description: str


class GameResponse(BaseModel):
    game_id: UUID
    squares: list[Optional[Mark]]
    current_move: int
    next_player: Mark
    winner: Optional[Mark]
    status: str
    moves: list[MoveEntry]
