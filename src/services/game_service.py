"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JumpToRequest,
    MoveEntry,
    PlayRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.tictactoe.history import GameHistory
from src.tictactoe.presentation import jump_list, status_label

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for tic-tac-toe games. Every game id is one session."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Start a session on an empty board, X to move."""

        new_game = GameHistory()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by the renderer after each intent.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def play(self, request: PlayRequest) -> GameResponse:
        """Place the next mark. Ignored plays (taken cell, game won) return the unchanged state."""

        stored_model = self._fetch_game(request.game_id)
        game = GameHistory.from_model(stored_model)

        if not game.play(request.cell):
            return self._create_game_response(request.game_id, stored_model)

        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)

        winner = game.winner()
        if winner is not None:
            logger.info("Game %s won by %s", request.game_id, winner.name)
        return self._create_game_response(request.game_id, after_move)

    def jump_to(self, request: JumpToRequest) -> GameResponse:
        """Move the pointer back (or forward) to a recorded snapshot."""

        stored_model = self._fetch_game(request.game_id)
        game = GameHistory.from_model(stored_model)
        game.jump_to(request.move)

        after_jump = game.to_model()
        self.repo.update_game(request.game_id, after_jump)
        return self._create_game_response(request.game_id, after_jump)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""

        game = GameHistory.from_model(model)
        winner = game.winner()
        return GameResponse(
            game_id=game_id,
            squares=[cell.to_mark() for cell in game.current_board().cells],
            current_move=game.current_move,
            next_player=game.current_turn().to_mark(),
            winner=winner.to_mark() if winner is not None else None,
            status=status_label(game),
            moves=[
                MoveEntry(move=move, description=description)
                for move, description in jump_list(game)
            ],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            logger.warning("Game %s not found", game_id)
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
