"""
GameHistory is the entrypoint into the domain layer for the service layer.

It owns every snapshot played so far plus a pointer to the one currently shown.
Whose turn it is and who won are never stored: both get derived from the pointer and the current snapshot.
The pointer can be moved back to any earlier snapshot. Playing from there throws away the snapshots after it.
"""

import logging
from threading import RLock
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidArgumentError, InvalidBoardError
from src.core.models import GameModel
from src.tictactoe.board import Board, is_valid_cell_index
from src.tictactoe.cell import Cell
from src.tictactoe.winner import detect_winner

logger = logging.getLogger(__name__)


def mark_for_move(move: int) -> Cell:
    """X plays from even positions, O from odd ones."""
    return Cell.X if move % 2 == 0 else Cell.O


class GameHistory:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    def __init__(self) -> None:
        # history and pointer always change together, under this lock
        self._lock = RLock()
        self._history: list[Board] = [Board.empty()]
        self._pointer = 0

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild from stored data, refusing anything that normal play could not have produced."""
        try:
            boards = [Board.from_string(encoded) for encoded in model.history]
        except InvalidBoardError as e:
            raise GameStateError(f"Stored history holds an invalid board: {e}") from e

        _validate_history(boards)
        if not 0 <= model.current_move < len(boards):
            raise GameStateError(
                f"Current move {model.current_move} outside of history with {len(boards)} entries."
            )

        game = cls()
        game._history = boards
        game._pointer = model.current_move
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        with self._lock:
            return GameModel(
                history=[board.to_string() for board in self._history],
                current_move=self._pointer,
            )

    # --- QUERIES (polled by the renderer after every intent) ---

    @property
    def current_move(self) -> int:
        with self._lock:
            return self._pointer

    @property
    def boards(self) -> tuple[Board, ...]:
        with self._lock:
            return tuple(self._history)

    def board_at(self, move: int) -> Board:
        with self._lock:
            self._assert_valid_move(move)
            return self._history[move]

    def current_board(self) -> Board:
        with self._lock:
            return self._history[self._pointer]

    def current_turn(self) -> Cell:
        with self._lock:
            return mark_for_move(self._pointer)

    def winner(self) -> Optional[Cell]:
        return detect_winner(self.current_board())

    def move_count(self) -> int:
        with self._lock:
            return len(self._history)

    # --- INTENTS ---

    def play(self, cell: int) -> bool:
        """
        Place the current player's mark on `cell`.
        ----

        Returns False (and changes nothing) when the game already has a winner or the cell is taken.
        Any snapshots after the current pointer are discarded before the new one is appended.
        """
        if not is_valid_cell_index(cell):
            raise InvalidArgumentError(f"Cell must be an integer in 0..8, got {cell!r}.")

        with self._lock:
            board = self._history[self._pointer]
            if detect_winner(board) is not None:
                logger.debug("Ignored play on cell %d: game already won.", cell)
                return False
            if not board.is_empty(cell):
                logger.debug("Ignored play on cell %d: cell is occupied.", cell)
                return False

            mark = mark_for_move(self._pointer)
            discarded = len(self._history) - self._pointer - 1
            self._history = self._history[: self._pointer + 1]
            self._history.append(board.with_mark(cell, mark))
            self._pointer = len(self._history) - 1
            new_move = self._pointer

        if discarded:
            logger.debug("Discarded %d future move(s).", discarded)
        logger.debug("%s played cell %d (move #%d).", mark.name, cell, new_move)
        return True

    def jump_to(self, move: int) -> None:
        """Show snapshot `move` again. History itself stays untouched."""
        with self._lock:
            self._assert_valid_move(move)
            self._pointer = move
        logger.debug("Jumped to move #%d.", move)

    # --- Internal helpers ---

    def _assert_valid_move(self, move: int) -> None:
        if (
            not isinstance(move, int)
            or isinstance(move, bool)
            or not 0 <= move < len(self._history)
        ):
            raise InvalidArgumentError(
                f"Move must be an integer in 0..{len(self._history) - 1}, got {move!r}."
            )


def _validate_history(boards: list[Board]) -> None:
    """Each snapshot must be its predecessor plus exactly one mark, alternating X and O."""
    if not boards:
        raise GameStateError("History must hold at least the starting board.")
    if boards[0] != Board.empty():
        raise GameStateError("History must start from an empty board.")

    for move, (before, after) in enumerate(zip(boards, boards[1:])):
        changed = [
            index
            for index, (old, new) in enumerate(zip(before.cells, after.cells))
            if old != new
        ]
        if len(changed) != 1:
            raise GameStateError(
                f"Move #{move + 1} must change exactly one cell, changed {len(changed)}."
            )
        index = changed[0]
        if before.cells[index] != Cell.EMPTY:
            raise GameStateError(f"Move #{move + 1} overwrites occupied cell {index}.")
        if after.cells[index] != mark_for_move(move):
            raise GameStateError(
                f"Move #{move + 1} should place {mark_for_move(move).name}, placed {after.cells[index].name}."
            )
        if detect_winner(before) is not None:
            raise GameStateError(f"Move #{move + 1} was played after the game was won.")
