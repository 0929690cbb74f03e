"""Unit tests for /src/tictactoe/presentation.py"""

from typing import Callable

import pytest

from src.tictactoe.board import Board
from src.tictactoe.history import GameHistory
from src.tictactoe.presentation import (
    jump_list,
    move_description,
    render_board,
    status_label,
)

PlayFn = Callable[..., GameHistory]


@pytest.mark.parametrize(
    "cells, expected",
    [
        ((), "Next player: X"),
        ((4,), "Next player: O"),
        ((4, 0), "Next player: X"),
        ((0, 1, 3, 4, 6), "Winner: X"),
        ((8, 0, 4, 1, 5, 2), "Winner: O"),
        ((0, 1, 2, 4, 3, 5, 7, 6, 8), "Next player: O"),  # draw: no special label
    ],
)
def test_status_label(game_after_moves: PlayFn, cells: tuple[int, ...], expected: str) -> None:
    assert status_label(game_after_moves(*cells)) == expected


def test_status_label_follows_jumps(game_after_moves: PlayFn) -> None:
    game = game_after_moves(0, 1, 3, 4, 6)
    game.jump_to(3)
    assert status_label(game) == "Next player: O"


def test_move_description() -> None:
    assert move_description(0) == "Go to game start"
    assert move_description(1) == "Go to move #1"
    assert move_description(9) == "Go to move #9"


def test_jump_list(game_after_moves: PlayFn) -> None:
    assert jump_list(GameHistory()) == [(0, "Go to game start")]
    assert jump_list(game_after_moves(4, 0)) == [
        (0, "Go to game start"),
        (1, "Go to move #1"),
        (2, "Go to move #2"),
    ]


def test_jump_list_lists_future_moves_after_jump(game_after_moves: PlayFn) -> None:
    game = game_after_moves(4, 0, 8)
    game.jump_to(1)
    assert len(jump_list(game)) == 4


def test_render_board() -> None:
    board = Board.from_string("XO..X...O")
    assert render_board(board) == "X | O |\n---------\n  | X |\n---------\n  |   | O"


def test_render_empty_board() -> None:
    assert render_board(Board.empty()).splitlines() == [
        "  |   |",
        "---------",
        "  |   |",
        "---------",
        "  |   |",
    ]
