"""Unit tests for BitXO game logic."""

import pytest

from bitxo.bitboard import from_squares
from bitxo.game import (
    GameState,
    PlayerType,
    TicTacToeGame,
    apply_move,
    evaluate_state,
    resolve,
)


def test_new_game_assigns_complementary_signs():
    game = TicTacToeGame.new(0)
    assert game.human.sign == "o"
    assert game.ai.sign == "x"
    assert game.human.player_type is PlayerType.HUMAN
    assert game.ai.player_type is PlayerType.AI
    assert game.player_to_move is game.ai
    assert game.cells == [str(i) for i in range(1, 10)]


def test_x_moves_first():
    game = TicTacToeGame.new(1)
    assert game.player_to_move is game.human


def test_rejects_unknown_sign():
    with pytest.raises(ValueError):
        TicTacToeGame.new(2)


def test_play_move_updates_masks_and_cells():
    game = TicTacToeGame.new(1)
    game.play_move(4)
    assert game.human.board == from_squares([4])
    assert game.cells[4] == "x"
    assert game.player_to_move is game.ai
    assert 4 not in game.available_moves()
    assert game.state is GameState.PLAYING


def test_rejects_taken_square():
    game = TicTacToeGame.new(1)
    game.play_move(0)
    with pytest.raises(ValueError):
        game.play_move(0)


def test_rejects_square_off_board():
    game = TicTacToeGame.new(1)
    with pytest.raises(ValueError):
        game.play_move(9)


def test_human_win_ends_game():
    game = TicTacToeGame.new(1)
    for square in (0, 3, 1, 4, 2):
        game.play_move(square)
    assert game.state is GameState.HUMAN_WON
    assert game.is_over
    assert game.available_moves() == []
    with pytest.raises(ValueError):
        game.play_move(5)


def test_full_board_without_line_is_draw():
    game = TicTacToeGame.new(1)
    for square in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        game.play_move(square)
    assert game.state is GameState.DRAW


def test_resolve_reports_winner_by_identity():
    line = from_squares([2, 4, 6])
    other = from_squares([0, 1])
    assert resolve(line, True, other) is GameState.HUMAN_WON
    assert resolve(line, False, other) is GameState.COMPUTER_WON
    assert evaluate_state(from_squares([0]), True, from_squares([4])) is GameState.PLAYING


def test_resolve_win_on_last_square_beats_draw():
    mover = from_squares([0, 1, 2, 5, 7])
    other = from_squares([3, 4, 6, 8])
    assert resolve(mover, False, other) is GameState.COMPUTER_WON


def test_apply_move_sets_bit():
    assert apply_move(from_squares([1]), 7) == from_squares([1, 7])


def test_render_draws_three_rows():
    game = TicTacToeGame.new(1)
    game.play_move(0)
    assert game.render() == (
        " x | 2 | 3 \n---|---|---\n 4 | 5 | 6 \n---|---|---\n 7 | 8 | 9 \n"
    )
