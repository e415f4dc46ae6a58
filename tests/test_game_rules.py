"""Tests for Tic-Tac-Toe game rules."""

import numpy as np
import pytest

from puremcts.exceptions import (
    CellOccupiedError,
    GameOverError,
    MoveError,
    OutOfBoundsError,
)
from puremcts.games import GameResult, Player, get_game, list_games
from puremcts.games.tictactoe import (
    TicTacToeGame,
    TicTacToeState,
    state_from_string,
)


@pytest.fixture
def game():
    return TicTacToeGame()


def play_moves(game, moves):
    state = game.initial_state()
    for move in moves:
        state = game.apply(state, move)
    return state


class TestInitialState:
    def test_empty_board(self, game):
        state = game.initial_state()
        assert state.board.shape == (3, 3)
        assert np.all(state.board == 0)
        assert game.current_mover(state) is Player.FIRST
        assert game.classify(state) is GameResult.ONGOING

    def test_all_moves_legal(self, game):
        moves = game.legal_moves(game.initial_state())
        assert moves == [(r, c) for r in range(3) for c in range(3)]


class TestApply:
    def test_turn_switch(self, game):
        state = game.apply(game.initial_state(), (0, 0))
        assert game.current_mover(state) is Player.SECOND
        assert state.board[0, 0] == Player.FIRST.value

    def test_original_state_unchanged(self, game):
        state = game.initial_state()
        game.apply(state, (1, 1))
        assert np.all(state.board == 0)
        assert game.current_mover(state) is Player.FIRST

    def test_board_is_read_only(self, game):
        state = game.initial_state()
        with pytest.raises(ValueError):
            state.board[0, 0] = 1

    def test_out_of_bound(self, game):
        with pytest.raises(OutOfBoundsError):
            game.apply(game.initial_state(), (5, 1))
        with pytest.raises(OutOfBoundsError):
            game.apply(game.initial_state(), (-1, 0))

    def test_non_empty_cell(self, game):
        state = game.apply(game.initial_state(), (0, 0))
        with pytest.raises(CellOccupiedError):
            game.apply(state, (0, 0))

    def test_move_errors_are_value_errors(self, game):
        with pytest.raises(ValueError):
            game.apply(game.initial_state(), (3, 3))

    def test_play_after_game_over(self, game):
        state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        with pytest.raises(GameOverError):
            game.apply(state, (2, 2))
        assert issubclass(GameOverError, MoveError)


class TestWinDetection:
    def test_x_won_horizontal(self, game):
        state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1)])
        assert game.classify(state) is GameResult.ONGOING

        state = game.apply(state, (0, 2))
        assert game.classify(state) is GameResult.FIRST_WON
        assert game.classify(state).winner is Player.FIRST

    def test_o_won_vertical(self, game):
        state = play_moves(game, [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0)])
        assert game.classify(state) is GameResult.ONGOING

        state = game.apply(state, (2, 1))
        assert game.classify(state) is GameResult.SECOND_WON

    def test_x_won_first_diagonal(self, game):
        state = play_moves(game, [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)])
        assert game.classify(state) is GameResult.FIRST_WON

    def test_x_won_second_diagonal(self, game):
        state = play_moves(game, [(0, 2), (0, 0), (1, 1), (0, 1), (2, 0)])
        assert game.classify(state) is GameResult.FIRST_WON

    def test_no_legal_moves_after_win(self, game):
        state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        assert game.is_terminal(state)
        assert game.legal_moves(state) == []

    def test_mover_defined_on_terminal_state(self, game):
        state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        assert game.current_mover(state) is Player.SECOND


class TestTie:
    def test_tie(self, game):
        moves = [(2, 0), (1, 1), (2, 2), (2, 1), (1, 2), (1, 0), (0, 1), (0, 2)]
        state = play_moves(game, moves)
        assert game.classify(state) is GameResult.ONGOING

        state = game.apply(state, (0, 0))
        assert game.classify(state) is GameResult.TIE
        assert game.classify(state).winner is None
        assert game.legal_moves(state) == []


class TestStateValue:
    def test_transpositions_are_equal(self, game):
        a = play_moves(game, [(0, 0), (1, 1), (2, 2)])
        b = play_moves(game, [(2, 2), (1, 1), (0, 0)])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_side_to_move_matters(self):
        board = np.zeros((3, 3), dtype=np.int8)
        assert TicTacToeState(board, Player.FIRST) != TicTacToeState(board, Player.SECOND)

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            TicTacToeState(board=np.zeros((3, 4), dtype=np.int8))


class TestParsing:
    def test_parse_move(self, game):
        assert game.parse_move("1, 2") == (1, 2)
        assert game.parse_move(" 0,0\n") == (0, 0)

    def test_parse_wrong_count(self, game):
        with pytest.raises(ValueError, match="must be 2"):
            game.parse_move("1")

    def test_parse_not_numbers(self, game):
        with pytest.raises(ValueError, match="non-negative"):
            game.parse_move("a, b")
        with pytest.raises(ValueError, match="non-negative"):
            game.parse_move("-1, 0")

    def test_state_from_string(self, game):
        state = state_from_string("X.O|.X.|..O")
        assert state.board[0, 0] == Player.FIRST.value
        assert state.board[0, 2] == Player.SECOND.value
        assert game.current_mover(state) is Player.FIRST

        state = state_from_string("X........")
        assert game.current_mover(state) is Player.SECOND

    def test_state_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            state_from_string("X..")
        with pytest.raises(ValueError):
            state_from_string("XX.......")
        with pytest.raises(ValueError):
            state_from_string("Z........")


class TestRender:
    def test_render_empty(self, game):
        output = game.render(game.initial_state())
        assert "." in output
        assert "X" not in output
        assert "O" not in output

    def test_render_with_pieces(self, game):
        state = play_moves(game, [(1, 1), (0, 0)])
        output = game.render(state)
        assert "X" in output
        assert "O" in output
        assert output.count("-----------") == 2


class TestRegistry:
    def test_tictactoe_registered(self):
        assert "tictactoe" in list_games()
        assert isinstance(get_game("tictactoe"), TicTacToeGame)

    def test_unknown_game(self):
        with pytest.raises(ValueError, match="Unknown game"):
            get_game("chess")
