"""Tests for difficulty presets, config and the CLI."""

import pytest
from typer.testing import CliRunner

from puremcts.cli import app
from puremcts.games import GameSpec
from puremcts.games.tictactoe import TicTacToeGame
from puremcts.play import (
    ROLLOUT_BUDGETS,
    Difficulty,
    DifficultyConfig,
    get_difficulty_config,
)
from puremcts.utils import Config, MCTSConfig, get_default_config


LEVELS = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD, Difficulty.IMPOSSIBLE]


class TestDifficulty:
    def test_presets_get_stronger(self):
        for spec in (None, TicTacToeGame().spec):
            configs = [get_difficulty_config(level, spec) for level in LEVELS]
            iterations = [c.iterations for c in configs]
            temperatures = [c.temperature for c in configs]
            assert iterations == sorted(iterations)
            assert temperatures == sorted(temperatures, reverse=True)

    def test_tictactoe_iterations(self):
        spec = TicTacToeGame().spec
        iterations = [get_difficulty_config(level, spec).iterations for level in LEVELS]
        assert iterations == [5, 30, 200, 1000]

    def test_budget_spread_over_move_slots(self):
        wide = GameSpec(name="wide", board_shape=(2, 9), num_moves=18)
        narrow = GameSpec(name="narrow", board_shape=(3, 3), num_moves=9)
        for level in LEVELS:
            assert (get_difficulty_config(level, wide).iterations * 2
                    >= get_difficulty_config(level, narrow).iterations)
            assert (get_difficulty_config(level, wide).iterations
                    < get_difficulty_config(level, narrow).iterations)

    def test_without_spec_uses_rollout_budget(self):
        config = get_difficulty_config(Difficulty.HARD)
        rollouts, temperature, _ = ROLLOUT_BUDGETS[Difficulty.HARD]
        assert config.iterations == rollouts
        assert config.temperature == temperature
        assert config.name == "Hard"

    def test_never_below_one_iteration(self):
        huge = GameSpec(name="huge", board_shape=(100, 100), num_moves=10000)
        assert get_difficulty_config(Difficulty.EASY, huge).iterations == 1

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            DifficultyConfig(iterations=0, temperature=0.5)
        with pytest.raises(ValueError):
            DifficultyConfig(iterations=10, temperature=-1.0)


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert config.game == "tictactoe"
        assert config.mcts.iterations == 1000
        assert config.mcts.time_budget is None
        assert config.seed is None

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        config = Config(mcts=MCTSConfig(iterations=50, exploration=1.0), seed=7)
        config.save(str(path))

        loaded = Config.load(str(path))
        assert loaded == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("mcts:\n  iterations: 20\narena:\n  opponent: mcts\n")

        config = Config.load(str(path))
        assert config.mcts.iterations == 20
        assert config.arena.opponent == "mcts"
        assert config.play.difficulty == "medium"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert Config.load(str(path)) == Config()


class TestCLI:
    def test_list_games(self):
        result = CliRunner().invoke(app, ["list-games"])
        assert result.exit_code == 0
        assert "tictactoe" in result.output

    def test_recommend_winning_move(self):
        result = CliRunner().invoke(
            app, ["recommend", "XX.|OO.|...", "--iterations", "300", "--seed", "0"]
        )
        assert result.exit_code == 0
        assert "Recommended move for X: (0, 2)" in result.output

    def test_recommend_rejects_bad_position(self):
        result = CliRunner().invoke(app, ["recommend", "XXX"])
        assert result.exit_code == 1

    def test_recommend_rejects_finished_game(self):
        result = CliRunner().invoke(app, ["recommend", "XXX|OO.|..."])
        assert result.exit_code == 1

    def test_arena(self):
        result = CliRunner().invoke(
            app, ["arena", "--games", "2", "--iterations", "20", "--seed", "0"]
        )
        assert result.exit_code == 0
        assert "Arena Results" in result.output

    def test_recommend_rejects_zero_iterations(self):
        result = CliRunner().invoke(app, ["recommend", ".........", "-n", "0"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "at least 1" in result.output

    def test_arena_honours_zero_games(self):
        result = CliRunner().invoke(app, ["arena", "--games", "0", "--seed", "0"])
        assert result.exit_code == 0
        assert "0 games" in result.output

    def test_arena_rejects_zero_iterations(self):
        result = CliRunner().invoke(app, ["arena", "--games", "1", "--iterations", "0"])
        assert result.exit_code == 1


class TestPlayCommand:
    def test_two_players(self):
        moves = [
            "0, 0",  # X
            "3, 0",  # O: out of bounds
            "0, 0",  # O: occupied
            "a, b",  # O: not numbers
            "1, 0",  # O
            "0, 1",  # X
            "1, 1",  # O
            "0, 2",  # X completes the top row
        ]
        result = CliRunner().invoke(
            app, ["play", "--opponent", "human"], input="\n".join(moves) + "\n"
        )

        assert result.exit_code == 0
        assert "Select cell for player X in format row_index, col_index" in result.output
        assert "Select cell for player O in format row_index, col_index" in result.output
        assert "Index out of bound. Try again." in result.output
        assert "Cannot mark a non empty cell. Try again." in result.output
        assert "Must enter valid non-negative numbers separated by a comma." in result.output
        assert "X wins!" in result.output
        assert result.output.rstrip().endswith("Game Over!")

    def test_against_engine(self):
        # Out of bounds, then every cell in order; taken cells are rejected
        cells = ["9, 9", "0, 0"] + [f"{r}, {c}" for r in range(3) for c in range(3)]
        result = CliRunner().invoke(
            app,
            ["play", "--seed", "0", "--difficulty", "easy", "--first"],
            input="\n".join(cells) + "\n",
        )

        assert result.exit_code == 0
        assert "You are X, AI is O" in result.output
        assert "Index out of bound. Try again." in result.output
        assert "Cannot mark a non empty cell. Try again." in result.output
        assert "AI played:" in result.output
        assert "Game Over!" in result.output

    def test_rejects_unknown_opponent(self):
        result = CliRunner().invoke(app, ["play", "--opponent", "robot"])
        assert result.exit_code == 1
        assert "Invalid opponent" in result.output
