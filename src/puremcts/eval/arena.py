"""
Arena for evaluating agents through head-to-head matches.

An agent is any callable taking (game, state) and returning a move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional
import numpy as np

from ..games.base import Game, GameResult, Player
from ..mcts import MCTS, random_move
from ..mcts.uct import EXPLORATION

logger = logging.getLogger(__name__)

Agent = Callable[[Game, Any], Any]


def random_agent(rng: Optional[np.random.Generator] = None) -> Agent:
    """Agent playing uniformly random legal moves."""
    rng = rng if rng is not None else np.random.default_rng()

    def play(game: Game, state: Any) -> Any:
        return random_move(game, state, rng)

    return play


def mcts_agent(
    game: Game,
    iterations: int,
    exploration: float = EXPLORATION,
    temperature: float = 0.0,
    rng: Optional[np.random.Generator] = None,
    time_budget: Optional[float] = None,
) -> Agent:
    """Agent searching a fresh tree for every move."""
    mcts = MCTS(game, exploration=exploration, rng=rng)

    def play(game: Game, state: Any) -> Any:
        tree = mcts.search(state, iterations=iterations, time_budget=time_budget)
        return mcts.select_move(tree, temperature)

    return play


def play_game(game: Game, first: Agent, second: Agent) -> tuple[GameResult, int]:
    """
    Play one game to the end.

    Args:
        game: Game rules
        first: Agent moving for Player.FIRST
        second: Agent moving for Player.SECOND

    Returns:
        (result, num_moves)
    """
    agents = {Player.FIRST: first, Player.SECOND: second}
    state = game.initial_state()
    num_moves = 0

    while not game.is_terminal(state):
        agent = agents[game.current_mover(state)]
        state = game.apply(state, agent(game, state))
        num_moves += 1

    return game.classify(state), num_moves


@dataclass
class ArenaResult:
    """Results from arena evaluation."""

    wins: int
    losses: int
    draws: int
    total_games: int
    win_rate: float

    @property
    def score(self) -> float:
        """Win rate counting draws as half."""
        return (self.wins + 0.5 * self.draws) / self.total_games if self.total_games > 0 else 0.0


class Arena:
    """
    Arena for agent evaluation matches.

    Args:
        game: Game instance
    """

    def __init__(self, game: Game):
        self.game = game

    def evaluate(
        self,
        candidate: Agent,
        opponent: Agent,
        num_games: int = 20,
        progress_callback: Optional[Callable[[int, str], None]] = None,
    ) -> ArenaResult:
        """
        Evaluate candidate against opponent.

        Plays num_games matches, alternating who goes first.

        Args:
            candidate: Agent being evaluated
            opponent: Reference agent
            num_games: Number of games to play
            progress_callback: Optional callback(games_completed, result)

        Returns:
            ArenaResult from candidate's perspective
        """
        wins = 0
        losses = 0
        draws = 0

        for i in range(num_games):
            # Alternate who plays first
            if i % 2 == 0:
                candidate_side = Player.FIRST
                result, num_moves = play_game(self.game, candidate, opponent)
            else:
                candidate_side = Player.SECOND
                result, num_moves = play_game(self.game, opponent, candidate)

            if result.winner is candidate_side:
                wins += 1
                outcome = "W"
            elif result.winner is None:
                draws += 1
                outcome = "D"
            else:
                losses += 1
                outcome = "L"

            logger.debug("game %d: %s as %s in %d moves",
                         i + 1, outcome, candidate_side.name, num_moves)

            if progress_callback:
                progress_callback(i + 1, outcome)

        total = wins + losses + draws
        win_rate = wins / total if total > 0 else 0.0

        return ArenaResult(
            wins=wins,
            losses=losses,
            draws=draws,
            total_games=total,
            win_rate=win_rate,
        )
