"""
Random playouts.

A rollout plays uniformly random legal moves from a state until the game
ends. States are immutable, so the rollout walks its own chain of
successor states and the tree is never touched.
"""

from __future__ import annotations

from typing import Any, Optional
import numpy as np

from ..exceptions import MoveError, SearchInvariantError
from ..games.base import Game, GameResult


def random_move(game: Game, state: Any, rng: np.random.Generator) -> Any:
    """Pick one legal move uniformly at random."""
    moves = game.legal_moves(state)
    return moves[int(rng.integers(len(moves)))]


def simulate(
    game: Game,
    state: Any,
    rng: Optional[np.random.Generator] = None,
) -> GameResult:
    """
    Play random moves from `state` to the end of the game.

    Args:
        game: Game rules
        state: Starting state (not modified)
        rng: Random generator; pass a seeded one for reproducible rollouts

    Returns:
        Terminal result of the playout (never GameResult.ONGOING)
    """
    if rng is None:
        rng = np.random.default_rng()

    result = game.classify(state)
    while not result.is_terminal:
        move = random_move(game, state, rng)
        try:
            state = game.apply(state, move)
        except MoveError as e:
            raise SearchInvariantError(
                f"Legal move {move!r} was rejected during a rollout"
            ) from e
        result = game.classify(state)

    return result
