"""
MCTS search with UCT selection and random rollouts.

One iteration:
1. Select: descend from the root by UCT until reaching a leaf
2. Expand: create a child per legal move (skipped for terminal leaves)
3. Simulate: random rollout from every new child (or the terminal leaf)
4. Backpropagate: fold each rollout result into the path to the root
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional
import numpy as np

from .backprop import backpropagate
from .expansion import expand
from .node import SearchTree
from .rollout import simulate
from .uct import EXPLORATION, select
from ..games.base import Game

logger = logging.getLogger(__name__)


class MCTS:
    """
    Monte Carlo Tree Search with UCT.

    Args:
        game: Game instance
        exploration: UCT exploration constant C (default sqrt(2))
        rng: Random generator used for rollouts and move sampling
        seed: Seed for a fresh generator when rng is not given
    """

    def __init__(
        self,
        game: Game,
        exploration: float = EXPLORATION,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        self.game = game
        self.exploration = exploration
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def new_tree(self, state: Any) -> SearchTree:
        """Create a tree rooted at `state`."""
        return SearchTree(state)

    def run_iteration(self, tree: SearchTree) -> int:
        """
        Run one select -> expand -> simulate -> backpropagate cycle.

        Returns:
            Number of rollouts backpropagated
        """
        leaf = select(tree, self.exploration)

        if self.game.is_terminal(leaf.state):
            targets = [leaf]
        else:
            targets = expand(tree, leaf.index, self.game)

        for node in targets:
            result = simulate(self.game, node.state, self.rng)
            backpropagate(tree, node.index, result, self.game)

        return len(targets)

    def search(
        self,
        state: Any,
        iterations: Optional[int] = None,
        time_budget: Optional[float] = None,
        tree: Optional[SearchTree] = None,
    ) -> SearchTree:
        """
        Run MCTS from the given state.

        Stops after `iterations` iterations or once `time_budget` seconds
        have passed, whichever comes first.

        Args:
            state: Starting game state (ignored when `tree` is given)
            iterations: Maximum number of iterations
            time_budget: Maximum wall-clock seconds
            tree: Optional existing tree to keep searching

        Returns:
            Search tree with updated statistics
        """
        if iterations is None and time_budget is None:
            raise ValueError("Either iterations or time_budget must be given")
        if iterations is not None and iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        if time_budget is not None and time_budget <= 0:
            raise ValueError(f"time_budget must be positive, got {time_budget}")

        if tree is None:
            tree = self.new_tree(state)

        start = time.perf_counter()
        deadline = start + time_budget if time_budget is not None else None
        done = 0
        rollouts = 0

        while iterations is None or done < iterations:
            if deadline is not None and time.perf_counter() >= deadline:
                break
            rollouts += self.run_iteration(tree)
            done += 1

        logger.debug(
            "search: %d iterations, %d rollouts, %d nodes in %.3fs",
            done, rollouts, len(tree), time.perf_counter() - start,
        )
        return tree

    def recommend_move(self, tree: SearchTree) -> Any:
        """
        Move of the most visited root child.

        Visit counts are more robust than win rates, which are noisy for
        rarely visited children. Ties go to the earliest child.
        """
        children = tree.children_of(tree.root.index)
        if not children:
            raise ValueError("Root has no children; run at least one iteration")
        best = max(children, key=lambda child: child.visits)
        return best.move

    def get_policy(self, tree: SearchTree, temperature: float = 1.0) -> np.ndarray:
        """
        Get a distribution over the root children from visit counts.

        Args:
            temperature: Temperature for exploration.
                - tau=0: argmax (greedy)
                - tau=1: proportional to visits
                - tau>1: more uniform

        Returns:
            Probabilities aligned with the root's children
        """
        children = tree.children_of(tree.root.index)
        if not children:
            raise ValueError("Root has no children; run at least one iteration")
        visits = np.array([child.visits for child in children], dtype=np.float64)

        if temperature == 0:
            policy = np.zeros(len(children))
            policy[int(np.argmax(visits))] = 1.0
            return policy

        counts = visits ** (1.0 / temperature)
        total = counts.sum()
        if total > 0:
            return counts / total
        # No visits yet, uniform
        return np.full(len(children), 1.0 / len(children))

    def select_move(self, tree: SearchTree, temperature: float = 0.0) -> Any:
        """
        Pick a root move, sampling by visit counts unless temperature is 0.
        """
        if temperature == 0:
            return self.recommend_move(tree)
        policy = self.get_policy(tree, temperature)
        choice = int(self.rng.choice(len(policy), p=policy))
        return tree.children_of(tree.root.index)[choice].move
