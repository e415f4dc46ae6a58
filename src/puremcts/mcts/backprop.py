"""
Backpropagation of rollout results.

Each node on the path from the simulated node to the root gets one
visit. Its win credit is judged against the player on move at that
node: the node was reached by the opponent's move, so the node scores
when the player on move goes on to lose.
"""

from __future__ import annotations

from .node import SearchTree
from ..exceptions import InvalidBackpropagationResultError
from ..games.base import Game, GameResult, Player

WIN = 1.0
TIE = 0.5
LOSS = 0.0


def credit_for(result: GameResult, mover: Player) -> float:
    """Win credit for a node whose state has `mover` on move."""
    if result is GameResult.TIE:
        return TIE
    if result.winner is mover:
        return LOSS
    return WIN


def backpropagate(
    tree: SearchTree,
    index: int,
    result: GameResult,
    game: Game,
) -> None:
    """
    Fold a terminal result into node `index` and every ancestor.

    Raises:
        InvalidBackpropagationResultError: if `result` is not terminal
    """
    if not result.is_terminal:
        raise InvalidBackpropagationResultError(result)

    for node in tree.ancestry(index):
        node.visits += 1
        node.wins += credit_for(result, game.current_mover(node.state))
