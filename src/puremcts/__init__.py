"""
puremcts - Monte Carlo Tree Search move recommendation.

Recommends moves for deterministic two-player perfect-information games
by UCT tree search with uniformly random rollouts. No neural network,
no training: the tree statistics are the whole evaluation.

Supported games:
- Tic-Tac-Toe

Usage:
    from puremcts.games import get_game
    from puremcts.mcts import MCTS

    game = get_game('tictactoe')
    mcts = MCTS(game, seed=0)

    tree = mcts.search(game.initial_state(), iterations=500)
    move = mcts.recommend_move(tree)
"""

__version__ = "0.1.0"

from . import games
from . import mcts
from . import play
from . import eval

__all__ = [
    "games",
    "mcts",
    "play",
    "eval",
    "__version__",
]
