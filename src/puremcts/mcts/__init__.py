"""
Monte Carlo Tree Search module.
"""

from .node import NO_PARENT, Node, SearchTree
from .uct import EXPLORATION, best_child, select, uct_score
from .expansion import expand
from .rollout import random_move, simulate
from .backprop import backpropagate, credit_for
from .search import MCTS

__all__ = [
    "NO_PARENT",
    "Node",
    "SearchTree",
    "EXPLORATION",
    "best_child",
    "select",
    "uct_score",
    "expand",
    "random_move",
    "simulate",
    "backpropagate",
    "credit_for",
    "MCTS",
]
