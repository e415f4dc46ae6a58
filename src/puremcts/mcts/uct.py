"""
UCT selection.

UCT score of a child, seen from its parent:
U = W / N + C * sqrt(ln(N_parent) / N)

Unvisited children (N = 0) score +inf so every child is tried once
before any sibling is revisited. Equal scores go to the earliest child
in legal-move order.
"""

from __future__ import annotations

import math
from typing import Optional

from .node import Node, SearchTree

EXPLORATION = math.sqrt(2)


def uct_score(
    wins: float,
    visits: float,
    parent_visits: float,
    exploration: float = EXPLORATION,
) -> float:
    """Score a child with `wins` out of `visits` under a parent with `parent_visits`."""
    if visits == 0:
        return math.inf
    return wins / visits + exploration * math.sqrt(math.log(parent_visits) / visits)


def best_child(tree: SearchTree, node: Node, exploration: float = EXPLORATION) -> Node:
    """Child of an expanded node with the highest UCT score."""
    best = None
    best_score = -math.inf
    for child in tree.children_of(node.index):
        score = uct_score(child.wins, child.visits, node.visits, exploration)
        if score > best_score:
            best, best_score = child, score
    return best


def select(
    tree: SearchTree,
    exploration: float = EXPLORATION,
    start: Optional[int] = None,
) -> Node:
    """
    Descend from `start` (the root by default) to the first node without children.

    Raises:
        EmptyTreeError: if the tree has no root
    """
    root = tree.root
    node = root if start is None else tree.node(start)
    while node.children:
        node = best_child(tree, node, exploration)
    return node
