"""Node expansion: one child per legal move."""

from __future__ import annotations

from .node import Node, SearchTree
from ..exceptions import AlreadyExpandedError, MoveError, SearchInvariantError
from ..games.base import Game


def expand(tree: SearchTree, index: int, game: Game) -> list[Node]:
    """
    Create a child of node `index` for every legal move of its state.

    A terminal state has no legal moves, so expanding it creates nothing
    and the node stays a leaf. Check game.is_terminal() to tell such a
    leaf apart from an unexpanded one.

    Returns:
        The new children, in legal-move order

    Raises:
        AlreadyExpandedError: if the node already has children
        SearchInvariantError: if the game rejects one of its own legal moves
    """
    node = tree.node(index)
    if node.children:
        raise AlreadyExpandedError(index, len(node.children))

    if game.is_terminal(node.state):
        return []

    children = []
    for move in game.legal_moves(node.state):
        try:
            child_state = game.apply(node.state, move)
        except MoveError as e:
            raise SearchInvariantError(
                f"Legal move {move!r} was rejected while expanding node {index}"
            ) from e
        children.append(tree.add_child(index, child_state, move))

    return children
