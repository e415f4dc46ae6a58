"""
MCTS tree data structure.

Nodes live in an arena (a list owned by SearchTree) and refer to each
other by index:
- children: indices of the nodes created when this node was expanded
- parent: index of the node this one was reached from (NO_PARENT for root)

Ownership only runs downward through the arena, so there are no
reference cycles between parents and children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from ..exceptions import EmptyTreeError

NO_PARENT = -1
ROOT = 0


@dataclass
class Node:
    """
    MCTS tree node.

    wins are credited to the player who made the move leading here,
    so a parent picks the child with the best win rate for itself.
    """

    index: int
    state: Any  # Game state
    parent: int = NO_PARENT
    move: Any = None  # Move that led to this node

    # Statistics, only ever incremented by backpropagation
    visits: float = 0.0
    wins: float = 0.0

    # Child node indices, in legal-move order
    children: list[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent == NO_PARENT

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def win_rate(self) -> float:
        """Mean score wins / visits, 0.0 when unvisited."""
        if self.visits == 0:
            return 0.0
        return self.wins / self.visits

    def __repr__(self) -> str:
        return (
            f"Node(index={self.index}, move={self.move}, "
            f"visits={self.visits:g}, wins={self.wins:g}, "
            f"children={len(self.children)})"
        )


class SearchTree:
    """
    Arena of MCTS nodes.

    Args:
        root_state: Optional state for the root node. Without it the tree
            is empty until new_root() is called.
    """

    def __init__(self, root_state: Any = None):
        self._nodes: list[Node] = []
        if root_state is not None:
            self.new_root(root_state)

    def new_root(self, state: Any) -> Node:
        """Discard all nodes and start over from a fresh root."""
        self._nodes = [Node(index=ROOT, state=state)]
        return self._nodes[ROOT]

    @property
    def root(self) -> Node:
        if not self._nodes:
            raise EmptyTreeError()
        return self._nodes[ROOT]

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def add_child(self, parent: int, state: Any, move: Any) -> Node:
        """Create a node for `state` reached from `parent` by `move`."""
        child = Node(
            index=len(self._nodes),
            state=state,
            parent=parent,
            move=move,
        )
        self._nodes.append(child)
        self._nodes[parent].children.append(child.index)
        return child

    def children_of(self, index: int) -> list[Node]:
        return [self._nodes[i] for i in self._nodes[index].children]

    def parent_of(self, index: int) -> Optional[Node]:
        """Parent node, or None for the root."""
        parent = self._nodes[index].parent
        if parent == NO_PARENT:
            return None
        return self._nodes[parent]

    def ancestry(self, index: int) -> Iterator[Node]:
        """Yield the node at `index`, then each ancestor up to the root."""
        while index != NO_PARENT:
            node = self._nodes[index]
            yield node
            index = node.parent

    def depth(self, index: int) -> int:
        """Number of moves between the root and this node."""
        return sum(1 for _ in self.ancestry(index)) - 1

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        if not self._nodes:
            return "SearchTree(empty)"
        return f"SearchTree(nodes={len(self)}, root_visits={self.root.visits:g})"
