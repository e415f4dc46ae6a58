"""Exception classes for the search engine and the game rules."""

from __future__ import annotations


class PureMCTSError(Exception):
    """Base exception for all puremcts errors."""


class EmptyTreeError(PureMCTSError):
    """Raised when a search tree has no root node."""

    def __init__(self) -> None:
        super().__init__("Search tree has no root node")


class AlreadyExpandedError(PureMCTSError):
    """Raised when expanding a node that already has children."""

    def __init__(self, index: int, num_children: int) -> None:
        self.index = index
        self.num_children = num_children
        super().__init__(
            f"Node {index} is already expanded ({num_children} children)"
        )


class InvalidBackpropagationResultError(PureMCTSError):
    """Raised when backpropagating a result that is not terminal."""

    def __init__(self, result: object) -> None:
        self.result = result
        super().__init__(f"Cannot backpropagate non-terminal result {result!r}")


class SearchInvariantError(PureMCTSError):
    """Raised when the game rejects a move the search took from legal_moves."""


class MoveError(PureMCTSError, ValueError):
    """Raised when a move cannot be applied to a game state."""


class OutOfBoundsError(MoveError):
    """Raised when a move points outside the board."""

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Index out of bound: ({row}, {col})")


class CellOccupiedError(MoveError):
    """Raised when a move targets a non-empty cell."""

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        super().__init__(f"Cannot mark a non-empty cell: ({row}, {col})")


class GameOverError(MoveError):
    """Raised when trying to play on a finished game."""

    def __init__(self) -> None:
        super().__init__("Cannot play a terminated game")


__all__ = [
    "PureMCTSError",
    "EmptyTreeError",
    "AlreadyExpandedError",
    "InvalidBackpropagationResultError",
    "SearchInvariantError",
    "MoveError",
    "OutOfBoundsError",
    "CellOccupiedError",
    "GameOverError",
]
