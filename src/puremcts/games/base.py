"""
Abstract base classes for games searched by MCTS.

The search engine knows nothing about the rules of a game. It only needs
these operations:
1. Which moves are legal
2. The state reached by applying a move
3. Who is on move
4. Whether the game is over, and how it ended
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Generic, Optional


class Player(Enum):
    """The two sides of a two-player game."""
    FIRST = 1
    SECOND = -1

    @property
    def opponent(self) -> Player:
        return Player(-self.value)


class GameResult(Enum):
    """Classification of a game state."""
    ONGOING = "ongoing"
    FIRST_WON = "first_won"
    SECOND_WON = "second_won"
    TIE = "tie"

    @property
    def is_terminal(self) -> bool:
        return self is not GameResult.ONGOING

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for ongoing games and ties."""
        if self is GameResult.FIRST_WON:
            return Player.FIRST
        if self is GameResult.SECOND_WON:
            return Player.SECOND
        return None

    @classmethod
    def won_by(cls, player: Player) -> GameResult:
        return cls.FIRST_WON if player is Player.FIRST else cls.SECOND_WON


@dataclass(frozen=True)
class GameSpec:
    """
    Describes a game's structure.

    Used by front ends to size boards and move prompts.
    """
    name: str
    board_shape: tuple[int, ...]  # e.g., (3, 3) for Tic-Tac-Toe
    num_moves: int                # number of distinct move slots


# Type variables for game state and move
State = TypeVar('State')
Move = TypeVar('Move')


class Game(ABC, Generic[State, Move]):
    """
    Abstract base class for a deterministic two-player perfect-information game.

    States must be immutable values: apply() returns a new state and never
    modifies its argument. The search stores states in tree nodes and
    replays random moves on them, so sharing a state must be safe.
    """

    @property
    @abstractmethod
    def spec(self) -> GameSpec:
        """Return the game specification."""

    @abstractmethod
    def initial_state(self) -> State:
        """Return the starting state of the game."""

    @abstractmethod
    def current_mover(self, state: State) -> Player:
        """
        Return the player on move.

        Also defined on terminal states, where it is the player who would
        have moved next.
        """

    @abstractmethod
    def legal_moves(self, state: State) -> list[Move]:
        """
        Return the legal moves in a stable order.

        The list is empty if and only if the state is terminal.
        """

    @abstractmethod
    def apply(self, state: State, move: Move) -> State:
        """
        Apply a move and return the successor state.

        Raises:
            MoveError: if the move cannot be played from this state
        """

    @abstractmethod
    def classify(self, state: State) -> GameResult:
        """Return how the game stands at this state."""

    def is_terminal(self, state: State) -> bool:
        """Whether the game is over at this state."""
        return self.classify(state).is_terminal

    def parse_move(self, text: str) -> Move:
        """
        Parse a move typed by a user.

        Optional - games without a text front end don't need it.
        """
        raise NotImplementedError(f"{self.spec.name} has no move parser")

    def render(self, state: State) -> str:
        """
        Render state as string for display.

        Optional - default returns empty string.
        """
        return ""


# Registry of available games
_GAME_REGISTRY: dict[str, type[Game]] = {}


def register_game(name: str):
    """Decorator to register a game class."""
    def decorator(cls: type[Game]):
        _GAME_REGISTRY[name] = cls
        return cls
    return decorator


def get_game(name: str) -> Game:
    """Get a game instance by name."""
    if name not in _GAME_REGISTRY:
        available = ", ".join(_GAME_REGISTRY.keys())
        raise ValueError(f"Unknown game '{name}'. Available: {available}")
    return _GAME_REGISTRY[name]()


def list_games() -> list[str]:
    """List all registered games."""
    return list(_GAME_REGISTRY.keys())
