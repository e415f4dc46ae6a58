"""
Game implementations for MCTS.

Each game implements the Game interface from base.py.
"""

from .base import (
    Game,
    GameResult,
    GameSpec,
    Player,
    State,
    Move,
    register_game,
    get_game,
    list_games,
)

# Import games to register them
from . import tictactoe

__all__ = [
    "Game",
    "GameResult",
    "GameSpec",
    "Player",
    "State",
    "Move",
    "register_game",
    "get_game",
    "list_games",
]
