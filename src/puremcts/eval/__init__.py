"""Evaluation module."""

from .arena import (
    Agent,
    Arena,
    ArenaResult,
    mcts_agent,
    play_game,
    random_agent,
)

__all__ = [
    "Agent",
    "Arena",
    "ArenaResult",
    "mcts_agent",
    "play_game",
    "random_agent",
]
