"""
Play module for engine difficulty control.
"""

from .difficulty import (
    Difficulty,
    DifficultyConfig,
    ROLLOUT_BUDGETS,
    get_difficulty_config,
)

__all__ = [
    "Difficulty",
    "DifficultyConfig",
    "ROLLOUT_BUDGETS",
    "get_difficulty_config",
]
