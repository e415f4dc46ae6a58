"""
Engine strength presets for interactive play.

A preset is a rollout budget plus a move-selection temperature. Each
iteration expands a whole leaf and runs one rollout per new child, so a
game with more move slots burns through rollouts faster; the iteration
count for a game is its rollout budget divided by `GameSpec.num_moves`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..games.base import GameSpec


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    IMPOSSIBLE = "impossible"


@dataclass(frozen=True)
class DifficultyConfig:
    """Search settings the engine uses for one move."""
    iterations: int
    temperature: float
    name: str = ""
    description: str = ""

    def __post_init__(self):
        if self.iterations < 1:
            raise ValueError("Iterations must be at least 1")
        if self.temperature < 0:
            raise ValueError("Temperature must be non-negative")


# difficulty -> (rollouts per move, temperature, description)
ROLLOUT_BUDGETS: dict[Difficulty, tuple[int, float, str]] = {
    Difficulty.EASY: (45, 1.0, "Samples moves by visit count, blunders often"),
    Difficulty.MEDIUM: (270, 0.5, "Decent but beatable"),
    Difficulty.HARD: (1800, 0.1, "Rarely misses a threat"),
    Difficulty.IMPOSSIBLE: (9000, 0.0, "Always plays the most visited move"),
}


def get_difficulty_config(
    difficulty: Difficulty,
    spec: Optional[GameSpec] = None,
) -> DifficultyConfig:
    """
    Turn a preset into search settings for a game.

    Without a spec the rollout budget is used as the iteration count.
    """
    rollouts, temperature, description = ROLLOUT_BUDGETS[difficulty]
    slots = spec.num_moves if spec is not None else 1
    return DifficultyConfig(
        iterations=max(1, math.ceil(rollouts / slots)),
        temperature=temperature,
        name=difficulty.value.capitalize(),
        description=description,
    )
