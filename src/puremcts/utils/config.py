"""
Configuration management for puremcts.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, asdict
from typing import Optional
import yaml


@dataclass
class MCTSConfig:
    """MCTS configuration."""

    iterations: int = 1000
    exploration: float = math.sqrt(2)
    time_budget: Optional[float] = None  # Seconds per move (None = iterations only)


@dataclass
class ArenaConfig:
    """Arena match configuration."""

    num_games: int = 20
    opponent: str = "random"  # "random" or "mcts"
    opponent_iterations: int = 100


@dataclass
class PlayConfig:
    """Interactive play configuration."""

    opponent: str = "engine"  # "engine" or "human"
    difficulty: str = "medium"
    human_first: bool = True


@dataclass
class Config:
    """Full configuration."""

    # Component configs
    mcts: MCTSConfig = field(default_factory=MCTSConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    play: PlayConfig = field(default_factory=PlayConfig)

    # Global settings
    game: str = "tictactoe"
    log_level: str = "WARNING"

    # Random seed (None = fresh entropy every run)
    seed: Optional[int] = None

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Parse nested configs
        return cls(
            mcts=MCTSConfig(**data.get("mcts", {})),
            arena=ArenaConfig(**data.get("arena", {})),
            play=PlayConfig(**data.get("play", {})),
            game=data.get("game", "tictactoe"),
            log_level=data.get("log_level", "WARNING"),
            seed=data.get("seed"),
        )


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
