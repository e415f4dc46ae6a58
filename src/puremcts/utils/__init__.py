"""Utilities module."""

from .config import (
    Config,
    MCTSConfig,
    ArenaConfig,
    PlayConfig,
    get_default_config,
)
from .seed import make_rng
from .logging import (
    console,
    setup_logging,
    create_progress,
    print_config,
    print_board,
    print_root_stats,
)

__all__ = [
    "Config",
    "MCTSConfig",
    "ArenaConfig",
    "PlayConfig",
    "get_default_config",
    "make_rng",
    "console",
    "setup_logging",
    "create_progress",
    "print_config",
    "print_board",
    "print_root_stats",
]
