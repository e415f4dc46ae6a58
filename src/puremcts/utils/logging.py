"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
)
from rich.panel import Panel

from ..mcts.node import SearchTree


console = Console()


def setup_logging(level: str = "WARNING") -> None:
    """
    Route stdlib logging through rich.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    # Replace our own handler on repeated calls
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)


def create_progress() -> Progress:
    """Create a rich progress bar with elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue", expand=False))


def print_root_stats(tree: SearchTree, best_move: Any = None) -> None:
    """Print visit and win statistics for each root move."""
    root = tree.root
    table = Table(title=f"Root statistics ({root.visits:g} visits)")
    table.add_column("Move", style="cyan")
    table.add_column("Visits", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Win rate", justify="right")

    for child in tree.children_of(root.index):
        style = "bold green" if child.move == best_move else None
        table.add_row(
            str(child.move),
            f"{child.visits:g}",
            f"{child.wins:g}",
            f"{child.win_rate * 100:.1f}%",
            style=style,
        )

    console.print(table)
