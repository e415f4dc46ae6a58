"""
Random seed management for reproducibility.
"""

from __future__ import annotations

from typing import Optional
import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the generator handed to the search.

    The search never touches global random state, so a run is
    reproducible from this seed alone.
    """
    return np.random.default_rng(seed)
