"""Random-source helpers and small shared numeric utilities.

Randomness is always passed explicitly as a ``numpy.random.Generator`` so
weight initialisation and dataset shuffling are reproducible in tests.
"""

import random
from typing import Optional, Sequence

import numpy as np

from .errors import ShapeMismatchError


def set_seed(seed: int) -> None:
    """Seed Python's and NumPy's global RNGs.

    learnkit itself never draws from global state, but scripts and notebooks
    that mix in other libraries usually want both seeded together.

    Args:
        seed: Integer seed value.
    """
    random.seed(seed)
    np.random.seed(seed)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a NumPy ``Generator``; unseeded when ``seed`` is ``None``."""
    return np.random.default_rng(seed)


def as_vector(values: Sequence[float], context: str, expected_length: Optional[int] = None) -> np.ndarray:
    """Convert ``values`` to a 1-D float array, optionally checking its length.

    Raises:
        ShapeMismatchError: If ``expected_length`` is given and does not match.
    """
    vector = np.asarray(values, dtype=float).reshape(-1)
    if expected_length is not None and vector.shape[0] != expected_length:
        raise ShapeMismatchError(context, expected_length, vector.shape[0])
    return vector
