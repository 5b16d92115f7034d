# tests/data_gen.py
"""
Tiny synthetic-data generators reused across the kcentroids test suite.

Intended usage:
    >>> X, y = make_integer_blobs(n_per=30, seed=0)
    >>> X.shape, y.shape
    ((90, 2), (90,))
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray

DEFAULT_CENTERS = ((0, 0), (100, 0), (50, 90))


def make_integer_blobs(
    n_per: int = 30,
    centers: Sequence[Tuple[int, int]] = DEFAULT_CENTERS,
    spread: float = 3.0,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Integer-coordinate Gaussian blobs around the given centers.

    Parameters
    ----------
    n_per : int, default=30
        Number of points per blob (total points = len(centers) * n_per).
    centers : sequence of (x, y), default three well-separated centers
        Blob centers.
    spread : float, default=3.0
        Standard deviation of the Gaussian offsets before rounding.
    seed : int or None, default=None
        If provided, use as the RNG seed for reproducibility.

    Returns
    -------
    X : (len(centers) * n_per, 2) ndarray, int64
        Points, blob by blob.
    y : (len(centers) * n_per,) ndarray, int64
        Ground-truth blob index of each point.
    """
    rng = np.random.default_rng(seed)
    blobs = []
    labels = []
    for k, (cx, cy) in enumerate(centers):
        offsets = rng.normal(scale=spread, size=(n_per, 2))
        blobs.append(np.rint(offsets + np.array([cx, cy])).astype(np.int64))
        labels.append(np.full(n_per, k, dtype=np.int64))
    return np.vstack(blobs), np.concatenate(labels)
