"""
Input validation utilities.

Configuration errors are rejected before any engine runs, with a
descriptive exception rather than silent clamping.
"""

from numbers import Integral
from typing import Optional, Sequence, Tuple, Union
import numpy as np
import torch
from torch import Tensor

from ..base.data_structures import Point, PointSet

PointsLike = Union[PointSet, Tensor, np.ndarray, Sequence[Point], Sequence[Sequence[int]]]


def validate_points(X: PointsLike) -> PointSet:
    """Validate and convert input data to a PointSet.

    Args:
        X: Points as a PointSet, an (n, 2) tensor or numpy array, or a
            sequence of Points / (x, y) pairs. Float inputs are accepted
            only if every value is integral.

    Returns:
        Validated PointSet

    Raises:
        ValueError: If the data is empty, not 2-D, or not integral
        TypeError: If the data cannot be converted
    """
    if isinstance(X, PointSet):
        if len(X) == 0:
            raise ValueError("Found 0 points, but need at least 1")
        return X

    if isinstance(X, Tensor):
        values = X.detach().cpu()
    elif isinstance(X, np.ndarray):
        values = torch.from_numpy(np.ascontiguousarray(X))
    elif isinstance(X, (list, tuple)):
        rows = [[p.x, p.y] if isinstance(p, Point) else list(p) for p in X]
        if not rows:
            raise ValueError("Found 0 points, but need at least 1")
        values = torch.tensor(rows)
    else:
        raise TypeError(f"Cannot convert {type(X)} to points")

    if values.dim() != 2 or values.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) array of points, got shape {tuple(values.shape)}")

    if values.shape[0] == 0:
        raise ValueError("Found 0 points, but need at least 1")

    if values.is_floating_point():
        if not torch.isfinite(values).all():
            raise ValueError("Input contains NaN or infinite values")
        if not torch.equal(values, torch.trunc(values)):
            raise ValueError("Point coordinates must be integers")
    elif values.dtype == torch.bool or values.is_complex():
        raise TypeError(f"Unsupported coordinate dtype {values.dtype}")

    return PointSet.from_tensor(values.to(torch.int64))


def _check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be int, got {type(value)}")


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters for the fixed-K engine.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        TypeError: If n_clusters is not an integer
        ValueError: If invalid
    """
    _check_int('n_clusters', n_clusters)

    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise ValueError(f"n_clusters ({n_clusters}) cannot be larger than "
                         f"n_samples ({n_samples})")


def check_max_clusters(max_clusters: int, n_samples: int) -> None:
    """Validate the cluster ceiling for the adaptive engine.

    The adaptive search starts at two clusters, so the ceiling must be at
    least 2 and no larger than the data set.
    """
    _check_int('max_clusters', max_clusters)

    if max_clusters < 2:
        raise ValueError(f"max_clusters must be at least 2, got {max_clusters}")

    if max_clusters > n_samples:
        raise ValueError(f"max_clusters ({max_clusters}) cannot be larger than "
                         f"n_samples ({n_samples})")


def check_n_runs(n_runs: int) -> None:
    _check_int('n_runs', n_runs)
    if n_runs <= 0:
        raise ValueError(f"n_runs must be positive, got {n_runs}")


def check_max_iter(max_iter: Optional[int]) -> None:
    """None means no ceiling; otherwise a positive integer."""
    if max_iter is None:
        return
    _check_int('max_iter', max_iter)
    if max_iter <= 0:
        raise ValueError(f"max_iter must be positive or None, got {max_iter}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Tuple[torch.Generator, int]:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a fresh
            nondeterministic seed

    Returns:
        (generator, seed) where seed reproduces the generator's stream
    """
    if random_state is None:
        generator = torch.Generator()
        seed = generator.seed()
        return generator, seed
    elif isinstance(random_state, torch.Generator):
        return random_state, random_state.initial_seed()
    elif isinstance(random_state, Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator, int(random_state)
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")
