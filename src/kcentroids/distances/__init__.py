"""Distance metrics for clustering algorithms."""

from typing import Union

from ..base.interfaces import DistanceMetric
from .euclidean import EuclideanDistance
from .manhattan import ManhattanDistance

_METRICS = {
    'euclidean': EuclideanDistance,
    'manhattan': ManhattanDistance,
}


def get_distance(metric: Union[str, DistanceMetric]) -> DistanceMetric:
    """Resolve a metric instance or name ('euclidean', 'manhattan')."""
    if isinstance(metric, DistanceMetric):
        return metric
    if isinstance(metric, str) and metric.lower() in _METRICS:
        return _METRICS[metric.lower()]()
    raise ValueError(f"Unknown distance metric: {metric!r}. "
                     f"Expected one of {sorted(_METRICS)}")


__all__ = [
    'EuclideanDistance',
    'ManhattanDistance',
    'get_distance'
]
