"""
Builder pattern and presets for constructing clustering engines.

The four classic programs are configurations of the same two engines:

    kmeans    Euclidean + mean,   fixed K
    kmedians  Manhattan + median, fixed K
    xmeans    Euclidean + mean,   adaptive K
    xmedians  Manhattan + median, adaptive K
"""

from typing import Optional, Union
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import CentroidRule, DistanceMetric
from ..distances import EuclideanDistance, ManhattanDistance, get_distance
from ..updates import MeanRule, MedianRule, get_centroid_rule
from .fixed_k import FixedKClustering
from .adaptive_k import AdaptiveKClustering


class ClusteringBuilder:
    """Fluent builder for creating clustering engines.

    Examples
    --------
    >>> # k-medians with 10 restarts
    >>> algorithm = (ClusteringBuilder()
    ...     .with_manhattan_distance()
    ...     .with_median_update()
    ...     .with_restarts(10)
    ...     .build_fixed(n_clusters=4))

    >>> # x-means searching up to 8 clusters
    >>> algorithm = (ClusteringBuilder()
    ...     .with_random_state(7)
    ...     .build_adaptive(max_clusters=8))
    """

    def __init__(self):
        """Initialize builder with k-means defaults."""
        self._metric: DistanceMetric = EuclideanDistance()
        self._centroid_rule: CentroidRule = MeanRule()
        self._n_runs = 30
        self._max_iter: Optional[int] = 300
        self._selection = 'best'
        self._verbose = 0
        self._random_state = None

    def with_metric(self, metric: Union[str, DistanceMetric]) -> 'ClusteringBuilder':
        """Set the distance metric."""
        self._metric = get_distance(metric)
        return self

    def with_euclidean_distance(self) -> 'ClusteringBuilder':
        return self.with_metric(EuclideanDistance())

    def with_manhattan_distance(self) -> 'ClusteringBuilder':
        return self.with_metric(ManhattanDistance())

    def with_centroid_rule(self, rule: Union[str, CentroidRule]) -> 'ClusteringBuilder':
        """Set the centroid update rule."""
        self._centroid_rule = get_centroid_rule(rule)
        return self

    def with_mean_update(self) -> 'ClusteringBuilder':
        return self.with_centroid_rule(MeanRule())

    def with_median_update(self) -> 'ClusteringBuilder':
        return self.with_centroid_rule(MedianRule())

    def with_restarts(self, n_runs: int) -> 'ClusteringBuilder':
        """Set the number of independent restarts."""
        self._n_runs = n_runs
        return self

    def with_max_iter(self, max_iter: Optional[int]) -> 'ClusteringBuilder':
        """Set the iteration ceiling (None removes it)."""
        self._max_iter = max_iter
        return self

    def with_selection(self, selection: str) -> 'ClusteringBuilder':
        """Choose 'best' or 'last' restart for fixed-K results."""
        self._selection = selection
        return self

    def with_verbose(self, verbose: int) -> 'ClusteringBuilder':
        self._verbose = verbose
        return self

    def with_random_state(self, random_state: Union[int, torch.Generator]) -> 'ClusteringBuilder':
        self._random_state = random_state
        return self

    def build_fixed(self, n_clusters: int) -> FixedKClustering:
        """Build a fixed-K engine."""
        return FixedKClustering(
            n_clusters=n_clusters,
            metric=self._metric,
            centroid_rule=self._centroid_rule,
            n_runs=self._n_runs,
            selection=self._selection,
            max_iter=self._max_iter,
            verbose=self._verbose,
            random_state=self._random_state
        )

    def build_adaptive(self, max_clusters: int) -> AdaptiveKClustering:
        """Build an adaptive-K engine."""
        return AdaptiveKClustering(
            max_clusters=max_clusters,
            metric=self._metric,
            centroid_rule=self._centroid_rule,
            n_runs=self._n_runs,
            max_iter=self._max_iter,
            verbose=self._verbose,
            random_state=self._random_state
        )


def _apply_options(builder: ClusteringBuilder, kwargs: dict) -> ClusteringBuilder:
    for key, value in kwargs.items():
        method = getattr(builder, f'with_{key}', None)
        if method is None:
            raise TypeError(f"Unknown option: {key}")
        method(value)
    return builder


def create_kmeans(n_clusters: int, **kwargs) -> FixedKClustering:
    """Fixed-K clustering with Euclidean distance and mean centroids.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    **kwargs : dict
        Builder options by name, e.g. restarts=10, random_state=0

    Returns
    -------
    algorithm : FixedKClustering
    """
    builder = ClusteringBuilder().with_euclidean_distance().with_mean_update()
    return _apply_options(builder, kwargs).build_fixed(n_clusters)


def create_kmedians(n_clusters: int, **kwargs) -> FixedKClustering:
    """Fixed-K clustering with Manhattan distance and median centroids."""
    builder = ClusteringBuilder().with_manhattan_distance().with_median_update()
    return _apply_options(builder, kwargs).build_fixed(n_clusters)


def create_xmeans(max_clusters: int, **kwargs) -> AdaptiveKClustering:
    """Adaptive-K clustering with Euclidean distance and mean centroids."""
    builder = ClusteringBuilder().with_euclidean_distance().with_mean_update()
    return _apply_options(builder, kwargs).build_adaptive(max_clusters)


def create_xmedians(max_clusters: int, **kwargs) -> AdaptiveKClustering:
    """Adaptive-K clustering with Manhattan distance and median centroids."""
    builder = ClusteringBuilder().with_manhattan_distance().with_median_update()
    return _apply_options(builder, kwargs).build_adaptive(max_clusters)


PRESETS = {
    'kmeans': create_kmeans,
    'kmedians': create_kmedians,
    'xmeans': create_xmeans,
    'xmedians': create_xmedians,
}


def create_preset(name: str, k: int, **kwargs) -> BaseClusteringAlgorithm:
    """Build one of the named presets.

    Args:
        name: 'kmeans', 'kmedians', 'xmeans' or 'xmedians'
        k: Number of clusters for fixed-K presets, ceiling for adaptive ones
        **kwargs: Builder options by name

    Returns:
        Configured, unfitted engine
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown preset: {name!r}. Expected one of {sorted(PRESETS)}")
    return PRESETS[name](k, **kwargs)
