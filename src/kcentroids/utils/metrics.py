"""
Clustering evaluation metrics.

The engines rank partitions by the Dunn Index: the smallest distance
between points of different clusters divided by the largest distance
between points of the same cluster. Higher values indicate compact,
well-separated clusters.

Distance matrices are built one block of rows at a time, so memory grows
with chunk_size * n rather than n * n.
"""

from typing import Optional
import warnings
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..distances import EuclideanDistance
from ..exceptions import DegenerateClusteringWarning

CHUNK_SIZE = 1024


def cluster_diameter(points: Tensor, metric: Optional[DistanceMetric] = None,
                     chunk_size: int = CHUNK_SIZE) -> float:
    """Largest pairwise distance between members of one cluster.

    Args:
        points: (m, 2) member points
        metric: Distance metric (Euclidean if None)
        chunk_size: Rows of the distance matrix computed at once

    Returns:
        Diameter, 0.0 for clusters with fewer than two members
    """
    if metric is None:
        metric = EuclideanDistance()
    if points.shape[0] < 2:
        return 0.0

    largest = 0.0
    for block in points.split(chunk_size):
        largest = max(largest, metric.pairwise(block, points).max().item())
    return largest


def max_diameter(X: Tensor, labels: Tensor, metric: Optional[DistanceMetric] = None,
                 chunk_size: int = CHUNK_SIZE) -> float:
    """Largest cluster diameter over all clusters (Dunn Index dmax)."""
    largest = 0.0
    for k in torch.unique(labels).tolist():
        largest = max(largest, cluster_diameter(X[labels == k], metric, chunk_size))
    return largest


def min_separation(X: Tensor, labels: Tensor, metric: Optional[DistanceMetric] = None,
                   chunk_size: int = CHUNK_SIZE) -> float:
    """Smallest distance between two points in different clusters (Dunn Index dmin).

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels
        metric: Distance metric (Euclidean if None)
        chunk_size: Rows of each inter-cluster distance matrix computed at once

    Returns:
        Minimum separation, or inf if no cross-cluster pair exists
    """
    if metric is None:
        metric = EuclideanDistance()

    cluster_ids = torch.unique(labels).tolist()
    shortest = float('inf')
    for i, a in enumerate(cluster_ids):
        members_a = X[labels == a]
        for b in cluster_ids[i + 1:]:
            members_b = X[labels == b]
            for block in members_a.split(chunk_size):
                shortest = min(shortest, metric.pairwise(block, members_b).min().item())

    return shortest


def dunn_index(X: Tensor, labels: Tensor, metric: Optional[DistanceMetric] = None,
               n_clusters: Optional[int] = None, chunk_size: int = CHUNK_SIZE) -> float:
    """Compute Dunn index.

    Higher values indicate better clustering (compact, well-separated clusters).

    Args:
        X: (n, 2) data points
        labels: (n,) cluster labels; points sharing a label are in the same
            cluster
        metric: Distance metric (Euclidean if None)
        n_clusters: Number of clusters in the partition, counting empty ones.
            A single-cluster partition scores 0.0.
        chunk_size: Rows of each distance matrix computed at once

    Returns:
        dmin / dmax, or 0.0 for degenerate partitions
    """
    if n_clusters is None:
        n_clusters = len(torch.unique(labels))

    if n_clusters == 1:
        return 0.0

    dmin = min_separation(X, labels, metric, chunk_size)
    dmax = max_diameter(X, labels, metric, chunk_size)

    if dmin == float('inf'):
        warnings.warn(
            f"All points fell into a single cluster of a {n_clusters}-cluster "
            f"partition; no inter-cluster distance exists, scoring 0.0",
            DegenerateClusteringWarning
        )
        return 0.0

    if dmax == 0:
        return 0.0

    return dmin / dmax
