"""
kcentroids: Lloyd-style centroid clustering of 2-D integer points.

One engine parameterized over distance metric (Euclidean or Manhattan),
centroid rule (truncated mean or coordinate-wise median) and driver:
- fixed K with random restarts (k-means, k-medians)
- adaptive K, growing clusters by splitting and keeping the partition with
  the best Dunn Index (x-means, x-medians)

Example usage:
    >>> from kcentroids import create_xmedians
    >>>
    >>> points = [(0, 0), (1, 0), (0, 1), (20, 20), (21, 20), (20, 21)]
    >>>
    >>> # Search K in [2, 4] with Manhattan distance and median centroids
    >>> model = create_xmedians(4, restarts=5, random_state=0)
    >>> model.fit(points)
    >>>
    >>> model.best_run_.k, model.best_run_.score
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.fixed_k import FixedKClustering
from .algorithms.adaptive_k import AdaptiveKClustering
from .algorithms.builder import (
    ClusteringBuilder,
    create_kmeans,
    create_kmedians,
    create_xmeans,
    create_xmedians,
    create_preset
)

# Import visualization
from .visualization import (
    plot_clusters_2d,
    plot_score_by_k
)

# Convenience imports
from .base import (
    Point,
    Cluster,
    RunRecord,
    AssignmentIndex
)
from .distances import EuclideanDistance, ManhattanDistance
from .updates import MeanRule, MedianRule
from .utils.metrics import dunn_index
from .exceptions import ConvergenceWarning, DegenerateClusteringWarning

__all__ = [
    # Algorithms
    'FixedKClustering',
    'AdaptiveKClustering',

    # Builder
    'ClusteringBuilder',
    'create_kmeans',
    'create_kmedians',
    'create_xmeans',
    'create_xmedians',
    'create_preset',

    # Core data structures
    'Point',
    'Cluster',
    'RunRecord',
    'AssignmentIndex',

    # Components
    'EuclideanDistance',
    'ManhattanDistance',
    'MeanRule',
    'MedianRule',
    'dunn_index',

    # Warnings
    'ConvergenceWarning',
    'DegenerateClusteringWarning',

    # Visualization
    'plot_clusters_2d',
    'plot_score_by_k',

    # Version
    '__version__'
]
