"""Base classes and interfaces for the centroid clustering engines."""

from .interfaces import (
    DistanceMetric,
    CentroidRule,
    AssignmentStrategy,
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    Point,
    PointSet,
    Cluster,
    ClusterSnapshot,
    RunRecord,
    AssignmentIndex,
    points_to_tensor,
    tensor_to_points,
    rank_runs,
    best_run
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DistanceMetric',
    'CentroidRule',
    'AssignmentStrategy',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'Point',
    'PointSet',
    'Cluster',
    'ClusterSnapshot',
    'RunRecord',
    'AssignmentIndex',
    'points_to_tensor',
    'tensor_to_points',
    'rank_runs',
    'best_run',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
