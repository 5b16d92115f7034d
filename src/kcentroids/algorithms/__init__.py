"""Clustering engine implementations."""

from .fixed_k import FixedKClustering
from .adaptive_k import AdaptiveKClustering, split_indices
from .builder import (
    ClusteringBuilder,
    PRESETS,
    create_kmeans,
    create_kmedians,
    create_xmeans,
    create_xmedians,
    create_preset
)

__all__ = [
    'FixedKClustering',
    'AdaptiveKClustering',
    'split_indices',
    'ClusteringBuilder',
    'PRESETS',
    'create_kmeans',
    'create_kmedians',
    'create_xmeans',
    'create_xmedians',
    'create_preset'
]
