"""Utility functions for the centroid clustering engines."""

from .convergence import (
    CentroidStability,
    same_locations
)

from .metrics import (
    cluster_diameter,
    max_diameter,
    min_separation,
    dunn_index
)

from .validation import (
    validate_points,
    check_n_clusters,
    check_max_clusters,
    check_n_runs,
    check_max_iter,
    check_random_state
)

from .io import (
    parse_points,
    load_points,
    format_centroid,
    format_run,
    format_adaptive_run,
    output_name,
    seed_output_name,
    write_runs
)

__all__ = [
    # Convergence criteria
    'CentroidStability',
    'same_locations',

    # Metrics
    'cluster_diameter',
    'max_diameter',
    'min_separation',
    'dunn_index',

    # Validation
    'validate_points',
    'check_n_clusters',
    'check_max_clusters',
    'check_n_runs',
    'check_max_iter',
    'check_random_state',

    # Text I/O
    'parse_points',
    'load_points',
    'format_centroid',
    'format_run',
    'format_adaptive_run',
    'output_name',
    'seed_output_name',
    'write_runs'
]
