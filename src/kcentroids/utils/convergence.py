"""
Convergence criteria for clustering algorithms.

The engines stop when a full pass leaves every centroid exactly where it
was. The iteration ceiling that guards against oscillation lives in the
base algorithm, not here.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..base.interfaces import ConvergenceCriterion
from ..base.data_structures import Point


def same_locations(current: Sequence[Optional[Point]],
                   previous: Sequence[Optional[Point]]) -> bool:
    """Position-by-position equality of two centroid sequences.

    An empty sequence on either side never compares equal, so the first
    pass of a loop, which has no snapshot yet, cannot converge.
    """
    if len(current) == 0 or len(previous) == 0:
        return False
    if len(current) != len(previous):
        return False
    return all(a == b for a, b in zip(current, previous))


class CentroidStability(ConvergenceCriterion):
    """Convergence when the ordered centroid locations stop changing."""

    def __init__(self):
        super().__init__()
        self._prev_centroids: List[Point] = []

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare this pass's centroids with the previous snapshot.

        Args:
            current_state: Must contain 'centroids', the ordered centroid
                locations after relocation

        Returns:
            True if every position matches the snapshot
        """
        centroids = list(current_state['centroids'])
        converged = same_locations(centroids, self._prev_centroids)

        n_moved = sum(1 for a, b in zip(centroids, self._prev_centroids) if a != b)
        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_moved': n_moved if self._prev_centroids else len(centroids),
            'converged': converged
        })

        if not converged:
            self._prev_centroids = centroids

        return converged

    def reset(self):
        """Drop the snapshot and history."""
        super().reset()
        self._prev_centroids = []
