"""
Random initialization strategy for clustering algorithms.

Selects random points from a candidate set as initial cluster centers.
"""

from typing import List, Sequence, Set
import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, Point


class RandomPointInit(InitializationStrategy):
    """Random initialization by selecting points from the candidates.

    Indices are drawn uniformly from [0, n) and a draw is rejected when
    its point value has already been used, so the chosen locations are
    distinct. Once every distinct value has been used (more clusters than
    distinct candidates) the used set is emptied and values start to
    repeat, instead of rejecting forever.
    """

    def initialize(self, points: Sequence[Point], n_clusters: int,
                   generator: torch.Generator) -> List[Point]:
        """Pick starting locations.

        Args:
            points: Candidate points (data set or a cluster's members)
            n_clusters: Number of locations to pick
            generator: Source of random draws

        Returns:
            List of n_clusters Points
        """
        n_points = len(points)
        if n_points == 0:
            raise ValueError("Cannot seed clusters from an empty point set")

        n_distinct = len(set(points))
        used: Set[Point] = set()
        chosen: List[Point] = []

        while len(chosen) < n_clusters:
            if len(used) >= n_distinct:
                used.clear()

            idx = int(torch.randint(n_points, (1,), generator=generator).item())
            candidate = points[idx]
            if candidate in used:
                continue

            used.add(candidate)
            chosen.append(candidate)

        return chosen

    def seed(self, clusters: Sequence[Cluster], points: Sequence[Point],
             generator: torch.Generator) -> None:
        """Place each cluster on a freshly drawn location."""
        locations = self.initialize(points, len(clusters), generator)
        for cluster, location in zip(clusters, locations):
            cluster.centroid = location
