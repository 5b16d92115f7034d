"""
Manhattan (city block) distance metric.

Used by the k-medians and x-medians configurations, where the coordinate-wise
median is the matching centroid rule.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class ManhattanDistance(DistanceMetric):
    """City block distance |ax - bx| + |ay - by|."""

    name = 'manhattan'

    def pairwise(self, X: Tensor, Y: Tensor) -> Tensor:
        """
        Args:
            X: (n, 2) tensor of points
            Y: (m, 2) tensor of points

        Returns:
            (n, m) float64 tensor of distances
        """
        diff = X.to(torch.float64).unsqueeze(1) - Y.to(torch.float64).unsqueeze(0)
        return torch.sum(torch.abs(diff), dim=2)

    def between(self, a, b) -> float:
        return float(abs(a.x - b.x) + abs(a.y - b.y))
