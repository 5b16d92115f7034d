"""
Euclidean distance metric for clustering.

Used by the k-means and x-means configurations.
"""

import math
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Straight-line distance sqrt((ax - bx)^2 + (ay - by)^2)."""

    name = 'euclidean'

    def pairwise(self, X: Tensor, Y: Tensor) -> Tensor:
        """Compute Euclidean distances between every pair of points.

        Differences are taken explicitly rather than through the
        ||x||^2 + ||y||^2 - 2<x,y> expansion, which loses the exactness of
        integer inputs and can break ties between equidistant clusters.

        Args:
            X: (n, 2) tensor of points
            Y: (m, 2) tensor of points

        Returns:
            (n, m) float64 tensor of distances
        """
        diff = X.to(torch.float64).unsqueeze(1) - Y.to(torch.float64).unsqueeze(0)
        return torch.sqrt(torch.sum(diff * diff, dim=2))

    def between(self, a, b) -> float:
        return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)
