"""
Coordinate-wise median update rule.

The x and y coordinates are sorted independently, so the resulting centroid
is generally not one of the member points.
"""

import torch
from torch import Tensor

from ..base.interfaces import CentroidRule


class MedianRule(CentroidRule):
    """Relocates a centroid to the coordinate-wise median of its members.

    Odd counts take the middle element of each sorted coordinate list. Even
    counts take the average of the two middle elements, truncated toward
    zero, so {(0,0), (0,10)} moves to (0, 5).
    """

    name = 'median'

    def compute(self, points: Tensor) -> Tensor:
        """Compute the coordinate-wise median location.

        Args:
            points: (n, 2) int64 tensor of member points, n >= 1

        Returns:
            (2,) int64 tensor
        """
        n_points = points.shape[0]
        if n_points == 0:
            raise ValueError("Median of an empty cluster is undefined")

        ordered, _ = torch.sort(points.to(torch.int64), dim=0)
        middle = n_points // 2

        if n_points % 2 == 1:
            return ordered[middle].clone()

        return torch.div(ordered[middle - 1] + ordered[middle], 2, rounding_mode='trunc')
