"""
Mean update rule for centroid-based clustering.
"""

import torch
from torch import Tensor

from ..base.interfaces import CentroidRule


class MeanRule(CentroidRule):
    """Relocates a centroid to the truncated arithmetic mean of its members.

    Coordinates are summed and divided by the member count, truncating
    toward zero, so {(0,0), (10,0), (0,10)} moves to (3, 3) and negative
    means round up toward the origin.
    """

    name = 'mean'

    def compute(self, points: Tensor) -> Tensor:
        """Compute the truncated mean location.

        Args:
            points: (n, 2) int64 tensor of member points, n >= 1

        Returns:
            (2,) int64 tensor
        """
        n_points = points.shape[0]
        if n_points == 0:
            raise ValueError("Mean of an empty cluster is undefined")

        sums = points.to(torch.int64).sum(dim=0)
        return torch.div(sums, n_points, rounding_mode='trunc')
