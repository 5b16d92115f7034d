"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..base.data_structures import AssignmentIndex, Cluster, PointSet, points_to_tensor
from ..distances import EuclideanDistance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point joins exactly one cluster: the one whose centroid is at
    strictly minimum distance. When several clusters tie, the one stored
    first in the partition wins, so assignment is reproducible for a given
    cluster order.
    """

    def __init__(self, metric: Optional[DistanceMetric] = None):
        """
        Args:
            metric: Distance used to compare points to centroids
                (Euclidean if None)
        """
        super().__init__()
        self.metric = metric if metric is not None else EuclideanDistance()

    def compute_assignments(self, points: Tensor, clusters: List[Cluster]) -> Tensor:
        """Label each point with the position of its nearest cluster.

        Args:
            points: (n, 2) data points
            clusters: K placed clusters

        Returns:
            (n,) int64 tensor of cluster positions
        """
        if not clusters:
            raise ValueError("Cannot assign points to an empty partition")
        if any(not c.is_placed for c in clusters):
            raise ValueError("All clusters must be placed before assignment")

        centers = points_to_tensor(c.centroid for c in clusters)
        distances = self.metric.pairwise(points, centers)

        # argmin reports the first minimal index on ties
        return torch.argmin(distances, dim=1)

    def assign(self, data: PointSet, clusters: List[Cluster]) -> AssignmentIndex:
        """Assign every data point and rebuild the assignment index.

        Members are appended in data set order. Every cluster's member list
        must already be empty.

        Args:
            data: The full data set
            clusters: K placed clusters with cleared members

        Returns:
            Fresh AssignmentIndex for this pass
        """
        if any(c.members for c in clusters):
            raise ValueError("Cluster members must be cleared before an assignment pass")

        labels = self.compute_assignments(data.values, clusters)

        index = AssignmentIndex(clusters)
        for point, k in zip(data.points, labels.tolist()):
            clusters[k].add_member(point)
            index.assign(point, k)

        return index
