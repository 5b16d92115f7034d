"""
Core interfaces for the centroid clustering engines.

This module defines the abstract base classes that all pluggable components
must implement, so that the fixed-K and adaptive-K engines can run any
combination of distance metric and centroid rule.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, TYPE_CHECKING
import torch
from torch import Tensor

if TYPE_CHECKING:
    from .data_structures import AssignmentIndex, Cluster, Point, PointSet


class DistanceMetric(ABC):
    """Abstract base class for point-to-point distances.

    Metrics operate on integer coordinates but always return float64
    distances, so that equal integer offsets produce bit-identical values
    and ties between clusters are detected exactly.
    """

    name: str = ''

    @abstractmethod
    def pairwise(self, X: Tensor, Y: Tensor) -> Tensor:
        """Compute all distances between two point sets.

        Args:
            X: (n, 2) tensor of points
            Y: (m, 2) tensor of points

        Returns:
            (n, m) float64 tensor of distances
        """
        pass

    @abstractmethod
    def between(self, a: 'Point', b: 'Point') -> float:
        """Distance between two individual points."""
        pass

    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        """Compute distances from points to a single center.

        Args:
            points: (n, 2) tensor of points
            center: (2,) tensor holding the center location

        Returns:
            (n,) float64 tensor of distances
        """
        return self.pairwise(points, center.reshape(1, -1)).squeeze(1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CentroidRule(ABC):
    """Abstract base class for centroid relocation rules.

    A rule maps a non-empty multiset of member points to a new integer
    centroid location. Rules must never be called on an empty member list;
    clusters without members keep their previous centroid.
    """

    name: str = ''

    @abstractmethod
    def compute(self, points: Tensor) -> Tensor:
        """Compute the new centroid.

        Args:
            points: (n, 2) int64 tensor of member points, n >= 1

        Returns:
            (2,) int64 tensor holding the new location
        """
        pass

    def __call__(self, members: Sequence['Point']) -> 'Point':
        """Apply the rule to a sequence of Points."""
        from .data_structures import Point, points_to_tensor

        if len(members) == 0:
            raise ValueError(f"{self.__class__.__name__} requires at least one member point")

        location = self.compute(points_to_tensor(members))
        return Point(int(location[0]), int(location[1]))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def assign(self, data: 'PointSet', clusters: List['Cluster']) -> 'AssignmentIndex':
        """Populate cluster memberships for every point in the data set.

        Args:
            data: The full data set
            clusters: Clusters with placed centroids and cleared members

        Returns:
            Freshly built index mapping each point to its owning cluster
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for centroid seeding strategies."""

    @abstractmethod
    def initialize(self, points: Sequence['Point'], n_clusters: int,
                   generator: torch.Generator) -> List['Point']:
        """Choose starting centroid locations.

        Args:
            points: Candidate points to seed from
            n_clusters: Number of centroids to produce
            generator: Source of random draws

        Returns:
            List of n_clusters starting locations
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
