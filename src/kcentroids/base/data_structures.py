"""
Core data structures for the centroid clustering engines.

Points are immutable integer coordinates. Clusters are mutable pairs of a
centroid and a member list that is rebuilt on every assignment pass.
Converged partitions are frozen into RunRecords so runs with different K
values or restarts can be compared by score.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass
import torch
from torch import Tensor


@dataclass(frozen=True)
class Point:
    """Immutable 2-D integer coordinate."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


def points_to_tensor(points: Iterable[Point]) -> Tensor:
    """Stack Points into an (n, 2) int64 tensor."""
    rows = [[p.x, p.y] for p in points]
    if not rows:
        return torch.zeros((0, 2), dtype=torch.int64)
    return torch.tensor(rows, dtype=torch.int64)


def tensor_to_points(values: Tensor) -> List[Point]:
    """Convert an (n, 2) integer tensor to a list of Points."""
    return [Point(int(x), int(y)) for x, y in values.tolist()]


class PointSet:
    """An ordered, non-empty data set held both as Points and as a tensor.

    The Point view drives membership and the assignment index, the tensor
    view drives vectorized distance computations. Both share one order.
    """

    def __init__(self, points: Sequence[Point]):
        """
        Args:
            points: Ordered data points
        """
        self.points: Tuple[Point, ...] = tuple(points)
        self.values: Tensor = points_to_tensor(self.points)

    @classmethod
    def from_tensor(cls, values: Tensor) -> 'PointSet':
        return cls(tensor_to_points(values))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> Point:
        return self.points[idx]

    @property
    def n_distinct(self) -> int:
        """Number of distinct coordinate values in the set."""
        return len(set(self.points))

    def __repr__(self) -> str:
        return f"PointSet(n_points={len(self)})"


class Cluster:
    """A centroid location plus the points currently assigned to it.

    Equality and hashing consider the centroid location only, never the
    membership: two clusters sitting on the same location are treated as
    the same cluster. This is what convergence comparison and the
    "same cluster" test of the Dunn Index rely on.

    The member list is owned by the cluster for the duration of one pass.
    It is cleared at the start of each assignment pass and refilled only
    by the assignment strategy.
    """

    def __init__(self, centroid: Optional[Point] = None):
        """
        Args:
            centroid: Starting location, or None for an unplaced cluster
        """
        self.centroid = centroid
        self.members: List[Point] = []

    @property
    def is_placed(self) -> bool:
        return self.centroid is not None

    @property
    def size(self) -> int:
        return len(self.members)

    def add_member(self, point: Point) -> None:
        self.members.append(point)

    def clear_members(self) -> None:
        self.members = []

    def relocate(self, rule) -> bool:
        """Move the centroid using a CentroidRule.

        Args:
            rule: CentroidRule applied to the current members

        Returns:
            True if the centroid changed. Clusters without members are left
            where they are and return False.
        """
        if not self.members:
            return False

        new_centroid = rule(self.members)
        moved = new_centroid != self.centroid
        self.centroid = new_centroid
        return moved

    def snapshot(self) -> 'ClusterSnapshot':
        """Freeze centroid and membership into an immutable copy."""
        if self.centroid is None:
            raise ValueError("Cannot snapshot an unplaced cluster")
        return ClusterSnapshot(centroid=self.centroid, members=tuple(self.members))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cluster):
            return NotImplemented
        return self.centroid == other.centroid

    def __hash__(self) -> int:
        return hash(self.centroid)

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid}, size={self.size})"


@dataclass(frozen=True)
class ClusterSnapshot:
    """Immutable copy of a cluster taken at convergence."""

    centroid: Point
    members: Tuple[Point, ...]

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True)
class RunRecord:
    """One converged partition and its Dunn Index score.

    Created once per convergence event and never mutated afterwards.
    """

    k: int
    clusters: Tuple[ClusterSnapshot, ...]
    score: float
    converged: bool = True
    n_iter: int = 0
    restart: int = 0

    @classmethod
    def from_clusters(cls, clusters: Sequence[Cluster], score: float,
                      converged: bool = True, n_iter: int = 0,
                      restart: int = 0) -> 'RunRecord':
        """Freeze the current partition."""
        return cls(
            k=len(clusters),
            clusters=tuple(c.snapshot() for c in clusters),
            score=float(score),
            converged=converged,
            n_iter=n_iter,
            restart=restart
        )

    @property
    def centroids(self) -> Tuple[Point, ...]:
        """Final centroids in stable cluster order."""
        return tuple(c.centroid for c in self.clusters)

    @property
    def sizes(self) -> Tuple[int, ...]:
        """Final membership sizes in stable cluster order."""
        return tuple(c.size for c in self.clusters)

    def centers_tensor(self) -> Tensor:
        """(k, 2) int64 tensor of centroids."""
        return points_to_tensor(self.centroids)


def rank_runs(records: Iterable[RunRecord]) -> List[RunRecord]:
    """Order records by descending score, keeping recording order on ties."""
    return sorted(records, key=lambda r: r.score, reverse=True)


def best_run(records: Sequence[RunRecord]) -> RunRecord:
    """Highest-scoring record; the first recorded wins ties."""
    if not records:
        raise ValueError("No runs recorded")
    return rank_runs(records)[0]


class AssignmentIndex:
    """Pass-scoped mapping from each data point to its owning cluster.

    Built from scratch by every assignment pass and only valid until the
    next one. Keys are Points, so duplicate coordinates in the data set
    share an entry (they are always assigned to the same cluster).
    """

    def __init__(self, clusters: Sequence[Cluster]):
        """
        Args:
            clusters: The partition the index refers to, in stored order
        """
        self._clusters = list(clusters)
        self._owner: Dict[Point, int] = {}

    def assign(self, point: Point, cluster_idx: int) -> None:
        self._owner[point] = cluster_idx

    def label_of(self, point: Point) -> int:
        """Position of the owning cluster in the partition."""
        return self._owner[point]

    def cluster_of(self, point: Point) -> Cluster:
        return self._clusters[self._owner[point]]

    def __contains__(self, point: object) -> bool:
        return point in self._owner

    def __len__(self) -> int:
        return len(self._owner)

    def labels(self, points: Iterable[Point]) -> Tensor:
        """(n,) int64 tensor of owning cluster positions."""
        return torch.tensor([self._owner[p] for p in points], dtype=torch.int64)

    def location_labels(self, points: Iterable[Point]) -> Tensor:
        """Labels under location-only cluster identity.

        Clusters sharing a centroid location collapse onto the position of
        the first such cluster, matching Cluster equality.
        """
        first_at: Dict[Point, int] = {}
        canonical = []
        for idx, cluster in enumerate(self._clusters):
            canonical.append(first_at.setdefault(cluster.centroid, idx))
        return torch.tensor([canonical[self._owner[p]] for p in points], dtype=torch.int64)
