"""
Adaptive-K centroid clustering.

Starts from two clusters and grows K by splitting the least cohesive half of
the clusters after every convergence, keeping the partition with the best
Dunn Index. With the Euclidean metric and mean rule this is x-means;
with the Manhattan metric and median rule it is x-medians.
"""

from typing import Any, Dict, List, Optional, Union
import warnings
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import CentroidRule, DistanceMetric
from ..base.data_structures import (
    Cluster, PointSet, RunRecord, best_run, points_to_tensor
)
from ..exceptions import DegenerateClusteringWarning
from ..utils.metrics import cluster_diameter
from ..utils.validation import check_max_clusters

INITIAL_CLUSTERS = 2


def split_indices(n_clusters: int) -> range:
    """Ranks (0 = widest) selected for splitting out of n_clusters.

    Ranks 0 through n_clusters // 2 - 1 inclusive are split. For odd counts
    this is one cluster fewer than half rounded up: 3 clusters split 1,
    5 split 2. Growth rates of the adaptive search depend on this, and
    existing x-means result files were produced with it.
    """
    return range(n_clusters // 2)


class AdaptiveKClustering(BaseClusteringAlgorithm):
    """Centroid clustering that searches K from 2 up to a ceiling.

    Each restart seeds two clusters on the data, then repeats:

    1. run Lloyd iteration to convergence;
    2. score the partition with the Dunn Index and record it;
    3. rank clusters by diameter (largest first) and split the top half,
       replacing each chosen cluster with two clusters seeded from its own
       members, so K grows by one per split;

    until K exceeds ``max_clusters``. The restart's winner is its highest
    scoring record.

    Parameters
    ----------
    max_clusters : int
        Ceiling for K, 2 <= max_clusters <= number of points
    metric : str or DistanceMetric, default='euclidean'
        'euclidean' or 'manhattan'
    centroid_rule : str or CentroidRule, default='mean'
        'mean' or 'median'
    n_runs : int, default=30
        Number of independent searches
    max_iter : int or None, default=300
        Iteration ceiling per convergence loop; None for no ceiling
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility

    Attributes
    ----------
    history_ : list of RunRecord
        Every recorded partition of every restart, in order
    runs_ : list of RunRecord
        Winner of each restart
    best_run_ : RunRecord
        Overall winner (first on ties); also result_
    labels_ : Tensor of shape (n_samples,)
        Cluster positions of the training points under best_run_
    seed_ : int
        Seed of the random stream used for seeding
    """

    def __init__(self,
                 max_clusters: int,
                 metric: Union[str, DistanceMetric] = 'euclidean',
                 centroid_rule: Union[str, CentroidRule] = 'mean',
                 n_runs: int = 30,
                 max_iter: Optional[int] = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize adaptive-K clustering."""
        super().__init__(
            metric=metric,
            centroid_rule=centroid_rule,
            n_runs=n_runs,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state
        )
        self.max_clusters = max_clusters

        self.history_: List[RunRecord] = []
        self.runs_: List[RunRecord] = []
        self.best_run_: Optional[RunRecord] = None

    def _fit(self, data: PointSet) -> None:
        check_max_clusters(self.max_clusters, len(data))

        if self.verbose:
            print(f"Searching K in [{INITIAL_CLUSTERS}, {self.max_clusters}] over "
                  f"{len(data)} points, {self.n_runs} restarts (seed {self.seed_})...")

        history = []
        runs = []
        for restart in range(self.n_runs):
            records = self._search(data, restart)
            winner = best_run(records)
            history.extend(records)
            runs.append(winner)

            if self.verbose:
                print(f"Run {restart:3d}: best K = {winner.k}, "
                      f"Dunn index = {winner.score:.6f} ({len(records)} partitions tried)")

        self.history_ = history
        self.runs_ = runs
        self.best_run_ = best_run(runs)
        self.result_ = self.best_run_

    def _search(self, data: PointSet, restart: int) -> List[RunRecord]:
        """One full growth sequence from K=2 past max_clusters."""
        clusters = [Cluster() for _ in range(INITIAL_CLUSTERS)]
        self._seed(clusters, data.points)

        records = []
        while len(clusters) <= self.max_clusters:
            record = self._run_once(data, clusters, restart)
            records.append(record)

            if self.verbose >= 2:
                print(f"  K = {record.k:3d}: Dunn index = {record.score:.6f}")

            self._split(data, clusters)

        return records

    def _split(self, data: PointSet, clusters: List[Cluster]) -> int:
        """Split the widest half of the clusters in place.

        Memberships must reflect the current centroids (as left by the
        final pass of the convergence loop). Chosen clusters are removed
        by location, so when several clusters share a location the first
        one in the partition is taken. The two replacements are seeded
        from the removed cluster's members and appended at the end.

        Args:
            data: The full data set, used to seed replacements for a chosen
                cluster that has no members
            clusters: Current partition, mutated in place

        Returns:
            Number of splits performed (the increase in K)
        """
        diameters = [
            cluster_diameter(points_to_tensor(c.members), self.metric)
            for c in clusters
        ]
        # Stable sort: equal diameters keep partition order
        ranked = sorted(range(len(clusters)), key=lambda i: diameters[i], reverse=True)
        chosen = [clusters[ranked[rank]] for rank in split_indices(len(clusters))]

        n_splits = 0
        for target in chosen:
            to_split = clusters[clusters.index(target)]

            seeds = to_split.members
            if not seeds:
                warnings.warn(f"Splitting empty cluster at {to_split.centroid}; "
                              f"seeding replacements from the whole data set",
                              DegenerateClusteringWarning)
                seeds = data.points

            new_clusters = [Cluster(), Cluster()]
            self._seed(new_clusters, seeds)

            clusters.remove(to_split)
            clusters.extend(new_clusters)
            n_splits += 1

        return n_splits

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        params = super().get_params(deep)
        params['max_clusters'] = self.max_clusters
        return params
