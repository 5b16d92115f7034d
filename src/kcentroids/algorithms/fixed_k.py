"""
Fixed-K centroid clustering.

Lloyd iteration for a caller-supplied number of clusters, repeated from
fresh random seeds. With the Euclidean metric and mean rule this is k-means;
with the Manhattan metric and median rule it is k-medians.
"""

from typing import Any, Dict, List, Optional, Union
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import CentroidRule, DistanceMetric
from ..base.data_structures import Cluster, PointSet, RunRecord, best_run
from ..utils.validation import check_n_clusters

SELECTIONS = ('best', 'last')


class FixedKClustering(BaseClusteringAlgorithm):
    """Centroid clustering with a fixed number of clusters.

    Each of ``n_runs`` restarts seeds ``n_clusters`` centroids on distinct
    data points, runs Lloyd iteration to convergence and scores the result
    with the Dunn Index. Every restart is kept in ``runs_``.

    Parameters
    ----------
    n_clusters : int
        Number of clusters, 1 <= n_clusters <= number of points
    metric : str or DistanceMetric, default='euclidean'
        'euclidean' or 'manhattan'
    centroid_rule : str or CentroidRule, default='mean'
        'mean' or 'median'
    n_runs : int, default=30
        Number of independent restarts
    selection : {'best', 'last'}, default='best'
        Which restart backs labels_, cluster_centers_ and score_. 'last'
        matches the legacy k-means output, which reported the final restart
        even though every restart was scored.
    max_iter : int or None, default=300
        Iteration ceiling per restart; None for no ceiling
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility

    Attributes
    ----------
    runs_ : list of RunRecord
        One record per restart, in restart order
    best_run_ : RunRecord
        Highest-scoring restart (first on ties)
    last_run_ : RunRecord
        Final restart
    result_ : RunRecord
        The record chosen by ``selection``
    labels_ : Tensor of shape (n_samples,)
        Cluster positions of the training points under result_
    seed_ : int
        Seed of the random stream used for seeding
    """

    def __init__(self,
                 n_clusters: int,
                 metric: Union[str, DistanceMetric] = 'euclidean',
                 centroid_rule: Union[str, CentroidRule] = 'mean',
                 n_runs: int = 30,
                 selection: str = 'best',
                 max_iter: Optional[int] = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize fixed-K clustering."""
        super().__init__(
            metric=metric,
            centroid_rule=centroid_rule,
            n_runs=n_runs,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state
        )
        if selection not in SELECTIONS:
            raise ValueError(f"selection must be one of {SELECTIONS}, got {selection!r}")

        self.n_clusters = n_clusters
        self.selection = selection

        self.runs_: List[RunRecord] = []
        self.best_run_: Optional[RunRecord] = None
        self.last_run_: Optional[RunRecord] = None

    def _fit(self, data: PointSet) -> None:
        check_n_clusters(self.n_clusters, len(data))

        if self.verbose:
            print(f"Clustering {len(data)} points into {self.n_clusters} clusters, "
                  f"{self.n_runs} restarts (seed {self.seed_})...")

        runs = []
        for restart in range(self.n_runs):
            clusters = [Cluster() for _ in range(self.n_clusters)]
            self._seed(clusters, data.points)

            record = self._run_once(data, clusters, restart)
            runs.append(record)

            if self.verbose:
                status = "converged" if record.converged else "stopped"
                print(f"Run {restart:3d}: {status} after {record.n_iter} iterations, "
                      f"Dunn index = {record.score:.6f}")

        self.runs_ = runs
        self.best_run_ = best_run(runs)
        self.last_run_ = runs[-1]
        self.result_ = self.best_run_ if self.selection == 'best' else self.last_run_

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        params = super().get_params(deep)
        params.update({
            'n_clusters': self.n_clusters,
            'selection': self.selection
        })
        return params
