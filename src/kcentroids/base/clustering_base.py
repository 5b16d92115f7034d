"""
Base class for the centroid clustering engines.

Provides the Lloyd iteration shared by the fixed-K and adaptive-K drivers:
alternate an assignment pass with centroid relocation until a pass leaves
every centroid where it was.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union
import time
import warnings
import torch
from torch import Tensor

from .interfaces import DistanceMetric, CentroidRule
from .data_structures import AssignmentIndex, Cluster, PointSet, RunRecord
from ..assignments.hard import HardAssignment
from ..distances import get_distance
from ..exceptions import ConvergenceWarning
from ..initialization.random import RandomPointInit
from ..updates import get_centroid_rule
from ..utils.convergence import CentroidStability
from ..utils.metrics import dunn_index
from ..utils.validation import (
    PointsLike, validate_points, check_n_runs, check_max_iter, check_random_state
)


class BaseClusteringAlgorithm:
    """Base class implementing the Lloyd convergence loop.

    Subclasses implement ``_fit`` to drive one or more convergence loops
    over the validated data set and must set ``result_`` to the RunRecord
    that backs ``labels_``, ``cluster_centers_`` and ``score_``.
    """

    def __init__(self,
                 metric: Union[str, DistanceMetric] = 'euclidean',
                 centroid_rule: Union[str, CentroidRule] = 'mean',
                 n_runs: int = 30,
                 max_iter: Optional[int] = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            metric: Distance metric instance or name ('euclidean', 'manhattan')
            centroid_rule: Centroid rule instance or name ('mean', 'median')
            n_runs: Number of independent random restarts
            max_iter: Iteration ceiling per convergence loop, None for no
                ceiling
            verbose: Verbosity level (0=silent, 1=per run, 2=per iteration)
            random_state: Seed or generator; None draws a fresh seed, which
                is exposed as seed_ after fitting
        """
        self.metric = get_distance(metric)
        self.centroid_rule = get_centroid_rule(centroid_rule)
        self.n_runs = n_runs
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        self.assignment_strategy = HardAssignment(self.metric)
        self.initialization_strategy = RandomPointInit()
        self.convergence_criterion = CentroidStability()

        # Fit state
        self.fitted_ = False
        self.seed_: Optional[int] = None
        self.result_: Optional[RunRecord] = None
        self.labels_: Optional[Tensor] = None
        self._generator: Optional[torch.Generator] = None

    @abstractmethod
    def _fit(self, data: PointSet) -> None:
        """Run the engine on validated data and set result_."""
        pass

    def fit(self, X: PointsLike, y: Optional[Any] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, 2) integer points
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        data = validate_points(X)
        check_n_runs(self.n_runs)
        check_max_iter(self.max_iter)
        self._generator, self.seed_ = check_random_state(self.random_state)

        start_time = time.time()
        self._fit(data)

        self.labels_ = self.assignment_strategy.compute_assignments(
            data.values, self._clusters_from(self.result_)
        )
        self.fitted_ = True

        if self.verbose:
            print(f"Total fitting time: {time.time() - start_time:.3f}s")

        return self

    def fit_predict(self, X: PointsLike, y: Optional[Any] = None) -> Tensor:
        """Fit and return cluster assignments for the training data."""
        self.fit(X)
        return self.labels_

    def predict(self, X: PointsLike) -> Tensor:
        """Assign new points to the nearest fitted centroid.

        Args:
            X: (n, 2) integer points

        Returns:
            (n,) tensor of cluster positions
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        data = validate_points(X)
        return self.assignment_strategy.compute_assignments(
            data.values, self._clusters_from(self.result_)
        )

    def _converge(self, data: PointSet, clusters: List[Cluster]) -> Tuple[AssignmentIndex, bool, int]:
        """Run Lloyd iteration until the centroids stop moving.

        Each pass clears memberships, assigns every point, relocates each
        non-empty cluster and clears memberships again. Clusters that
        attract no points keep their centroid and may stay empty for the
        rest of the run. A final assignment pass leaves memberships
        matching the final centroids.

        Args:
            data: The full data set
            clusters: Placed clusters, mutated in place

        Returns:
            (assignment index of the final pass, converged, iterations run).
            converged is False only when max_iter stopped the loop.
        """
        self.convergence_criterion.reset()
        converged = False
        n_iter = 0

        while self.max_iter is None or n_iter < self.max_iter:
            iter_start_time = time.time()
            n_iter += 1

            for cluster in clusters:
                cluster.clear_members()
            self.assignment_strategy.assign(data, clusters)

            for cluster in clusters:
                if cluster.members:
                    cluster.relocate(self.centroid_rule)
                cluster.clear_members()

            converged = self.convergence_criterion.check({
                'iteration': n_iter,
                'centroids': [c.centroid for c in clusters]
            })

            if self.verbose >= 2:
                n_moved = self.convergence_criterion.history[-1]['n_moved']
                print(f"Iteration {n_iter:3d}: {n_moved} of {len(clusters)} centroids moved "
                      f"({time.time() - iter_start_time:.3f}s)")

            if converged:
                break

        if not converged:
            warnings.warn(f"Failed to converge after {self.max_iter} iterations "
                          f"with {len(clusters)} clusters", ConvergenceWarning)

        for cluster in clusters:
            cluster.clear_members()
        index = self.assignment_strategy.assign(data, clusters)

        return index, converged, n_iter

    def _score(self, data: PointSet, clusters: List[Cluster], index: AssignmentIndex) -> float:
        """Dunn Index of the partition described by the assignment index."""
        labels = index.location_labels(data.points)
        return dunn_index(data.values, labels, self.metric, n_clusters=len(clusters))

    def _seed(self, clusters: List[Cluster], points) -> None:
        self.initialization_strategy.seed(clusters, points, self._generator)

    def _run_once(self, data: PointSet, clusters: List[Cluster], restart: int) -> RunRecord:
        """Converge an already seeded partition and freeze it with its score."""
        index, converged, n_iter = self._converge(data, clusters)
        score = self._score(data, clusters, index)
        return RunRecord.from_clusters(
            clusters, score, converged=converged, n_iter=n_iter, restart=restart
        )

    @staticmethod
    def _clusters_from(record: RunRecord) -> List[Cluster]:
        return [Cluster(c.centroid) for c in record.clusters]

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")

    @property
    def cluster_centers_(self) -> Tensor:
        """(k, 2) tensor of the selected run's centroids."""
        self._check_fitted()
        return self.result_.centers_tensor()

    @property
    def score_(self) -> float:
        """Dunn Index of the selected run."""
        self._check_fitted()
        return self.result_.score

    @property
    def n_clusters_(self) -> int:
        self._check_fitted()
        return self.result_.k

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'metric': self.metric,
            'centroid_rule': self.centroid_rule,
            'n_runs': self.n_runs,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            if key == 'metric':
                value = get_distance(value)
                self.assignment_strategy = HardAssignment(value)
            elif key == 'centroid_rule':
                value = get_centroid_rule(value)
            setattr(self, key, value)
        return self
