import pytest
import torch

from kcentroids.assignments import HardAssignment
from kcentroids.base.data_structures import Cluster, Point
from kcentroids.distances import EuclideanDistance, ManhattanDistance
from kcentroids.utils.validation import validate_points


def _clusters(*locations):
    return [Cluster(Point(x, y)) for x, y in locations]


def test_every_point_joins_nearest_cluster(two_blobs):
    data = validate_points(two_blobs)
    clusters = _clusters((0, 0), (20, 20))

    index = HardAssignment().assign(data, clusters)

    assert clusters[0].members == [Point(0, 0), Point(1, 0), Point(0, 1)]
    assert clusters[1].members == [Point(20, 20), Point(21, 20), Point(20, 21)]
    assert index.labels(data.points).tolist() == [0, 0, 0, 1, 1, 1]
    assert len(index) == 6


def test_ties_go_to_first_stored_cluster():
    data = validate_points([(5, 0)])

    forward = _clusters((0, 0), (10, 0))
    HardAssignment().assign(data, forward)
    assert forward[0].members == [Point(5, 0)]

    backward = _clusters((10, 0), (0, 0))
    HardAssignment().assign(data, backward)
    assert backward[0].members == [Point(5, 0)]


def test_metric_changes_nearest_cluster():
    # (0,0) -> (3,3): euclidean 4.24, manhattan 6
    # (0,0) -> (5,0): euclidean 5,    manhattan 5
    data = validate_points([(0, 0)])

    labels_e = HardAssignment(EuclideanDistance()).compute_assignments(
        data.values, _clusters((3, 3), (5, 0)))
    labels_m = HardAssignment(ManhattanDistance()).compute_assignments(
        data.values, _clusters((3, 3), (5, 0)))

    assert labels_e.tolist() == [0]
    assert labels_m.tolist() == [1]


def test_far_cluster_may_stay_empty():
    data = validate_points([(0, 0), (1, 1)])
    clusters = _clusters((0, 0), (1000, 1000))
    HardAssignment().assign(data, clusters)
    assert clusters[1].members == []


def test_duplicate_points_assigned_together():
    data = validate_points([(2, 2), (9, 9), (2, 2)])
    clusters = _clusters((0, 0), (10, 10))
    index = HardAssignment().assign(data, clusters)
    assert clusters[0].members == [Point(2, 2), Point(2, 2)]
    assert index.label_of(Point(2, 2)) == 0


def test_assign_requires_cleared_members():
    data = validate_points([(0, 0)])
    clusters = _clusters((0, 0))
    clusters[0].add_member(Point(0, 0))
    with pytest.raises(ValueError):
        HardAssignment().assign(data, clusters)


def test_assign_rejects_unplaced_or_missing_clusters():
    values = torch.tensor([[0, 0]])
    with pytest.raises(ValueError):
        HardAssignment().compute_assignments(values, [])
    with pytest.raises(ValueError):
        HardAssignment().compute_assignments(values, [Cluster()])
