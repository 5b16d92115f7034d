"""
Fixed-K engine: restarts, result selection and the fitted accessors.
"""

import math

import pytest
import torch

from kcentroids import FixedKClustering, Point
from kcentroids.algorithms.builder import create_kmedians

from utils import all_members


def test_two_blobs_best_run(two_blobs):
    model = FixedKClustering(2, n_runs=5, random_state=0).fit(two_blobs)

    best = model.best_run_
    assert set(best.centroids) == {Point(0, 0), Point(20, 20)}
    assert best.score == pytest.approx(math.sqrt(761) / math.sqrt(2))
    assert model.score_ == best.score
    assert model.n_clusters_ == 2


def test_kmedians_two_blobs(two_blobs):
    model = create_kmedians(2, restarts=5, random_state=0).fit(two_blobs)
    assert set(model.best_run_.centroids) == {Point(0, 0), Point(20, 20)}
    # manhattan: dmin 39 between (1,0) and (20,20), dmax 2
    assert model.best_run_.score == pytest.approx(19.5)


def test_every_restart_recorded(two_blobs):
    model = FixedKClustering(2, n_runs=7, random_state=1).fit(two_blobs)
    assert len(model.runs_) == 7
    assert [r.restart for r in model.runs_] == list(range(7))
    assert all(r.k == 2 for r in model.runs_)
    assert model.best_run_.score == max(r.score for r in model.runs_)
    assert model.last_run_ is model.runs_[-1]


def test_partition_covers_data(two_blobs):
    model = FixedKClustering(2, n_runs=3, random_state=2).fit(two_blobs)
    for record in model.runs_:
        assert sorted(all_members(record)) == sorted(two_blobs)


def test_selection_last_reports_final_restart(two_blobs):
    model = FixedKClustering(2, n_runs=4, selection='last', random_state=0).fit(two_blobs)
    assert model.result_ is model.runs_[-1]
    assert model.score_ == model.runs_[-1].score


def test_bad_selection_rejected():
    with pytest.raises(ValueError):
        FixedKClustering(2, selection='worst')


def test_labels_and_predict(two_blobs):
    model = FixedKClustering(2, n_runs=5, random_state=0).fit(two_blobs)
    labels = model.labels_.tolist()
    assert len(set(labels[:3])) == 1
    assert len(set(labels[3:])) == 1
    assert labels[0] != labels[3]

    predicted = model.predict([(2, 2), (19, 19)]).tolist()
    assert predicted == [labels[0], labels[3]]
    assert model.cluster_centers_.shape == (2, 2)


def test_predict_before_fit_raises():
    with pytest.raises(RuntimeError):
        FixedKClustering(2).predict([(0, 0)])
    with pytest.raises(RuntimeError):
        FixedKClustering(2).score_


def test_single_cluster_scores_zero(two_blobs):
    model = FixedKClustering(1, n_runs=2, random_state=0).fit(two_blobs)
    assert all(r.score == 0.0 for r in model.runs_)
    assert model.runs_[0].sizes == (6,)


def test_one_cluster_per_point(two_blobs):
    model = FixedKClustering(6, n_runs=2, random_state=0).fit(two_blobs)
    record = model.runs_[0]
    assert record.sizes == (1,) * 6
    assert set(record.centroids) == {Point(x, y) for x, y in two_blobs}
    assert record.score == 0.0


def test_too_many_clusters_rejected(two_blobs):
    with pytest.raises(ValueError):
        FixedKClustering(7).fit(two_blobs)
    with pytest.raises(ValueError):
        FixedKClustering(0).fit(two_blobs)


def test_invalid_restart_count_rejected(two_blobs):
    with pytest.raises(ValueError):
        FixedKClustering(2, n_runs=0).fit(two_blobs)


def test_same_seed_same_runs(two_blobs):
    a = FixedKClustering(2, n_runs=5, random_state=42).fit(two_blobs)
    b = FixedKClustering(2, n_runs=5, random_state=42).fit(two_blobs)
    assert a.runs_ == b.runs_
    assert a.seed_ == b.seed_ == 42


def test_generator_random_state(two_blobs):
    generator = torch.Generator().manual_seed(9)
    model = FixedKClustering(2, n_runs=2, random_state=generator).fit(two_blobs)
    assert model.seed_ == 9


def test_fresh_seed_reported(two_blobs):
    model = FixedKClustering(2, n_runs=2).fit(two_blobs)
    assert isinstance(model.seed_, int)
    replay = FixedKClustering(2, n_runs=2, random_state=model.seed_).fit(two_blobs)
    assert replay.runs_ == model.runs_


def test_get_set_params():
    model = FixedKClustering(3, metric='manhattan', centroid_rule='median', n_runs=4)
    params = model.get_params()
    assert params['n_clusters'] == 3
    assert params['n_runs'] == 4
    assert params['selection'] == 'best'
    assert params['metric'].name == 'manhattan'

    model.set_params(metric='euclidean', n_runs=2)
    assert model.metric.name == 'euclidean'
    assert model.assignment_strategy.metric is model.metric
    assert model.n_runs == 2
