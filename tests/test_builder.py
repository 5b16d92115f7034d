import pytest

from kcentroids import (
    AdaptiveKClustering, ClusteringBuilder, EuclideanDistance, FixedKClustering,
    ManhattanDistance, MeanRule, MedianRule, create_kmeans, create_kmedians,
    create_preset, create_xmeans, create_xmedians
)


def test_builder_defaults():
    model = ClusteringBuilder().build_fixed(3)
    assert isinstance(model, FixedKClustering)
    assert isinstance(model.metric, EuclideanDistance)
    assert isinstance(model.centroid_rule, MeanRule)
    assert model.n_runs == 30
    assert model.max_iter == 300
    assert model.selection == 'best'


def test_builder_chain():
    model = (ClusteringBuilder()
             .with_manhattan_distance()
             .with_median_update()
             .with_restarts(5)
             .with_max_iter(None)
             .with_random_state(7)
             .build_adaptive(6))
    assert isinstance(model, AdaptiveKClustering)
    assert isinstance(model.metric, ManhattanDistance)
    assert isinstance(model.centroid_rule, MedianRule)
    assert model.assignment_strategy.metric is model.metric
    assert model.max_clusters == 6
    assert model.n_runs == 5
    assert model.max_iter is None
    assert model.random_state == 7


@pytest.mark.parametrize("factory, engine, metric, rule", [
    (create_kmeans, FixedKClustering, EuclideanDistance, MeanRule),
    (create_kmedians, FixedKClustering, ManhattanDistance, MedianRule),
    (create_xmeans, AdaptiveKClustering, EuclideanDistance, MeanRule),
    (create_xmedians, AdaptiveKClustering, ManhattanDistance, MedianRule),
])
def test_presets(factory, engine, metric, rule):
    model = factory(4)
    assert isinstance(model, engine)
    assert isinstance(model.metric, metric)
    assert isinstance(model.centroid_rule, rule)
    assert model.n_runs == 30


def test_preset_options_forwarded():
    model = create_kmeans(2, restarts=3, selection='last', verbose=1, random_state=0)
    assert model.n_runs == 3
    assert model.selection == 'last'
    assert model.verbose == 1
    assert model.random_state == 0


def test_create_preset_by_name():
    model = create_preset('xmedians', 5, restarts=2)
    assert isinstance(model, AdaptiveKClustering)
    assert model.max_clusters == 5
    assert isinstance(model.metric, ManhattanDistance)

    with pytest.raises(ValueError):
        create_preset('kmodes', 2)


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        create_kmeans(2, tolerance=0.1)


def test_builder_rejects_unknown_metric():
    with pytest.raises(ValueError):
        ClusteringBuilder().with_metric('cosine')
