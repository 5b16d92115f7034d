from kcentroids.base.data_structures import ClusterSnapshot, Point, RunRecord
from kcentroids.utils.io import (
    format_adaptive_run, format_centroid, format_run, load_points,
    output_name, parse_points, seed_output_name, write_runs
)


def _record(*centroids, score=9.0):
    clusters = tuple(ClusterSnapshot(Point(*c), ()) for c in centroids)
    return RunRecord(k=len(clusters), clusters=clusters, score=score)


def test_parse_points_reads_pairs():
    assert parse_points(["1 2\n", "-4   7\n", "3\t4 extra\n"]) == [
        Point(1, 2), Point(-4, 7), Point(3, 4)
    ]


def test_parse_points_stops_at_first_bad_line():
    assert parse_points(["1 2", "", "5 6"]) == [Point(1, 2)]
    assert parse_points(["1 2", "x 3", "5 6"]) == [Point(1, 2)]
    assert parse_points(["1 2", "3", "5 6"]) == [Point(1, 2)]
    assert parse_points(["1.5 2"]) == []


def test_load_points(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text("0 0\n10 0\n0 10\n")
    assert load_points(path) == [Point(0, 0), Point(10, 0), Point(0, 10)]


def test_format_centroid():
    assert format_centroid(Point(0, 0)) == "0.0 0.0"
    assert format_centroid(Point(-3, 5)) == "-3.0 5.0"


def test_format_run():
    assert format_run(_record((0, 0), (10, 0))) == "0.0 0.0 10.0 0.0 9.0"
    assert format_run(_record((1, 2), score=0.0)) == "1.0 2.0 0.0"


def test_format_adaptive_run():
    line = format_adaptive_run(_record((0, 0), (10, 0)))
    assert line == "K: 2 V: [0.0 0.0, 10.0 0.0] Dunn Index: 9.0"


def test_score_keeps_full_precision():
    line = format_run(_record((0, 0), score=2 ** 0.5))
    assert line.endswith(repr(2 ** 0.5))


def test_output_names():
    assert output_name("data/set1.txt", 4) == "set1_4.txt"
    assert output_name("archive.tar.gz", 3) == "archive_3.txt"
    assert output_name("points", 2) == "points_2.txt"
    assert seed_output_name(12345) == "12345"


def test_write_runs_creates_directories(tmp_path):
    target = tmp_path / "outputs" / "nested" / "set1_2.txt"
    written = write_runs(target, ["a", "b"])
    assert written == target
    assert target.read_text() == "a\nb\n"
