"""
Plain-text input and output for clustering runs.

Data files hold one point per line as two whitespace-separated integers.
Result files hold one line per run. Nothing in the engines touches files;
callers load points here, fit, and hand the records back for formatting.
"""

from pathlib import Path
from typing import Iterable, List, Union

from ..base.data_structures import Point, RunRecord

PathLike = Union[str, Path]


def parse_points(lines: Iterable[str]) -> List[Point]:
    """Parse points from lines of text.

    Reading stops at the first line that does not start with two integers,
    so a trailing blank line or footer ends the data set. Extra columns
    after the first two are ignored.

    Args:
        lines: Text lines, e.g. an open file

    Returns:
        Points in file order
    """
    points = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            break
        try:
            points.append(Point(int(fields[0]), int(fields[1])))
        except ValueError:
            break
    return points


def load_points(path: PathLike) -> List[Point]:
    """Read a data file. See parse_points for the format."""
    with open(path, 'r') as f:
        return parse_points(f)


def _format_coord(value: int) -> str:
    return repr(float(value))


def format_centroid(point: Point) -> str:
    """'x.0 y.0' rendering of a centroid."""
    return f"{_format_coord(point.x)} {_format_coord(point.y)}"


def format_run(record: RunRecord) -> str:
    """Flat result line: every centroid's coordinates, then the score.

    Example: '0.0 0.0 10.0 0.0 9.0'
    """
    fields = [format_centroid(c) for c in record.centroids]
    fields.append(repr(float(record.score)))
    return ' '.join(fields)


def format_adaptive_run(record: RunRecord) -> str:
    """Labelled result line used for adaptive searches.

    Example: 'K: 2 V: [0.0 0.0, 10.0 0.0] Dunn Index: 9.0'
    """
    centroids = ', '.join(format_centroid(c) for c in record.centroids)
    return f"K: {record.k} V: [{centroids}] Dunn Index: {float(record.score)!r}"


def output_name(input_path: PathLike, n_clusters: int) -> str:
    """File name for fixed-K results: '<input stem>_<k>.txt'.

    The stem is everything before the first dot of the input file name.
    """
    stem = Path(input_path).name.split('.')[0]
    return f"{stem}_{n_clusters}.txt"


def seed_output_name(seed: int) -> str:
    """File name for adaptive results: the generator seed, so a result file
    identifies the random stream that produced it."""
    return str(seed)


def write_runs(path: PathLike, lines: Iterable[str]) -> Path:
    """Write result lines, one per line, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        for line in lines:
            f.write(line + '\n')
    return path
