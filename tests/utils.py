# tests/utils.py
"""
Small, reusable helpers used across the kcentroids test suite.

Functions:
- all_members(record): every member point of a RunRecord, cluster by cluster.
- perm_invariant_accuracy(labels, truth): best label agreement over relabelings.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict, List

import numpy as np


def all_members(record) -> List[tuple]:
    """Flatten a RunRecord's memberships into (x, y) tuples."""
    return [p.as_tuple() for c in record.clusters for p in c.members]


def perm_invariant_accuracy(labels, truth) -> float:
    """
    Best fraction of points whose predicted label matches the truth under
    some one-to-one relabeling. Brute force over permutations; keep K small.
    """
    labels = np.asarray(labels)
    truth = np.asarray(truth)
    pred_ids = np.unique(labels)
    true_ids = np.unique(truth)
    if len(pred_ids) != len(true_ids):
        return 0.0

    best = 0.0
    for perm in itertools.permutations(true_ids):
        mapping = dict(zip(pred_ids, perm))
        mapped = np.array([mapping[v] for v in labels])
        best = max(best, float(np.mean(mapped == truth)))
    return best


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":90,"K":3} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        meta_str = " " + json.dumps(meta, separators=(",", ":")) if meta else ""
        print(f"[timing] {label}{meta_str} {dt:.3f}s")
