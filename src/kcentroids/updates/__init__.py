"""Centroid update rules for clustering algorithms."""

from typing import Union

from ..base.interfaces import CentroidRule
from .mean import MeanRule
from .median import MedianRule

_RULES = {
    'mean': MeanRule,
    'median': MedianRule,
}


def get_centroid_rule(rule: Union[str, CentroidRule]) -> CentroidRule:
    """Resolve a rule instance or name ('mean', 'median')."""
    if isinstance(rule, CentroidRule):
        return rule
    if isinstance(rule, str) and rule.lower() in _RULES:
        return _RULES[rule.lower()]()
    raise ValueError(f"Unknown centroid rule: {rule!r}. "
                     f"Expected one of {sorted(_RULES)}")


__all__ = [
    'MeanRule',
    'MedianRule',
    'get_centroid_rule'
]
