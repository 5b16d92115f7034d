"""Initialization strategies for clustering algorithms."""

from .random import RandomPointInit

__all__ = [
    'RandomPointInit'
]
