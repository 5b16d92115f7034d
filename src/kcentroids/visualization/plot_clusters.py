"""
Cluster visualization utilities.

Scatter plots of a recorded partition and score curves for adaptive
searches.
"""

from typing import List, Optional, Sequence
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import RunRecord


def plot_clusters_2d(record: RunRecord,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot the members and centroids of a recorded partition.

    Args:
        record: Converged partition to draw
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title (defaults to K and the Dunn index)

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = record.k

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for i, cluster in enumerate(record.clusters):
        if cluster.size == 0:
            continue
        members = np.array([p.as_tuple() for p in cluster.members])
        ax.scatter(members[:, 0], members[:, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {i} ({cluster.size})')

    centers = np.array([p.as_tuple() for p in record.centroids])
    ax.scatter(centers[:, 0], centers[:, 1],
               c='black',
               marker=center_marker,
               s=center_size,
               edgecolors='white',
               linewidth=2,
               label='Centroids',
               zorder=10)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(title if title else f'K = {record.k}, Dunn index = {record.score:.4f}')

    if show_legend:
        ax.legend()

    return ax


def plot_score_by_k(history: Sequence[RunRecord],
                    ax: Optional[plt.Axes] = None,
                    title: Optional[str] = None) -> plt.Axes:
    """Plot Dunn index against K for the records of an adaptive search.

    Records from different restarts are drawn as separate lines.

    Args:
        history: RunRecords, e.g. AdaptiveKClustering.history_
        ax: Matplotlib axes (created if None)
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))

    restarts = sorted({r.restart for r in history})
    for restart in restarts:
        records = [r for r in history if r.restart == restart]
        ax.plot([r.k for r in records], [r.score for r in records],
                marker='o', alpha=0.6, label=f'Run {restart}')

    if history:
        best = max(history, key=lambda r: r.score)
        ax.scatter([best.k], [best.score], c='red', s=150, marker='*', zorder=10,
                   label=f'Best (K = {best.k})')

    ax.set_xlabel('K')
    ax.set_ylabel('Dunn index')
    if title:
        ax.set_title(title)
    if len(restarts) <= 10:
        ax.legend()

    return ax
