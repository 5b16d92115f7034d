"""
Demo of the four clustering presets.

This example shows how to:
1. Generate synthetic integer blobs
2. Fit k-means, k-medians, x-means and x-medians
3. Compare Dunn indices and visualize the adaptive search
"""

import torch
import matplotlib.pyplot as plt

from kcentroids import (
    create_kmeans, create_kmedians, create_xmeans, create_xmedians,
    plot_clusters_2d, plot_score_by_k
)


def generate_blobs(n_per_cluster=40, centers=((0, 0), (60, 10), (25, 70), (80, 80)),
                   spread=8.0, seed=42):
    """Integer points scattered around a few centers."""
    generator = torch.Generator().manual_seed(seed)

    blobs = []
    for cx, cy in centers:
        offsets = torch.randn(n_per_cluster, 2, generator=generator) * spread
        blobs.append(torch.round(offsets + torch.tensor([cx, cy], dtype=torch.float32)))

    return torch.cat(blobs, dim=0).to(torch.int64)


def main():
    print("=== Centroid Clustering Presets Demo ===\n")

    X = generate_blobs()
    print(f"Data shape: {tuple(X.shape)}\n")

    fixed = [
        ("k-means", create_kmeans(4, restarts=10, random_state=0)),
        ("k-medians", create_kmedians(4, restarts=10, random_state=0)),
    ]
    for name, model in fixed:
        model.fit(X)
        print(f"{name:10s} best Dunn = {model.best_run_.score:.4f}  "
              f"last Dunn = {model.last_run_.score:.4f}  sizes = {model.best_run_.sizes}")

    adaptive = [
        ("x-means", create_xmeans(8, restarts=5, random_state=0)),
        ("x-medians", create_xmedians(8, restarts=5, random_state=0)),
    ]
    for name, model in adaptive:
        model.fit(X)
        print(f"{name:10s} best K = {model.best_run_.k}  Dunn = {model.best_run_.score:.4f}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    plot_clusters_2d(fixed[0][1].best_run_, ax=axes[0], title="k-means, K = 4")
    plot_clusters_2d(adaptive[1][1].best_run_, ax=axes[1], show_legend=False,
                     title=f"x-medians, K = {adaptive[1][1].best_run_.k}")
    plot_score_by_k(adaptive[1][1].history_, ax=axes[2], title="x-medians: Dunn index by K")
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
