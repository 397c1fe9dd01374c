"""
CLUSTER QUALITY METRICS

Two kinds of question:

    "Is this clustering any good?"        → silhouette_score (no labels)
    "Does it match a known partition?"    → adjusted_rand_index,
                                            clustering_accuracy

Cluster labels are arbitrary: {0, 1, 2} and {2, 0, 1} describe the
same partition. Every comparison here is invariant to relabeling.
"""

from itertools import permutations

import numpy as np


def clustering_accuracy(y_true, y_pred, n_clusters):
    """
    Compute clustering accuracy with optimal label permutation.

    Clusters have arbitrary labels, so we find the permutation that
    maximizes accuracy. counts[p, t] holds the points predicted p with
    true label t; a permutation scores Σ_p counts[p, perm[p]].
    Labels outside [0, n_clusters) never count as a match.
    """
    y_true = np.asarray(y_true).ravel()
    y_pred = np.asarray(y_pred).ravel()
    if y_true.shape != y_pred.shape:
        raise ValueError(f"Label vectors differ in length: {y_true.shape[0]} vs {y_pred.shape[0]}")
    if y_true.size == 0:
        raise ValueError("Cannot compare empty labelings")

    keep = (y_pred >= 0) & (y_pred < n_clusters) & (y_true >= 0) & (y_true < n_clusters)
    counts = np.zeros((n_clusters, n_clusters), dtype=np.int64)
    np.add.at(counts, (y_pred[keep].astype(int), y_true[keep].astype(int)), 1)

    rows = np.arange(n_clusters)
    best = max(counts[rows, list(perm)].sum() for perm in permutations(range(n_clusters)))
    return float(best / y_true.size)


def contingency_table(labels_a, labels_b):
    """Counts n_ij of points in cluster i of `a` and cluster j of `b`."""
    _, a_idx = np.unique(labels_a, return_inverse=True)
    _, b_idx = np.unique(labels_b, return_inverse=True)
    table = np.zeros((a_idx.max() + 1, b_idx.max() + 1), dtype=np.int64)
    np.add.at(table, (a_idx, b_idx), 1)
    return table


def _pairs(counts):
    return np.sum(counts * (counts - 1) / 2.0)


def adjusted_rand_index(labels_a, labels_b):
    """
    Adjusted Rand Index between two partitions of the same points.

        ARI = (Σ C(n_ij, 2) - E) / (½[Σ C(a_i, 2) + Σ C(b_j, 2)] - E)
        E   = Σ C(a_i, 2) · Σ C(b_j, 2) / C(n, 2)

    1.0 means identical up to relabeling, ~0 means chance agreement.
    """
    labels_a = np.asarray(labels_a).ravel()
    labels_b = np.asarray(labels_b).ravel()
    if labels_a.shape != labels_b.shape:
        raise ValueError(f"Label vectors differ in length: {labels_a.shape[0]} vs {labels_b.shape[0]}")
    n = labels_a.shape[0]
    if n == 0:
        raise ValueError("Cannot compare empty labelings")

    table = contingency_table(labels_a, labels_b)
    sum_comb = _pairs(table)
    sum_a = _pairs(table.sum(axis=1))
    sum_b = _pairs(table.sum(axis=0))
    total = n * (n - 1) / 2.0

    expected = sum_a * sum_b / total if total > 0 else 0.0
    max_index = (sum_a + sum_b) / 2.0

    # Both partitions trivial (all one cluster, or all singletons)
    if max_index == expected:
        return 1.0
    return float((sum_comb - expected) / (max_index - expected))


def silhouette_score(X, labels):
    """
    Compute silhouette score — how well-separated are clusters?

    For each point:
        a = mean distance to points in same cluster
        b = mean distance to points in nearest other cluster
        s = (b - a) / max(a, b)

    Score in [-1, 1]: higher = better separated
    """
    X = np.asarray(X, dtype=float)
    labels = np.asarray(labels)
    n_samples = X.shape[0]
    unique_labels = np.unique(labels)
    n_clusters = len(unique_labels)

    if n_clusters == 1:
        return 0.0  # Can't compute silhouette with 1 cluster

    silhouettes = np.zeros(n_samples)

    for i in range(n_samples):
        # Distances from point i only, O(n·d) memory
        dist = np.sqrt(np.sum((X - X[i])**2, axis=1))

        # a: mean distance to same-cluster points
        same_cluster = labels == labels[i]
        same_cluster[i] = False  # Exclude self
        if np.sum(same_cluster) == 0:
            continue  # Singleton cluster: s = 0 by convention
        a = np.mean(dist[same_cluster])

        # b: mean distance to nearest other cluster
        b = min(np.mean(dist[labels == k]) for k in unique_labels if k != labels[i])

        silhouettes[i] = (b - a) / max(a, b) if max(a, b) > 0 else 0

    return float(np.mean(silhouettes))
