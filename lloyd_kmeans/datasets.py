"""
DATASETS — the clustering challenge suite

Each generator returns (X, y) where y is the true group of every point.
Clustering never sees y; it is only used to score the result.

    make_clustered  → round blobs: where k-means should succeed
    make_elongated  → stretched ellipses: violates the spherical assumption
    make_circles    → concentric rings: non-convex, k-means fails
    make_moons      → interleaved half-moons: non-convex, k-means fails
"""

import numpy as np


def make_clustered(n_samples=500, n_clusters=5, random_state=42):
    """
    WHAT: Gaussian blobs with random centers and spreads.
    WHO WINS: K-means, when K matches n_clusters.

    n_samples is rounded down to a multiple of n_clusters.
    """
    rng = np.random.RandomState(random_state)

    n_per_cluster = n_samples // n_clusters
    X = []
    y = []

    for i in range(n_clusters):
        center = rng.randn(2) * 5
        spread = rng.rand() * 0.5 + 0.3

        X.append(rng.randn(n_per_cluster, 2) * spread + center)
        y.extend([i] * n_per_cluster)

    X = np.vstack(X)
    y = np.array(y)

    idx = rng.permutation(len(y))
    return X[idx], y[idx]


def make_elongated(n_samples=200, separation=5.0, random_state=42):
    """
    WHAT: One horizontal and one vertical ellipse, side by side.
    WHO FAILS: K-means tends to cut the long ellipse in half.
    """
    rng = np.random.RandomState(random_state)
    n = n_samples // 2

    X0 = rng.randn(n, 2) @ np.array([[3, 0], [0, 0.3]])
    X1 = rng.randn(n, 2) @ np.array([[0.3, 0], [0, 3]]) + np.array([separation, 0])

    X = np.vstack([X0, X1])
    y = np.array([0]*n + [1]*n)

    idx = rng.permutation(len(y))
    return X[idx], y[idx]


def make_circles(n_samples=500, noise=0.05, random_state=42):
    """
    WHAT: Concentric circles — inner ring is group 0, outer is group 1.
    WHO FAILS: K-means — no pair of centroids separates nested rings.
    """
    rng = np.random.RandomState(random_state)
    n = n_samples // 2

    # Inner circle, radius 1
    theta0 = rng.rand(n) * 2 * np.pi
    r0 = 1 + rng.randn(n) * noise
    X0 = np.column_stack([r0 * np.cos(theta0), r0 * np.sin(theta0)])

    # Outer circle, radius 3
    theta1 = rng.rand(n) * 2 * np.pi
    r1 = 3 + rng.randn(n) * noise
    X1 = np.column_stack([r1 * np.cos(theta1), r1 * np.sin(theta1)])

    X = np.vstack([X0, X1])
    y = np.array([0]*n + [1]*n)

    idx = rng.permutation(len(y))
    return X[idx], y[idx]


def make_moons(n_samples=500, noise=0.15, random_state=42):
    """
    WHAT: Two interleaved half-moons.
    WHO FAILS: K-means splits them with a straight line.
    """
    rng = np.random.RandomState(random_state)
    n = n_samples // 2

    # Upper semicircle
    theta0 = np.linspace(0, np.pi, n)
    X0 = np.column_stack([np.cos(theta0), np.sin(theta0)])

    # Lower semicircle, shifted right and down
    theta1 = np.linspace(0, np.pi, n)
    X1 = np.column_stack([1 - np.cos(theta1), 0.5 - np.sin(theta1)])

    X = np.vstack([X0, X1]) + rng.randn(2 * n, 2) * noise
    y = np.array([0]*n + [1]*n)

    idx = rng.permutation(len(y))
    return X[idx], y[idx]
