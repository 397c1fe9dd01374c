"""
ELBOW METHOD — choosing K from the inertia curve

Total within-cluster sum of squares always falls as K grows (K = n
gives zero). The useful K is where the curve bends: before the elbow
each extra cluster buys a big drop, after it only a small one.

find_elbow() locates the bend as the point farthest from the straight
line joining the first and last points of the curve.
"""

import numpy as np

from .kmeans import KMeans, validate_data


def elbow_analysis(X, k_range=range(1, 11), n_init=10, max_iter=100, tol=1e-4,
                   random_state=42):
    """
    Elbow method for choosing K.

    Runs KMeans once per candidate K and returns (ks, inertias).
    Candidates larger than the number of rows are skipped.
    """
    X = validate_data(X)
    ks = [int(k) for k in k_range if 1 <= k <= X.shape[0]]
    if not ks:
        raise ValueError(f"No usable K in {list(k_range)} for {X.shape[0]} observations")

    inertias = []
    for k in ks:
        km = KMeans(n_clusters=k, n_init=n_init, max_iter=max_iter, tol=tol,
                    random_state=random_state)
        km.fit(X)
        inertias.append(km.inertia_)

    return ks, inertias


def find_elbow(ks, inertias):
    """K at the point of maximum distance from the end-to-end chord."""
    ks = np.asarray(ks, dtype=float)
    inertias = np.asarray(inertias, dtype=float)
    if ks.shape != inertias.shape or ks.size == 0:
        raise ValueError("ks and inertias must be non-empty and the same length")
    if ks.size < 3:
        return int(ks[0])

    # Both axes scaled to [0, 1]
    x = (ks - ks[0]) / (ks[-1] - ks[0])
    span = inertias[0] - inertias[-1]
    y = (inertias - inertias[-1]) / span if span != 0 else np.zeros_like(inertias)

    # Chord runs from (0, 1) to (1, 0): distance ∝ |x + y - 1|
    distances = np.abs(x + y - 1) / np.sqrt(2)
    return int(ks[np.argmax(distances)])
