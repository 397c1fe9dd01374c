"""
LLOYD ITERATOR — the assign/update loop at the heart of k-means

===============================================================
THE LOOP
===============================================================

Given observations X (n × d) and starting centers C (k × d):

    for i = 1 .. max_iter:
        1. ASSIGN:  every point → nearest center (ties → lowest index)
        2. STABLE?  assignments identical to last pass → stop, report i - 1
        3. UPDATE:  every center → mean of its points
                    (empty cluster → reseed to a random observation)
        4. SHIFT?   Σ (new - old)² < tol → stop, report i

    Exhausting max_iter reports max_iter.

The stability exit counts only the passes that actually refined the
centers: the pass that merely confirms nothing moved is not counted.
The tolerance exit counts the pass that triggered it.

===============================================================
TWO WAYS TO MEASURE DISTANCE
===============================================================

    'direct':    ||x - c||²  via broadcasting, O(n·k·d) memory
    'expanded':  ||x||² - 2 x·c + ||c||²  via one matrix product

The expansion is faster for large inputs but loses precision when
centers sit close together: cancellation can push a squared distance
slightly below zero, so it is clamped at 0 before the argmin.

===============================================================
"""

import logging
import warnings
from typing import Callable, NamedTuple, Optional

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 100
DEFAULT_TOL = 1e-4

METHODS = ('direct', 'expanded')


class EmptyClusterWarning(UserWarning):
    """A cluster lost all of its points and was reseeded."""


class LloydResult(NamedTuple):
    """
    Output of one Lloyd run.

    centers      : (k, d) final center positions
    cluster      : (n,) 0-based cluster index per observation
    iterations   : refinement passes actually performed
    withinss     : (k,) sum of squared distances to the final centers
    tot_withinss : withinss.sum()
    """
    centers: np.ndarray
    cluster: np.ndarray
    iterations: int
    withinss: np.ndarray
    tot_withinss: float


def squared_distances(X: np.ndarray, centers: np.ndarray,
                      method: str = 'direct') -> np.ndarray:
    """
    Squared Euclidean distance from every observation to every center.

    Returns an (n, k) matrix.
    """
    if method == 'direct':
        diff = X[:, np.newaxis, :] - centers[np.newaxis, :, :]  # (n, k, d)
        return np.sum(diff**2, axis=2)
    elif method == 'expanded':
        X_sq = np.sum(X**2, axis=1, keepdims=True)  # (n, 1)
        C_sq = np.sum(centers**2, axis=1)          # (k,)
        XC = X @ centers.T                          # (n, k)
        return np.maximum(X_sq + C_sq - 2 * XC, 0.0)
    raise ValueError(f"Unknown method: {method}")


def assign_clusters(X: np.ndarray, centers: np.ndarray,
                    method: str = 'direct') -> np.ndarray:
    """Index of the nearest center for each observation (first wins ties)."""
    # argmin returns the first occurrence of the minimum
    return np.argmin(squared_distances(X, centers, method), axis=1)


def update_centroids(X: np.ndarray, labels: np.ndarray, n_clusters: int,
                     draw_index: Callable[[int], int],
                     iteration: Optional[int] = None) -> np.ndarray:
    """
    New center matrix: the mean of each cluster's points.

    An empty cluster is moved onto the observation picked by
    draw_index(n). Two empty clusters may land on the same row.
    """
    n_samples, n_features = X.shape
    centroids = np.zeros((n_clusters, n_features))

    for k in range(n_clusters):
        mask = labels == k
        if np.sum(mask) > 0:
            centroids[k] = X[mask].mean(axis=0)
        else:
            idx = int(draw_index(n_samples))
            if not 0 <= idx < n_samples:
                raise ValueError(f"draw_index returned {idx}, expected a row in [0, {n_samples})")
            warnings.warn(
                f"Empty cluster in iteration {iteration} - re-initializing cluster {k} "
                f"to observation {idx}",
                EmptyClusterWarning,
                stacklevel=3,
            )
            centroids[k] = X[idx]

    return centroids


def within_cluster_ss(X: np.ndarray, centers: np.ndarray,
                      labels: np.ndarray) -> np.ndarray:
    """Per-cluster sum of squared distances; 0 for clusters with no points."""
    point_sq_dists = np.sum((X - centers[labels])**2, axis=1)
    return np.bincount(labels, weights=point_sq_dists, minlength=len(centers))


def index_drawer(random_state=None) -> Callable[[int], int]:
    """
    Build a draw_index function from a seed or RandomState.

    Each call returns a uniformly random row index in [0, n).
    """
    if isinstance(random_state, np.random.RandomState):
        rng = random_state
    else:
        rng = np.random.RandomState(random_state)
    return lambda n: rng.randint(n)


def check_inputs(X, centers, max_iter, tol):
    """Fail loudly on anything the loop cannot handle."""
    if (not isinstance(X, np.ndarray) or X.ndim != 2 or not np.issubdtype(X.dtype, np.number)
            or np.iscomplexobj(X)):
        raise ValueError("X must be a numeric matrix.")
    if X.shape[0] < 1:
        raise ValueError("X must have at least one row.")
    if X.shape[1] < 1:
        raise ValueError("X must have at least one column.")
    if np.isnan(X).any():
        raise ValueError("X contains missing values (NA or NaN). "
                         "Please remove or impute them before clustering.")
    if np.isinf(X).any():
        raise ValueError("X contains infinite values. Please handle them before clustering.")

    if (not isinstance(centers, np.ndarray) or centers.ndim != 2
            or not np.issubdtype(centers.dtype, np.number) or np.iscomplexobj(centers)):
        raise ValueError("Initial centers must be a numeric matrix.")
    if centers.shape[1] != X.shape[1]:
        raise ValueError("Dimensions of X and initial centers matrix do not match.")
    if not 1 <= centers.shape[0] <= X.shape[0]:
        raise ValueError("k must be a positive integer less than or equal to "
                         "the number of rows in X.")
    if np.isnan(centers).any():
        raise ValueError("Initial centers matrix contains missing values.")
    if np.isinf(centers).any():
        raise ValueError("Initial centers matrix contains infinite values.")

    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)) or max_iter <= 0:
        raise ValueError("max_iter must be a positive integer.")
    if not tol >= 0:  # also rejects NaN
        raise ValueError("tol must be non-negative.")


def lloyd(X: np.ndarray, initial_centers: np.ndarray,
          max_iter: int = DEFAULT_MAX_ITER, tol: float = DEFAULT_TOL,
          method: str = 'direct', random_state=None,
          draw_index: Optional[Callable[[int], int]] = None) -> LloydResult:
    """
    Run Lloyd's algorithm from the given starting centers.

    Parameters:
    -----------
    X : (n, d) array
        Observations. Read only.
    initial_centers : (k, d) array
        Starting centers. Copied, never modified.
    max_iter : int
        Upper bound on refinement passes.
    tol : float
        Stop once the summed squared center movement drops below this.
    method : str
        'direct' or 'expanded' squared-distance computation.
    random_state : int, RandomState or None
        Seeds the empty-cluster reseeding when draw_index is not given.
    draw_index : callable or None
        draw_index(n) -> row index used to reseed an empty cluster.

    Returns:
    --------
    LloydResult
    """
    check_inputs(X, initial_centers, max_iter, tol)
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")
    if draw_index is None:
        draw_index = index_drawer(random_state)

    X = X.astype(float, copy=False)
    centers = initial_centers.astype(float)
    n_clusters = centers.shape[0]

    # Sentinel: no real assignment equals -1, so pass 1 never looks stable
    labels = np.full(X.shape[0], -1, dtype=np.intp)
    n_iter = max_iter

    for iteration in range(1, max_iter + 1):
        new_labels = assign_clusters(X, centers, method)

        if np.array_equal(new_labels, labels):
            n_iter = iteration - 1
            logger.debug("Assignments stable after %d iterations", n_iter)
            break
        labels = new_labels

        new_centers = update_centroids(X, labels, n_clusters, draw_index, iteration)

        center_change = np.sum((new_centers - centers)**2)
        centers = new_centers

        if center_change < tol:
            n_iter = iteration
            logger.debug("Center shift %.3e below tol after %d iterations",
                         center_change, n_iter)
            break
    else:
        logger.debug("Reached max_iter (%d) without converging", max_iter)

    withinss = within_cluster_ss(X, centers, labels)

    return LloydResult(
        centers=centers,
        cluster=labels,
        iterations=n_iter,
        withinss=withinss,
        tot_withinss=float(np.sum(withinss)),
    )
