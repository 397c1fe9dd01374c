"""
K-MEANS FRONT END — validation, initialization, restarts

lloyd() assumes clean input and is handed its starting centers.
This module is what a user actually calls:

    kmeans(X, centers=3)          → k random rows of X as the start
    kmeans(X, centers=C0)         → explicit k × d starting matrix
    KMeans(n_clusters=3).fit(X)   → n_init restarts, keep lowest WSS

Starting centers are always chosen uniformly from the data rows.
Smarter seeding (k-means++) is out of scope here: bad starts are
handled by restarting, not by spreading the seeds apart.
"""

import numpy as np

from .lloyd import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    METHODS,
    LloydResult,
    index_drawer,
    lloyd,
    squared_distances,
)


def validate_data(X):
    """Coerce X to a float matrix and reject anything lloyd() can't use."""
    X = np.asarray(X)
    if (X.ndim != 2 or np.iscomplexobj(X)
            or not (np.issubdtype(X.dtype, np.number) or X.dtype == bool)):
        raise ValueError("X must be a numeric matrix.")
    X = X.astype(float)

    if np.isnan(X).any():
        raise ValueError("X contains missing values (NA or NaN). "
                         "Please remove or impute them before clustering.")
    if np.isinf(X).any():
        raise ValueError("X contains infinite values. Please handle them before clustering.")
    if X.shape[0] < 1:
        raise ValueError("X must have at least one row.")
    if X.shape[1] < 1:
        raise ValueError("X must have at least one column.")
    return X


def _as_k(centers):
    """The cluster count when `centers` is a single integral number, else None."""
    if isinstance(centers, bool):
        return None
    if isinstance(centers, (int, np.integer)):
        return int(centers)
    if isinstance(centers, (float, np.floating, list, tuple, np.ndarray)):
        value = np.asarray(centers)
        if value.ndim <= 1 and value.size == 1 and np.issubdtype(value.dtype, np.number) \
                and not np.iscomplexobj(value):
            k = value.item()
            if not np.isfinite(k) or k != int(k):
                raise ValueError("k must be a positive integer less than or equal to "
                                 "the number of rows in X.")
            return int(k)
    return None


def initial_centers(X, centers, rng):
    """
    Resolve the `centers` argument to a (k, d) starting matrix.

    A single integral number (3, 3.0, [3]) is k and picks k distinct
    rows of X; a 2-D matrix is checked and copied.
    """
    n_samples = X.shape[0]

    k = _as_k(centers)
    if k is not None:
        if k <= 0 or k > n_samples:
            raise ValueError("k must be a positive integer less than or equal to "
                             "the number of rows in X.")
        indices = rng.choice(n_samples, k, replace=False)
        return X[indices].copy()

    centers = np.asarray(centers) if isinstance(centers, (list, tuple, np.ndarray)) else None
    if (centers is None or centers.ndim != 2 or not np.issubdtype(centers.dtype, np.number)
            or np.iscomplexobj(centers)):
        raise ValueError("'centers' must be either an integer (k) or a matrix of initial centers.")
    if centers.shape[1] != X.shape[1]:
        raise ValueError("Dimensions of X and initial centers matrix do not match.")
    if np.isnan(centers).any():
        raise ValueError("Initial centers matrix contains missing values.")
    if not 1 <= centers.shape[0] <= n_samples:
        raise ValueError("k must be a positive integer less than or equal to "
                         "the number of rows in X.")
    return centers.astype(float)


def kmeans(X, centers, max_iter=DEFAULT_MAX_ITER, tol=DEFAULT_TOL,
           method='direct', random_state=None) -> LloydResult:
    """
    Validate the inputs, pick starting centers and run Lloyd's algorithm.

    Parameters:
    -----------
    X : array-like (n, d)
        Each row is an observation.
    centers : int or array-like (k, d)
        Number of clusters, or the starting centers themselves.
    max_iter : int
        Maximum number of iterations.
    tol : float
        Stop when the summed squared center movement is below tol.
    method : str
        'direct' or 'expanded' distance computation.
    random_state : int, RandomState or None
        Drives both the choice of starting rows and empty-cluster reseeding.
    """
    X = validate_data(X)

    if isinstance(max_iter, bool) or not isinstance(max_iter, (int, np.integer)) or max_iter <= 0:
        raise ValueError("max_iter must be a positive integer.")
    if not tol >= 0:
        raise ValueError("tol must be non-negative.")
    if method not in METHODS:
        raise ValueError(f"Unknown method: {method}")

    if isinstance(random_state, np.random.RandomState):
        rng = random_state
    else:
        rng = np.random.RandomState(random_state)

    start = initial_centers(X, centers, rng)
    return lloyd(X, start, max_iter=max_iter, tol=tol, method=method,
                 draw_index=index_drawer(rng))


def one_based(labels):
    """Shift 0-based cluster indices to the 1..k labels used for display."""
    return np.asarray(labels) + 1


class KMeans:
    """
    K-Means Clustering — Lloyd's algorithm with random restarts.

    Each restart draws k distinct data rows as starting centers; the
    run with the lowest total within-cluster sum of squares wins.
    """

    def __init__(self, n_clusters=3, max_iter=DEFAULT_MAX_ITER, tol=DEFAULT_TOL,
                 n_init=10, method='direct', random_state=None):
        """
        Parameters:
        -----------
        n_clusters : int
            Number of clusters K
        max_iter : int
            Maximum iterations per run
        tol : float
            Convergence tolerance (summed squared centroid movement)
        n_init : int
            Number of runs with different starting centers
        method : str
            'direct' or 'expanded' distance computation
        random_state : int or None
            Random seed for reproducibility
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.tol = tol
        self.n_init = n_init
        self.method = method
        self.random_state = random_state

        # Attributes set after fit
        self.cluster_centers_ = None  # Centroids (K × d)
        self.labels_ = None           # Cluster assignments (n_samples,)
        self.inertia_ = None          # Total within-cluster sum of squares
        self.withinss_ = None         # Per-cluster sum of squares (K,)
        self.n_iter_ = None           # Iterations of the winning run

    def fit(self, X):
        """
        Fit K-Means clustering.

        Runs n_init times and keeps the best result (lowest inertia).
        """
        if isinstance(self.n_init, bool) or not isinstance(self.n_init, (int, np.integer)) \
                or self.n_init <= 0:
            raise ValueError("n_init must be a positive integer.")

        X = validate_data(X)
        rng = np.random.RandomState(self.random_state)

        best = None
        for _ in range(self.n_init):
            result = kmeans(X, self.n_clusters, max_iter=self.max_iter, tol=self.tol,
                            method=self.method, random_state=rng)
            if best is None or result.tot_withinss < best.tot_withinss:
                best = result

        self.cluster_centers_ = best.centers
        self.labels_ = best.cluster
        self.inertia_ = best.tot_withinss
        self.withinss_ = best.withinss
        self.n_iter_ = best.iterations
        return self

    def _check_fitted(self):
        if self.cluster_centers_ is None:
            raise ValueError("KMeans instance is not fitted yet. Call 'fit' first.")

    def predict(self, X):
        """Assign new points to nearest centroid."""
        self._check_fitted()
        X = validate_data(X)
        return np.argmin(squared_distances(X, self.cluster_centers_, self.method), axis=1)

    def fit_predict(self, X):
        """Fit and return cluster labels."""
        self.fit(X)
        return self.labels_

    def transform(self, X):
        """Transform X to cluster-distance space."""
        self._check_fitted()
        X = validate_data(X)
        return np.sqrt(squared_distances(X, self.cluster_centers_, self.method))
