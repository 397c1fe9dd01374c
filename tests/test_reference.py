"""Agreement with scikit-learn's Lloyd implementation on the iris data."""

import numpy as np
import pytest
from sklearn.cluster import KMeans as SklearnKMeans
from sklearn.datasets import load_iris
from sklearn.metrics import adjusted_rand_score

from lloyd_kmeans import kmeans


@pytest.fixture(scope='module')
def iris_start():
    X = load_iris().data.astype(float)
    rng = np.random.RandomState(123)
    start = X[rng.choice(X.shape[0], 3, replace=False)]
    return X, start


@pytest.fixture(scope='module')
def reference(iris_start):
    X, start = iris_start
    return SklearnKMeans(n_clusters=3, init=start, n_init=1, max_iter=100,
                         tol=0.0, algorithm='lloyd').fit(X)


def test_direct_matches_reference(iris_start, reference):
    X, start = iris_start
    result = kmeans(X, start, max_iter=100, tol=1e-4, method='direct')

    assert adjusted_rand_score(result.cluster, reference.labels_) == 1.0
    np.testing.assert_allclose(result.centers, reference.cluster_centers_, atol=1e-4)
    assert result.tot_withinss == pytest.approx(reference.inertia_, rel=1e-6)


def test_expanded_matches_reference(iris_start, reference):
    X, start = iris_start
    result = kmeans(X, start, max_iter=100, tol=1e-4, method='expanded')

    assert adjusted_rand_score(result.cluster, reference.labels_) > 0.99
    np.testing.assert_allclose(result.centers, reference.cluster_centers_, atol=1e-4)


def test_iris_result_shape(iris_start):
    X, start = iris_start
    result = kmeans(X, start)

    assert result.centers.shape == (3, 4)
    assert result.cluster.shape == (150,)
    assert result.withinss.shape == (3,)
    assert 1 <= result.iterations <= 100
