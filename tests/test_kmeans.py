import numpy as np
import pytest

from lloyd_kmeans import KMeans, kmeans, one_based
from lloyd_kmeans.metrics import adjusted_rand_index


def test_integer_centers_picks_distinct_rows(blobs):
    X, y = blobs
    result = kmeans(X, 3, random_state=0)

    assert result.centers.shape == (3, 2)
    assert result.cluster.shape == (150,)
    assert set(np.unique(result.cluster)) <= {0, 1, 2}
    assert result.withinss.shape == (3,)


def test_matrix_centers_matches_core(blobs):
    X, _ = blobs
    start = X[[0, 60, 120]]
    result = kmeans(X, start)
    assert adjusted_rand_index(result.cluster, blobs[1]) == pytest.approx(1.0)


def test_accepts_nested_lists(two_pairs):
    result = kmeans(two_pairs.tolist(), [[0, 0], [10, 10]])
    assert list(result.cluster) == [0, 0, 1, 1]


def test_random_state_makes_runs_reproducible(blobs):
    X, _ = blobs
    a = kmeans(X, 4, random_state=11)
    b = kmeans(X, 4, random_state=11)
    np.testing.assert_array_equal(a.centers, b.centers)
    np.testing.assert_array_equal(a.cluster, b.cluster)


@pytest.mark.parametrize("X, centers, kwargs, message", [
    ([[1, 'a']], 1, {}, "X must be a numeric matrix"),
    ([1.0, 2.0], 1, {}, "X must be a numeric matrix"),
    ([[1.0, np.nan]], 1, {}, "missing values"),
    ([[1.0, -np.inf]], 1, {}, "infinite values"),
    (np.zeros((0, 2)), 1, {}, "at least one row"),
    (np.zeros((2, 0)), 1, {}, "at least one column"),
    (np.zeros((3, 2)), 0, {}, "less than or equal"),
    (np.zeros((3, 2)), 4, {}, "less than or equal"),
    (np.zeros((3, 2)), np.zeros((2, 3)), {}, "do not match"),
    (np.zeros((3, 2)), [[np.nan, 0.0]], {}, "Initial centers matrix contains missing"),
    (np.zeros((3, 2)), 'three', {}, "'centers' must be either"),
    ([[1 + 5j, 0], [2 + 7j, 1], [9, 9]], [[1, 0], [9, 9]], {}, "X must be a numeric matrix"),
    (np.zeros((3, 2)), np.array([[1 + 1j, 0]]), {}, "'centers' must be either"),
    (np.zeros((3, 2)), 2.5, {}, "less than or equal"),
    (np.zeros((3, 2)), [np.nan], {}, "less than or equal"),
    (np.zeros((3, 2)), 1, {'max_iter': 0}, "max_iter must be a positive integer"),
    (np.zeros((3, 2)), 1, {'tol': -0.1}, "tol must be non-negative"),
    (np.zeros((3, 2)), 1, {'method': 'fast'}, "Unknown method"),
])
def test_validation_errors(X, centers, kwargs, message):
    with pytest.raises(ValueError, match=message):
        kmeans(X, centers, **kwargs)


def test_one_based_labels():
    np.testing.assert_array_equal(one_based(np.array([0, 2, 1])), [1, 3, 2])


def test_estimator_recovers_blobs(blobs):
    X, y = blobs
    km = KMeans(n_clusters=3, random_state=42).fit(X)

    assert km.cluster_centers_.shape == (3, 2)
    assert adjusted_rand_index(y, km.labels_) == pytest.approx(1.0)
    assert km.inertia_ == pytest.approx(km.withinss_.sum())
    assert 1 <= km.n_iter_ <= km.max_iter


def test_more_restarts_never_worse(blobs):
    X, _ = blobs
    single = KMeans(n_clusters=5, n_init=1, random_state=3).fit(X)
    many = KMeans(n_clusters=5, n_init=10, random_state=3).fit(X)
    # Same seed → the first restart of `many` is the `single` run
    assert many.inertia_ <= single.inertia_


def test_predict_and_transform(blobs):
    X, _ = blobs
    km = KMeans(n_clusters=3, tol=0.0, random_state=0)
    labels = km.fit_predict(X)

    np.testing.assert_array_equal(km.predict(X), labels)
    distances = km.transform(X)
    assert distances.shape == (150, 3)
    np.testing.assert_array_equal(np.argmin(distances, axis=1), labels)


def test_unfitted_estimator_raises():
    with pytest.raises(ValueError, match="not fitted"):
        KMeans().predict(np.zeros((2, 2)))


def test_bad_n_init():
    with pytest.raises(ValueError, match="n_init"):
        KMeans(n_init=0).fit(np.zeros((4, 2)))


@pytest.mark.parametrize("k", [3.0, np.float64(3), [3], (3,), np.array([3])])
def test_integral_k_forms(blobs, k):
    X, _ = blobs
    expected = kmeans(X, 3, random_state=5)
    result = kmeans(X, k, random_state=5)

    assert result.centers.shape == (3, 2)
    np.testing.assert_array_equal(result.centers, expected.centers)
    np.testing.assert_array_equal(result.cluster, expected.cluster)


def test_one_by_one_matrix_is_a_center():
    X = np.array([[1.0], [3.0]])
    result = kmeans(X, [[0.0]])
    np.testing.assert_allclose(result.centers, [[2.0]])
