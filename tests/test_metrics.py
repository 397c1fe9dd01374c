import numpy as np
import pytest
from sklearn.metrics import adjusted_rand_score
from sklearn.metrics import silhouette_score as sk_silhouette_score

from lloyd_kmeans.metrics import (
    adjusted_rand_index,
    clustering_accuracy,
    contingency_table,
    silhouette_score,
)


def test_ari_is_permutation_invariant():
    a = [0, 0, 1, 1, 2, 2]
    b = [2, 2, 0, 0, 1, 1]
    assert adjusted_rand_index(a, b) == pytest.approx(1.0)


def test_ari_matches_sklearn():
    rng = np.random.RandomState(0)
    for _ in range(5):
        a = rng.randint(0, 4, size=80)
        b = rng.randint(0, 3, size=80)
        assert adjusted_rand_index(a, b) == pytest.approx(adjusted_rand_score(a, b))


def test_ari_trivial_partitions():
    assert adjusted_rand_index([0, 0, 0], [1, 1, 1]) == 1.0
    assert adjusted_rand_index([0, 1, 2], [5, 6, 7]) == 1.0
    assert adjusted_rand_index([0, 0, 0, 0], [0, 0, 1, 1]) == pytest.approx(0.0)


def test_ari_length_mismatch():
    with pytest.raises(ValueError, match="differ in length"):
        adjusted_rand_index([0, 1], [0, 1, 1])


def test_contingency_table():
    table = contingency_table([0, 0, 1, 1], ['x', 'y', 'y', 'y'])
    np.testing.assert_array_equal(table, [[1, 1], [0, 2]])


def test_clustering_accuracy_with_swapped_labels():
    y_true = np.array([0, 0, 1, 1, 1])
    y_pred = np.array([1, 1, 0, 0, 1])
    assert clustering_accuracy(y_true, y_pred, 2) == pytest.approx(0.8)


def test_silhouette_matches_sklearn(blobs):
    X, y = blobs
    labels = y.copy()
    labels[:5] = 1  # a few misplaced points
    assert silhouette_score(X, labels) == pytest.approx(sk_silhouette_score(X, labels))


def test_silhouette_single_cluster_is_zero(blobs):
    X, _ = blobs
    assert silhouette_score(X, np.zeros(len(X), dtype=int)) == 0.0


def test_silhouette_prefers_true_partition(blobs):
    X, y = blobs
    shuffled = np.random.RandomState(0).permutation(y)
    assert silhouette_score(X, y) > silhouette_score(X, shuffled)


def test_clustering_accuracy_three_clusters():
    y_true = np.array([0, 0, 1, 1, 2, 2])
    y_pred = np.array([2, 2, 0, 0, 1, 0])
    assert clustering_accuracy(y_true, y_pred, 3) == pytest.approx(5 / 6)


def test_clustering_accuracy_ignores_out_of_range_labels():
    y_true = np.array([0, 0, 1, 1])
    y_pred = np.array([1, 1, 0, 5])
    assert clustering_accuracy(y_true, y_pred, 2) == pytest.approx(0.75)


def test_clustering_accuracy_length_mismatch():
    with pytest.raises(ValueError, match="differ in length"):
        clustering_accuracy([0, 1], [0], 2)


def test_silhouette_handles_larger_inputs():
    rng = np.random.RandomState(2)
    X = np.vstack([rng.randn(400, 8), rng.randn(400, 8) + 6])
    labels = np.repeat([0, 1], 400)
    assert silhouette_score(X, labels) == pytest.approx(sk_silhouette_score(X, labels))
