import matplotlib
matplotlib.use('Agg')

import numpy as np
import pytest


@pytest.fixture
def two_pairs():
    """Two tight pairs of points far apart."""
    return np.array([[0.0, 0.0], [0.0, 1.0], [10.0, 10.0], [10.0, 11.0]])


@pytest.fixture
def blobs():
    """Three well separated Gaussian blobs and their true labels."""
    rng = np.random.RandomState(0)
    centers = np.array([[0.0, 0.0], [8.0, 8.0], [-8.0, 8.0]])
    X = np.vstack([rng.randn(50, 2) * 0.5 + c for c in centers])
    y = np.repeat(np.arange(3), 50)
    return X, y
