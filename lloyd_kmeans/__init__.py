"""Lloyd's k-means clustering on numpy arrays."""

from .elbow import elbow_analysis, find_elbow
from .kmeans import KMeans, kmeans, one_based
from .lloyd import (
    DEFAULT_MAX_ITER,
    DEFAULT_TOL,
    EmptyClusterWarning,
    LloydResult,
    assign_clusters,
    lloyd,
    squared_distances,
    within_cluster_ss,
)
from .metrics import adjusted_rand_index, clustering_accuracy, silhouette_score

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_MAX_ITER',
    'DEFAULT_TOL',
    'EmptyClusterWarning',
    'KMeans',
    'LloydResult',
    'adjusted_rand_index',
    'assign_clusters',
    'clustering_accuracy',
    'elbow_analysis',
    'find_elbow',
    'kmeans',
    'lloyd',
    'one_based',
    'silhouette_score',
    'squared_distances',
    'within_cluster_ss',
]
