"""Figures for the k-means walkthrough. 2D data only."""

import matplotlib.pyplot as plt
import numpy as np

from .datasets import make_circles, make_clustered, make_elongated, make_moons
from .elbow import elbow_analysis, find_elbow
from .kmeans import KMeans
from .lloyd import lloyd
from .metrics import clustering_accuracy, silhouette_score


def plot_clusters(X, labels, centers, ax=None, title='', cmap='viridis'):
    """Scatter the points coloured by cluster, centers as black-edged X marks."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 5))

    ax.scatter(X[:, 0], X[:, 1], c=labels, cmap=cmap, alpha=0.6, s=20)
    ax.scatter(centers[:, 0], centers[:, 1],
               c='red', marker='X', s=200, edgecolors='black', linewidth=2)
    ax.set_title(title)
    ax.set_aspect('equal')
    return ax


def plot_elbow(ks, inertias, ax=None, true_k=None):
    """Inertia vs K, with the detected elbow marked."""
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(5, 4))

    ax.plot(ks, inertias, 'bo-', linewidth=2, markersize=8)
    elbow = find_elbow(ks, inertias)
    ax.axvline(x=elbow, color='g', linestyle=':', label=f'Elbow K={elbow}')
    if true_k is not None:
        ax.axvline(x=true_k, color='r', linestyle='--', label=f'True K={true_k}')
    ax.set_xlabel('Number of Clusters (K)')
    ax.set_ylabel('Inertia')
    ax.set_title('Elbow Method')
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


def visualize_kmeans(random_state=42):
    """Effect of K, failure modes, and the K-selection tools."""
    fig = plt.figure(figsize=(16, 12))

    # Row 1: Different K values on clustered data
    X, _ = make_clustered(n_samples=500, n_clusters=4, random_state=random_state)

    for i, k in enumerate([2, 3, 4, 5]):
        ax = fig.add_subplot(3, 4, i+1)
        km = KMeans(n_clusters=k, random_state=random_state).fit(X)
        sil = silhouette_score(X, km.labels_)
        plot_clusters(X, km.labels_, km.cluster_centers_, ax=ax, title=f'K={k}, sil={sil:.2f}')

    # Row 2: K-Means failures (non-spherical clusters)
    datasets = [
        ("Elongated", make_elongated(n_samples=300, separation=2.0, random_state=random_state)),
        ("Circles", make_circles(n_samples=300, random_state=random_state)),
        ("Moons", make_moons(n_samples=300, random_state=random_state)),
    ]

    for i, (name, (X_local, y_local)) in enumerate(datasets):
        ax = fig.add_subplot(3, 4, 5+i)
        km = KMeans(n_clusters=2, random_state=random_state).fit(X_local)
        acc = clustering_accuracy(y_local, km.labels_, 2)

        # fill = predicted, edge = true
        ax.scatter(X_local[:, 0], X_local[:, 1], c=km.labels_,
                   cmap='coolwarm', alpha=0.6, s=30,
                   edgecolors=plt.cm.Set1(y_local), linewidth=1)
        ax.scatter(km.cluster_centers_[:, 0], km.cluster_centers_[:, 1],
                   c='black', marker='X', s=200, edgecolors='white', linewidth=2)
        ax.set_title(f'{name}\nacc={acc:.2f}')
        ax.set_aspect('equal')

    # Row 3: Elbow and Silhouette analysis
    X_analysis, _ = make_clustered(n_samples=500, n_clusters=4, random_state=random_state)

    ax = fig.add_subplot(3, 4, 9)
    ks, inertias = elbow_analysis(X_analysis, random_state=random_state)
    plot_elbow(ks, inertias, ax=ax, true_k=4)

    ax = fig.add_subplot(3, 4, 10)
    silhouettes = [silhouette_score(X_analysis,
                                    KMeans(n_clusters=k, random_state=random_state).fit_predict(X_analysis))
                   for k in range(2, 11)]
    ax.plot(range(2, 11), silhouettes, 'go-', linewidth=2, markersize=8)
    ax.axvline(x=4, color='r', linestyle='--', label='True K=4')
    ax.set_xlabel('Number of Clusters (K)')
    ax.set_ylabel('Silhouette Score')
    ax.set_title('Silhouette Analysis')
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Restarts: spread of final inertia over single-start runs
    ax = fig.add_subplot(3, 4, 11)
    single_inertias = [KMeans(n_clusters=4, n_init=1, random_state=seed).fit(X_analysis).inertia_
                       for seed in range(50)]
    ax.hist(single_inertias, bins=15, alpha=0.7, color='blue')
    ax.set_xlabel('Inertia')
    ax.set_ylabel('Count')
    ax.set_title('Single-start runs\n(50 seeds)')

    plt.suptitle('K-MEANS CLUSTERING\n'
                 'Row 1: Effect of K | Row 2: Failure modes (fill=predicted, edge=true) | '
                 'Row 3: Analysis tools',
                 fontsize=12, fontweight='bold')
    plt.tight_layout()
    return fig


def visualize_kmeans_algorithm(random_state=42):
    """Lloyd's algorithm step by step from one fixed set of starting centers."""
    X, _ = make_clustered(n_samples=200, n_clusters=3, random_state=random_state)

    rng = np.random.RandomState(123)
    start = X[rng.choice(len(X), 3, replace=False)].copy()

    fig, axes = plt.subplots(2, 4, figsize=(16, 8))
    colors = np.array(['red', 'green', 'blue'])
    steps = [0, 1, 2, 3, 5, 10, 15, 20]

    for idx, step in enumerate(steps):
        ax = axes[idx // 4, idx % 4]

        if step == 0:
            ax.scatter(X[:, 0], X[:, 1], c='gray', alpha=0.5, s=20)
            ax.scatter(start[:, 0], start[:, 1], c=colors, marker='X', s=300,
                       edgecolors='black', linewidth=2)
            ax.set_title(f'Step {step}: Initialize')
        else:
            # tol=0 so only stability (or the step cap) ends the run
            result = lloyd(X, start, max_iter=step, tol=0.0, random_state=random_state)
            ax.scatter(X[:, 0], X[:, 1], c=colors[result.cluster], alpha=0.5, s=20)
            ax.scatter(result.centers[:, 0], result.centers[:, 1], c=colors, marker='X',
                       s=300, edgecolors='black', linewidth=2)
            ax.set_title(f'Step {step}: inertia={result.tot_withinss:.0f}'
                         f'\n(iterations={result.iterations})')

        ax.set_aspect('equal')
        ax.set_xlim(X[:, 0].min() - 1, X[:, 0].max() + 1)
        ax.set_ylim(X[:, 1].min() - 1, X[:, 1].max() + 1)

    plt.suptitle("LLOYD'S ALGORITHM: Step-by-Step Convergence\n"
                 'X marks = centroids, colors = cluster assignments',
                 fontsize=12, fontweight='bold')
    plt.tight_layout()
    return fig
