"""
ABLATIONS AND BENCHMARKS — what the knobs of Lloyd's algorithm do

Every experiment prints a small table followed by the "->" lessons.
"""

import time
import warnings

import numpy as np

from .datasets import make_circles, make_clustered, make_elongated, make_moons
from .elbow import elbow_analysis, find_elbow
from .kmeans import KMeans, kmeans
from .lloyd import EmptyClusterWarning, lloyd
from .metrics import adjusted_rand_index, clustering_accuracy, silhouette_score


def ablation_experiments(random_state=42):
    print("\n" + "="*60)
    print("ABLATION EXPERIMENTS")
    print("="*60)

    X, y_true = make_clustered(n_samples=600, n_clusters=5, random_state=random_state)

    # -------- Experiment 1: Number of Clusters --------
    print("\n1. EFFECT OF NUMBER OF CLUSTERS (K)")
    print("-" * 40)
    print("True K=5. What happens with different K?")

    for k in [2, 3, 4, 5, 6, 7, 8]:
        km = KMeans(n_clusters=k, random_state=random_state).fit(X)
        sil = silhouette_score(X, km.labels_)
        print(f"  K={k}  inertia={km.inertia_:>8.1f}  silhouette={sil:.3f}")

    ks, inertias = elbow_analysis(X, range(1, 11), random_state=random_state)
    print(f"  Elbow detected at K={find_elbow(ks, inertias)}")
    print("-> Inertia always decreases (more clusters = less within-cluster variance)")
    print("-> Silhouette peaks near true K")

    # -------- Experiment 2: Number of Restarts --------
    print("\n2. EFFECT OF N_INIT (Number of Random Starts)")
    print("-" * 40)

    for n_init in [1, 3, 5, 10, 20]:
        best_inertias = []
        for trial in range(10):
            km = KMeans(n_clusters=5, n_init=n_init, random_state=trial*100).fit(X)
            best_inertias.append(km.inertia_)
        print(f"  n_init={n_init:<3}  mean_best_inertia={np.mean(best_inertias):.1f}  "
              f"std={np.std(best_inertias):.1f}")
    print("-> More starts = better chance of escaping a poor local minimum")
    print("-> Diminishing returns after n_init~10")

    # -------- Experiment 3: Tolerance --------
    print("\n3. EFFECT OF TOL (Centroid-Shift Stopping Rule)")
    print("-" * 40)

    start = X[np.random.RandomState(random_state).choice(len(X), 5, replace=False)]
    reference = lloyd(X, start, max_iter=300, tol=0.0)
    for tol in [0.0, 1e-8, 1e-4, 1e-1, 10.0, 1e30]:
        result = lloyd(X, start, max_iter=300, tol=tol)
        ari = adjusted_rand_index(reference.cluster, result.cluster)
        print(f"  tol={tol:<8g}  iterations={result.iterations:<3}  "
              f"inertia={result.tot_withinss:>8.1f}  ARI vs tol=0: {ari:.3f}")
    print("-> tol=0 stops only when assignments are stable")
    print("-> A huge tol stops after the very first update")

    # -------- Experiment 4: Cluster Shape Sensitivity --------
    print("\n4. CLUSTER SHAPE SENSITIVITY (K-Means' Achilles Heel)")
    print("-" * 40)

    shapes = [
        ("Elongated", make_elongated(n_samples=200, random_state=random_state)),
        ("Concentric circles", make_circles(n_samples=300, random_state=random_state)),
        ("Half-moons", make_moons(n_samples=300, random_state=random_state)),
    ]
    for name, (X_shape, y_shape) in shapes:
        km = KMeans(n_clusters=2, random_state=random_state).fit(X_shape)
        acc = clustering_accuracy(y_shape, km.labels_, 2)
        print(f"  {name:<20} accuracy={acc:.3f}")
    print("-> K-Means fails on non-spherical clusters!")
    print("-> Non-convex (circles, moons): cannot separate")

    # -------- Experiment 5: Convergence Speed --------
    print("\n5. CONVERGENCE BEHAVIOR")
    print("-" * 40)

    for k in [2, 5, 10, 20]:
        n_iters = [KMeans(n_clusters=k, n_init=1, random_state=seed).fit(X).n_iter_
                   for seed in range(20)]
        print(f"  K={k:<3}  iterations: mean={np.mean(n_iters):.1f}, max={max(n_iters)}")
    print("-> More clusters = more iterations to converge")

    # -------- Experiment 6: Empty Clusters --------
    print("\n6. EMPTY-CLUSTER RECOVERY")
    print("-" * 40)

    # Every duplicate start loses its points to the first copy on iteration 1
    duplicated = np.repeat(X[:1], 5, axis=0)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always', EmptyClusterWarning)
        result = lloyd(X, duplicated, max_iter=300, tol=0.0, random_state=random_state)
    n_empty = sum(issubclass(w.category, EmptyClusterWarning) for w in caught)
    acc = clustering_accuracy(y_true, result.cluster, 5)
    print(f"  5 identical starts: {n_empty} reseeds, iterations={result.iterations}, "
          f"accuracy={acc:.3f}")
    print("-> Reseeding from the data keeps all K clusters alive")


def benchmark_clustering(random_state=42):
    """Benchmark K-Means on various datasets."""
    print("\n" + "="*60)
    print("BENCHMARK: K-Means Clustering")
    print("="*60)

    results = {}

    for true_k in [3, 4, 5]:
        X, y_true = make_clustered(n_samples=600, n_clusters=true_k, random_state=random_state)
        km = KMeans(n_clusters=true_k, random_state=random_state).fit(X)

        acc = clustering_accuracy(y_true, km.labels_, true_k)
        sil = silhouette_score(X, km.labels_)
        ari = adjusted_rand_index(y_true, km.labels_)

        results[f'clustered_K{true_k}'] = {'accuracy': acc, 'silhouette': sil, 'ari': ari}
        print(f"Clustered (K={true_k}): accuracy={acc:.3f}, silhouette={sil:.3f}, ARI={ari:.3f}")

    X_circles, y_circles = make_circles(n_samples=300, random_state=random_state)
    km = KMeans(n_clusters=2, random_state=random_state).fit(X_circles)
    acc = clustering_accuracy(y_circles, km.labels_, 2)
    results['circles'] = {'accuracy': acc}
    print(f"Circles:            accuracy={acc:.3f} (expected: ~0.5 - K-means fails)")

    X_moons, y_moons = make_moons(n_samples=300, random_state=random_state)
    km.fit(X_moons)
    acc = clustering_accuracy(y_moons, km.labels_, 2)
    results['moons'] = {'accuracy': acc}
    print(f"Moons:              accuracy={acc:.3f}")

    # Distance forms: same partition, different speed
    rng = np.random.RandomState(random_state)
    X_big = rng.randn(20000, 16)
    start = X_big[rng.choice(len(X_big), 8, replace=False)]
    timings = {}
    labels = {}
    for method in ['direct', 'expanded']:
        t0 = time.perf_counter()
        res = kmeans(X_big, start, max_iter=50, tol=0.0, method=method, random_state=random_state)
        timings[method] = time.perf_counter() - t0
        labels[method] = res.cluster
    ari = adjusted_rand_index(labels['direct'], labels['expanded'])
    results['methods'] = {'ari': ari, **{f'{m}_seconds': t for m, t in timings.items()}}
    print(f"direct vs expanded (n=20000, d=16, K=8): ARI={ari:.4f}, "
          f"direct={timings['direct']:.2f}s, expanded={timings['expanded']:.2f}s")

    return results
