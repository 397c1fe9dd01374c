"""
Run the k-means walkthrough: ablations, benchmark and figures.

    python -m lloyd_kmeans --output-dir figures
"""

import argparse
import logging
import os

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for saving figures
import matplotlib.pyplot as plt

from .experiments import ablation_experiments, benchmark_clustering


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='lloyd_kmeans',
        description="Lloyd's k-means: ablation experiments, benchmark and figures.")
    parser.add_argument('--output-dir', default='.',
                        help='Directory for the saved figures (default: current directory)')
    parser.add_argument('--seed', type=int, default=42, help='Random seed (default: 42)')
    parser.add_argument('--no-plots', action='store_true', help='Skip figure generation')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log convergence details')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    print("="*60)
    print("K-MEANS CLUSTERING — Lloyd's Algorithm")
    print("="*60)

    ablation_experiments(random_state=args.seed)
    benchmark_clustering(random_state=args.seed)

    if args.no_plots:
        return 0

    # Imported late: pyplot figures only when plotting
    from .visualize import visualize_kmeans, visualize_kmeans_algorithm

    print("\nGenerating visualizations...")
    os.makedirs(args.output_dir, exist_ok=True)

    for name, make_figure in [('kmeans', visualize_kmeans),
                              ('kmeans_algorithm', visualize_kmeans_algorithm)]:
        fig = make_figure(random_state=args.seed)
        save_path = os.path.join(args.output_dir, f'{name}.png')
        fig.savefig(save_path, dpi=100, bbox_inches='tight')
        print(f"Saved: {save_path}")
        plt.close(fig)

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
