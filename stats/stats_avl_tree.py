"""Shape statistics for AVL trees and the alternative search tree variants."""

import argparse
import logging
import os
from datetime import datetime
from statistics import mean

import numpy as np
from tqdm import tqdm

from search_trees.base import AbstractSearchTree
from search_trees.factory import TREE_CLASSES, create_tree
from search_trees.invariants import assert_tree_invariants_raise
from search_trees.tree_stats import tree_stats_
from search_trees.utils import max_avl_height, perfect_height

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("random", "ascending")


def draw_keys(n: int, distribution: str = "random") -> list:
    """Draw n unique integer keys in insertion order."""
    if distribution == "random":
        return [int(k) for k in np.random.permutation(n) + 1]
    if distribution == "ascending":
        return list(range(1, n + 1))
    raise ValueError(f"Unknown distribution {distribution!r}, expected one of {DISTRIBUTIONS}")


def random_tree_of_size(n: int, kind: str = "avl", distribution: str = "random") -> AbstractSearchTree:
    """Build a tree of the given kind from n keys, then remove a random half of them."""
    keys = draw_keys(n, distribution)
    tree = create_tree(kind, keys)
    assert_tree_invariants_raise(tree, tree_stats_(tree))

    doomed = np.random.choice(keys, size=n // 2, replace=False) if n else []
    tree_remove = tree.remove
    for key in doomed:
        tree_remove(int(key))
    return tree


def repeated_experiment(
    size: int,
    repetitions: int,
    kind: str = "avl",
    distribution: str = "random",
) -> list:
    """
    Repeatedly builds trees of the given kind and checks every invariant on
    them. Aggregates the shape statistics over all trees, logs a table and
    returns its rows as (name, avg, var) tuples.
    """
    results = []
    for _ in tqdm(range(repetitions), desc=f"{kind} n={size}", leave=False):
        tree = random_tree_of_size(size, kind, distribution)
        stats = tree_stats_(tree)
        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    remaining = size - size // 2
    best = perfect_height(remaining)
    avl_bound = max_avl_height(remaining)

    avg_height = mean(s.height for s in results)
    avg_height_amp = mean((s.height / best) for s in results) if best > 0 else 0
    avg_imbalance = mean(s.max_imbalance for s in results)

    var_height = mean((s.height - avg_height) ** 2 for s in results)
    var_height_amp = mean(((s.height / best) - avg_height_amp) ** 2 for s in results) if best > 0 else 0
    var_imbalance = mean((s.max_imbalance - avg_imbalance) ** 2 for s in results)

    rows = [
        ("Node count", remaining, None),
        ("Height", avg_height, var_height),
        ("Perfect height", best, None),
        ("AVL height bound", avl_bound, None),
        ("Height amplification", avg_height_amp, var_height_amp),
        ("Max imbalance", avg_imbalance, var_imbalance),
    ]

    header = f"{'Metric':<22} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<22} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            logger.info(f"{name:<22} {avg:15.2f} {var_str:>15}")

    return rows


if __name__ == "__main__":
    # --- Argument Parsing ---
    parser = argparse.ArgumentParser(description="Run shape statistics experiments for search trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument(
        "--kinds", nargs="+", choices=sorted(TREE_CLASSES), default=["avl", "splay"],
        help="Tree kinds to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--distribution", choices=DISTRIBUTIONS, default="random", help="Insertion order of the keys."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/avl_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )

    # Also apply the chosen level to the library logger
    logging.getLogger("search_trees").setLevel(log_level)

    for n in args.sizes:
        for kind in args.kinds:
            logger.info("")
            logger.info(
                f"---------------- NOW RUNNING EXPERIMENT: n = {n}, kind = {kind}, "
                f"distribution = {args.distribution}, repetitions = {args.repetitions} ----------------"
            )
            repeated_experiment(size=n, repetitions=args.repetitions, kind=kind, distribution=args.distribution)
