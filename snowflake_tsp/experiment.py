import numpy as np

from .explorer import snowflake_path
from .geometry import (
    HEIGHT,
    PRECISION,
    WIDTH,
    bounding_triangle,
    generate_grid_points,
    generate_random_points,
    to_points,
)
from .heuristics import heuristics_registry_dict
from .render import render_path
from .tour import compute_path_cost
from .utils import random_subsets, save_order_result_to_file

MAX_POINTS = 50
DEFAULT_SEED = 42


# -------------------------
# SINGLE RUN
# -------------------------
def run_snowflake(
    max_points: int = MAX_POINTS,
    width: float = WIDTH,
    height: float = HEIGHT,
    precision: int = PRECISION,
    seed=DEFAULT_SEED,
    max_depth=None,
    verbose=True,
):
    """
    Sample between 0 and max_points - 1 random points in the search area,
    walk the snowflake subdivision and render the resulting path.
    Returns (points, path, text).
    """
    if max_points < 1:
        raise ValueError(f"max_points must be at least 1, got {max_points}")

    if seed is not None:
        np.random.seed(seed)

    triangle = bounding_triangle(width, height)
    n = int(np.random.randint(0, max_points))
    points = to_points(generate_random_points(n, width, height, precision))
    path = snowflake_path(triangle, points, max_depth=max_depth)
    text = render_path(path, precision)

    if verbose:
        print(f"✅ {n} points sampled in {width}x{height}")
        print(text)
    return points, path, text


# -------------------------
# ORDER COMPARISON
# -------------------------
def compare_orders(points, order_fns=None, size: float = 1.0, verbose=True):
    """
    Evaluate several orderings of the same point set.
    Returns {name: {"order", "cost", "ratio"}}, ratio being relative to
    the cheapest order of the batch.
    """
    if order_fns is None:
        order_fns = heuristics_registry_dict
    points = np.asarray(points, dtype=float)

    results = {}
    for name, fn in order_fns.items():
        order, _ = fn(points, size=size)
        results[name] = {"order": order, "cost": compute_path_cost(points, order)}

    best = min(r["cost"] for r in results.values())
    for name, r in results.items():
        r["ratio"] = r["cost"] / best if best > 0 else 1.0
        if verbose:
            print(f"[{name}] cost {r['cost']:.4f} | ratio {r['ratio']:.4f}")
    return results


# -------------------------
# RANDOMIZED SEARCH
# -------------------------
def find_worst_subset_randomized(
    M,
    k,
    order_name="Snowflake",
    order_fns=None,
    max_iter=50,
    seed=None,
    verbose=True,
    folder="results",
):
    """
    Draw random k-subsets of an MxM grid and keep the one on which
    `order_name` does worst compared to the best of the other orders.
    Saves it and returns (worst_ratio, filename).
    """
    if order_fns is None:
        order_fns = heuristics_registry_dict
    if order_name not in order_fns:
        raise ValueError(f"order {order_name!r} is not among the compared orders {sorted(order_fns)}")
    if len(order_fns) < 2:
        raise ValueError(f"order {order_name!r} needs at least one other order to be compared with")

    all_points = generate_grid_points(M)
    if verbose:
        print(f"✅ Grid generated with {len(all_points)} points ({M}x{M})")

    worst = {"ratio": -np.inf, "subset": None, "orders": None, "costs": None, "reference": None}

    for idx, indices in enumerate(random_subsets(len(all_points), k, max_iter, seed=seed, verbose=verbose)):
        subset = all_points[list(indices)]
        results = compare_orders(subset, order_fns=order_fns, verbose=False)

        others = {name: r for name, r in results.items() if name != order_name}
        reference = min(others, key=lambda name: others[name]["cost"])
        if others[reference]["cost"] == 0:
            continue
        ratio = results[order_name]["cost"] / others[reference]["cost"]

        if verbose and idx % max(1, max_iter // 10) == 0:
            print(f"[{order_name}] subset {idx}/{max_iter} | ratio {ratio:.4f} | worst {worst['ratio']:.4f}")

        if ratio > worst["ratio"]:
            worst = {
                "ratio": ratio,
                "subset": subset,
                "orders": (results[order_name]["order"], others[reference]["order"]),
                "costs": (results[order_name]["cost"], others[reference]["cost"]),
                "reference": reference,
            }

    if worst["subset"] is None:
        return None, None

    filename = save_order_result_to_file(
        worst["subset"],
        worst["orders"][0],
        worst["orders"][1],
        worst["costs"][0],
        worst["costs"][1],
        oracle_name=order_name,
        reference_name=worst["reference"],
        folder=folder,
        verbose=verbose,
    )
    return worst["ratio"], filename


def run_experiments(grid_sizes=(8, 16, 32), percents=(10, 30, 50), max_iter=20, seed=DEFAULT_SEED, folder="results", verbose=True):
    """Loop over grids and subset sizes; returns {(M, k): worst snowflake ratio}."""
    summary = {}
    for M in grid_sizes:
        total_points = M * M
        if verbose:
            print(f"\n📦 Grid {M}x{M} ({total_points} points)")

        for percent in percents:
            k = max(2, (total_points * percent) // 100)
            ratio, _ = find_worst_subset_randomized(
                M, k, max_iter=max_iter, seed=seed, verbose=verbose, folder=folder
            )
            summary[(M, k)] = ratio
            if verbose:
                print(f"✅ Done for M={M}, k={k}")
    return summary


if __name__ == "__main__":
    run_snowflake()
