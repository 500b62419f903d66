import os

import numpy as np


# -------------------------
# RANDOM SUBSETS
# -------------------------
def random_subsets(N: int, k: int, max_iter: int, seed=None, verbose=True):
    """
    Up to max_iter distinct random k-subsets of range(N), each as a sorted
    index array. Gives up after 10 * max_iter draws.
    """
    if k > N:
        raise ValueError(f"cannot draw {k} elements out of {N}")
    if seed is not None:
        np.random.seed(seed)

    subsets = {}
    for _ in range(10 * max_iter):
        if len(subsets) == max_iter:
            break
        drawn = np.sort(np.random.choice(N, k, replace=False))
        subsets.setdefault(drawn.tobytes(), drawn)

    if verbose and len(subsets) < max_iter:
        print(f"⚠️ Only {len(subsets)} unique subsets generated out of requested {max_iter}")
    return list(subsets.values())


# -------------------------
# FILE SAVING UTILS
# -------------------------
def save_order_result_to_file(
    points,
    order,
    reference_order,
    cost,
    reference_cost,
    oracle_name="snowflake",
    reference_name="best",
    folder="results",
    verbose=True,
):
    """
    Save one ordering of a point set next to the order it is compared
    against. Returns the file name.
    """
    if reference_cost <= 0:
        raise ValueError("reference cost must be positive to compute a ratio")

    os.makedirs(folder, exist_ok=True)

    ratio = cost / reference_cost
    ratio_str = f"{round(100 * ratio, 2):.2f}"
    filename = (
        f"{folder}/"
        f"k{len(points)}_heuristic_{oracle_name}_vs_{reference_name}_"
        f"ratio{ratio_str}.npz"
    )

    np.savez_compressed(
        filename,
        points=points,
        order=order,
        reference_order=reference_order,
        cost=cost,
        reference_cost=reference_cost,
        ratio=ratio,
        oracle_name=oracle_name,
        reference_name=reference_name,
    )

    if verbose:
        print(f"💾 Saved: {filename}")
    return filename


def load_order_result_from_file(filename):
    data = np.load(filename)
    return {
        "points": data["points"],
        "order": data["order"],
        "reference_order": data["reference_order"],
        "cost": data["cost"].item(),
        "reference_cost": data["reference_cost"].item(),
        "ratio": data["ratio"].item(),
        "oracle_name": str(data["oracle_name"]),
        "reference_name": str(data["reference_name"]),
    }
