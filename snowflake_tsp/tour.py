import numpy as np

from .geometry import distance


def compute_path_cost(points: np.ndarray, order, closed: bool = False) -> float:
    """Euclidean length of the path visiting `points` in `order` (a tour if closed)."""
    order = np.asarray(order, dtype=int)
    if len(order) < 2:
        return 0.0

    ordered = np.asarray(points, dtype=float)[order]
    if closed:
        ordered = np.vstack([ordered, ordered[:1]])
    steps = np.diff(ordered, axis=0)
    return float(np.sum(np.hypot(steps[:, 0], steps[:, 1])))


def path_length(path, closed: bool = False) -> float:
    """Same as compute_path_cost, for a sequence of Point."""
    if len(path) < 2:
        return 0.0
    total = sum(distance(p, q) for p, q in zip(path, path[1:]))
    if closed:
        total += distance(path[-1], path[0])
    return total
