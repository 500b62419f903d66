from collections import defaultdict, deque

import numpy as np
from hilbertcurve.hilbertcurve import HilbertCurve
import zCurve as z

from .explorer import snowflake_path
from .geometry import bounding_triangle, sierpinski_curve, to_points


# -------------------------
# SNOWFLAKE ORDER
# -------------------------
def snowflake_order(points: np.ndarray, size: float = 1.0, max_depth=None):
    """
    Order points along the snowflake subdivision of [0, size]^2.
    Returns (indices, ranks) where ranks[i] is the position of point i.
    """
    pts = to_points(points)
    if not pts:
        return np.array([], dtype=int), np.array([], dtype=int)

    path = snowflake_path(bounding_triangle(size, size), pts, max_depth=max_depth)

    # equal coordinates are the same point to the walk, so hand their
    # indices out in input order
    slots = defaultdict(deque)
    for i, p in enumerate(pts):
        slots[p].append(i)
    indices = np.array([slots[p].popleft() for p in path], dtype=int)

    ranks = np.empty(len(indices), dtype=int)
    ranks[indices] = np.arange(len(indices))
    return indices, ranks


# -------------------------
# CURVE KEYS
# -------------------------
def quantize(points: np.ndarray, bits: int, size: float = 1.0) -> np.ndarray:
    """Map [0, size]^2 onto the integer cells of a 2^bits x 2^bits grid."""
    R = 2 ** bits
    cells = np.floor(np.asarray(points, dtype=float).reshape(-1, 2) / size * R)
    return np.clip(cells, 0, R - 1).astype(int)


def order_by(codes):
    """Stable (indices, codes) pair sorted on the curve keys."""
    return np.argsort(codes, kind="stable"), codes


def hilbert_order(points: np.ndarray, p: int = 10, size: float = 1.0):
    """Order points by their distance along a 2D Hilbert curve of order p."""
    curve = HilbertCurve(p, 2)
    return order_by([curve.distance_from_point(cell) for cell in quantize(points, p, size).tolist()])


def zcurve_order(points: np.ndarray, bits: int = 16, size: float = 1.0):
    """Order points by Morton code."""
    cells = [tuple(cell) for cell in quantize(points, bits, size).tolist()]
    if not cells:
        return np.array([], dtype=int), []
    return order_by(z.par_interlace(cells, dims=2, bits_per_dim=bits))


def platzman_order(points: np.ndarray, size: float = 1.0):
    """
    Approximate Platzman–Bartholdi order: each point takes the rank of its
    nearest Sierpiński curve support point.
    """
    points = np.asarray(points, dtype=float).reshape(-1, 2)
    if not len(points):
        return np.array([], dtype=int), np.array([], dtype=int)

    support = sierpinski_curve(int(np.ceil(0.5 * np.log2(max(len(points), 2)))), size)
    gaps = np.linalg.norm(points[:, None, :] - support[None, :, :], axis=2)
    return order_by(np.argmin(gaps, axis=1))


# === Accessible heuristics ===
heuristics_registry_dict = {
    "Snowflake": snowflake_order,
    "Hilbert": hilbert_order,
    "Z-order": zcurve_order,
    "Platzman": platzman_order,
}
