import math
from typing import NamedTuple

import numpy as np

# -------------------------
# 0. SEARCH AREA CONSTANTS
# -------------------------
WIDTH = 100.0
HEIGHT = 100.0
PRECISION = 2


# -------------------------
# 1. POINTS AND TRIANGLES
# -------------------------
class Point(NamedTuple):
    """A 2D coordinate. Two points with equal coordinates are the same point."""

    x: float
    y: float

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)


# Returned by average() when there is nothing to average.
ORIGIN = Point(0.0, 0.0)


class Triangle(NamedTuple):
    """Three ordered vertices. The order decides how the triangle is split."""

    a: Point
    b: Point
    c: Point

    def centroid(self) -> Point:
        return triangle_centroid(self.a, self.b, self.c)


# -------------------------
# 2. BASIC GEOMETRIC HELPERS
# -------------------------
def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p.x - q.x, p.y - q.y)


def average(*points: Point) -> Point:
    """Mean of any number of points, ORIGIN for none."""
    if not points:
        return ORIGIN
    total = ORIGIN
    for p in points:
        total = total + p
    return total.scale(1 / len(points))


def midpoint(p1: Point, p2: Point) -> Point:
    """Midpoint between two 2D points."""
    return average(p1, p2)


def triangle_centroid(p1: Point, p2: Point, p3: Point) -> Point:
    """Centroid of a triangle, degenerate ones included."""
    return average(p1, p2, p3)


def bounding_triangle(width: float = WIDTH, height: float = HEIGHT) -> Triangle:
    """
    Triangle enclosing the [0, width] x [0, height] search area.

    The right angle sits at the origin and the hypotenuse passes through the
    far corner (width, height), which is the midpoint of A and C. The first
    split therefore cuts along the diagonal of the search area and produces
    two mirrored right triangles, one on each side of it.

    The area must be square: only then does every split cut a right isosceles
    triangle into two mirror halves, so that the closer centroid is always
    the one on the point's side of the cut and distinct points end up apart.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"search area must be positive, got {width}x{height}")
    if width != height:
        raise ValueError(f"search area must be square, got {width}x{height}")
    return Triangle(
        Point(0.0, 2.0 * height),
        Point(0.0, 0.0),
        Point(2.0 * width, 0.0),
    )


# -------------------------
# 3. POINT SETS
# -------------------------
def generate_grid_points(M: int, size: float = 1.0) -> np.ndarray:
    """Uniform MxM grid of cell centres in [0, size]^2."""
    step = size / M
    half_step = step / 2
    points = []
    for i in range(M):
        for j in range(M):
            points.append([i * step + half_step, j * step + half_step])
    return np.array(points, dtype=float).reshape(-1, 2)


def generate_random_points(
    n: int,
    width: float = WIDTH,
    height: float = HEIGHT,
    precision: int = PRECISION,
    seed=None,
) -> np.ndarray:
    """Draw n points uniformly in [0, width] x [0, height], rounded to `precision` decimals."""
    if n < 0:
        raise ValueError(f"cannot sample a negative number of points ({n})")
    if width <= 0 or height <= 0:
        raise ValueError(f"search area must be positive, got {width}x{height}")

    if seed is not None:
        np.random.seed(seed)

    xs = np.random.uniform(0, width, size=n)
    ys = np.random.uniform(0, height, size=n)
    return np.round(np.column_stack([xs, ys]), precision)


def to_points(array) -> list:
    """(N, 2) array -> list of Point."""
    pts = np.asarray(array, dtype=float)
    if pts.size == 0:
        return []
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of coordinates, got shape {pts.shape}")
    return [Point(float(x), float(y)) for x, y in pts]


def to_array(points) -> np.ndarray:
    """Sequence of Point -> (N, 2) float array."""
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)


# -------------------------
# 4. SIERPIŃSKI CURVE SUPPORT
# -------------------------
def sierpinski_sub(tri, iters: int):
    """Recursive halving of a triangle, returning the centroids of the pieces in curve order."""
    p1, p2, p3 = tri
    if iters == 0:
        return [triangle_centroid(p1, p2, p3)]
    mid = midpoint(p1, p3)
    return sierpinski_sub((p1, mid, p2), iters - 1) + sierpinski_sub((p2, mid, p3), iters - 1)


def sierpinski_curve(iterations: int = 3, size: float = 1.0) -> np.ndarray:
    """Support points of the Sierpiński (triangular) curve over [0, size]^2."""
    tri1 = (Point(0.0, size), Point(0.0, 0.0), Point(size, 0.0))
    tri2 = (Point(size, 0.0), Point(size, size), Point(0.0, size))
    return to_array(sierpinski_sub(tri1, iterations) + sierpinski_sub(tri2, iterations))
