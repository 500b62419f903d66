from typing import NamedTuple, Tuple, Union

from .geometry import Point, Triangle, distance, midpoint


# ============================================================
# ZONES: a triangle plus the points it currently owns
# ============================================================
class Unresolved(NamedTuple):
    """Zone still holding two or more points; it will be split again."""

    triangle: Triangle
    points: Tuple[Point, ...]


class Leaf(NamedTuple):
    """Zone reduced to a single point; contributes one step to the path."""

    triangle: Triangle
    point: Point


class Empty(NamedTuple):
    """Zone that received no points; dropped by the traversal."""

    triangle: Triangle


Zone = Union[Unresolved, Leaf, Empty]


def make_zone(triangle: Triangle, points) -> Zone:
    """Wrap a triangle and its points in the matching zone variant."""
    points = tuple(points)
    if not points:
        return Empty(triangle)
    if len(points) == 1:
        return Leaf(triangle, points[0])
    return Unresolved(triangle, points)


def zone_points(zone: Zone) -> Tuple[Point, ...]:
    """Points owned by a zone, whatever its variant."""
    if isinstance(zone, Unresolved):
        return zone.points
    if isinstance(zone, Leaf):
        return (zone.point,)
    return ()


# ============================================================
# SPLITTING
# ============================================================
def split_triangle(triangle: Triangle) -> Tuple[Triangle, Triangle]:
    """
    Cut (A, B, C) along the median from B.

    With M the midpoint of A and C, the children are (B, M, A) and
    (C, M, B). Applied recursively this alternates the orientation of
    every level and keeps the angles of the parent, which is what gives
    the subdivision its snowflake look.
    """
    a, b, c = triangle
    m = midpoint(a, c)
    return Triangle(b, m, a), Triangle(c, m, b)


def split(zone: Unresolved) -> Tuple[Zone, Zone]:
    """
    Split a zone in two and hand each of its points to the child whose
    centroid is closer. Equal distances go to the second child.
    """
    if not isinstance(zone, Unresolved):
        raise TypeError(f"only unresolved zones can be split, got {type(zone).__name__}")

    tri_a, tri_b = split_triangle(zone.triangle)
    centre_a = tri_a.centroid()
    centre_b = tri_b.centroid()

    owned_a, owned_b = [], []
    for p in zone.points:
        if distance(p, centre_a) < distance(p, centre_b):
            owned_a.append(p)
        else:
            owned_b.append(p)

    return make_zone(tri_a, owned_a), make_zone(tri_b, owned_b)
