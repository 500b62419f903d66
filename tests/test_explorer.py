"""Tests for the depth-first snowflake traversal"""

import pytest

from snowflake_tsp.explorer import (
    SubdivisionDepthError,
    explode,
    explode_zones,
    snowflake_path,
)
from snowflake_tsp.geometry import (
    Point,
    Triangle,
    bounding_triangle,
    generate_grid_points,
    generate_random_points,
    to_points,
)
from snowflake_tsp.zones import Empty, Leaf, Unresolved, make_zone, split

SAMPLE = Triangle(Point(0, 0), Point(10, 0), Point(0, 10))


def recursive_walk(zone):
    """Plain recursive reading of the subdivision tree, for comparison."""
    if isinstance(zone, Empty):
        return []
    if isinstance(zone, Leaf):
        return [zone.point]
    first, second = split(zone)
    return recursive_walk(first) + recursive_walk(second)


def distinct_random_points(n, seed):
    return list(dict.fromkeys(to_points(generate_random_points(n, seed=seed))))


def test_explode_no_points():
    assert explode(make_zone(SAMPLE, [])) == []
    assert snowflake_path(SAMPLE, []) == []


def test_explode_single_point():
    p = Point(3.25, 1.5)
    assert explode(make_zone(SAMPLE, [p])) == [p]


def test_explode_two_separated_points():
    p1, p2 = Point(1, 1), Point(9, 9)
    leaves = explode_zones(make_zone(SAMPLE, [p1, p2]))
    assert [type(leaf) for leaf in leaves] == [Leaf, Leaf]
    assert explode(make_zone(SAMPLE, [p1, p2])) == [p1, p2]


def test_explode_keeps_every_point_once():
    points = distinct_random_points(60, seed=7)
    path = snowflake_path(bounding_triangle(), points, max_depth=200)
    assert len(path) == len(points)
    assert sorted(path) == sorted(points)


def test_explode_separates_distinct_points_in_square_area():
    for seed in range(5):
        points = distinct_random_points(200, seed=seed)
        path = snowflake_path(bounding_triangle(), points, max_depth=200)
        assert sorted(path) == sorted(points)


def test_explode_grid_points():
    points = to_points(generate_grid_points(8, size=100.0))
    path = snowflake_path(bounding_triangle(), points, max_depth=200)
    assert sorted(path) == sorted(points)


def test_explode_is_depth_first():
    points = distinct_random_points(40, seed=11)
    root = make_zone(bounding_triangle(), points)
    assert explode(root, max_depth=200) == recursive_walk(root)


def test_explode_is_repeatable():
    points = distinct_random_points(30, seed=5)
    root = make_zone(bounding_triangle(), points)
    assert explode(root) == explode(root)


def test_leaf_triangles_follow_path():
    points = distinct_random_points(20, seed=2)
    leaves = explode_zones(make_zone(bounding_triangle(), points), max_depth=200)
    assert [leaf.point for leaf in leaves] == explode(make_zone(bounding_triangle(), points))
    assert all(isinstance(leaf.triangle, Triangle) for leaf in leaves)


def test_coincident_points_hit_depth_limit():
    # coincident points are never separated: the walk needs a depth limit to stop
    root = make_zone(bounding_triangle(10, 10), [Point(5, 5), Point(5, 5)])
    with pytest.raises(SubdivisionDepthError) as err:
        explode(root, max_depth=40)
    assert err.value.depth == 40
    assert err.value.remaining == 2


def test_coincident_points_among_distinct_ones():
    points = [Point(1, 1), Point(5, 5), Point(5, 5), Point(8, 2)]
    with pytest.raises(SubdivisionDepthError):
        snowflake_path(bounding_triangle(10, 10), points, max_depth=60)


def test_depth_limit_not_hit_by_distinct_points():
    points = [Point(1, 1), Point(9, 9)]
    assert explode(make_zone(SAMPLE, points), max_depth=1) == points


def test_zero_depth_refuses_any_split():
    root = make_zone(SAMPLE, [Point(1, 1), Point(9, 9)])
    assert isinstance(root, Unresolved)
    with pytest.raises(SubdivisionDepthError):
        explode(root, max_depth=0)
