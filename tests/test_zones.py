"""Tests for zone construction and splitting"""

import pytest

from snowflake_tsp.geometry import Point, Triangle, average, bounding_triangle
from snowflake_tsp.zones import (
    Empty,
    Leaf,
    Unresolved,
    make_zone,
    split,
    split_triangle,
    zone_points,
)

A = Point(0, 0)
B = Point(10, 0)
C = Point(0, 10)
SAMPLE = Triangle(A, B, C)


def test_make_zone_variants():
    assert make_zone(SAMPLE, []) == Empty(SAMPLE)
    assert make_zone(SAMPLE, [Point(1, 1)]) == Leaf(SAMPLE, Point(1, 1))

    zone = make_zone(SAMPLE, [Point(1, 1), Point(2, 2)])
    assert isinstance(zone, Unresolved)
    assert zone_points(zone) == (Point(1, 1), Point(2, 2))


def test_split_vertices():
    first, second = split_triangle(SAMPLE)
    m = Point(0, 5)
    assert tuple(first) == (B, m, A)
    assert tuple(second) == (C, m, B)
    assert first == ((10, 0), (0, 5), (0, 0))
    assert second == ((0, 10), (0, 5), (10, 0))


def test_split_children_centroids_match_vertex_averages():
    zone = make_zone(SAMPLE, [Point(1, 1), Point(9, 9)])
    first, second = split(zone)
    m = Point(0, 5)
    assert first.triangle.centroid() == average(B, m, A)
    assert second.triangle.centroid() == average(C, m, B)


def test_split_separates_far_apart_points():
    p1, p2 = Point(1, 1), Point(9, 9)
    first, second = split(make_zone(SAMPLE, [p1, p2]))
    assert first == Leaf(first.triangle, p1)
    assert second == Leaf(second.triangle, p2)


def test_split_ties_go_to_second_child():
    # both points sit on the shared edge, at equal distance from both centroids
    tri = bounding_triangle(3, 3)
    points = [Point(1, 1), Point(2, 2)]
    first, second = split(make_zone(tri, points))
    assert isinstance(first, Empty)
    assert isinstance(second, Unresolved)
    assert second.points == tuple(points)


def test_split_keeps_empty_child():
    points = [Point(1, 1), Point(2, 0.5), Point(3, 1)]
    first, second = split(make_zone(SAMPLE, points))
    assert isinstance(first, Unresolved)
    assert set(first.points) == set(points)
    assert second == Empty(second.triangle)


def test_split_partitions_points():
    points = [Point(x, y) for x in range(0, 10, 2) for y in range(0, 10 - x, 3)]
    first, second = split(make_zone(SAMPLE, points))
    assert sorted(zone_points(first) + zone_points(second)) == sorted(points)
    assert not set(zone_points(first)) & set(zone_points(second))


def test_split_rejects_resolved_zones():
    with pytest.raises(TypeError):
        split(Leaf(SAMPLE, Point(1, 1)))
    with pytest.raises(TypeError):
        split(Empty(SAMPLE))
