"""Tests for ShapeRenderer primitives against a recording draw target."""

from __future__ import annotations

from hashicon.engine.transform import CellTransform
from tests.conftest import RED


def test_polygon_is_transformed(renderer, recording):
    renderer.transform = CellTransform(100, 50, 20, 1)
    renderer.polygon(RED, [(0, 0), (5, 0), (0, 5)])
    assert recording.calls == [("polygon", [(120, 50), (120, 55), (115, 50)], RED)]


def test_rectangle_adds_one_row(renderer, recording):
    renderer.transform = CellTransform(100, 100, 20, 0)
    renderer.rectangle(RED, (2, 3), (5, 6))
    assert recording.calls == [("rectangle", (102, 103, 106, 109), RED)]


def test_rectangle_swaps_size_on_odd_rotation(renderer, recording):
    renderer.transform = CellTransform(0, 0, 20, 1)
    renderer.rectangle(RED, (0, 0), (10, 4))
    assert recording.calls == [("rectangle", (16, 0, 19, 10), RED)]


def test_degenerate_rectangle_is_skipped(renderer, recording):
    renderer.transform = CellTransform(0, 0, 20, 0)
    renderer.rectangle(RED, (0, 0), (0, 5))
    renderer.rectangle(RED, (0, 0), (5, -2))
    assert recording.calls == []


def test_circle_uses_transformed_bounding_box(renderer, recording):
    renderer.transform = CellTransform(0, 0, 20, 2)
    renderer.circle(RED, (2, 2), 6)
    assert recording.calls == [("ellipse", (12, 12, 18, 18), RED)]


def test_rhombus_uses_edge_midpoints(renderer, recording):
    renderer.rhombus(RED, (0, 0), (10, 10))
    assert recording.calls == [("polygon", [(5, 0), (10, 5), (5, 10), (0, 5)], RED)]


def test_triangle_orientations(renderer, recording):
    for orientation in range(5):
        renderer.triangle(RED, (0, 0), (10, 10), orientation)
    polygons = [xy for _, xy, _ in recording.calls]
    assert polygons[0] == [(10, 10), (0, 10), (0, 0)]  # no top-right
    assert polygons[1] == [(10, 0), (0, 10), (0, 0)]  # no bottom-right
    assert polygons[2] == [(10, 0), (10, 10), (0, 0)]  # no bottom-left
    assert polygons[3] == [(10, 0), (10, 10), (0, 10)]  # no top-left
    assert polygons[4] == polygons[0]
