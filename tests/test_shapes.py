"""Test composite shapes built from lines.

Covers:
    - Triangle: three edges ab, bc, ca in one color
    - Rectangle: derived corners, closed four-edge loop, mirrored corners
    - Circle: 361 segments, closed loop, zero radius, negative radius
    - Replay: same seed renders identical pixel sequences

Run:
    pytest tests/test_shapes.py -v
"""

import math

import numpy as np
import pytest

from shapes import (
    CIRCLE_SEGMENTS,
    Circle,
    Color,
    InvalidBounds,
    Line,
    Point,
    Rectangle,
    Shape,
    Triangle,
)


BLUE = Color(0, 0, 255)


# ============================================================================
# Triangle
# ============================================================================

def test_triangle_three_edges_one_color(rng):
    tri = Triangle(Point(0, 0), Point(4, 0), Point(0, 4), rng=rng)
    edges = tri.edges()
    assert len(edges) == 3
    assert all(isinstance(e, Line) for e in edges)
    assert {e.rgb for e in edges} == {tri.rgb}
    assert [(e.p1, e.p2) for e in edges] == [
        (Point(0, 0), Point(4, 0)),
        (Point(4, 0), Point(0, 4)),
        (Point(0, 4), Point(0, 0)),
    ]


def test_triangle_draw_sequence(sink):
    Triangle(Point(0, 0), Point(4, 0), Point(0, 4), rgb=BLUE).draw(sink)
    assert sink.coords == [
        (0, 0), (1, 0), (2, 0), (3, 0),
        (4, 0), (3, 1), (2, 2), (1, 3),
        (0, 4), (0, 3), (0, 2), (0, 1),
    ]
    assert sink.colors == {BLUE}


def test_triangle_random(rng):
    tri = Triangle.random(rng, 30, 20)
    for p in (tri.a, tri.b, tri.c):
        assert 0 <= p.x < 30 and 0 <= p.y < 20
    assert isinstance(tri.rgb, Color)


# ============================================================================
# Rectangle
# ============================================================================

def test_rectangle_corners_cyclic_order():
    rect = Rectangle(Point(0, 0), Point(4, 2), rgb=BLUE)
    assert rect.corners() == [Point(0, 0), Point(0, 2), Point(4, 2), Point(4, 0)]


def test_rectangle_edges_closed_loop(rng):
    rect = Rectangle(Point(0, 0), Point(4, 2), rng=rng)
    edges = rect.edges()
    assert len(edges) == 4
    for cur, nxt in zip(edges, edges[1:] + edges[:1]):
        assert cur.p2 == nxt.p1
    assert {e.rgb for e in edges} == {rect.rgb}


def test_rectangle_draw_covers_perimeter(sink):
    Rectangle(Point(0, 0), Point(4, 2), rgb=BLUE).draw(sink)
    perimeter = {(x, y) for x in range(5) for y in range(3) if x in (0, 4) or y in (0, 2)}
    assert len(sink.calls) == 12
    assert set(sink.coords) == perimeter
    assert sink.colors == {BLUE}


def test_rectangle_mirrored_corners_same_outline(make_sink):
    a, b = make_sink(), make_sink()
    Rectangle(Point(0, 0), Point(4, 2), rgb=BLUE).draw(a)
    Rectangle(Point(4, 2), Point(0, 0), rgb=BLUE).draw(b)
    assert set(a.coords) == set(b.coords)


def test_rectangle_random_is_normalized(rng):
    for _ in range(50):
        rect = Rectangle.random(rng, 25, 25)
        assert rect.left.x <= rect.right.x
        assert rect.left.y <= rect.right.y
        assert 0 <= rect.left.x and rect.right.x < 25


# ============================================================================
# Circle
# ============================================================================

def test_circle_361_segments_closed_loop(rng):
    circle = Circle(Point(5, 5), 3, rng=rng)
    edges = circle.edges()
    assert len(edges) == CIRCLE_SEGMENTS + 1 == 361
    assert edges[0].p1 == edges[-1].p2 == Point(8, 5)
    # first segment joins the 0 degree sample to itself
    assert edges[0].p1 == edges[0].p2
    for cur, nxt in zip(edges, edges[1:]):
        assert cur.p2 == nxt.p1
    assert {e.rgb for e in edges} == {circle.rgb}


def test_circle_samples_lie_on_circle():
    circle = Circle(Point(50, 40), 20, rgb=BLUE)
    samples = circle.samples()
    assert len(samples) == 361
    assert samples[0] == samples[-1]
    assert samples[90] == Point(50, 60)
    assert samples[180] == Point(30, 40)
    assert samples[270] == Point(50, 20)
    for p in samples:
        assert abs(math.hypot(p.x - 50, p.y - 40) - 20) <= math.sqrt(0.5)


def test_circle_draw_hits_axis_extremes(sink):
    Circle(Point(5, 5), 3, rgb=BLUE).draw(sink)
    coords = set(sink.coords)
    for p in [(8, 5), (5, 8), (2, 5), (5, 2)]:
        assert p in coords
    assert sink.colors == {BLUE}
    expected = sum(max(abs(e.p2.x - e.p1.x), abs(e.p2.y - e.p1.y), 1)
                   for e in Circle(Point(5, 5), 3, rgb=BLUE).edges())
    assert len(sink.calls) == expected


def test_circle_zero_radius_single_pixel(sink):
    circle = Circle(Point(4, 6), 0, rgb=BLUE)
    circle.draw(sink)
    assert sink.calls == [(4, 6, BLUE)]
    edges = circle.edges()
    assert len(edges) == 1
    assert edges[0].p1 == edges[0].p2 == Point(4, 6)


def test_circle_negative_radius_rejected():
    with pytest.raises(ValueError):
        Circle(Point(0, 0), -1)


def test_circle_random(rng):
    for _ in range(50):
        circle = Circle.random(rng, 40, 30)
        assert 0 <= circle.center.x < 40 and 0 <= circle.center.y < 30
        assert 0 <= circle.radius < 30


def test_circle_random_invalid_bounds(rng):
    with pytest.raises(InvalidBounds):
        Circle.random(rng, 10, 0)


# ============================================================================
# Polymorphism and replay
# ============================================================================

def test_base_shape_draw_not_implemented(sink):
    with pytest.raises(NotImplementedError):
        Shape().draw(sink)


@pytest.mark.parametrize("cls", [Point, Line, Triangle, Rectangle, Circle])
def test_same_seed_renders_identically(cls, make_sink):
    runs = []
    for _ in range(2):
        shape = cls.random(np.random.default_rng(42), 64, 48)
        s = make_sink()
        shape.draw(s)
        runs.append(s.calls)
    assert runs[0] == runs[1]
    assert len(runs[0]) > 0


def test_same_instance_renders_identically(rng, make_sink):
    tri = Triangle.random(rng, 100, 100)
    a, b = make_sink(), make_sink()
    tri.draw(a)
    tri.draw(b)
    assert a.calls == b.calls
