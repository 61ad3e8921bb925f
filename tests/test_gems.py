import math

import pytest

from jeweljam.gems import Circle, Diamond, Gem, Pentagon, Rectangle, Square, Triangle


def test_kinds_follow_class_names():
    gems = [
        Circle(0, 0, 10),
        Diamond(0, 0, 10),
        Pentagon(0, 0, 10),
        Rectangle(0, 0, 10, 10),
        Square(0, 0, 10),
        Triangle(0, 0, 10),
    ]
    assert [g.kind for g in gems] == [
        "Circle",
        "Diamond",
        "Pentagon",
        "Rectangle",
        "Square",
        "Triangle",
    ]


def test_gem_base_is_abstract():
    with pytest.raises(TypeError):
        Gem(0, 0)


def test_circle_points_lie_on_radius():
    circle = Circle(100, 200, 15)
    points = circle.shape()
    assert len(points) == 360
    for px, py in points:
        assert math.hypot(px, py) == pytest.approx(15)


def test_pentagon_has_five_corners_at_size():
    pentagon = Pentagon(0, 0, 20)
    points = pentagon.shape()
    assert len(points) == 5
    assert points[0] == pytest.approx((20, 0))
    for px, py in points:
        assert math.hypot(px, py) == pytest.approx(20)


def test_diamond_corners_on_axes():
    size = 50
    points = Diamond(0, 0, size).shape()
    assert len(points) == 4
    for px, py in points:
        assert abs(px) + abs(py) == pytest.approx(size / 2)


def test_square_is_symmetric():
    size = 40
    points = Square(0, 0, size).shape()
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert max(xs) - min(xs) == pytest.approx(size)
    assert max(ys) - min(ys) == pytest.approx(size)
    assert sum(xs) == pytest.approx(0)


def test_rectangle_spans_width_and_height():
    points = Rectangle(0, 0, 30, 12).shape()
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert max(xs) - min(xs) == pytest.approx(30)
    assert max(ys) - min(ys) == pytest.approx(12)


def test_triangle_apex_on_top():
    size = 50
    apex, left, right = Triangle(0, 0, size).shape()
    assert apex == (0.0, size / 2)
    assert left[1] == right[1] == -size / 2
    assert left[0] == -right[0]


@pytest.mark.parametrize(
    "gem",
    [Circle(10, 20, 5), Diamond(10, 20, 5), Square(10, 20, 5), Triangle(10, 20, 5)],
)
def test_outline_is_shape_moved_to_centre(gem):
    shifted = [(gem.x + dx, gem.y + dy) for dx, dy in gem.shape()]
    assert gem.outline() == shifted


def test_moving_a_gem_moves_its_outline():
    gem = Square(0, 0, 10)
    before = gem.outline()
    gem.x = 60
    gem.y = 120
    after = gem.outline()
    for (bx, by), (ax, ay) in zip(before, after):
        assert ax - bx == pytest.approx(60)
        assert ay - by == pytest.approx(120)


@pytest.mark.parametrize(
    "gem",
    [
        Circle(0, 0, 10),
        Diamond(0, 0, 10),
        Pentagon(0, 0, 10),
        Rectangle(0, 0, 10, 10),
        Square(0, 0, 10),
        Triangle(0, 0, 10),
    ],
)
def test_colors_are_unit_range(gem):
    color = tuple(gem.color)
    assert len(color) == 3
    assert all(0.0 <= c <= 1.0 for c in color)