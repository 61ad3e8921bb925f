import math

import pytest

from jeweljam.menu import (
    BACK_BUTTON,
    BLACK,
    BROWN,
    MAIN_MENU_BUTTONS,
    MENU_BUTTONS,
    PAUSE_BUTTON,
    Rect,
    bear_parts,
    button_at,
    check_mouse_click,
    circle_points,
    ellipse_arc,
)


def test_rect_contains_includes_edges():
    rect = Rect(240, 450, 400, 60)
    assert rect.contains(240, 450)
    assert rect.contains(640, 510)
    assert rect.contains(400, 480)


def test_rect_excludes_outside_points():
    rect = Rect(240, 450, 400, 60)
    assert not rect.contains(239.5, 480)
    assert not rect.contains(400, 510.5)
    assert not rect.contains(640.5, 450)


def test_check_mouse_click_matches_rect():
    for x, y in [(100, 150), (300, 250), (200, 200), (99, 200), (200, 251)]:
        assert check_mouse_click(x, y, 100, 150, 200, 100) == PAUSE_BUTTON.contains(x, y)


def test_button_at_main_menu():
    assert button_at(MAIN_MENU_BUTTONS, 300, 470) == 0
    assert button_at(MAIN_MENU_BUTTONS, 300, 370) == 1
    assert button_at(MAIN_MENU_BUTTONS, 300, 270) == 2
    assert button_at(MAIN_MENU_BUTTONS, 300, 170) == 3


def test_button_at_misses():
    assert button_at(MAIN_MENU_BUTTONS, 700, 470) is None
    assert button_at(MENU_BUTTONS, 300, 440) is None
    assert button_at([], 300, 470) is None


def test_back_button_position():
    assert BACK_BUTTON.contains(510, 100)
    assert BACK_BUTTON.contains(710, 150)
    assert not BACK_BUTTON.contains(711, 150)


@pytest.mark.parametrize("segments", [1, 4, 100])
def test_circle_points_lie_on_circle(segments):
    points = circle_points(1000.0, 450.0, 50.0, segments)
    assert len(points) == segments + 1
    for x, y in points:
        assert math.hypot(x - 1000.0, y - 450.0) == pytest.approx(50.0)


def test_circle_points_start_at_angle_zero():
    points = circle_points(10.0, 20.0, 5.0, 100)
    assert points[0] == (15.0, 20.0)
    assert points[-1] == pytest.approx((15.0, 20.0), abs=1e-3)


def test_circle_points_rejects_no_segments():
    with pytest.raises(ValueError):
        circle_points(0.0, 0.0, 1.0, 0)


def test_ellipse_arc_points_on_ellipse():
    points = ellipse_arc(1000.0, 435.0, 20, 10, 210, 330)
    assert len(points) == 330 - 210 + 1
    for x, y in points:
        value = ((x - 1000.0) / 20) ** 2 + ((y - 435.0) / 10) ** 2
        assert value == pytest.approx(1.0)


def test_ellipse_arc_lower_half_is_below_centre():
    points = ellipse_arc(0.0, 0.0, 8, 4, 181, 359)
    assert all(y < 0 for _, y in points)


def test_ellipse_arc_empty_when_reversed():
    assert ellipse_arc(0.0, 0.0, 1, 1, 10, 5) == []


def test_bear_parts_layout():
    parts = bear_parts()
    assert len(parts) == 16
    assert parts[0].color == BROWN
    assert all(part.points for part in parts)
    for part in parts:
        assert all(0.0 <= channel <= 1.0 for channel in part.color)


def test_bear_mouth_is_an_open_black_line():
    open_parts = [part for part in bear_parts() if not part.filled]
    assert len(open_parts) == 1
    assert open_parts[0].color == BLACK