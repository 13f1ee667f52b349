import math

import pytest

from sketchbook.fractal_circle import (
    FractalCircle,
    circle_outline_points,
    fractal_circles,
    main,
)


def test_outline_has_sixteen_points_per_step():
    points = circle_outline_points(100, 100, 60)
    assert points
    assert len(points) % 16 == 0


def test_outline_lies_near_the_circle():
    cx, cy, diameter = 200, 150, 100
    radius = diameter // 2
    for x, y in circle_outline_points(cx, cy, diameter):
        distance = math.hypot(x - cx, y - cy)
        assert radius - 3 <= distance <= radius + 2


def test_outline_is_mirror_symmetric():
    cx, cy = 50, 70
    points = set(circle_outline_points(cx, cy, 40))
    assert points == {(2 * cx - x, y) for x, y in points}
    assert points == {(x, 2 * cy - y) for x, y in points}


def test_depth_zero_has_no_circles():
    assert fractal_circles(0, 400, 400, 800) == []


def test_depth_one_is_the_outer_circle():
    assert fractal_circles(1, 400, 400, 800) == [(400, 400, 800)]


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_each_circle_holds_seven(depth):
    assert len(fractal_circles(depth, 400, 400, 810)) == 1 + 7 * len(
        fractal_circles(depth - 1, 400, 400, 810)
    )


def test_children_are_a_third_of_the_parent():
    circles = fractal_circles(2, 300, 300, 99)
    assert all(diameter == 33 for _, _, diameter in circles[1:])
    assert circles[1] == (300, 300, 33)
    assert circles[2] == (300, 300 - 33, 33)
    assert circles[3] == (300, 300 + 33, 33)


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        fractal_circles(-1, 0, 0, 100)


def test_frames_reveal_one_more_circle_each():
    fractal = FractalCircle(2, 400, 400, 800)
    total = len(fractal.circles)
    for expected in range(1, total + 1):
        circles, complete = fractal.frame()
        assert complete is False
        assert circles == fractal.circles[:expected]
    circles, complete = fractal.frame()
    assert complete is True
    assert circles == fractal.circles
    assert fractal.frame()[1] is True


def test_depth_zero_completes_at_once():
    assert FractalCircle(0, 400, 400, 800).frame() == ([], True)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_rejects_non_integer(capsys):
    assert main(["deep"]) == 1
    assert "where depth is an int" in capsys.readouterr().out