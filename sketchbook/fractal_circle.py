"""Fractal of circles, each holding seven smaller ones, drawn one more per frame."""

import itertools
import math
import re
import sys
import time

from sketchbook.draw import midpoint_circle_points

WINDOW_SIZE = 800
FRAME_DELAY = 0.2
_WHITE = (255, 255, 255)
_RED = (255, 0, 0)

# Outward shift for each of the eight octant points of one midpoint step.
_OUTWARD = ((1, 0), (1, 0), (-1, 0), (-1, 0), (0, -1), (0, 1), (0, -1), (0, 1))

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def circle_outline_points(cx, cy, diameter):
    """Pixels of a two-pixel-thick circle outline of ``diameter`` around ``(cx, cy)``."""
    inner = midpoint_circle_points(cx, cy, diameter)
    outer = [
        (px + dx, py + dy)
        for (px, py), (dx, dy) in zip(inner, itertools.cycle(_OUTWARD))
    ]
    return inner + outer


def _circles(depth, cx, cy, diameter):
    if depth == 0:
        return
    yield cx, cy, diameter
    inner = diameter // 3
    x_offset = int(inner * math.sqrt(3.0) / 2.0)
    y_offset = inner // 2
    for child_x, child_y in (
        (cx, cy),
        (cx, cy - inner),
        (cx, cy + inner),
        (cx - x_offset, cy - y_offset),
        (cx + x_offset, cy - y_offset),
        (cx - x_offset, cy + y_offset),
        (cx + x_offset, cy + y_offset),
    ):
        yield from _circles(depth - 1, child_x, child_y, inner)


def fractal_circles(depth, cx, cy, diameter):
    """All circles of the fractal as ``(cx, cy, diameter)`` in drawing order."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    return list(_circles(depth, cx, cy, diameter))


class FractalCircle:
    """Reveals the fractal one circle per frame until every circle is shown."""

    def __init__(self, depth, cx, cy, diameter):
        self.circles = fractal_circles(depth, cx, cy, diameter)
        self.drawn = 0

    def frame(self):
        """Circles to draw this frame and whether the drawing is complete."""
        if self.drawn < len(self.circles):
            self.drawn += 1
            return self.circles[: self.drawn], False
        return list(self.circles), True


def _paint(screen, circles):
    for cx, cy, diameter in circles:
        for point in circle_outline_points(cx, cy, diameter):
            screen.set_at(point, _RED)


def _show(depth):
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption(f"Fractal Circle {depth}")
        if pygame.event.wait().type == pygame.QUIT:
            return 0
        screen.fill(_WHITE)

        centre = WINDOW_SIZE // 2
        fractal = FractalCircle(depth, centre, centre, WINDOW_SIZE)
        while True:
            circles, complete = fractal.frame()
            _paint(screen, circles)
            if complete:
                print(f"Complete: {len(circles)}")
                break
            print(f"Circles drawn: {len(circles)}")
            pygame.display.flip()
            pygame.event.pump()
            time.sleep(FRAME_DELAY)
            screen.fill(_WHITE)
        pygame.display.flip()

        while pygame.event.wait().type != pygame.QUIT:
            pass
        return 0
    finally:
        pygame.quit()


def main(argv=None):
    """Animate the circle fractal of the given depth; return an exit code."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: fractal-circle <depth>")
        return 1
    try:
        depth = _parse_int(argv[0])
    except ValueError:
        print("Usage: fractal-circle <depth> (where depth is an int)")
        return 1
    print(f"Fractal Circle depth: {depth}")
    if depth < 0:
        print("Depth must not be negative.")
        return 1
    return _show(depth)