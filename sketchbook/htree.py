"""H-tree fractal: recursive H shapes drawn in random colours."""

import re
import sys

from sketchbook.randomutil import random_int

WINDOW_SIZE = 800
LINE_WIDTH = 2
_WHITE = (255, 255, 255)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _half(n):
    """Half of ``n`` rounded toward zero."""
    return n // 2 if n >= 0 else -(-n // 2)


def line_strokes(x1, y1, x2, y2, width):
    """Parallel one-pixel segments making up a line ``width`` pixels thick.

    Mostly horizontal lines are thickened vertically and vice versa.
    """
    if width <= 0:
        return []
    horizontal = abs(x2 - x1) > abs(y2 - y1)
    return [
        (x1, y1 + i, x2, y2 + i) if horizontal else (x1 + i, y1, x2 + i, y2)
        for i in range(-(width // 2), (width + 1) // 2)
    ]


def _htree(depth, size, cx, cy, rng, shapes):
    if depth == 0:
        return
    colour = tuple(random_int(0, 256, rng) for _ in range(3))
    h = _half(size)
    strokes = [
        *line_strokes(cx - h, cy, cx + h, cy, LINE_WIDTH),
        *line_strokes(cx - h, cy - h, cx - h, cy + h, LINE_WIDTH),
        *line_strokes(cx + h, cy - h, cx + h, cy + h, LINE_WIDTH),
    ]
    shapes.append((colour, strokes))
    for corner_x, corner_y in (
        (cx - h, cy - h),
        (cx + h, cy - h),
        (cx - h, cy + h),
        (cx + h, cy + h),
    ):
        _htree(depth - 1, h, corner_x, corner_y, rng, shapes)


def htree(depth, size, center_x, center_y, rng=None):
    """The H shapes of an H-tree as ``(colour, segments)`` pairs in drawing order."""
    if depth < 0:
        raise ValueError("depth must not be negative")
    shapes = []
    _htree(depth, size, center_x, center_y, rng, shapes)
    return shapes


def _render(pygame, screen, depth):
    screen.fill(_WHITE)
    half = WINDOW_SIZE // 2
    for colour, strokes in htree(depth, half, half, half):
        for x1, y1, x2, y2 in strokes:
            pygame.draw.line(screen, colour, (x1, y1), (x2, y2))
    pygame.display.flip()


def _show(depth):
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption("H-Tree")
        _render(pygame, screen, depth)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                _render(pygame, screen, depth)
    finally:
        pygame.quit()


def main(argv=None):
    """Draw an H-tree of the given depth; space redraws in new colours."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: htree <depth>")
        return 1
    try:
        depth = _parse_int(argv[0])
    except ValueError:
        print("Usage: htree <depth> (where depth is an int)")
        return 1
    print(f"H-tree depth: {depth}")
    if depth < 0:
        print("Depth must not be negative.")
        return 1
    return _show(depth)