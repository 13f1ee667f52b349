"""Animated Julia set whose constant travels around the unit circle."""

import argparse
import math
from dataclasses import dataclass

from sketchbook.randomutil import random_int

WINDOW_SIZE = 800
ANGLE_STEP = 0.02
OFFSET_MAX = 55
ESCAPE_LIMIT = 64.0
SHADED_ITERATIONS = 200
PALETTE_ITERATIONS = 256
SHADED_WAIT_MS = 5
PALETTE_WAIT_MS = 1
_WHITE = (255, 255, 255)


def palette():
    """The 256 colours used for escape counts, as ``(r, g, b)`` before byte wrapping."""
    return [
        ((col >> 5) * 36, ((col >> 3) & 7) * 72, (col & 3) * 85)
        for col in range(256)
    ]


def escape_count(a, b, ca, cb, max_iterations):
    """Steps of ``z -> z*z + c`` from ``a + bi`` before ``|z|^2`` exceeds 64."""
    n = 0
    while n < max_iterations:
        aa, bb = a * a, b * b
        if aa + bb > ESCAPE_LIMIT:
            break
        a, b = aa - bb + ca, 2.0 * a * b + cb
        n += 1
    return n


def julia_counts(width, height, angle, max_iterations):
    """Escape counts for each pixel, row by row, with ``c = cos(angle) + i sin(angle)``."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    ca, cb = math.cos(angle), math.sin(angle)
    w = 4
    h = (w * height) // width
    xmin = -(w // 2)
    ymin = -(h // 2)
    dx = w / width
    dy = h / height
    return [
        [
            escape_count(xmin + i * dx, ymin + j * dy, ca, cb, max_iterations)
            for i in range(width)
        ]
        for j in range(height)
    ]


@dataclass
class ColourOffset:
    """A colour channel offset that wanders between 0 and 55."""

    offset: int = 0
    ascending: bool = False

    def advance(self, faster=False, rng=None):
        """Move the offset by a small random step, turning at the ends; return it."""
        step = random_int(1, 5 if faster else 3, rng)
        self.offset += step if self.ascending else -step
        if self.offset < 0:
            self.offset = 0
            self.ascending = True
        elif self.offset > OFFSET_MAX:
            self.offset = OFFSET_MAX
            self.ascending = False
        return self.offset

    def __str__(self):
        return f"{{{self.offset}, {str(self.ascending).lower()}}}"


def _byte_colour(rgb):
    return tuple(component & 0xFF for component in rgb)


def _shaded_colourer():
    red, green, blue = ColourOffset(), ColourOffset(), ColourOffset()

    def next_frame():
        red.advance(False)
        green.advance(True)
        blue.advance(False)
        print(f"R: {red}, G: {green}, B: {blue}")
        offsets = (red.offset, green.offset, blue.offset)

        def colour(n):
            if n == SHADED_ITERATIONS:
                return offsets
            return _byte_colour(tuple(n + offset for offset in offsets))

        return colour

    return next_frame


def _palette_colourer():
    colours = [_byte_colour(rgb) for rgb in palette()]

    def colour(n):
        return (0, 0, 0) if n == PALETTE_ITERATIONS else colours[n]

    return lambda: colour


def _show(use_palette):
    import pygame

    if use_palette:
        next_frame, iterations, wait_ms = (
            _palette_colourer(), PALETTE_ITERATIONS, PALETTE_WAIT_MS,
        )
    else:
        next_frame, iterations, wait_ms = (
            _shaded_colourer(), SHADED_ITERATIONS, SHADED_WAIT_MS,
        )

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        pygame.display.set_caption("Julia Set")
        angle = 0.0
        paused = False
        while True:
            event = pygame.event.wait(wait_ms)
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                paused = not paused
            elif not paused:
                colour = next_frame()
                screen.fill(_WHITE)
                counts = julia_counts(WINDOW_SIZE, WINDOW_SIZE, angle, iterations)
                angle += ANGLE_STEP
                for j, row in enumerate(counts):
                    for i, n in enumerate(row):
                        screen.set_at((i, j), colour(n))
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None):
    """Animate the Julia set; space pauses.  Return an exit code."""
    parser = argparse.ArgumentParser(
        prog="julia", description="Animated Julia set; press space to pause."
    )
    parser.add_argument(
        "--palette",
        action="store_true",
        help="colour by a fixed 256-colour palette instead of drifting shades",
    )
    args = parser.parse_args(argv)
    return _show(args.palette)