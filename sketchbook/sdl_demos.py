"""Small window demos: colour on input events, and a smoothly shaded square."""

import argparse
import sys

HELLO_SIZE = (640, 480)
CLOSE_DELAY_MS = 2000
SQUARE_THRESHOLD = 10
_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)
_MAGENTA = (255, 0, 255)


def colour_for_event(event_type):
    """Fill colour for a pygame event type, or None if the event changes nothing."""
    import pygame

    return {pygame.KEYDOWN: _YELLOW, pygame.MOUSEBUTTONDOWN: _MAGENTA}.get(event_type)


def gradient_pixel(i, j, dimension):
    """Colour of row ``i``, column ``j`` in a shaded square of side ``dimension``."""
    i_stretch = int(i / float(dimension) * 255)
    j_stretch = int(j / float(dimension) * 255)
    return i_stretch, 255 - j_stretch, 255 - i_stretch


def gradient_square(dimension):
    """Rows of colours for a shaded square of side ``dimension``."""
    if dimension < 0:
        raise ValueError("dimension must not be negative")
    return [
        [gradient_pixel(i, j, dimension) for j in range(dimension)]
        for i in range(dimension)
    ]


def hello_main(argv=None):
    """Window that turns yellow on key presses and magenta on clicks; return an exit code."""
    argparse.ArgumentParser(
        prog="hello-sdl", description="Colour a window on key presses and clicks."
    ).parse_args(argv)

    import pygame

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(HELLO_SIZE)
        except pygame.error as exc:
            print(f"Window Error: {exc}")
            return 1
        pygame.display.set_caption("Hello SDL")
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            colour = colour_for_event(event.type)
            if colour is not None:
                screen.fill(colour)
                pygame.display.flip()

        screen.fill(_WHITE)
        pygame.display.flip()
        pygame.time.wait(CLOSE_DELAY_MS)
        return 0
    finally:
        pygame.quit()


def _show_square(dimension):
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((dimension, dimension))
        for i, row in enumerate(gradient_square(dimension)):
            for j, colour in enumerate(row):
                screen.set_at((j, i), colour)
        pygame.display.flip()
        print(
            "you should see a smoothly-colored square - "
            "no sharp lines but the square borders!"
        )
        while pygame.event.wait().type != pygame.QUIT:
            pass
    finally:
        pygame.quit()


def square_main(argv=None):
    """Draw the shaded square sized by the argument count when it exceeds ten."""
    if argv is None:
        argv = sys.argv[1:]
    count = len(argv) + 1
    if count > SQUARE_THRESHOLD:
        print(f"Calling sql_square with: {count}")
        _show_square(count)
    else:
        print(f"Skipping making square ({count})")
    return 0