"""Owl image moved around a window with the arrow keys, plus a still-image viewer."""

import argparse
import enum
from dataclasses import dataclass

WINDOW_SIZE = (600, 400)
SPEED = 5
REC_SQRT2 = 0.7071067811865475
START_X = 200
START_Y = 100
OWL_IMAGE = "assets/owl.png"
FONT_PATH = "assets/FreeSans.ttf"
FONT_SIZE = 30
GREETING = "Hello owl!"
TEXT_POSITION = (50, 175)
HELLO_POSITION = (200, 100)
HELLO_SIZE = (200, 200)
FRAME_RATE = 60
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


class Direction(enum.IntFlag):
    """Arrow keys that can be held down."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8


@dataclass
class OwlState:
    """Position of the owl and the arrow keys currently held."""

    x: int = START_X
    y: int = START_Y
    active: Direction = Direction.NONE

    def press(self, direction):
        """Mark ``direction`` as held."""
        self.active |= direction

    def release(self, direction):
        """Toggle ``direction``, as a key-up event does."""
        self.active ^= direction

    def velocity(self):
        """Velocity ``(vx, vy)`` from the held keys; diagonals are slowed to unit speed."""
        vx = vy = 0
        if self.active & Direction.UP:
            vy = -SPEED
        if self.active & Direction.DOWN:
            vy = SPEED
        if self.active & Direction.LEFT:
            vx = -SPEED
        if self.active & Direction.RIGHT:
            vx = SPEED
        if vx and vy:
            vx = int(vx * REC_SQRT2)
            vy = int(vy * REC_SQRT2)
        return vx, vy

    def step(self):
        """Move the owl by one frame's velocity and return its new position."""
        vx, vy = self.velocity()
        self.x += vx
        self.y += vy
        return self.x, self.y


def _load_owl(pygame):
    try:
        return pygame.image.load(OWL_IMAGE)
    except (pygame.error, OSError) as exc:
        print(f"IMG_Load: {exc}")
        return None


def _render_greeting(pygame):
    try:
        font = pygame.font.Font(FONT_PATH, FONT_SIZE)
    except (pygame.error, OSError) as exc:
        print(f"TTF_OpenFont: {exc}")
        return None
    return font.render(GREETING, True, _BLACK)


def main(argv=None):
    """Move the owl with the arrow keys until the window closes; return an exit code."""
    parser = argparse.ArgumentParser(
        prog="owl", description="Move an owl around a window with the arrow keys."
    )
    parser.add_argument(
        "--text", action="store_true", help=f"also write {GREETING!r} in the window"
    )
    args = parser.parse_args(argv)

    import pygame

    keys = {
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        owl = _load_owl(pygame)
        greeting = _render_greeting(pygame) if args.text else None
        state = OwlState()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
                    continue
                direction = keys.get(event.key)
                if direction is None:
                    continue
                if event.type == pygame.KEYDOWN:
                    state.press(direction)
                else:
                    state.release(direction)

            state.step()
            screen.fill(_WHITE)
            if owl is not None:
                screen.blit(owl, (state.x, state.y))
            if greeting is not None:
                screen.blit(greeting, TEXT_POSITION)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def hello_owl_main(argv=None):
    """Show the owl image once on a white background; return an exit code."""
    argparse.ArgumentParser(
        prog="hello-owl", description="Show the owl image in a window."
    ).parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        screen.fill(_WHITE)
        owl = _load_owl(pygame)
        if owl is not None:
            screen.blit(pygame.transform.scale(owl, HELLO_SIZE), HELLO_POSITION)
        pygame.display.flip()
        print("you should see an image.")
        while pygame.event.wait().type != pygame.QUIT:
            pass
        return 0
    finally:
        pygame.quit()