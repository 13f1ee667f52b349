"""Small random helpers shared by the drawing commands."""

import random as _random


def _source(rng):
    return rng if rng is not None else _random


def random_unit(rng=None):
    """Random float in the half-open range [-1, 1)."""
    return _source(rng).random() * 2.0 - 1.0


def random_int(start, stop, rng=None):
    """Random integer from ``start`` (inclusive) to ``stop`` (exclusive)."""
    if start >= stop:
        raise ValueError(f"empty range: start {start} must be below stop {stop}")
    return _source(rng).randrange(start, stop)