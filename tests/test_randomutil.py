import random

import pytest

from sketchbook.randomutil import random_int, random_unit


def test_random_int_stays_within_bounds():
    rng = random.Random(1)
    values = [random_int(0, 256, rng) for _ in range(1000)]
    assert all(0 <= value < 256 for value in values)


def test_random_int_single_value_range():
    assert random_int(5, 6) == 5


def test_random_int_reaches_every_value():
    rng = random.Random(3)
    values = {random_int(1, 3, rng) for _ in range(200)}
    assert values == {1, 2}


@pytest.mark.parametrize("start, stop", [(3, 3), (4, 2)])
def test_random_int_rejects_empty_range(start, stop):
    with pytest.raises(ValueError):
        random_int(start, stop)


def test_random_unit_range_and_both_signs():
    rng = random.Random(11)
    values = [random_unit(rng) for _ in range(1000)]
    assert all(-1.0 <= value < 1.0 for value in values)
    assert any(value < 0 for value in values)
    assert any(value > 0 for value in values)


def test_seeded_generators_repeat():
    first = random.Random(7)
    second = random.Random(7)
    assert [random_int(0, 100, first) for _ in range(20)] == [
        random_int(0, 100, second) for _ in range(20)
    ]
    assert random_unit(first) == random_unit(second)