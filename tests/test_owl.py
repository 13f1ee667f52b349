import pytest

from sketchbook.owl import Direction, OwlState, START_X, START_Y, main


def test_new_state_starts_at_fixed_position_and_is_still():
    state = OwlState()
    assert (state.x, state.y) == (200, 100)
    assert state.velocity() == (0, 0)


def test_up_moves_up():
    state = OwlState()
    state.press(Direction.UP)
    assert state.velocity() == (0, -5)


def test_down_overrides_up():
    state = OwlState()
    state.press(Direction.UP)
    state.press(Direction.DOWN)
    assert state.velocity() == (0, 5)


def test_right_overrides_left():
    state = OwlState()
    state.press(Direction.LEFT)
    state.press(Direction.RIGHT)
    assert state.velocity() == (5, 0)


def test_diagonal_is_slowed_equally():
    state = OwlState()
    state.press(Direction.UP)
    state.press(Direction.RIGHT)
    vx, vy = state.velocity()
    assert vx == -vy
    assert 0 < vx < 5
    assert (vx, vy) == (3, -3)


def test_diagonal_left_down_signs():
    state = OwlState()
    state.press(Direction.LEFT)
    state.press(Direction.DOWN)
    vx, vy = state.velocity()
    assert vx < 0 < vy
    assert -vx == vy


def test_press_then_release_stops():
    state = OwlState()
    state.press(Direction.LEFT)
    state.release(Direction.LEFT)
    assert state.active == Direction.NONE
    assert state.velocity() == (0, 0)


def test_release_without_press_toggles_on():
    state = OwlState()
    state.release(Direction.UP)
    assert state.active & Direction.UP
    assert state.velocity() == (0, -5)


def test_press_is_idempotent():
    state = OwlState()
    state.press(Direction.DOWN)
    state.press(Direction.DOWN)
    assert state.active == Direction.DOWN


def test_step_accumulates_velocity():
    state = OwlState()
    state.press(Direction.RIGHT)
    state.press(Direction.DOWN)
    vx, vy = state.velocity()
    state.step()
    position = state.step()
    assert position == (START_X + 2 * vx, START_Y + 2 * vy)
    assert (state.x, state.y) == position


def test_step_without_keys_stays_put():
    state = OwlState(x=10, y=20)
    assert state.step() == (10, 20)


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit):
        main(["--bogus"])