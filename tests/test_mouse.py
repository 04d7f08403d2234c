import pytest

from memorymatch.mouse import MAX_MOUSE_BUTTON, MOUSE_LEFT, MOUSE_RIGHT, MouseInput


def test_fresh_state_is_released():
    mouse = MouseInput()
    assert mouse.is_released(MOUSE_LEFT)
    assert not mouse.is_on(MOUSE_LEFT)
    assert not mouse.is_repeat(MOUSE_LEFT)


def test_first_frame_is_on_then_repeat():
    mouse = MouseInput()
    mouse.update(MOUSE_LEFT, 5, 6)
    assert mouse.is_on(MOUSE_LEFT)
    assert not mouse.is_repeat(MOUSE_LEFT)
    mouse.update(MOUSE_LEFT, 5, 6)
    assert not mouse.is_on(MOUSE_LEFT)
    assert mouse.is_repeat(MOUSE_LEFT)
    assert not mouse.is_released(MOUSE_LEFT)


def test_release_clears_button():
    mouse = MouseInput()
    mouse.update(MOUSE_LEFT, 0, 0)
    mouse.update(None, 0, 0)
    assert mouse.is_released(MOUSE_LEFT)
    mouse.update(MOUSE_LEFT, 0, 0)
    assert mouse.is_on(MOUSE_LEFT)


def test_other_button_clears_previous():
    mouse = MouseInput()
    mouse.update(MOUSE_LEFT, 0, 0)
    mouse.update(MOUSE_RIGHT, 0, 0)
    assert mouse.is_released(MOUSE_LEFT)
    assert mouse.is_on(MOUSE_RIGHT)


def test_position_is_recorded():
    mouse = MouseInput()
    mouse.update(0, 120, 340)
    assert (mouse.x, mouse.y) == (120, 340)


@pytest.mark.parametrize("button", [0, -1, MAX_MOUSE_BUTTON + 1])
def test_out_of_range_buttons_report_false(button):
    mouse = MouseInput()
    mouse.update(button, 0, 0)
    assert not mouse.is_on(button)
    assert not mouse.is_released(button)
    assert not mouse.is_repeat(button)


def test_highest_button_is_tracked():
    mouse = MouseInput()
    mouse.update(MAX_MOUSE_BUTTON, 0, 0)
    assert mouse.is_on(MAX_MOUSE_BUTTON)


def test_reset_forgets_state():
    mouse = MouseInput()
    mouse.update(MOUSE_LEFT, 10, 20)
    mouse.update(MOUSE_LEFT, 10, 20)
    mouse.reset()
    assert mouse.is_released(MOUSE_LEFT)
    assert (mouse.x, mouse.y) == (0, 0)