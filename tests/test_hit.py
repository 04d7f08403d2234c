import pytest

from memorymatch.hit import HIT_HEIGHT, HIT_WIDTH, card_hit


def test_inside_is_hit():
    assert card_hit(40, 70, 41, 71)
    assert card_hit(40, 70, 40 + HIT_WIDTH - 1, 70 + HIT_HEIGHT - 1)


@pytest.mark.parametrize(
    "mouse_x, mouse_y",
    [
        (40, 100),
        (40 + HIT_WIDTH, 100),
        (60, 70),
        (60, 70 + HIT_HEIGHT),
        (0, 0),
        (500, 500),
    ],
)
def test_edges_and_outside_miss(mouse_x, mouse_y):
    assert not card_hit(40, 70, mouse_x, mouse_y)


def test_click_area_size_fixed():
    assert card_hit(0, 0, 69, 99)
    assert not card_hit(0, 0, 70, 50)
    assert not card_hit(0, 0, 35, 100)
    assert (HIT_WIDTH, HIT_HEIGHT) == (70, 100)