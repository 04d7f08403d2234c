"""Hit testing of the mouse cursor against a card."""

HIT_WIDTH = 70
HIT_HEIGHT = 100


def card_hit(box_x: int, box_y: int, mouse_x: int, mouse_y: int) -> bool:
    """Return whether the cursor lies strictly inside the card's click area."""
    return box_x < mouse_x < box_x + HIT_WIDTH and box_y < mouse_y < box_y + HIT_HEIGHT