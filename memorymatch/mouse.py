"""Per-frame mouse button state tracking."""

from __future__ import annotations

MAX_MOUSE_BUTTON = 8

MOUSE_LEFT = 1
MOUSE_RIGHT = 2
MOUSE_MIDDLE = 4

_COUNTER_LIMIT = 2**31 - 1


class MouseInput:
    """Counts how many consecutive frames each mouse button has been held.

    Buttons are identified by ids 1 to ``MAX_MOUSE_BUTTON``. Ids outside that
    range are never reported as pressed, released or repeating.
    """

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self._held = [0] * MAX_MOUSE_BUTTON

    def reset(self) -> None:
        """Forget the cursor position and all held buttons."""
        self.x = 0
        self.y = 0
        self._held = [0] * MAX_MOUSE_BUTTON

    def update(self, pressed_button: int | None, x: int, y: int) -> None:
        """Advance one frame.

        ``pressed_button`` is the id of the button down this frame, or
        ``None``/``0`` when no button is down. Every other button is cleared.
        """
        self.x = x
        self.y = y
        state = pressed_button or 0
        self._held = [
            min(count + 1, _COUNTER_LIMIT) if state - 1 == index else 0
            for index, count in enumerate(self._held)
        ]

    def _count(self, button: int) -> int | None:
        index = button - 1
        if not 0 <= index < MAX_MOUSE_BUTTON:
            return None
        return self._held[index]

    def is_on(self, button: int) -> bool:
        """True only on the first frame the button is held."""
        count = self._count(button)
        return count == 1

    def is_released(self, button: int) -> bool:
        """True while the button is not held."""
        count = self._count(button)
        return count == 0

    def is_repeat(self, button: int) -> bool:
        """True while the button has been held for two frames or more."""
        count = self._count(button)
        return count is not None and count > 1