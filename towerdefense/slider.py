"""A horizontal slider whose value runs from 0 to 1."""

from __future__ import annotations

from collections.abc import Callable


class Slider:
    """Bar with a draggable handle reporting changes through `on_change`."""

    MIN = 0.0
    MAX = 1.0

    def __init__(self, x: float, y: float, width: float, height: float,
                 on_change: Callable[[float], None] | None = None) -> None:
        self.bar_x = float(x)
        self.bar_y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.handle_x = self.bar_x + self.width
        self.handle_y = self.bar_y + self.height / 2
        self.value = 0.0
        self.down = False
        self.on_change = on_change

    def set_value(self, value: float) -> None:
        """Move the handle to `value` and notify the listener."""
        self.value = value
        self.handle_x = self.bar_x + value * self.width
        if self.on_change is not None:
            self.on_change(value)

    def mouse_down(self, button: int, over_handle: bool) -> None:
        """Start dragging on a primary-button press over the handle."""
        if button & 1 and over_handle:
            self.down = True

    def mouse_up(self) -> None:
        self.down = False

    def mouse_move(self, mx: float) -> None:
        """While dragging, set the value from the clamped mouse x position."""
        if not self.down:
            return
        clamped = min(max(float(mx), self.bar_x), self.bar_x + self.width)
        self.set_value((clamped - self.bar_x) / self.width)