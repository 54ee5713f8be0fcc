"""Small shared helpers for the launcher."""

from __future__ import annotations

from enum import Enum

SMALL_SPACING = 5.0
MEDIUM_SPACING = 10.0
LARGE_SPACING = 15.0
HUGE_SPACING = 20.0


class FocusDirection(Enum):
    """Direction in which the focused entry moves."""

    UP = "up"
    DOWN = "down"

    def add(self, current: int, length: int) -> int:
        """Return the new focus index, wrapping around a list of ``length`` entries."""
        if length <= 0:
            return 0
        if self is FocusDirection.UP:
            return current - 1 if current > 0 else length - 1
        return (current + 1) % length