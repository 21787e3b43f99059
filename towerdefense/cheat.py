"""Keyboard codes and the cheat-code matcher of the play scene."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import IntEnum


class Key(IntEnum):
    """Key codes as delivered by the input layer."""

    A = 1
    B = 2
    Q = 17
    W = 23
    Z = 26
    DIGIT_0 = 27
    DIGIT_1 = 28
    DIGIT_2 = 29
    DIGIT_3 = 30
    DIGIT_4 = 31
    DIGIT_5 = 32
    DIGIT_6 = 33
    DIGIT_7 = 34
    DIGIT_8 = 35
    DIGIT_9 = 36
    BACKSPACE = 63
    TAB = 64
    ENTER = 67
    SPACE = 75
    LEFT = 82
    RIGHT = 83
    UP = 84
    DOWN = 85
    LSHIFT = 215


KONAMI_CODE: tuple[int, ...] = (
    Key.UP, Key.UP, Key.DOWN, Key.DOWN,
    Key.LEFT, Key.RIGHT, Key.LEFT, Key.RIGHT,
    Key.B, Key.A, Key.LSHIFT, Key.ENTER,
)


class CheatCode:
    """Collects key strokes and reports when the cheat sequence was typed."""

    def __init__(self, sequence: Iterable[int] = KONAMI_CODE) -> None:
        self.sequence = tuple(int(key) for key in sequence)
        if not self.sequence:
            raise ValueError("cheat sequence must not be empty")
        self._strokes: deque[int] = deque()

    def press(self, key: int) -> bool:
        """Record a key stroke; return True when it completes the sequence."""
        self._strokes.append(int(key))
        if len(self._strokes) != len(self.sequence):
            return False
        matched = 0
        while self._strokes:
            if self._strokes[0] == self.sequence[matched]:
                self._strokes.popleft()
                matched += 1
            else:
                if matched == 0:
                    self._strokes.popleft()
                matched = 0
                break
        return matched == len(self.sequence)