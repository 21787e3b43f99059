"""Enemy wave files: triples of enemy type, wait time and repeat count."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Wave:
    """One enemy to spawn after waiting `wait` seconds."""

    enemy_type: int
    wait: float


def _numbers(text: str) -> Iterator[float]:
    """Yield leading numbers; stop at the first token that is not a number."""
    for token in text.split():
        match = _NUMBER.match(token)
        if not match:
            return
        yield float(match.group())
        if match.end() != len(token):
            return


def parse_waves(text: str) -> list[Wave]:
    """Expand 'type wait repeat' triples into a flat list of waves.

    The type is truncated to an integer and each triple is repeated while the
    repeat index stays below `repeat`. An incomplete trailing triple is ignored.
    """
    numbers = list(_numbers(text))
    waves: list[Wave] = []
    for enemy_type, wait, repeat in zip(*[iter(numbers)] * 3):
        count = math.ceil(repeat) if repeat > 0 else 0
        waves.extend([Wave(int(enemy_type), wait)] * count)
    return waves


def read_waves(path: str | Path) -> list[Wave]:
    """Read a wave file; a missing or unreadable file yields no waves."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    return parse_waves(text)