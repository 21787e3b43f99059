"""Score records: the score file, paging through it and typing a winner's name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from towerdefense.cheat import Key

PAGE_SIZE = 5
MAX_NAME_LENGTH = 10
UNKNOWN_NAME = "UNKNOWN"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game: the player's name and the money left."""

    name: str
    score: int


def _parse_score(text: str) -> int:
    """Read the leading integer of a score line, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"invalid score line: {text!r}")
    return int(match.group(1))


def parse_scores(text: str) -> list[ScoreEntry]:
    """Parse alternating score and name lines, highest score first.

    A score without a following name line gets an empty name; a score line
    that does not start with an integer raises ValueError.
    """
    lines = text.splitlines()
    scores = lines[0::2]
    names = lines[1::2]
    names += [""] * (len(scores) - len(names))
    entries = [ScoreEntry(name, _parse_score(score)) for score, name in zip(scores, names)]
    entries.sort(key=lambda entry: entry.score, reverse=True)
    return entries


def load_scores(path: str | Path) -> list[ScoreEntry]:
    """Load the score file; a missing or unreadable file yields no entries."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return []
    return parse_scores(text)


def append_score(path: str | Path, score: int | str, name: str) -> None:
    """Append a score line and a name line to the score file."""
    with Path(path).open("a", encoding="utf-8") as record:
        record.write(f"{score}\n")
        record.write(f"{name}\n")


class ScoreBoard:
    """Pages through score entries, `page_size` at a time."""

    def __init__(self, entries: list[ScoreEntry], page_size: int = PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.entries = list(entries)
        self.page_size = page_size
        self.current_page = 0

    @property
    def page_count(self) -> int:
        return -(-len(self.entries) // self.page_size)

    def page(self) -> list[ScoreEntry]:
        """Entries shown on the current page."""
        start = self.current_page * self.page_size
        return self.entries[start:start + self.page_size]

    def next_page(self) -> bool:
        """Move forward one page if there is one; return whether it moved."""
        if self.current_page + 1 < self.page_count:
            self.current_page += 1
            return True
        return False

    def prev_page(self) -> bool:
        """Move back one page if not on the first; return whether it moved."""
        if self.current_page > 0:
            self.current_page -= 1
            return True
        return False


class NameEntry:
    """Text box in which the winner types a name with the keyboard."""

    def __init__(self) -> None:
        self.text = ""
        self.submitted = False

    def press(self, key: int) -> bool:
        """Apply a key press; return True when Enter submits the name."""
        key = int(key)
        if key <= Key.Z:
            if len(self.text) < MAX_NAME_LENGTH:
                self.text += chr(key + 96)
        elif key == Key.BACKSPACE:
            self.text = self.text[:-1]
        elif key == Key.SPACE:
            self.text += " "
        elif key == Key.ENTER:
            self.text = self.final_name()
            self.submitted = True
            return True
        return False

    def final_name(self) -> str:
        """The typed name, or UNKNOWN when nothing was typed."""
        return self.text or UNKNOWN_NAME