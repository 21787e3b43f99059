import pytest

from towerdefense.cheat import Key
from towerdefense.scoreboard import (
    MAX_NAME_LENGTH,
    UNKNOWN_NAME,
    NameEntry,
    ScoreBoard,
    ScoreEntry,
    append_score,
    load_scores,
    parse_scores,
)


def _entries(count):
    return [ScoreEntry(f"p{i}", 1000 - i) for i in range(count)]


def test_parse_scores_sorted_descending():
    entries = parse_scores("100\nalice\n300\nbob\n200\ncarol\n")
    assert [e.name for e in entries] == ["bob", "carol", "alice"]
    assert [e.score for e in entries] == [300, 200, 100]


def test_parse_scores_missing_name_is_empty():
    entries = parse_scores("50\nann\n70")
    assert entries[0] == ScoreEntry("", 70)
    assert entries[1] == ScoreEntry("ann", 50)


def test_parse_scores_empty_text():
    assert parse_scores("") == []


def test_parse_scores_invalid_score_raises():
    with pytest.raises(ValueError):
        parse_scores("abc\nname\n")


def test_load_scores_missing_file(tmp_path):
    assert load_scores(tmp_path / "missing.txt") == []


def test_append_then_load_round_trip(tmp_path):
    path = tmp_path / "scoreboard.txt"
    append_score(path, 150, "zed")
    append_score(path, "900", "amy")
    assert load_scores(path) == [ScoreEntry("amy", 900), ScoreEntry("zed", 150)]


def test_scoreboard_first_page_limited_to_page_size():
    board = ScoreBoard(_entries(12))
    assert board.page() == _entries(12)[:5]
    assert board.page_count == 3


def test_scoreboard_paging_forward_and_back():
    entries = _entries(12)
    board = ScoreBoard(entries)
    assert board.next_page() is True
    assert board.page() == entries[5:10]
    assert board.next_page() is True
    assert board.page() == entries[10:]
    assert board.next_page() is False
    assert board.page() == entries[10:]
    assert board.prev_page() is True
    assert board.page() == entries[5:10]


def test_scoreboard_prev_on_first_page_stays():
    board = ScoreBoard(_entries(3))
    assert board.prev_page() is False
    assert board.current_page == 0
    assert board.next_page() is False


def test_scoreboard_empty_and_bad_page_size():
    assert ScoreBoard([]).page() == []
    with pytest.raises(ValueError):
        ScoreBoard([], page_size=0)


def test_name_entry_typing_and_backspace():
    entry = NameEntry()
    entry.press(Key.A)
    entry.press(Key.B)
    entry.press(Key.SPACE)
    entry.press(Key.Z)
    assert entry.text == "ab z"
    entry.press(Key.BACKSPACE)
    assert entry.text == "ab "


def test_name_entry_length_cap():
    entry = NameEntry()
    for _ in range(MAX_NAME_LENGTH + 5):
        entry.press(Key.A)
    assert len(entry.text) == MAX_NAME_LENGTH


def test_name_entry_enter_submits_unknown_when_empty():
    entry = NameEntry()
    assert entry.press(Key.ENTER) is True
    assert entry.submitted is True
    assert entry.text == UNKNOWN_NAME
    assert entry.final_name() == "UNKNOWN"


def test_name_entry_final_name_keeps_typed_text():
    entry = NameEntry()
    assert entry.press(Key.Q) is False
    assert entry.final_name() == entry.text
    assert entry.submitted is False


def test_backspace_on_empty_stays_empty():
    entry = NameEntry()
    entry.press(Key.BACKSPACE)
    assert entry.text == ""
    assert entry.final_name() == UNKNOWN_NAME