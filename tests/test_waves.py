from towerdefense.waves import Wave, parse_waves, read_waves


def test_parse_waves_expands_repeats():
    waves = parse_waves("1 1.0 3\n2 0.5 1\n")
    assert waves == [Wave(1, 1.0)] * 3 + [Wave(2, 0.5)]


def test_parse_waves_truncates_type():
    assert parse_waves("2.9 1 1") == [Wave(2, 1.0)]


def test_parse_waves_fractional_repeat_rounds_up():
    assert len(parse_waves("1 1 2.5")) == 3


def test_parse_waves_zero_or_negative_repeat():
    assert parse_waves("1 1 0\n3 2 -4") == []


def test_parse_waves_ignores_incomplete_triple():
    assert parse_waves("4 2 1\n3 1") == [Wave(4, 2.0)]


def test_parse_waves_stops_at_non_number():
    assert parse_waves("1 1 1\nabc\n2 2 2") == [Wave(1, 1.0)]


def test_parse_waves_stops_after_number_prefix():
    assert parse_waves("1 1 1x 2 2 2") == [Wave(1, 1.0)]


def test_parse_waves_empty():
    assert parse_waves("") == []


def test_read_waves_round_trip(tmp_path):
    text = "3 0.25 2\n4 10 1\n"
    path = tmp_path / "enemy1.txt"
    path.write_text(text, encoding="utf-8")
    assert read_waves(path) == parse_waves(text)


def test_read_waves_missing_file(tmp_path):
    assert read_waves(tmp_path / "nope.txt") == []