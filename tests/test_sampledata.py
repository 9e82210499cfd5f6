import io
import random

from algokit.sampledata import (
    Timer,
    format_array,
    random_data,
    reverse_data,
    sorted_data,
)


def test_sorted_data_is_ascending_from_one():
    data = sorted_data(100)
    assert len(data) == 100
    assert data == sorted(data)
    assert data[0] == 1
    assert data[-1] == 100


def test_reverse_data_mirrors_sorted_data():
    assert reverse_data(50) == list(reversed(sorted_data(50)))


def test_empty_sizes():
    assert sorted_data(0) == []
    assert reverse_data(0) == []
    assert random_data(0, random.Random(1)) == []


def test_random_data_range_and_length():
    data = random_data(1000, random.Random(3))
    assert len(data) == 1000
    assert all(0 <= value < 1000 for value in data)


def test_random_data_is_deterministic_for_seed():
    first = random_data(200, random.Random(42))
    second = random_data(200, random.Random(42))
    other = random_data(200, random.Random(43))
    assert len(first) == 200
    assert first == second
    assert first != other
    assert len(set(first)) > 1


def test_format_array_short_row():
    assert format_array([1, 2, 3]) == "    1    2    3"


def test_format_array_breaks_every_ten():
    lines = format_array(sorted_data(20)).split("\n")
    assert len(lines) == 3
    assert lines[2] == ""
    assert all(len(line) == 50 for line in lines[:2])
    assert [int(x) for x in lines[1].split()] == sorted_data(20)[10:]


def test_timer_reports_elapsed():
    out = io.StringIO()
    with Timer(stream=out) as timer:
        sum(range(1000))
    assert timer.elapsed >= 0
    text = out.getvalue()
    assert text.startswith(">> start_timer\n")
    assert ">> elapsed : " in text


def test_timer_does_not_swallow_exceptions():
    out = io.StringIO()
    try:
        with Timer(stream=out):
            raise KeyError("boom")
    except KeyError as exc:
        assert exc.args == ("boom",)
    assert ">> elapsed : " in out.getvalue()