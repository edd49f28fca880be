import threading

import pytest

from idracctl.exceptions import ParseError
from idracctl.parsers import DurationParser


@pytest.mark.parametrize("text, seconds", [
    ("1s", 1.0),
    ("45s", 45.0),
    ("2m", 120.0),
    ("3h", 10800.0),
])
def test_valid_durations(text, seconds):
    assert DurationParser.parse(text) == seconds


@pytest.mark.parametrize("text", ["", "abc", "10", "1d", "1.5s", "-1s", "s", "0s", "1m30s"])
def test_invalid_durations(text):
    with pytest.raises(ParseError):
        DurationParser.parse(text)


def test_longest_thread_wait_is_accepted():
    longest = int(threading.TIMEOUT_MAX)
    assert DurationParser.parse(f"{longest}s") == float(longest)


def test_duration_beyond_thread_wait_limit_is_rejected():
    with pytest.raises(ParseError, match="too long"):
        DurationParser.parse("2562048h")
    with pytest.raises(ParseError, match="too long"):
        DurationParser.parse("99999999999999999999s")
