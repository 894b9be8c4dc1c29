import io
import sys

import pytest

from resourcetext.input import Buffer, get_raw, get_str_raw, record, refresh


@pytest.fixture
def feed(monkeypatch):
    def _feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed


def test_get_str_raw_strips_line_endings(feed, capsys):
    feed("hello\r\n")
    assert get_str_raw() == "hello"
    assert capsys.readouterr().out == "-->"


def test_get_str_raw_eof(feed):
    feed("")
    with pytest.raises(EOFError):
        get_str_raw()


def test_refresh_prints_blank_lines(capsys):
    refresh()
    assert capsys.readouterr().out == "\n" * 100


def test_get_raw_retries_until_valid(feed, capsys):
    feed("x\n5\n")
    assert get_raw(int, "bad") == 5
    assert capsys.readouterr().out.count("bad") == 1


def test_get_raw_bool_only_accepts_words(feed):
    feed("yes\n1\ntrue\n")
    assert get_raw(bool, "err") is True


def test_record_applies_function():
    assert record("abc", str.upper) == "ABC"


def test_read_takes_characters_in_order(feed):
    feed("ab\nc\n")
    buf = Buffer("/")
    assert [buf.read() for _ in range(3)] == ["a", "b", "c"]


def test_flush_stops_at_separator(feed):
    feed("ab/cd\nef\n")
    buf = Buffer("/")
    assert buf.flush() == "ab"
    assert buf.flush() == "cd"
    assert buf.flush() == "ef"


def test_empty_line_is_separator(feed):
    feed("\n")
    buf = Buffer("/")
    assert buf.flush() == ""
    assert len(buf) == 0


def test_safety_empties_buffer(feed):
    feed("xyz\n")
    buf = Buffer("/")
    assert buf.read() == "x"
    assert buf.safety() == "yz"
    assert len(buf) == 0


def test_get_flush_retries(feed, capsys):
    feed("x/7\n")
    buf = Buffer("/")
    assert buf.get_flush(int, "msg", "err") == 7
    out = capsys.readouterr().out
    assert "msg" in out
    assert out.count("err") == 1


def test_get_valid_flush_checks_validity(feed):
    feed("9/3\n")
    buf = Buffer("/")
    assert buf.get_valid_flush(int, "m", "e", lambda v: v < 5) == 3


def test_get_safety_parses_whole_buffer(feed):
    feed("nope\ntrue\n")
    buf = Buffer("/")
    assert buf.get_safety(bool, "m", "e") is True


def test_copy_is_independent(feed):
    feed("abc\n")
    buf = Buffer("/")
    buf.read()
    other = buf.copy()
    assert other.safety() == "bc"
    assert buf.safety() == "bc"