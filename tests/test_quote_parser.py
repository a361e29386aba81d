"""
Splitting quote files into units.
"""

import pytest

from randquote.quotes import split_quotes


def test_fortune_file_with_trailing_delimiter():
    assert split_quotes("apple\n%\nbanana\n%\n", "%\n") == ["apple", "banana"]


def test_last_quote_without_delimiter():
    assert split_quotes("apple\n%\nbanana\n", "%\n") == ["apple", "banana"]
    assert split_quotes("apple\n%\nbanana", "%\n") == ["apple", "banana"]


def test_multiline_quote_keeps_inner_newlines():
    text = "To be,\nor not to be.\n%\nshort\n%\n"
    assert split_quotes(text, "%\n") == ["To be,\nor not to be.", "short"]


def test_only_one_trailing_newline_is_stripped():
    assert split_quotes("a\n\n%\n", "%\n") == ["a\n"]


def test_custom_delimiter():
    assert split_quotes("one||two||three", "||") == ["one", "two", "three"]


@pytest.mark.parametrize("text", ["", "%\n", "%\n%\n", "\n%\n"])
def test_no_units(text):
    assert split_quotes(text, "%\n") == []


def test_empty_delimiter_rejected():
    with pytest.raises(ValueError):
        split_quotes("a\nb\n", "")


def test_crlf_delimiter_matches_raw_text():
    assert split_quotes("a\r\n%\r\nb\r\n%\r\n", "%\r\n") == ["a", "b"]


def test_default_delimiter_reads_crlf_file():
    assert split_quotes("a\r\n%\r\nb\r\n%\r\n", "%\n") == ["a", "b"]


def test_interior_blank_units_are_dropped():
    assert split_quotes("a\n%\n\n%\nb\n", "%\n") == ["a", "b"]
