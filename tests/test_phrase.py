import pytest
from packages.phrase import (
    MAX_PHRASE_LEN, MAX_TEXT_LEN,
    find_matches, is_separator, mark_matches, match_at, split_input,
)


@pytest.mark.parametrize("ch,expected", [
    (" ", True), ("\t", True), ("\n", True), ("\r", True),
    ("a", False), ("\v", False), ("_", False),
])
def test_is_separator(ch, expected):
    assert is_separator(ch) is expected


def test_separator_runs_are_elastic():
    assert match_at("good  \t\r\nday", 0, "good day") is True
    assert match_at("good day", 0, "good   day") is True
    assert match_at("goodday", 0, "good day") is False
    assert match_at("good day", 0, "goodday") is False


def test_partial_words_match():
    assert find_matches("hello world", "hell") == [0]
    assert find_matches("say hello", "lo") == [7]


def test_text_ends_before_phrase():
    assert match_at("ab", 0, "abc") is False
    assert match_at("ab ", 0, "ab c") is False


def test_overlapping_matches():
    assert find_matches("aaaa", "aa") == [0, 1, 2]
    assert mark_matches("aaaa", "aa") == "@a@a@aa"


def test_empty_phrase_never_matches():
    assert find_matches("text", "") == []
    assert mark_matches("text", "") == "text"


def test_mark_matches_keeps_text():
    text = "Мама мыла\nраму, мама   мыла окно"
    assert mark_matches(text, "мама мыла") == "Мама мыла\nраму, @мама   мыла окно"


def test_split_input():
    assert split_input("") == ("", "")
    assert split_input("a b\r\nline one\nline two") == ("a b", "line one\nline two")
    assert split_input("phrase only") == ("phrase only", "")


def test_split_input_caps():
    long_first = "x" * 200 + "\nrest"
    phrase, text = split_input(long_first)
    assert phrase == "x" * (MAX_PHRASE_LEN - 1)
    assert text == "x" * (200 - (MAX_PHRASE_LEN - 1)) + "\nrest"

    phrase, text = split_input("p\n" + "t" * 5000)
    assert phrase == "p"
    assert len(text) == MAX_TEXT_LEN - 1
