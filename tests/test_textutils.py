import pytest

from embedkit.textutils import reverse_string, reverse_words


def test_reverse_string_source_example():
    assert reverse_string("Hello World1") == "1dlroW olleH"


@pytest.mark.parametrize("text", ["", "a", "ab", "racecar", "Hello World1", "  x y  "])
def test_reverse_string_is_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_reverse_words_two_words():
    assert reverse_words("hello world") == "world hello"


def test_reverse_words_order():
    assert reverse_words("a b c").split(" ") == ["c", "b", "a"]
    assert reverse_words("one two three four").split() == ["four", "three", "two", "one"]


def test_reverse_words_moves_leading_space():
    assert reverse_words(" ab") == "ab "


@pytest.mark.parametrize("text", ["", "word", "a  bc", " lead", "trail ", "x y z"])
def test_reverse_words_is_involution(text):
    assert reverse_words(reverse_words(text)) == text
    assert reverse_words(text).count(" ") == text.count(" ")
    assert sorted(reverse_words(text).split()) == sorted(text.split())


def test_reverse_words_single_word_unchanged():
    assert reverse_words("embedded") == "embedded"