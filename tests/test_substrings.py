import pytest

from drills.substrings import find_substring


def test_source_case_foo_bar():
    assert sorted(find_substring("barfoothefoobarman", ["foo", "bar"])) == [0, 9]


def test_source_case_no_match():
    words = ["word", "good", "best", "word"]
    assert find_substring("wordgoodgoodgoodbestword", words) == []


def test_source_case_three_words():
    words = ["bar", "foo", "the"]
    assert sorted(find_substring("barfoofoobarthefoobarman", words)) == [6, 9, 12]


def test_repeated_single_letters_match_everywhere():
    assert find_substring("a" * 50, ["a"] * 10) == list(range(41))


def test_window_longer_than_text():
    assert find_substring("foo", ["foo", "bar"]) == []


def test_duplicate_words_need_duplicates():
    assert find_substring("foofoobar", ["foo", "foo"]) == [0]


def test_empty_words_rejected():
    with pytest.raises(ValueError):
        find_substring("abc", [])


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        find_substring("abc", [""])