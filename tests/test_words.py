# tests/test_words.py
# How to run:
#   pytest -q
#
# Verifies:
#   - Punctuation / word-boundary predicates
#   - Normalized word comparison (case, surrounding space, punctuation)

import pytest

from core.keystrokes.words import (
    PUNCTUATION, is_punctuation, is_word_boundary, normalize_word_input, compare_words,
)


@pytest.mark.parametrize("ch", list(PUNCTUATION))
def test_punctuation_is_boundary(ch):
    assert is_punctuation(ch)
    assert is_word_boundary(ch)


def test_space_is_boundary_but_not_punctuation():
    assert is_word_boundary(" ")
    assert not is_punctuation(" ")


@pytest.mark.parametrize("ch", ["a", "Z", "0", "-", "\n", ""])
def test_other_characters_are_not_boundaries(ch):
    assert not is_word_boundary(ch)


def test_normalize_strips_lowercases_and_drops_punctuation():
    assert normalize_word_input("  Don't! ") == "dont"
    assert normalize_word_input('"Hello,"') == "hello"
    assert normalize_word_input("") == ""


def test_compare_words():
    assert compare_words("The,", "the")
    assert compare_words("the ", "THE")
    assert not compare_words("then", "the")
    assert not compare_words("", "a")
