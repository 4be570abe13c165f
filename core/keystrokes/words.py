from __future__ import annotations
import re

PUNCTUATION = (".", ",", "!", "?", ";", ":", "'", '"')

_PUNCT_RE = re.compile(r"""[.,!?;:'"]""")


def is_punctuation(char: str) -> bool:
    """Word-ending punctuation."""
    return char in PUNCTUATION


def is_word_boundary(char: str) -> bool:
    return char == " " or is_punctuation(char)


def normalize_word_input(text: str) -> str:
    """Trim, lowercase and drop punctuation so 'The,' compares equal to 'the'."""
    return _PUNCT_RE.sub("", text.strip().lower())


def compare_words(typed: str, target: str) -> bool:
    return normalize_word_input(typed) == normalize_word_input(target)
