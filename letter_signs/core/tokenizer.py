"""Tokenizer and input counters.

WHY: Conversion works word by word and letter by letter, so raw text must
be split into words first. The input box also shows live word and letter
counts. The two use different split rules: conversion treats punctuation
as a word boundary, the counters only split on whitespace. Both rules are
kept as separate functions so neither silently changes the other.

HOW: tokenize() trims the text and splits on runs of whitespace and the
punctuation set ,.!?;: then drops empty pieces. count_text() trims the
text, splits on whitespace runs for words, and counts every
non-whitespace character as a letter.

RULES:
- Separators: whitespace and , . ! ? ; : (runs collapse to one boundary)
- Tokens never contain a separator and are never empty
- Empty or whitespace-only text → EmptyInputError (enter some text)
- Text made only of separators → EmptyInputError (no valid words)
- Counters never raise; empty text counts as 0 words, 0 letters
"""

from __future__ import annotations

import re
from typing import List

from letter_signs.core.ir import SessionCounters, Token

_SEPARATOR_RE = re.compile(r"[\s,.!?;:]+")
_WHITESPACE_RE = re.compile(r"\s+")

EMPTY_TEXT_MESSAGE = "Please enter some text to convert!"
NO_WORDS_MESSAGE = "No valid words found. Please enter some text."


class EmptyInputError(ValueError):
    """Raised when the input yields no words to convert.

    The message is meant for the user and says what to do next.
    """


def tokenize(raw_text: str) -> List[Token]:
    """Split raw text into ordered, indexed word tokens.

    Args:
        raw_text: Arbitrary user input.

    Returns:
        Tokens in left-to-right order, indexed from 0.

    Raises:
        EmptyInputError: If the text contains no words.
    """
    text = raw_text.strip()
    if not text:
        raise EmptyInputError(EMPTY_TEXT_MESSAGE)

    words = [word for word in _SEPARATOR_RE.split(text) if word]
    if not words:
        raise EmptyInputError(NO_WORDS_MESSAGE)

    return [Token(text=word, index=i) for i, word in enumerate(words)]


def count_text(raw_text: str) -> SessionCounters:
    """Count whitespace-separated words and non-whitespace letters."""
    text = raw_text.strip()
    words = [word for word in _WHITESPACE_RE.split(text) if word]
    letters = _WHITESPACE_RE.sub("", text)
    return SessionCounters(word_count=len(words), letter_count=len(letters))
