"""Unit tests for the tokenizer and the input counters.

WHY: The two split rules intentionally differ — conversion splits on
punctuation too, the counters only on whitespace. These tests pin both so
neither drifts toward the other.
"""

import pytest

from letter_signs.core.tokenizer import (
    EMPTY_TEXT_MESSAGE,
    NO_WORDS_MESSAGE,
    EmptyInputError,
    count_text,
    tokenize,
)

_SEPARATORS = set(" \t\n,.!?;:")


class TestTokenize:
    """tokenize() splits on whitespace and ,.!?;: runs."""

    def test_two_words(self):
        tokens = tokenize("Hi there")
        assert [t.text for t in tokens] == ["Hi", "there"]
        assert [t.index for t in tokens] == [0, 1]

    def test_trims_and_collapses_separator_runs(self):
        tokens = tokenize("  Hello,  world!!  How;are:you?  ")
        assert [t.text for t in tokens] == ["Hello", "world", "How", "are", "you"]

    def test_characters(self):
        assert tokenize("abc")[0].characters == ["a", "b", "c"]

    def test_arabic_words(self):
        tokens = tokenize("هو يلعب، كرة")
        # Arabic comma is not a separator
        assert [t.text for t in tokens] == ["هو", "يلعب،", "كرة"]

    @pytest.mark.parametrize("text", [
        "a,b.c!d?e;f:g h\ti\nj",
        "...leading and trailing...",
        "mixed\t\n  whitespace,,,,and;;punctuation",
    ])
    def test_tokens_never_empty_or_contain_separators(self, text):
        for token in tokenize(text):
            assert token.text
            assert not (set(token.text) & _SEPARATORS)

    def test_other_punctuation_is_kept(self):
        assert [t.text for t in tokenize("don't-stop")] == ["don't-stop"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_input_raises(self, text):
        with pytest.raises(EmptyInputError) as exc_info:
            tokenize(text)
        assert str(exc_info.value) == EMPTY_TEXT_MESSAGE

    def test_only_punctuation_raises_no_words(self):
        with pytest.raises(EmptyInputError) as exc_info:
            tokenize(" ,.!?;: ")
        assert str(exc_info.value) == NO_WORDS_MESSAGE

    def test_empty_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            tokenize("")


class TestCountText:
    """count_text() uses whitespace-only splitting."""

    def test_counter_scenario(self):
        counters = count_text("one two  three")
        assert counters.word_count == 3
        assert counters.letter_count == 11

    def test_empty(self):
        counters = count_text("   ")
        assert counters.word_count == 0
        assert counters.letter_count == 0

    def test_punctuation_counts_as_letters_and_does_not_split(self):
        counters = count_text("a,b c.")
        assert counters.word_count == 2
        assert counters.letter_count == 5
        # conversion sees three words here
        assert len(tokenize("a,b c.")) == 3
