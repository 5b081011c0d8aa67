"""Intermediate representation dataclasses for converted sign strips.

WHY: The tokenizer, the async cell resolver, the session, and every
formatter all talk about the same things: words, letter cells, and their
resolution outcome. The IR provides a single, well-typed intermediate form
that all formatters consume, decoupling conversion from rendering.

HOW: The dataclasses form a hierarchy:
  Token          — one word of the input with its position
  GlyphCell      — one letter of a word and its asset resolution state
  WordResult     — the fully settled, ordered cells of one word
  SessionCounters — word and letter counts of the raw input
  SignStrip      — the complete converted text handed to formatters

RULES:
- GlyphCell starts PENDING and settles exactly once
- A settled GlyphCell is RESOLVED_ASSET ("PNG") or FALLBACK_TEXT ("TEXT")
- WordResult is frozen and only built from settled cells
- WordResult.cells are ordered by position, matching the word's characters
- SessionCounters are derived from raw text, never from conversion state
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from letter_signs.core.alphabets import Alphabet, get_settings

FORMAT_PNG = "PNG"
FORMAT_TEXT = "TEXT"


class CellAlreadySettledError(RuntimeError):
    """Raised when a GlyphCell that already settled is settled again."""


class CellOutcome(str, enum.Enum):
    """Resolution state of a single letter cell.

    RULES:
    - pending: asset check still in flight
    - resolved-asset: the sign image is available
    - fallback-text: the image is unavailable; show the character instead
    - resolved-asset and fallback-text are terminal and mutually exclusive
    """

    PENDING = "pending"
    RESOLVED_ASSET = "resolved-asset"
    FALLBACK_TEXT = "fallback-text"


@dataclass(frozen=True)
class Token:
    """A word of the input: non-empty text and its 0-based position."""

    text: str
    index: int

    @property
    def characters(self) -> List[str]:
        return list(self.text)


@dataclass
class GlyphCell:
    """One letter of one word and the outcome of its asset check.

    WHY: Each letter is rendered either as its sign image or, when the
    image cannot be found, as its display character. The presentation
    layer also lets users copy a single letter, so the cell keeps its
    display form after it settles.

    HOW: Created PENDING by the cell resolver with the display form, the
    asset key, and the asset reference already computed. settle() moves
    the cell to its terminal state exactly once.

    RULES:
    - character: the source character as typed
    - display_form: upper-cased for Latin, unchanged for Arabic
    - asset_key: the key derived from (character, alphabet)
    - position / total_in_word: 0-based index and word length
    - asset_ref: the locator reference the cell was checked against
    - payload is asset_ref when resolved, display_form on fallback
    """

    character: str
    display_form: str
    asset_key: str
    position: int
    total_in_word: int
    asset_ref: Optional[str] = None
    outcome: CellOutcome = CellOutcome.PENDING

    @property
    def settled(self) -> bool:
        return self.outcome is not CellOutcome.PENDING

    @property
    def format_tag(self) -> Optional[str]:
        if self.outcome is CellOutcome.RESOLVED_ASSET:
            return FORMAT_PNG
        if self.outcome is CellOutcome.FALLBACK_TEXT:
            return FORMAT_TEXT
        return None

    @property
    def payload(self) -> Optional[str]:
        if self.outcome is CellOutcome.RESOLVED_ASSET:
            return self.asset_ref
        if self.outcome is CellOutcome.FALLBACK_TEXT:
            return self.display_form
        return None

    @property
    def label(self) -> str:
        return "Letter {}".format(self.position + 1)

    def settle(self, available: bool) -> None:
        """Move the cell to its terminal state.

        Raises:
            CellAlreadySettledError: If the cell has already settled.
        """
        if self.settled:
            raise CellAlreadySettledError(
                "Cell {} ('{}') already settled as {}".format(
                    self.position, self.character, self.outcome.value
                )
            )
        if available:
            self.outcome = CellOutcome.RESOLVED_ASSET
        else:
            self.outcome = CellOutcome.FALLBACK_TEXT

    def copy_text(self) -> str:
        """Text placed on the clipboard by the per-letter copy action."""
        return self.display_form


@dataclass(frozen=True)
class WordResult:
    """The fully assembled sign strip of one word.

    RULES:
    - cells: every cell settled, ordered by position
    - index: 0-based word position in the input
    - total_words: number of words in the conversion (for labels)
    - label: "Word {index + 1} of {total_words}"
    """

    text: str
    index: int
    total_words: int
    alphabet: Alphabet
    cells: Tuple[GlyphCell, ...]

    @property
    def label(self) -> str:
        return "Word {} of {}".format(self.index + 1, self.total_words)

    @property
    def alphabet_label(self) -> str:
        return get_settings(self.alphabet).label

    def copy_text(self) -> str:
        return "".join(cell.copy_text() for cell in self.cells if cell.settled)


@dataclass(frozen=True)
class SessionCounters:
    """Word and letter counts of the raw input text.

    Computed with the coarse whitespace-only split, which can differ from
    the number of converted words when punctuation separates words.
    """

    word_count: int = 0
    letter_count: int = 0


@dataclass
class SignStrip:
    """The complete converted text that formatters receive.

    RULES:
    - words: WordResults in input order
    - source_text: the raw text the conversion started from
    - counters: SessionCounters for source_text
    """

    alphabet: Alphabet
    source_text: str
    words: List[WordResult] = field(default_factory=list)
    counters: SessionCounters = field(default_factory=SessionCounters)

    @property
    def direction(self) -> str:
        return get_settings(self.alphabet).direction

    def copy_text(self) -> str:
        """Every settled cell's display form, concatenated in document order."""
        return "".join(word.copy_text() for word in self.words)
