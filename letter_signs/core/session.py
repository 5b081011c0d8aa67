"""Conversion session: input, alphabet, counters, and ordered output.

WHY: A user types text, picks an alphabet, and converts — possibly many
times, and possibly switching alphabet while a conversion is still
resolving images. The session holds that state explicitly (no module
globals) and guarantees the output only ever contains words from the
current conversion, in input order.

HOW: The session keeps the raw input, its counters, the active alphabet,
the emitted WordResults, and a generation number. Every conversion,
alphabet switch, and clear bumps the generation. stream() tokenizes the
input and assembles one word at a time; a finished word is appended only
if the generation it started under is still current, otherwise the
conversion stops and the stale word is dropped.

RULES:
- Counters are recomputed on every set_input(), independent of conversion
- Words are assembled sequentially and emitted in index order
- set_alphabet() and clear() invalidate in-flight conversions; cells and
  words settling under a stale generation never reach the callbacks
- EmptyInputError leaves the output empty (no partial output)
- Unexpected failures → ConversionFailedError; earlier words stay emitted
- copy_all_text() concatenates display forms in document order
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, List, Optional, Tuple

from letter_signs.config import ASSET_TIMEOUT_S, DEFAULT_ALPHABET
from letter_signs.core.alphabets import Alphabet, AlphabetSettings, get_settings, parse_alphabet
from letter_signs.core.assembler import assemble_word
from letter_signs.core.ir import GlyphCell, SessionCounters, SignStrip, WordResult
from letter_signs.core.resolver import CellCallback
from letter_signs.core.tokenizer import count_text, tokenize

if TYPE_CHECKING:
    from letter_signs.assets.locator import BaseAssetLocator

logger = logging.getLogger(__name__)

CONVERSION_FAILED_MESSAGE = "An error occurred while converting. Please try again."

WordCallback = Callable[[WordResult], None]


class ConversionFailedError(RuntimeError):
    """Raised when a conversion fails for an unexpected reason.

    The message is generic and safe to show to the user; the original
    exception is chained as __cause__.
    """


class ConversionSession:
    """Stateful converter for one interactive user.

    Args:
        locator: Asset backend for every cell check.
        alphabet: Initial alphabet (defaults to LETTER_SIGNS_DEFAULT_ALPHABET).
        timeout_s: Per-cell availability check bound, in seconds.
        on_word: Called with each WordResult as it is emitted.
        on_cell: Called with each GlyphCell as it settles.
    """

    def __init__(
        self,
        locator: BaseAssetLocator,
        alphabet: Optional[Alphabet] = None,
        timeout_s: Optional[float] = ASSET_TIMEOUT_S,
        on_word: Optional[WordCallback] = None,
        on_cell: Optional[CellCallback] = None,
    ) -> None:
        self._locator = locator
        self._alphabet = alphabet or parse_alphabet(DEFAULT_ALPHABET)
        self._timeout_s = timeout_s
        self._on_word = on_word
        self._on_cell = on_cell
        self._text = ""
        self._counters = SessionCounters()
        self._results: List[WordResult] = []
        self._generation = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def settings(self) -> AlphabetSettings:
        return get_settings(self._alphabet)

    @property
    def text(self) -> str:
        return self._text

    @property
    def counters(self) -> SessionCounters:
        return self._counters

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def results(self) -> Tuple[WordResult, ...]:
        return tuple(self._results)

    def set_input(self, text: str) -> SessionCounters:
        """Record new raw input and recompute its counters."""
        self._text = text
        self._counters = count_text(text)
        return self._counters

    def set_alphabet(self, alphabet: Alphabet) -> None:
        """Switch alphabet and discard all pending and emitted output."""
        logger.info("Alphabet set to %s", alphabet.value)
        self._alphabet = alphabet
        self._invalidate()

    def clear(self) -> None:
        """Empty the input and the output, cancelling any conversion."""
        self.set_input("")
        self._invalidate()

    def _invalidate(self) -> None:
        self._generation += 1
        self._results = []

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    async def stream(self, text: Optional[str] = None) -> AsyncIterator[WordResult]:
        """Convert the input and yield each WordResult as it is emitted.

        WHY: The presentation layer appends each word as soon as it is
        ready instead of waiting for the whole text.

        HOW: Bumps the generation and clears previous output, tokenizes,
        then assembles the words one after another. Each finished word is
        checked against the captured generation before it is appended.

        RULES:
        - text=None converts the text last given to set_input()
        - Raises EmptyInputError before any word is emitted
        - Stops silently when the session is invalidated mid-conversion
        - Raises ConversionFailedError for unexpected failures

        Args:
            text: Optional new raw input; replaces the recorded input.

        Yields:
            WordResults in input order.
        """
        if text is not None:
            self.set_input(text)

        self._invalidate()
        generation = self._generation
        alphabet = self._alphabet
        tokens = tokenize(self._text)
        total = len(tokens)
        logger.info(
            "Converting %d word(s) with alphabet %s (generation %d)",
            total, alphabet.value, generation,
        )

        def on_cell(cell: GlyphCell) -> None:
            if generation != self._generation:
                logger.debug("Dropping cell from stale generation %d", generation)
                return
            if self._on_cell is not None:
                self._on_cell(cell)

        for token in tokens:
            if generation != self._generation:
                logger.info(
                    "Stopping stale generation %d before word %d (current %d)",
                    generation, token.index + 1, self._generation,
                )
                return

            try:
                word = await assemble_word(
                    token,
                    alphabet,
                    total,
                    self._locator,
                    timeout_s=self._timeout_s,
                    on_cell=on_cell,
                )
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.exception("Conversion failed at word %d", token.index + 1)
                raise ConversionFailedError(CONVERSION_FAILED_MESSAGE) from exc

            if generation != self._generation:
                logger.info(
                    "Discarding word %d from stale generation %d (current %d)",
                    token.index + 1, generation, self._generation,
                )
                return

            self._results.append(word)
            if self._on_word is not None:
                try:
                    self._on_word(word)
                except Exception as exc:
                    logger.exception("Word callback failed at word %d", token.index + 1)
                    raise ConversionFailedError(CONVERSION_FAILED_MESSAGE) from exc
            yield word

    async def convert(self, text: Optional[str] = None) -> List[WordResult]:
        """Convert the input and return the WordResults this call emitted.

        Same semantics as stream(). An invalidated conversion returns only
        the words emitted before invalidation (possibly none), and those
        are no longer part of results.
        """
        emitted: List[WordResult] = []
        async for word in self.stream(text):
            emitted.append(word)
        return emitted

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def snapshot(self) -> SignStrip:
        """Return the current output as a SignStrip for formatters."""
        return SignStrip(
            alphabet=self._alphabet,
            source_text=self._text,
            words=list(self._results),
            counters=self._counters,
        )

    def copy_all_text(self) -> str:
        """Display forms of every settled cell, in document order."""
        return "".join(word.copy_text() for word in self._results)
