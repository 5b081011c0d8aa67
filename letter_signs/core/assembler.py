"""Word assembly: concurrent cell resolution joined into one WordResult.

WHY: A word is shown only once every one of its letters has settled, and
its letters must appear in typing order. The asset checks are independent,
so they run concurrently and may finish in any order.

HOW: assemble_word() issues one resolve_cell() coroutine per character,
in character order, and joins them with asyncio.gather. The settled cells
are sorted by position and frozen into a WordResult.

RULES:
- Fan-out: one concurrent cell resolution per character
- Fan-in: wait for all cells; a fallback cell is a normal settlement
- Cell order = character order, whatever the settlement order
- No partial WordResult is ever built
- Empty tokens raise ValueError (the tokenizer never produces them)
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from letter_signs.config import ASSET_TIMEOUT_S
from letter_signs.core.alphabets import Alphabet
from letter_signs.core.ir import Token, WordResult
from letter_signs.core.resolver import CellCallback, resolve_cell

if TYPE_CHECKING:
    from letter_signs.assets.locator import BaseAssetLocator

logger = logging.getLogger(__name__)


async def assemble_word(
    token: Token,
    alphabet: Alphabet,
    total_words: int,
    locator: BaseAssetLocator,
    timeout_s: Optional[float] = ASSET_TIMEOUT_S,
    on_cell: Optional[CellCallback] = None,
) -> WordResult:
    """Resolve every letter of a word and assemble the ordered result.

    Args:
        token: The word to assemble.
        alphabet: Alphabet used for display forms and asset keys.
        total_words: Number of words in the conversion (for the label).
        locator: Asset backend passed to each cell resolution.
        timeout_s: Per-cell availability check bound, in seconds.
        on_cell: Optional callback for each settled cell.

    Returns:
        A frozen WordResult whose cells follow the word's characters.

    Raises:
        ValueError: If the token has no characters.
    """
    characters = token.characters
    if not characters:
        raise ValueError("Cannot assemble empty token at index {}".format(token.index))

    total = len(characters)
    settled = await asyncio.gather(*(
        resolve_cell(
            character,
            alphabet,
            position,
            total,
            locator,
            timeout_s=timeout_s,
            on_cell=on_cell,
        )
        for position, character in enumerate(characters)
    ))

    cells = tuple(sorted(settled, key=lambda cell: cell.position))
    logger.debug("Assembled word %d '%s' (%d cells)", token.index + 1, token.text, total)

    return WordResult(
        text=token.text,
        index=token.index,
        total_words=total_words,
        alphabet=alphabet,
        cells=cells,
    )
