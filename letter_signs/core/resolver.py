"""Glyph cell resolver: one letter → one settled sign cell.

WHY: Every letter is shown as its sign image when the image exists and
as plain text when it does not. Checking an image is the only slow,
fallible step in a conversion. A missing or unreachable image must never
fail the word, so this module absorbs every check failure into the text
fallback.

HOW: resolve_cell() derives the display form and asset key, asks the
locator for the asset reference, then awaits locator.is_available()
under asyncio.wait_for(). True settles the cell as RESOLVED_ASSET;
False, a timeout, or any exception settles it as FALLBACK_TEXT.

RULES:
- Each cell settles exactly once, success or fallback, never both
- Asset check failures are logged, never raised
- The check is bounded by timeout_s (None disables the bound)
- Task cancellation propagates; a cancelled cell does not settle
- on_cell, when given, is called once with each settled cell
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from letter_signs.config import ASSET_TIMEOUT_S
from letter_signs.core.alphabets import Alphabet, asset_key, display_form
from letter_signs.core.ir import GlyphCell

if TYPE_CHECKING:
    from letter_signs.assets.locator import BaseAssetLocator

logger = logging.getLogger(__name__)

CellCallback = Callable[[GlyphCell], None]


async def resolve_cell(
    character: str,
    alphabet: Alphabet,
    position: int,
    total_in_word: int,
    locator: BaseAssetLocator,
    timeout_s: Optional[float] = ASSET_TIMEOUT_S,
    on_cell: Optional[CellCallback] = None,
) -> GlyphCell:
    """Build a GlyphCell for one character and settle it.

    Args:
        character: The source character.
        alphabet: Alphabet whose rules derive the display form and key.
        position: 0-based index of the character within its word.
        total_in_word: Number of characters in the word.
        locator: Asset backend that builds and checks the reference.
        timeout_s: Upper bound on the availability check, in seconds.
        on_cell: Optional callback for the settled cell.

    Returns:
        The settled GlyphCell.
    """
    key = asset_key(character, alphabet)
    cell = GlyphCell(
        character=character,
        display_form=display_form(character, alphabet),
        asset_key=key,
        position=position,
        total_in_word=total_in_word,
        asset_ref=locator.reference(alphabet, key),
    )

    available = await _check_available(locator, cell.asset_ref, timeout_s)
    cell.settle(available)
    logger.debug(
        "Cell %d/%d '%s' → %s (%s)",
        position + 1, total_in_word, character, cell.format_tag, cell.asset_ref,
    )

    if on_cell is not None:
        on_cell(cell)
    return cell


async def _check_available(
    locator: BaseAssetLocator,
    ref: str,
    timeout_s: Optional[float],
) -> bool:
    """Await the locator's check, mapping timeouts and errors to False."""
    try:
        return bool(await asyncio.wait_for(locator.is_available(ref), timeout=timeout_s))
    except asyncio.TimeoutError:
        logger.warning("Asset check timed out after %.1fs: %s", timeout_s, ref)
        return False
    except Exception:
        logger.warning("Asset check failed for %s", ref, exc_info=True)
        return False
