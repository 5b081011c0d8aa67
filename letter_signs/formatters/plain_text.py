"""Plain text formatter: the "copy all letters" string.

WHY: Users copy the converted letters to paste them elsewhere. The copied
text is every settled cell's display form, in document order, with no
separators — exactly what the presentation layer puts on the clipboard.

RULES:
- Content: SignStrip.copy_text() followed by a single newline
- Empty strips produce an empty file
- Output suffix: "-letters.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from letter_signs.core.ir import SignStrip
from letter_signs.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that produces the concatenated display letters."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, strip: SignStrip) -> List[FormatterOutput]:
        content = strip.copy_text()
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-letters.txt",
                content=content,
                media_type="text/plain",
            )
        ]
