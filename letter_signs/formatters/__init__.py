"""Output formatter registry — pluggable presentation outputs.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["render_json"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from letter_signs.formatters.html_strip import HTMLStripFormatter
from letter_signs.formatters.plain_text import PlainTextFormatter
from letter_signs.formatters.render_json import RenderJSONFormatter

if TYPE_CHECKING:
    from letter_signs.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "render_json": RenderJSONFormatter,
    "html_strip": HTMLStripFormatter,
}
