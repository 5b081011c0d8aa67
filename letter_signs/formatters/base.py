"""Abstract base formatter and output container.

WHY: Every output format consumes the same SignStrip IR but produces
different file content. This base class enforces a consistent interface
so the CLI (and any other presentation layer) can work with any formatter
generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list — formatters may produce several files
- ``suffix`` starts with a hyphen, e.g. ``"-signs.json"``
- The caller is responsible for prepending the output stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from letter_signs.core.ir import SignStrip


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the output stem,
                e.g. ``"-signs.json"`` → ``"greeting-signs.json"``.
        content: The file content as a string or bytes.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Render JSON'."""

    @abstractmethod
    def format(self, strip: SignStrip) -> list[FormatterOutput]:
        """Convert the SignStrip IR into one or more output files.

        Args:
            strip: The converted words, alphabet, and input counters.

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string/bytes, and MIME type.
        """
