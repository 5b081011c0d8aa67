"""Letter Sign Converter — text to letter sign glyph strips.

WHY: Learners of a manual alphabet need to see every word they type as a
row of letter signs, one image per character. The rules for finding the
right image differ between the Latin and Arabic alphabets, and images can
be missing, so every letter also needs a readable text fallback.

HOW: Four-stage pipeline — tokenize (words and letters), derive asset keys
(alphabet rules), resolve cells (async asset checks with fallback), and
format (pluggable formatters). Each stage is independently testable.

RULES:
- All formatters consume the same SignStrip IR
- A missing asset never fails a conversion; it degrades to text
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
