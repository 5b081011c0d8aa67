"""Core conversion pipeline and intermediate representation modules.

WHY: The core package contains the stable heart of the converter — the
IR dataclasses, the alphabet rules, and the async conversion pipeline.
These are consumed by all formatters and the CLI.

HOW: alphabets.py holds the per-alphabet rules, ir.py the data
structures, tokenizer.py the word split and counters, resolver.py the
per-letter asset check, assembler.py the per-word join, and session.py
the orchestration with its generation token.

RULES:
- IR dataclasses are the contract — change with care
- Conversion logic is rendering-agnostic — no formatter logic here
- Only resolver.py awaits the asset backend
"""
