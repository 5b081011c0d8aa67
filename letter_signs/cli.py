"""Command-line interface for the Letter Sign Converter.

WHY: Users need a simple way to turn text into letter sign strips from
the terminal. The CLI wires together the full pipeline — input reading,
counters, asset locator selection, async conversion, pluggable formatter
output, and file saving — behind a single command.

HOW: Uses argparse to accept the text (or stdin), the alphabet, the asset
source (directory or URL), output formats, and an output directory. Runs
the async conversion via asyncio.run(). Progress goes to stderr as each
word is emitted; the copy-all letters go to stdout.

RULES:
- Positional argument: text to convert; read from stdin when omitted
- --alphabet selects "en" (Latin) or "ar" (Arabic)
- --assets: directory path or http(s) base URL (default from config)
- --formats: comma-separated formatter keys (default: all registered)
- Files are written only with --output-dir; names are {stem}{suffix}
  with a numeric suffix on conflict (-signs-2.json)
- Status output goes to stderr (not stdout)
- Exit 1 on empty input, conversion failure, bad options, or any other
  error (e.g. an unwritable output file); 130 on Ctrl-C
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from letter_signs.assets.locator import build_locator
from letter_signs.config import ASSET_SOURCE, ASSET_TIMEOUT_S, DEFAULT_ALPHABET
from letter_signs.core.alphabets import parse_alphabet
from letter_signs.core.ir import WordResult
from letter_signs.core.session import ConversionFailedError, ConversionSession
from letter_signs.core.tokenizer import EmptyInputError
from letter_signs.formatters import FORMATTERS
from letter_signs.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)

_ALPHABET_CHOICES = ["en", "ar", "latin", "english", "arabic"]


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str, code: int = 1) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(code)


def _describe_word(word: WordResult) -> str:
    tags = " ".join(cell.format_tag or "?" for cell in word.cells)
    return "  {} [{}]: {} ({})".format(word.label, word.alphabet_label, word.copy_text(), tags)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may convert many texts into the same folder. Numeric
    suffixes (-signs-2.json) prevent overwriting earlier output.

    RULES:
    - First attempt: {stem}{suffix} (e.g. greeting-signs.json)
    - Conflict: insert counter before the extension (greeting-signs-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)

    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")

    return path


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if sys.stdin is None or sys.stdin.isatty():
        _fail("No text given. Pass TEXT or pipe text on stdin.")
    return sys.stdin.read()


def _select_formats(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


async def _run_pipeline(
    args: argparse.Namespace,
    text: str,
    format_keys: List[str],
    output_dir: Optional[Path],
) -> None:
    """Execute the full conversion pipeline.

    RULES:
    - Print counters, then one status line per emitted word
    - Save each formatter's output files with conflict avoidance
    - Print the copy-all letters to stdout
    """
    async with build_locator(args.assets) as locator:
        session = ConversionSession(
            locator,
            alphabet=parse_alphabet(args.alphabet),
            timeout_s=args.timeout,
            on_word=lambda word: _status(_describe_word(word)),
        )
        counters = session.set_input(text)
        _status("Words: {}  Letters: {}".format(counters.word_count, counters.letter_count))
        if args.counts_only:
            return

        _status("Converting ({}, assets: {})...".format(session.settings.name, args.assets))
        await session.convert()

    strip = session.snapshot()

    if output_dir is not None:
        saved_files: List[Path] = []
        for key in format_keys:
            formatter = FORMATTERS[key]()
            _status("  Running {} formatter...".format(formatter.name))
            for output in formatter.format(strip):
                saved_files.append(_save_output(output, args.stem, output_dir))

        _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
        for path in saved_files:
            _status("  {}".format(path.name))

    print(strip.copy_text())


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separated from main() so tests can inspect the parser without running
    the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="letter-signs",
        description="Convert text into letter sign image strips "
                    "(Latin or Arabic alphabet) with text fallback.",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to convert. Read from stdin when omitted.",
    )

    parser.add_argument(
        "--alphabet",
        type=str.lower,
        choices=_ALPHABET_CHOICES,
        default=DEFAULT_ALPHABET,
        help="Alphabet: en (Latin) or ar (Arabic) (default: %(default)s).",
    )

    parser.add_argument(
        "--assets",
        default=ASSET_SOURCE,
        help="Directory or http(s) base URL holding <alphabet>/<KEY>.png "
             "images (default: %(default)s).",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=ASSET_TIMEOUT_S,
        help="Seconds to wait for each image check before falling back "
             "to text (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: print letters only).",
    )

    parser.add_argument(
        "--stem",
        default="signs",
        help="File name stem for saved output (default: %(default)s).",
    )

    parser.add_argument(
        "--counts-only",
        action="store_true",
        help="Only print the word and letter counters.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    text = _read_text(args)
    format_keys = _select_formats(args.formats)

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            _fail("Output directory does not exist: {}".format(output_dir))

    try:
        asyncio.run(_run_pipeline(args, text, format_keys, output_dir))
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)
    except EmptyInputError as e:
        _fail(str(e))
    except ConversionFailedError as e:
        logger.debug("Conversion failed", exc_info=True)
        _fail(str(e))
    except ValueError as e:
        _fail(str(e))
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        _fail(str(e))


if __name__ == "__main__":
    main()
