"""Command-line interface for the Intel HEX word converter.

WHY: The converter is mostly used as a filter in firmware build scripts:
``ihex-words --big-endian --depth 0x400 < rom.hex > rom32.hex``. The CLI
wires stdin/stdout (or files) to the parse → assemble → emit pipeline.

HOW: Uses argparse for options, with defaults taken from config (and so
from the environment / .env). Diagnostics go through the package logger,
which the CLI points at stderr with a bare message format for the
duration of the run.

RULES:
- Positional argument: input file, "-" (default) for stdin
- -o/--output writes to a file instead of stdout
- -e/--endianness, or the -l/-b shorthands, select the input byte order
- -d/--depth pads the output to at least N words (0 = off)
- -v/--verbose enables debug logging
- Records go to stdout, diagnostics to stderr
- Exit codes: 0 success, 1 bad input or I/O error, 2 usage error
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from ihex_words import __version__
from ihex_words.config import (
    DEFAULT_DEPTH,
    DEFAULT_ENDIANNESS,
    ENDIANNESS_CHOICES,
    parse_depth,
    parse_endianness,
)
from ihex_words.core.assembler import build_memory_image
from ihex_words.core.errors import InvalidRecordFormat
from ihex_words.formatters import FORMATTERS

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "ihex_words"


def _depth_type(value: str) -> int:
    """argparse ``type=`` wrapper around config.parse_depth."""
    try:
        return parse_depth(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="ihex-words",
        description="Re-encode a byte-addressed Intel HEX image as one "
                    "record per 32-bit word, addressed by word index.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Intel HEX input file (default: stdin).",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file (default: stdout).",
    )

    byte_order = parser.add_mutually_exclusive_group()
    byte_order.add_argument(
        "-e", "--endianness",
        choices=ENDIANNESS_CHOICES,
        default=DEFAULT_ENDIANNESS,
        help="Byte order of the input words (default: %(default)s).",
    )
    byte_order.add_argument(
        "-l", "--little-endian",
        dest="endianness",
        action="store_const",
        const="little",
        help="Same as --endianness little.",
    )
    byte_order.add_argument(
        "-b", "--big-endian",
        dest="endianness",
        action="store_const",
        const="big",
        help="Same as --endianness big.",
    )

    parser.add_argument(
        "-d", "--depth",
        type=_depth_type,
        default=DEFAULT_DEPTH,
        help="Minimum output depth in words; shorter images are padded with "
             "zero words, longer ones trigger a warning. 0 disables both "
             "(default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing and assembly details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


@contextmanager
def _stderr_logging(verbose: bool) -> Iterator[None]:
    """Route package log records to stderr, one bare message per line."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = package_logger.level
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.addHandler(handler)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


@contextmanager
def _open_input(path: str) -> Iterator[TextIO]:
    """Open the input with undecodable bytes replaced, for stdin and files alike.

    Junk lines are skipped by the parser, so a stray non-UTF-8 byte in one
    must not abort the run.
    """
    if path == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # Already a text-only stream (e.g. io.StringIO); nothing to decode.
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
        try:
            yield wrapper
        finally:
            # Detach so closing the wrapper never closes the process's stdin.
            wrapper.detach()
    else:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            yield f


def _write_output(content: str, path: Optional[str]) -> None:
    if path is None:
        sys.stdout.write(content)
        sys.stdout.flush()
    else:
        with open(path, "w", encoding="ascii", newline="\n") as f:
            f.write(content)


def _run(args: argparse.Namespace, little_endian: bool) -> None:
    """Execute the conversion for parsed arguments.

    RULES:
    - Nothing is written to the output until the whole input is assembled
    - InvalidRecordFormat and OSError end the run with exit code 1
    """
    try:
        with _open_input(args.input) as lines:
            image = build_memory_image(lines, little_endian=little_endian)
    except InvalidRecordFormat as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print("Error: Cannot read {}: {}".format(args.input, e.strerror or e), file=sys.stderr)
        sys.exit(1)

    formatter = FORMATTERS["intel_hex"](depth=args.depth)
    output = formatter.format(image)
    logger.debug("Encoded %d words as %s", len(image), formatter.name)

    try:
        _write_output(output.content, args.output)
    except OSError as e:
        print("Error: Cannot write {}: {}".format(args.output, e.strerror or e), file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        little_endian = parse_endianness(args.endianness)
    except ValueError as e:
        # Only reachable through a bad IHEX_WORDS_ENDIANNESS default.
        parser.error(str(e))

    with _stderr_logging(args.verbose):
        _run(args, little_endian)


if __name__ == "__main__":
    main()
