"""Configuration constants, record type codes, and .env loading.

WHY: Centralizes the configurable defaults (byte order, output depth) and
the fixed Intel HEX constants so they are easy to find and override. The
CLI reads its defaults from here; tests and library callers can pass
explicit values instead.

HOW: python-dotenv loads the .env file on import. Defaults are read with
os.getenv and validated by parse_endianness() / parse_depth(), which the
CLI also uses as argparse ``type=`` converters.

RULES:
- IHEX_WORDS_ENDIANNESS: "little" (default) or "big"
- IHEX_WORDS_DEPTH: non-negative integer, decimal or 0x-prefixed (default 0)
- Invalid values raise ValueError, never silently fall back
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the converter is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Intel HEX record types
# ---------------------------------------------------------------------------

RECORD_DATA = 0x00
RECORD_EOF = 0x01
RECORD_EXTENDED_SEGMENT_ADDRESS = 0x02

WORD_SIZE = 4
"""Bytes per assembled word."""

# ---------------------------------------------------------------------------
# Byte order
# ---------------------------------------------------------------------------

ENDIANNESS_CHOICES = ("little", "big")


def parse_endianness(value: str) -> bool:
    """Map an endianness name to the ``little_endian`` flag.

    RULES:
    - "little" → True, "big" → False (case-insensitive, surrounding space ignored)
    - Anything else raises ValueError
    """
    name = value.strip().lower()
    if name not in ENDIANNESS_CHOICES:
        raise ValueError(
            "Unknown endianness '{}'. Expected one of: {}".format(
                value, ", ".join(ENDIANNESS_CHOICES)
            )
        )
    return name == "little"


def parse_depth(value: int | str) -> int:
    """Parse an output depth in words.

    WHY: Depths are usually memory sizes, which people write in hex
    (0x400) as often as in decimal (1024).

    HOW: Integers pass through; strings go through int(value, 0).

    RULES:
    - 0 means no padding and no limit check
    - Negative values raise ValueError
    """
    if isinstance(value, int):
        depth = value
    else:
        try:
            depth = int(value.strip(), 0)
        except ValueError:
            raise ValueError("Invalid depth '{}': not an integer".format(value)) from None
    if depth < 0:
        raise ValueError("Invalid depth {}: must not be negative".format(depth))
    return depth


# ---------------------------------------------------------------------------
# Defaults (overridable via environment)
# ---------------------------------------------------------------------------

DEFAULT_ENDIANNESS = os.getenv("IHEX_WORDS_ENDIANNESS", "little").strip().lower()
DEFAULT_DEPTH = os.getenv("IHEX_WORDS_DEPTH", "0")
