"""Intel HEX emitter for word-addressed memory images.

WHY: The target tools expect one Intel HEX data record per 32-bit word,
with the record address counting words rather than bytes. The records have
to be rebuilt from scratch: new addresses, new byte counts, new checksums.

HOW: iter_lines() yields, in order:
  1. an address record clearing the upper address bits
  2. one 4-byte data record per word, address = word index
  3. zero-valued padding records up to the configured depth
  4. the end-of-file record
encode_record() builds every line, checksum() closes it. If a nonzero depth
is smaller than the image, a DepthExceededWarning is logged once and the
full image is still written.

RULES:
- Word bytes are written most significant first, whatever byte order the
  image was assembled with
- Record addresses are the low 16 bits of the word index
- A record's bytes, checksum included, sum to 0 mod 256
- Hex digits are uppercase, no separators
- depth == 0 disables both padding and the limit check
"""

from __future__ import annotations

import logging
import struct
from typing import Iterable, Iterator, Optional

from ihex_words.config import (
    RECORD_DATA,
    RECORD_EOF,
    RECORD_EXTENDED_SEGMENT_ADDRESS,
    WORD_SIZE,
    parse_depth,
)
from ihex_words.core.errors import DepthExceededWarning
from ihex_words.core.ir import MemoryImage
from ihex_words.formatters.base import BaseFormatter, FormatterOutput

logger = logging.getLogger(__name__)

_WORD = struct.Struct(">I")


def checksum(values: Iterable[int]) -> int:
    """Two's complement checksum of a record's bytes (checksum byte excluded)."""
    return (256 - (sum(values) & 0xFF)) & 0xFF


def encode_record(record_type: int, address: int, payload: bytes = b"") -> str:
    """Encode one Intel HEX record line, without a line terminator.

    >>> encode_record(0x01, 0)
    ':00000001FF'
    """
    record = bytes([len(payload), (address >> 8) & 0xFF, address & 0xFF, record_type]) + payload
    return ":{}{:02X}".format(record.hex().upper(), checksum(record))


# Base address 0 for everything that follows.
ADDRESS_RECORD = encode_record(RECORD_EXTENDED_SEGMENT_ADDRESS, 0, b"\x00\x00")
EOF_RECORD = encode_record(RECORD_EOF, 0)


def check_depth(words: int, depth: int) -> Optional[DepthExceededWarning]:
    """Decide whether *words* exceeds a nonzero *depth*, logging the warning if so.

    Returns the logged DepthExceededWarning, or None.
    """
    if depth and words > depth:
        warning = DepthExceededWarning(words, depth)
        logger.warning("warning: %s", warning)
        return warning
    return None


def _iter_records(image: MemoryImage, depth: int) -> Iterator[str]:
    yield ADDRESS_RECORD
    for index, word in enumerate(image):
        yield encode_record(RECORD_DATA, index & 0xFFFF, _WORD.pack(word))
    for index in range(len(image), depth):
        yield encode_record(RECORD_DATA, index & 0xFFFF, bytes(WORD_SIZE))
    yield EOF_RECORD


def iter_lines(image: MemoryImage, depth: int = 0) -> Iterator[str]:
    """Yield the output records for *image*, padded to *depth* words.

    WHY: Writing lines as they are produced keeps the emitter usable on
    large images without building the whole text in memory.

    HOW: check_depth() runs before the first line is yielded, so the
    warning lands on the diagnostic channel ahead of any output.

    RULES:
    - The warning is logged at most once per call
    - Padding records carry four zero bytes
    - Raises ValueError for a negative depth
    """
    depth = parse_depth(depth)
    check_depth(len(image), depth)
    yield from _iter_records(image, depth)


class IntelHexFormatter(BaseFormatter):
    """Formatter that writes a MemoryImage as word-addressed Intel HEX.

    RULES:
    - depth is fixed per formatter instance
    - Content is one record per line, plus a trailing newline
    """

    def __init__(self, depth: int = 0):
        self.depth = parse_depth(depth)

    @property
    def name(self) -> str:
        return "Intel HEX (32-bit words)"

    def format(self, image: MemoryImage) -> FormatterOutput:
        """Encode *image* as Intel HEX text.

        Args:
            image: The assembled word image.

        Returns:
            A FormatterOutput whose warnings hold the DepthExceededWarning,
            if one was raised.
        """
        warning = check_depth(len(image), self.depth)
        content = "\n".join(_iter_records(image, self.depth)) + "\n"
        return FormatterOutput(
            suffix=".hex",
            content=content,
            media_type="text/x-hex",
            warnings=[warning] if warning is not None else [],
        )
