"""Byte-to-word assembly and MemoryImage construction.

WHY: The input is byte-addressed; the output is one record per 32-bit word.
Somewhere the bytes have to be regrouped, and the input's byte order
decides which byte of each group is the most significant.

HOW: assemble_words() cuts a byte string into 4-byte groups and unpacks
each with struct, "<I" for little-endian or ">I" for big-endian.
build_memory_image() feeds it the decoded bytes of every data record from
the parser and collects the words into a MemoryImage.

RULES:
- Little-endian: byte0 is least significant; big-endian: byte0 is most
- Grouping restarts with every record; the 1–3 bytes left over at the end
  of a record (normally its checksum byte) are dropped without a warning
- Words are appended in record order; a word's index is its output address
"""

from __future__ import annotations

import logging
import struct
from typing import Iterable

from ihex_words.config import WORD_SIZE
from ihex_words.core.ir import MemoryImage
from ihex_words.core.parser import iter_record_bytes

logger = logging.getLogger(__name__)

_LITTLE_ENDIAN_WORD = struct.Struct("<I")
_BIG_ENDIAN_WORD = struct.Struct(">I")


def assemble_words(data: bytes, little_endian: bool = True) -> list[int]:
    """Group *data* into unsigned 32-bit words.

    Args:
        data: Raw bytes, in file order.
        little_endian: True to treat the first byte of each group as the
            least significant, False for network order.

    Returns:
        One int per complete 4-byte group. Trailing bytes that do not fill
        a group are ignored.
    """
    word = _LITTLE_ENDIAN_WORD if little_endian else _BIG_ENDIAN_WORD
    usable = len(data) - (len(data) % WORD_SIZE)
    return [value for (value,) in word.iter_unpack(data[:usable])]


def build_memory_image(lines: Iterable[str], little_endian: bool = True) -> MemoryImage:
    """Parse Intel HEX *lines* and assemble their data into a MemoryImage.

    WHY: This is the whole first stage of the pipeline — the emitter only
    ever sees the returned image.

    HOW: Pulls decoded bytes record by record from the parser (which stops
    at the first EOF record) and appends the assembled words.

    RULES:
    - Lines are consumed lazily; nothing after an EOF record is read
    - InvalidRecordFormat from the parser propagates unchanged

    Args:
        lines: Any iterable of text lines, e.g. an open file or sys.stdin.
        little_endian: Byte order of the input words.

    Returns:
        The assembled MemoryImage.
    """
    image = MemoryImage(little_endian=little_endian)
    for record_bytes in iter_record_bytes(lines):
        words = assemble_words(record_bytes, little_endian=little_endian)
        image.words.extend(words)
        image.record_count += 1
        image.byte_count += len(record_bytes)
        image.dropped_bytes += len(record_bytes) - len(words) * WORD_SIZE

    logger.debug(
        "Assembled %d words (%s-endian) from %d records, %d bytes (%d dropped)",
        len(image),
        "little" if little_endian else "big",
        image.record_count,
        image.byte_count,
        image.dropped_bytes,
    )
    return image
