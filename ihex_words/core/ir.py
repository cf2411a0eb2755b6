"""Intermediate representation dataclasses for parsed records and word images.

WHY: The parser, the assembler, and the emitter each look at the image at a
different granularity — raw record text, bytes, 32-bit words. Typed
dataclasses make the hand-off between stages explicit and keep the header
field extraction in one place.

HOW: Two dataclasses:
  HexRecord   — one matched input line, header fields split out
  MemoryImage — the ordered word list plus assembly bookkeeping

RULES:
- HexRecord.data is the whole remainder after the 8 header digits, so it
  still carries the record's checksum digits
- HexRecord header fields come from shifts and masks on one 32-bit int
- MemoryImage.words holds unsigned 32-bit ints in assembly order; the
  index of a word is its output address
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from ihex_words.config import RECORD_EOF

# Header (count, address, type) followed by at least one byte of payload.
RECORD_RE = re.compile(r"^:([0-9a-f]{8})([0-9a-f]{2,})$", re.IGNORECASE)


@dataclass(frozen=True)
class HexRecord:
    """A single Intel HEX record matched from one input line.

    WHY: Intel HEX packs the byte count, load address, and record type into
    the first four bytes of every line. Only the type drives processing,
    but the other fields are kept so callers can inspect them.

    HOW: from_line() matches RECORD_RE and decodes the 8 header digits as
    one integer: size is bits 31–24, address bits 23–8, type bits 7–0.

    RULES:
    - size and address are informational; records are processed in file order
    - Any type other than RECORD_EOF is treated as data downstream
    - data is not decoded here; see parser.decode_data()
    """

    size: int
    address: int
    type: int
    data: str

    @classmethod
    def from_line(cls, line: str) -> HexRecord | None:
        """Match one line, returning None when it is not a record."""
        match = RECORD_RE.match(line.rstrip("\r\n"))
        if match is None:
            return None
        header = int(match.group(1), 16)
        return cls(
            size=(header >> 24) & 0xFF,
            address=(header >> 8) & 0xFFFF,
            type=header & 0xFF,
            data=match.group(2),
        )

    @property
    def is_eof(self) -> bool:
        return self.type == RECORD_EOF


@dataclass
class MemoryImage:
    """The assembled, word-addressed memory image.

    WHY: The emitter needs the complete word list up front — padding and the
    depth check both depend on its final length.

    HOW: Built by assembler.build_memory_image(); the bookkeeping fields are
    filled in as records are consumed.

    RULES:
    - words: unsigned 32-bit ints, index == output word address
    - little_endian: the byte order the words were assembled with
    - record_count: data records consumed (the EOF record is not counted)
    - byte_count: bytes decoded from those records
    - dropped_bytes: trailing bytes that did not complete a word
    """

    words: list[int] = field(default_factory=list)
    little_endian: bool = True
    record_count: int = 0
    byte_count: int = 0
    dropped_bytes: int = 0

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)
