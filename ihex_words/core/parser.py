"""Intel HEX record parsing and data field decoding.

WHY: Input files mix records with blank lines, comments, and whatever
else a toolchain leaves behind. The parser picks out the records, stops at
the first end-of-file record, and turns each data field into bytes.

HOW: parse_record() matches a single line. iter_records() walks an
iterable of lines lazily and returns as soon as it sees an EOF record, so
nothing after it is read. decode_data() converts hex digit pairs to bytes.

RULES:
- Lines that do not match the record pattern are skipped, not errors
- The EOF record ends parsing; its own data is discarded
- Every other record type is treated as data
- Odd-length or non-hex data fields raise InvalidRecordFormat
- Input checksums are not verified
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from ihex_words.core.errors import InvalidRecordFormat
from ihex_words.core.ir import HexRecord

logger = logging.getLogger(__name__)

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")


def parse_record(line: str) -> HexRecord | None:
    """Parse one line into a HexRecord, or None if it is not a record."""
    return HexRecord.from_line(line)


def decode_data(data: str, line_number: int | None = None) -> bytes:
    """Decode a record's data field two hex digits at a time.

    Raises:
        InvalidRecordFormat: the field has an odd number of digits or a
            character that is not a hex digit.
    """
    if len(data) % 2:
        raise InvalidRecordFormat(
            "data field has an odd number of hex digits ({})".format(len(data)),
            line_number=line_number,
            line=data,
        )
    # bytes.fromhex() tolerates embedded whitespace; a record field must not.
    if not _HEX_DIGITS_RE.fullmatch(data):
        raise InvalidRecordFormat(
            "data field is not valid hex: {!r}".format(data),
            line_number=line_number,
            line=data,
        )
    return bytes.fromhex(data)


def iter_records(lines: Iterable[str]) -> Iterator[HexRecord]:
    """Yield the records found in *lines*, stopping at the first EOF record.

    The EOF record itself is not yielded and no line after it is consumed.
    """
    for _line_number, record in _iter_numbered_records(lines):
        yield record


def iter_record_bytes(lines: Iterable[str]) -> Iterator[bytes]:
    """Yield the decoded bytes of each data record in *lines*, in order."""
    for line_number, record in _iter_numbered_records(lines):
        yield decode_data(record.data, line_number=line_number)


def _iter_numbered_records(lines: Iterable[str]) -> Iterator[tuple[int, HexRecord]]:
    for line_number, line in enumerate(lines, start=1):
        record = parse_record(line)
        if record is None:
            logger.debug("Skipping line %d: not a HEX record", line_number)
            continue
        if record.is_eof:
            logger.debug("End-of-file record at line %d", line_number)
            return
        yield line_number, record
