"""Unit tests for the Intel HEX emitter.

WHY: The emitter's output is fed straight to programming tools, which
reject a file on the first bad checksum or malformed line.

HOW: Tests check record encoding and checksums against hand-computed
lines, the fixed framing records, depth padding, the depth warning, and
the formatter wrapper.
"""

import logging

import pytest

from ihex_words.core.errors import DepthExceededWarning
from ihex_words.core.ir import MemoryImage
from ihex_words.formatters import FORMATTERS
from ihex_words.formatters.intel_hex import (
    ADDRESS_RECORD,
    EOF_RECORD,
    IntelHexFormatter,
    checksum,
    encode_record,
    iter_lines,
)


def _record_bytes(line):
    return bytes.fromhex(line[1:])


def _data_records(lines):
    return [line for line in lines if line[7:9] == "00"]


class TestChecksum:
    """The checksum makes a record's bytes sum to 0 mod 256."""

    def test_known_value(self):
        assert checksum([0x04, 0x00, 0x00, 0x00, 0x04, 0x03, 0x02, 0x01]) == 0xF2

    def test_zero_sum(self):
        assert checksum([0x00, 0x00]) == 0x00

    def test_wraps(self):
        assert checksum([0xFF, 0x01]) == 0x00
        assert checksum([0xFF]) == 0x01


class TestEncodeRecord:
    """encode_record produces ':' + uppercase hex, checksum last."""

    def test_eof(self):
        assert encode_record(0x01, 0) == ":00000001FF"

    def test_data_record(self):
        assert encode_record(0x00, 1, b"\xdd\xcc\xbb\xaa") == ":04000100DDCCBBAAED"

    def test_address_is_big_endian(self):
        assert encode_record(0x00, 0x1234, b"\x00") == ":01123400" + "00" + "B9"

    def test_fixed_framing_records(self):
        assert ADDRESS_RECORD == ":020000020000FC"
        assert EOF_RECORD == ":00000001FF"


class TestIterLines:
    """iter_lines frames one data record per word between fixed records."""

    def test_single_word_example(self):
        image = MemoryImage(words=[0x04030201])
        assert list(iter_lines(image)) == [
            ":020000020000FC",
            ":0400000004030201F2",
            ":00000001FF",
        ]

    def test_word_bytes_big_endian_regardless_of_assembly(self):
        image = MemoryImage(words=[0x04030201], little_endian=False)
        assert list(iter_lines(image))[1] == ":0400000004030201F2"

    def test_two_words(self, two_word_image):
        assert list(iter_lines(two_word_image)) == [
            ":020000020000FC",
            ":0400000004030201F2",
            ":04000100DDCCBBAAED",
            ":00000001FF",
        ]

    def test_empty_image(self):
        assert list(iter_lines(MemoryImage())) == [":020000020000FC", ":00000001FF"]

    def test_every_record_sums_to_zero(self, two_word_image):
        for line in iter_lines(two_word_image, depth=6):
            assert sum(_record_bytes(line)) % 256 == 0

    def test_address_wraps_at_16_bits(self):
        image = MemoryImage(words=[0] * 0x10001)
        lines = list(iter_lines(image))
        assert lines[-2] == ":0400000000000000FC"

    def test_negative_depth_rejected(self, two_word_image):
        with pytest.raises(ValueError):
            list(iter_lines(two_word_image, depth=-1))


class TestDepthPadding:
    """Images shorter than the depth are padded with zero words."""

    def test_pads_to_depth(self, two_word_image, caplog):
        lines = list(iter_lines(two_word_image, depth=5))
        data = _data_records(lines)
        assert len(data) == 5
        assert data[2:] == [
            ":0400020000000000FA",
            ":0400030000000000F9",
            ":0400040000000000F8",
        ]
        assert lines[-1] == ":00000001FF"
        assert "exceeds" not in caplog.text

    def test_depth_equal_to_image(self, two_word_image, caplog):
        assert len(_data_records(list(iter_lines(two_word_image, depth=2)))) == 2
        assert caplog.records == []

    def test_zero_depth_means_no_padding(self, two_word_image):
        assert len(_data_records(list(iter_lines(two_word_image, depth=0)))) == 2


class TestDepthWarning:
    """An image longer than a nonzero depth is warned about, not truncated."""

    def test_no_truncation(self):
        image = MemoryImage(words=[1, 2, 3, 4, 5])
        lines = list(iter_lines(image, depth=2))
        assert len(_data_records(lines)) == 5

    def test_warns_exactly_once(self, caplog):
        caplog.set_level(logging.WARNING, logger="ihex_words")
        image = MemoryImage(words=[1, 2, 3, 4, 5])
        list(iter_lines(image, depth=2))
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == (
            "warning: Memory depth (5) exceeds maximum memory depth (2)"
        )

    def test_zero_depth_never_warns(self, caplog):
        list(iter_lines(MemoryImage(words=[1, 2, 3]), depth=0))
        assert caplog.records == []


class TestIntelHexFormatter:
    """The formatter wraps iter_lines output and reports warnings."""

    def test_registered(self):
        assert FORMATTERS["intel_hex"] is IntelHexFormatter

    def test_content(self, two_word_image):
        output = IntelHexFormatter().format(two_word_image)
        assert output.content == (
            ":020000020000FC\n"
            ":0400000004030201F2\n"
            ":04000100DDCCBBAAED\n"
            ":00000001FF\n"
        )
        assert output.suffix == ".hex"
        assert output.media_type == "text/x-hex"
        assert output.warnings == []

    def test_warning_reported(self):
        output = IntelHexFormatter(depth=1).format(MemoryImage(words=[1, 2]))
        assert len(output.warnings) == 1
        warning = output.warnings[0]
        assert isinstance(warning, DepthExceededWarning)
        assert (warning.depth, warning.configured) == (2, 1)
        assert str(warning) == "Memory depth (2) exceeds maximum memory depth (1)"

    def test_reported_warning_is_the_logged_one(self, caplog):
        caplog.set_level(logging.WARNING, logger="ihex_words")
        output = IntelHexFormatter(depth=2).format(MemoryImage(words=[1, 2, 3, 4, 5]))
        logged = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(logged) == 1
        assert logged[0].getMessage() == "warning: {}".format(output.warnings[0])

    def test_no_warning_logged_under_depth(self, caplog):
        output = IntelHexFormatter(depth=8).format(MemoryImage(words=[1, 2]))
        assert output.warnings == []
        assert caplog.records == []

    def test_depth_parsed_from_string(self):
        assert IntelHexFormatter(depth="0x10").depth == 16

    def test_name(self):
        assert IntelHexFormatter().name == "Intel HEX (32-bit words)"
