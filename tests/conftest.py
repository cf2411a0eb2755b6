"""Shared test fixtures for the ihex_words test suite.

WHY: Several test modules feed the same small HEX images through
different stages. Keeping them here means every stage is checked against
the same inputs.

HOW: Module-level constants hold the raw lines; fixtures hand out fresh
copies, plus a pre-assembled MemoryImage.

RULES:
- Every record line carries a correct checksum, even though input
  checksums are never verified
- SAMPLE_LINES holds two 4-byte data records, a blank line, and a stray
  comment, then EOF followed by a record that must never be read
"""

from typing import List

import pytest

from ihex_words.core.ir import MemoryImage


# ---------------------------------------------------------------------------
# Sample Intel HEX input
# ---------------------------------------------------------------------------

SAMPLE_LINES: List[str] = [
    "; built by the test suite\n",
    ":0400000001020304F2\n",
    "\n",
    ":04000400AABBCCDDEA\n",
    ":00000001FF\n",
    ":04000800112233444A\n",
]


@pytest.fixture
def sample_lines():
    """Two data records, noise lines, EOF, and a trailing record after EOF."""
    return list(SAMPLE_LINES)


@pytest.fixture
def two_word_image():
    """A MemoryImage holding two little-endian words."""
    return MemoryImage(
        words=[0x04030201, 0xDDCCBBAA],
        little_endian=True,
        record_count=2,
        byte_count=10,
        dropped_bytes=2,
    )
