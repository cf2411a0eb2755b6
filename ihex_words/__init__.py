"""Intel HEX word converter — byte-addressed HEX in, word-addressed HEX out.

WHY: Toolchains emit firmware and ROM images as byte-addressed Intel HEX.
Some programming tools and memory initialisation flows want the same image
as 32-bit words, one record per word, addressed by word index. This package
reads the former and writes the latter.

HOW: Two-stage pipeline — parse/assemble (core) and emit (formatters).
The core turns HEX lines into a MemoryImage of words; the Intel HEX
formatter re-encodes that image with fresh addresses and checksums.

RULES:
- The MemoryImage is the contract between assembly and emission
- Input checksums are never validated
- Output word bytes are always big-endian, whatever the input byte order
"""

__version__ = "0.1.0"
