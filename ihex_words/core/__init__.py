"""Core parsing, assembly, and intermediate representation modules.

WHY: The core package is the byte-level heart of the converter — it turns
Intel HEX lines into an ordered list of 32-bit words. Emission lives in
the formatters package so the two stages can be tested separately.

HOW: ir.py defines the data structures, parser.py matches and decodes
records, assembler.py groups bytes into words and builds the MemoryImage,
errors.py holds the exception and warning types.

RULES:
- IR dataclasses are the contract — change with care
- Nothing in core writes output or touches stdin/stdout
"""
