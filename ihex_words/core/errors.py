"""Exception and warning types raised by the converter.

WHY: Callers need to tell a broken input file apart from a merely
oversized one. The first is fatal, the second is a diagnostic.

RULES:
- InvalidRecordFormat subclasses ValueError so generic callers (and the
  CLI's ValueError handler) treat it as bad input
- DepthExceededWarning is a UserWarning; it is logged, not raised
- Non-matching lines are not errors and have no type here
"""

from __future__ import annotations


class InvalidRecordFormat(ValueError):
    """A matched record whose data field cannot be decoded into bytes."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = "line {}: {}".format(line_number, message)
        super().__init__(message)


class DepthExceededWarning(UserWarning):
    """The assembled image holds more words than the configured depth."""

    def __init__(self, depth: int, configured: int):
        self.depth = depth
        self.configured = configured
        super().__init__(
            "Memory depth ({}) exceeds maximum memory depth ({})".format(depth, configured)
        )
