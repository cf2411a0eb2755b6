"""Output formatter registry.

WHY: The CLI looks formatters up by name, so adding an encoding means one
new module plus one line here.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate with their options:
``formatter = FORMATTERS["intel_hex"](depth=1024)``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ihex_words.formatters.intel_hex import IntelHexFormatter

if TYPE_CHECKING:
    from ihex_words.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "intel_hex": IntelHexFormatter,
}
