"""Abstract base formatter and output container.

WHY: The CLI should not care how an image is encoded, only that it gets
text back plus any diagnostics raised along the way. This base class fixes
that interface.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles the encoded content with its suffix, MIME type, and warnings.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` never writes anywhere; the caller decides where content goes
- Warnings are reported in ``FormatterOutput.warnings`` and logged by the
  formatter; they never abort formatting
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ihex_words.core.ir import MemoryImage


@dataclass
class FormatterOutput:
    """One encoded image produced by a formatter.

    Attributes:
        suffix: File suffix for the output, e.g. ``".hex"``.
        content: The encoded text, newline-terminated.
        media_type: MIME type for the content, e.g. ``"text/x-hex"``.
        warnings: Non-fatal diagnostics raised while formatting.
    """

    suffix: str
    content: str
    media_type: str
    warnings: list[Warning] = field(default_factory=list)


class BaseFormatter(ABC):
    """Abstract base for output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Intel HEX (32-bit words)'."""

    @abstractmethod
    def format(self, image: MemoryImage) -> FormatterOutput:
        """Encode the MemoryImage.

        Args:
            image: The assembled word image.

        Returns:
            A FormatterOutput with the encoded content and any warnings.
        """
