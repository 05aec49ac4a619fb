"""Output sink contract.

Why Protocol:
- Console streams, open files and `io.StringIO` all qualify structurally,
  so the exporter does not need a common base class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Destination for formatted text."""

    def write(self, text: str, /) -> int:
        """Write `text` and return the number of characters written."""

        ...
