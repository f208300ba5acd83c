"""
Canonical document model.

Holds the single parsed document plus the last canonical parse error.
Only the sync controller mutates it; everyone else gets snapshots.
"""

import copy
from dataclasses import dataclass
from typing import Any, Optional

from toonplay.formats.base import FormatAdapter, ParseError


@dataclass
class ParseResult:
    """Outcome of feeding text to the document model."""
    document: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DocumentModel:
    """The canonical document and its parse-error state."""

    def __init__(self, document: Any = None):
        self._document = document
        self._error: Optional[str] = None

    @property
    def document(self) -> Any:
        return self._document

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def set_from_text(self, text: str, adapter: FormatAdapter, options=None) -> ParseResult:
        """Parse text with the given adapter and adopt the result.

        On failure the document is left as it was and the error is kept
        for display.
        """
        try:
            document = adapter.parse(text, options)
        except ParseError as e:
            self._error = e.message
            return ParseResult(error=e.message)

        self._document = document
        self._error = None
        return ParseResult(document=document)

    def replace(self, document: Any) -> None:
        """Adopt a document parsed elsewhere; clears any stored error."""
        self._document = document
        self._error = None

    def snapshot(self) -> Any:
        """Deep copy safe to hand to serializers."""
        return copy.deepcopy(self._document)
