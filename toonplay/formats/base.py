"""
Adapter contract shared by every notation.

An adapter wraps one external parser/serializer pair:
- serialize(document, options) -> str, never raises; a failure yields ""
- parse(text) -> document, raises ParseError on malformed input

Derived-only notations leave `editable` False and do not implement parse.
"""

import logging
from typing import Any, Optional

from toonplay.config import FormattingOptions

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Malformed text for a given notation."""

    def __init__(self, message: str, format_id: str = ""):
        super().__init__(message)
        self.message = message
        self.format_id = format_id

    def __str__(self) -> str:
        if self.format_id:
            return f"{self.format_id}: {self.message}"
        return self.message


class FormatAdapter:
    """Base class for notation adapters."""

    format_id: str = ""
    label: str = ""
    editable: bool = True

    def serialize(self, document: Any, options: FormattingOptions) -> str:
        """Serialize a document. Returns "" if the encoder fails."""
        try:
            return self._serialize(document, options)
        except Exception as e:
            logger.warning(f"{self.format_id} serialization failed: {e}")
            return ""

    def parse(self, text: str, options: Optional[FormattingOptions] = None) -> Any:
        """Parse text into a document. Raises ParseError.

        Options matter only for delimiter-sensitive notations.
        """
        if not self.editable:
            raise ParseError("representation is derived-only", self.format_id)
        return self._parse(text, options)

    def _serialize(self, document: Any, options: FormattingOptions) -> str:
        raise NotImplementedError

    def _parse(self, text: str, options: Optional[FormattingOptions] = None) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.format_id}>"
