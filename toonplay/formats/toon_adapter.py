"""
TOON adapter - compact, line-oriented notation tuned for token economy.

Derived-only: the pane is computed from the canonical document and never
parsed back. Encoding is delegated to the toon_format library.

TOON nests by indentation, so its indent never drops below one space.
At indent width 0 the pane uses single-space nesting instead.
"""

from typing import Any

from toonplay.config import FormattingOptions
from toonplay.formats.base import FormatAdapter

MIN_TOON_INDENT = 1


class ToonAdapter(FormatAdapter):
    format_id = "toon"
    label = "TOON"
    editable = False

    def __init__(self, toon_module):
        self._toon = toon_module

    def _serialize(self, document: Any, options: FormattingOptions) -> str:
        return self._toon.encode(
            document,
            indent_size=max(MIN_TOON_INDENT, options.indent_width),
            delimiter=options.delimiter,
        )
