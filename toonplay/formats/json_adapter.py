"""
JSON adapter - the canonical notation.

Uses stdlib json so it is available synchronously at startup.
"""

import json
from typing import Any, Optional

from toonplay.config import FormattingOptions
from toonplay.formats.base import FormatAdapter, ParseError


class JsonAdapter(FormatAdapter):
    format_id = "json"
    label = "JSON"
    editable = True

    def _serialize(self, document: Any, options: FormattingOptions) -> str:
        # indent 0 means compact, not "newlines without indentation"
        if options.indent_width == 0:
            return json.dumps(document, ensure_ascii=False, separators=(",", ":"), default=str)
        return json.dumps(document, ensure_ascii=False, indent=options.indent_width, default=str)

    def _parse(self, text: str, options: Optional[FormattingOptions] = None) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"{e.msg} (line {e.lineno}, column {e.colno})", self.format_id)
