"""
YAML adapter - general-purpose hierarchical notation (PyYAML).

Indent width 0 switches to single-line flow style: no nested key carries
leading whitespace and the text stays a lossless YAML document.
"""

from typing import Any, Optional

from toonplay.config import FormattingOptions
from toonplay.formats.base import FormatAdapter, ParseError

# Large enough that flow style never wraps
_NO_WRAP = 2 ** 31


class YamlAdapter(FormatAdapter):
    format_id = "yaml"
    label = "YAML"
    editable = True

    def __init__(self, yaml_module):
        self._yaml = yaml_module

    def _serialize(self, document: Any, options: FormattingOptions) -> str:
        if options.indent_width == 0:
            return self._yaml.safe_dump(
                document,
                default_flow_style=True,
                sort_keys=False,
                allow_unicode=True,
                width=_NO_WRAP,
            )
        return self._yaml.safe_dump(
            document,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=options.indent_width,
        )

    def _parse(self, text: str, options: Optional[FormattingOptions] = None) -> Any:
        try:
            return self._yaml.safe_load(text)
        except self._yaml.YAMLError as e:
            raise ParseError(str(e), self.format_id)
