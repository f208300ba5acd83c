"""
CSV adapter - flat tabular notation.

Lossy by design:
- a non-list document is wrapped in a one-element list before writing
- records are written under the union of their keys (first-seen order)
- nested lists/objects are written as compact JSON text and read back as strings
- a header that repeats a column name is rejected on read
- field types are inferred on read: true/false -> bool, numeric literals ->
  int/float, empty -> null, everything else stays a string
"""

import io
import json
import re
from typing import Any, List, Optional

from toonplay.config import FormattingOptions
from toonplay.formats.base import FormatAdapter, ParseError

_INT_RE = re.compile(r"^\s*-?\d+\s*$")
_FLOAT_RE = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")


def infer_value(field: str) -> Any:
    """Coerce a raw CSV field into the closest JSON scalar."""
    if field == "":
        return None
    if field in ("true", "TRUE", "True"):
        return True
    if field in ("false", "FALSE", "False"):
        return False
    if _INT_RE.match(field):
        return int(field)
    if _FLOAT_RE.match(field):
        return float(field)
    return field


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def _header_for(records: List[dict]) -> List[str]:
    header = []
    seen = set()
    for record in records:
        for key in record:
            if key not in seen:
                seen.add(key)
                header.append(key)
    return header


class CsvAdapter(FormatAdapter):
    format_id = "csv"
    label = "CSV"
    editable = True

    def __init__(self, csv_module):
        self._csv = csv_module

    def _serialize(self, document: Any, options: FormattingOptions) -> str:
        rows = document if isinstance(document, list) else [document]
        if not rows:
            return ""

        buf = io.StringIO()
        writer = self._csv.writer(buf, delimiter=options.delimiter, lineterminator="\n")

        if all(isinstance(row, dict) for row in rows):
            header = _header_for(rows)
            writer.writerow(header)
            for record in rows:
                writer.writerow([_cell(record.get(key)) for key in header])
        else:
            for row in rows:
                if isinstance(row, list):
                    writer.writerow([_cell(v) for v in row])
                else:
                    writer.writerow([_cell(row)])

        text = buf.getvalue()
        return text[:-1] if text.endswith("\n") else text

    def _parse(self, text: str, options: Optional[FormattingOptions] = None) -> Any:
        options = options or FormattingOptions()
        if not text.strip():
            return []

        reader = self._csv.reader(io.StringIO(text), delimiter=options.delimiter, strict=True)
        try:
            rows = [row for row in reader if row]
        except self._csv.Error as e:
            raise ParseError(f"line {reader.line_num}: {e}", self.format_id)

        header, body = rows[0], rows[1:]
        duplicates = sorted({key for key in header if header.count(key) > 1})
        if duplicates:
            raise ParseError(f"duplicate column names: {', '.join(duplicates)}", self.format_id)
        records = []
        for number, row in enumerate(body, start=2):
            if len(row) != len(header):
                raise ParseError(
                    f"row {number}: expected {len(header)} fields, found {len(row)}",
                    self.format_id,
                )
            records.append({key: infer_value(field) for key, field in zip(header, row)})
        return records
