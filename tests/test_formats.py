"""
Tests for notation adapters.

Each adapter should:
- Serialize any well-formed document under the given options
- Return "" instead of raising when its encoder fails
- Raise ParseError on malformed input (editable notations only)
"""

import pytest
import yaml

from toonplay.config import FormattingOptions
from toonplay.formats import (
    CANONICAL_ID,
    FORMAT_IDS,
    LAZY_FORMAT_IDS,
    CsvAdapter,
    JsonAdapter,
    ParseError,
    ToonAdapter,
    YamlAdapter,
    infer_value,
    is_editable,
    load_adapter,
)
from toonplay.presets import DEFAULT_DOCUMENT

from fakes import BrokenToon, RecordingToon

RECORDS = [
    {"id": 1, "name": "Blue Lake Trail", "distanceKm": 7.5, "wasSunny": True, "note": None},
    {"id": 2, "name": "Ridge Overlook", "distanceKm": 9.2, "wasSunny": False, "note": "windy"},
]

NESTED = {"user": {"name": "ana", "tags": ["a", "b"], "address": {"city": "Boulder"}}, "ok": True}


# ============================================================================
# Registry
# ============================================================================

def test_format_ids_and_editability():
    """JSON is canonical; TOON is the single derived-only notation."""
    assert FORMAT_IDS == ["json", "toon", "yaml", "csv"]
    assert CANONICAL_ID == "json"
    assert "json" not in LAZY_FORMAT_IDS
    assert [f for f in FORMAT_IDS if not is_editable(f)] == ["toon"]


def test_load_adapter_builds_each_notation():
    assert isinstance(load_adapter("json"), JsonAdapter)
    assert isinstance(load_adapter("toon"), ToonAdapter)
    assert isinstance(load_adapter("yaml"), YamlAdapter)
    assert isinstance(load_adapter("csv"), CsvAdapter)


def test_load_adapter_unknown_id():
    with pytest.raises(KeyError):
        load_adapter("xml")


# ============================================================================
# JSON
# ============================================================================

class TestJsonAdapter:
    """Tests for the canonical notation."""

    def test_pretty_prints_with_indent(self):
        text = JsonAdapter().serialize({"a": 1}, FormattingOptions(indent_width=2))
        assert text == '{\n  "a": 1\n}'

    def test_indent_zero_is_compact(self):
        text = JsonAdapter().serialize({"a": 1, "b": [1, 2]}, FormattingOptions(indent_width=0))
        assert text == '{"a":1,"b":[1,2]}'

    def test_keeps_unicode(self):
        text = JsonAdapter().serialize({"city": "Zürich"}, FormattingOptions())
        assert "Zürich" in text

    def test_parse_error_has_position(self):
        with pytest.raises(ParseError) as exc:
            JsonAdapter().parse('{"a": }')
        assert exc.value.format_id == "json"
        assert "line 1" in exc.value.message

    def test_empty_text_is_an_error(self):
        with pytest.raises(ParseError):
            JsonAdapter().parse("")


# ============================================================================
# YAML
# ============================================================================

class TestYamlAdapter:
    """Tests for the hierarchical notation."""

    @pytest.mark.parametrize("indent", [0, 2, 4])
    def test_round_trip(self, indent):
        adapter = load_adapter("yaml")
        text = adapter.serialize(NESTED, FormattingOptions(indent_width=indent))
        assert adapter.parse(text) == NESTED

    def test_keeps_key_order(self):
        text = load_adapter("yaml").serialize({"z": 1, "a": 2}, FormattingOptions())
        assert text.index("z:") < text.index("a:")

    def test_indent_width_applies_to_nested_keys(self):
        text = load_adapter("yaml").serialize({"a": {"b": 1}}, FormattingOptions(indent_width=4))
        assert "\n    b: 1" in text

    def test_indent_zero_has_no_leading_whitespace(self):
        text = load_adapter("yaml").serialize(NESTED, FormattingOptions(indent_width=0))
        for line in text.splitlines():
            assert line == line.lstrip()
        assert yaml.safe_load(text) == NESTED

    def test_parse_error(self):
        with pytest.raises(ParseError) as exc:
            load_adapter("yaml").parse("a: [1, 2")
        assert exc.value.format_id == "yaml"


# ============================================================================
# CSV
# ============================================================================

class TestCsvAdapter:
    """Tests for the tabular notation."""

    def test_single_object_is_wrapped(self):
        """A lone object becomes a one-record table; nested values become JSON text."""
        text = load_adapter("csv").serialize({"a": 1, "b": [1, 2]}, FormattingOptions())
        assert text == 'a,b\n1,"[1,2]"'

    def test_records_round_trip(self):
        adapter = load_adapter("csv")
        text = adapter.serialize(RECORDS, FormattingOptions())
        assert text.splitlines()[0] == "id,name,distanceKm,wasSunny,note"
        assert adapter.parse(text) == RECORDS

    @pytest.mark.parametrize("delimiter", ["\t", "|"])
    def test_delimiter_option(self, delimiter):
        adapter = load_adapter("csv")
        options = FormattingOptions(delimiter=delimiter)
        text = adapter.serialize(RECORDS, options)
        assert text.splitlines()[0] == delimiter.join(["id", "name", "distanceKm", "wasSunny", "note"])
        assert adapter.parse(text, options) == RECORDS

    def test_header_is_union_of_keys(self):
        text = load_adapter("csv").serialize([{"a": 1}, {"b": 2}], FormattingOptions())
        assert text == "a,b\n1,\n,2"

    def test_scalar_list_is_one_column(self):
        text = load_adapter("csv").serialize(["x", "y"], FormattingOptions())
        assert text == "x\ny"

    def test_empty_list(self):
        assert load_adapter("csv").serialize([], FormattingOptions()) == ""
        assert load_adapter("csv").parse("  ") == []

    def test_nested_values_read_back_as_strings(self):
        """Lossy by design: nested structure does not survive a CSV round trip."""
        adapter = load_adapter("csv")
        text = adapter.serialize({"a": 1, "b": [1, 2]}, FormattingOptions())
        assert adapter.parse(text) == [{"a": 1, "b": "[1,2]"}]

    def test_duplicate_header_is_an_error(self):
        with pytest.raises(ParseError) as exc:
            load_adapter("csv").parse("a,b,a\n1,2,3")
        assert "duplicate column names: a" in exc.value.message

    def test_field_count_mismatch_is_an_error(self):
        with pytest.raises(ParseError) as exc:
            load_adapter("csv").parse("a,b\n1")
        assert "expected 2 fields" in exc.value.message


@pytest.mark.parametrize("raw,expected", [
    ("", None),
    ("true", True),
    ("FALSE", False),
    ("42", 42),
    ("-7", -7),
    ("3.5", 3.5),
    ("1e3", 1000.0),
    (".5", 0.5),
    ("12abc", "12abc"),
    ("ana", "ana"),
])
def test_infer_value(raw, expected):
    """Numeric-looking fields become numbers, booleans become bools."""
    value = infer_value(raw)
    assert value == expected
    assert type(value) is type(expected)


# ============================================================================
# TOON
# ============================================================================

def _levels(text, width):
    """(nesting level, content) per line for a given indent width."""
    rows = []
    for line in text.splitlines():
        stripped = line.lstrip(" ")
        rows.append(((len(line) - len(stripped)) // width, stripped))
    return rows


class TestToonAdapter:
    """Tests for the compact, derived-only notation."""

    def test_is_derived_only(self):
        with pytest.raises(ParseError):
            load_adapter("toon").parse("a: 1")

    def test_passes_options_to_encoder(self):
        toon = RecordingToon()
        ToonAdapter(toon).serialize({"a": 1}, FormattingOptions(indent_width=4, delimiter="|"))
        assert toon.calls == [{"indent_size": 4, "delimiter": "|"}]

    def test_indent_zero_uses_single_space_nesting(self):
        toon = RecordingToon()
        text = ToonAdapter(toon).serialize({"a": 1}, FormattingOptions(indent_width=0))
        assert text
        assert toon.calls == [{"indent_size": 1, "delimiter": ","}]

    def test_encoder_failure_degrades_to_empty(self):
        assert ToonAdapter(BrokenToon()).serialize({"a": 1}, FormattingOptions()) == ""

    def test_encodes_with_library(self):
        text = load_adapter("toon").serialize({"a": 1, "b": [1, 2]}, FormattingOptions())
        assert "a: 1" in text
        assert "1,2" in text

    def test_tab_delimiter(self):
        text = load_adapter("toon").serialize({"b": [1, 2]}, FormattingOptions(delimiter="\t"))
        assert "1\t2" in text

    def test_indent_zero_keeps_structure(self):
        """Only whitespace changes between indent widths."""
        adapter = load_adapter("toon")
        flat = adapter.serialize(NESTED, FormattingOptions(indent_width=0))
        wide = adapter.serialize(NESTED, FormattingOptions(indent_width=2))

        assert flat
        assert "\n " in flat
        assert _levels(flat, 1) == _levels(wide, 2)

    def test_round_trips_through_library_decoder(self):
        import toon_format

        text = load_adapter("toon").serialize(DEFAULT_DOCUMENT, FormattingOptions())
        assert toon_format.decode(text) == DEFAULT_DOCUMENT
