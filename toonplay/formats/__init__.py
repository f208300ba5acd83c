"""
Notation adapters.

Each adapter wraps an external parser/serializer behind the same contract
(see base.FormatAdapter).

Supported notations:
- json (canonical) - stdlib json, available synchronously
- toon (derived-only) - toon_format library, loaded lazily
- yaml - PyYAML, loaded lazily
- csv - stdlib csv with typed fields, loaded lazily
"""

import importlib
from typing import Callable, Dict, List

from toonplay.formats.base import FormatAdapter, ParseError
from toonplay.formats.json_adapter import JsonAdapter
from toonplay.formats.toon_adapter import ToonAdapter
from toonplay.formats.yaml_adapter import YamlAdapter
from toonplay.formats.csv_adapter import CsvAdapter, infer_value

__all__ = [
    "FormatAdapter",
    "ParseError",
    "JsonAdapter",
    "ToonAdapter",
    "YamlAdapter",
    "CsvAdapter",
    "infer_value",
    "CANONICAL_ID",
    "FORMAT_IDS",
    "LAZY_FORMAT_IDS",
    "load_adapter",
    "adapter_factories",
    "is_editable",
]

CANONICAL_ID = "json"

# Display order of the panes
FORMAT_IDS: List[str] = ["json", "toon", "yaml", "csv"]

# Adapter class and the module it wraps, for the lazily loaded notations
_LAZY_ADAPTERS = {
    "toon": (ToonAdapter, "toon_format"),
    "yaml": (YamlAdapter, "yaml"),
    "csv": (CsvAdapter, "csv"),
}

LAZY_FORMAT_IDS: List[str] = [f for f in FORMAT_IDS if f in _LAZY_ADAPTERS]

_EDITABLE = {
    "json": JsonAdapter.editable,
    "toon": ToonAdapter.editable,
    "yaml": YamlAdapter.editable,
    "csv": CsvAdapter.editable,
}


def load_adapter(format_id: str) -> FormatAdapter:
    """Import the library behind a notation and build its adapter.

    Blocking; the loader runs this off the event loop.

    Raises:
        KeyError: unknown notation
        ImportError: library not installed
    """
    if format_id == CANONICAL_ID:
        return JsonAdapter()
    adapter_cls, module_name = _LAZY_ADAPTERS[format_id]
    return adapter_cls(importlib.import_module(module_name))


def adapter_factories() -> Dict[str, Callable[[], FormatAdapter]]:
    """Factories for every lazily loaded notation, keyed by id."""
    return {fid: (lambda fid=fid: load_adapter(fid)) for fid in LAZY_FORMAT_IDS}


def is_editable(format_id: str) -> bool:
    """Check whether user edits on a notation feed the canonical document."""
    return _EDITABLE[format_id]
