"""
toonplay - a playground for structured data in several notations.

One canonical JSON document, re-expressed as:
- TOON (compact, token-economical, derived-only)
- YAML (hierarchical, editable)
- CSV (flat tabular, editable)

Edits in any editable pane flow back into the canonical document and out
to the others. Token costs are compared against JSON, and a session can
be shared as a compact URL fragment.
"""

__version__ = "0.1.0"

from toonplay.config import FormattingOptions, PlaygroundConfig
from toonplay.controller import Representation, SyncController
from toonplay.share import SessionState, decode_state, encode_state
from toonplay.tokens import Savings, savings

__all__ = [
    "FormattingOptions",
    "PlaygroundConfig",
    "Representation",
    "SyncController",
    "SessionState",
    "decode_state",
    "encode_state",
    "Savings",
    "savings",
]
