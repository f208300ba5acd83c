"""
Playground configuration.

Two layers:
- FormattingOptions: indent width and field delimiter, passed explicitly
  into every serialize call. Changing them re-derives the panes.
- PlaygroundConfig: process-level settings (tokenizer, debounce window,
  share base URL), optionally stored as JSON on disk.
"""

import json
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Dict, Optional


# Delimiters the tabular and compact notations both understand
DELIMITERS: Dict[str, str] = {
    "comma": ",",
    "tab": "\t",
    "pipe": "|",
}

MIN_INDENT = 0
MAX_INDENT = 8

DEFAULT_INDENT = 2
DEFAULT_DELIMITER = ","


def clamp_indent(indent_width: int) -> int:
    """Bound an indent width to the supported range."""
    return max(MIN_INDENT, min(MAX_INDENT, int(indent_width)))


def resolve_delimiter(value: str) -> str:
    """Accept either a delimiter name ("tab") or the character itself."""
    if value in DELIMITERS:
        return DELIMITERS[value]
    if value in DELIMITERS.values():
        return value
    raise ValueError(
        f"Unsupported delimiter {value!r} "
        f"(expected one of: {', '.join(DELIMITERS)})"
    )


def delimiter_name(delimiter: str) -> str:
    """Reverse lookup for display."""
    for name, char in DELIMITERS.items():
        if char == delimiter:
            return name
    return repr(delimiter)


@dataclass(frozen=True)
class FormattingOptions:
    """Formatting applied when deriving representations."""
    indent_width: int = DEFAULT_INDENT
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self):
        object.__setattr__(self, "indent_width", clamp_indent(self.indent_width))
        object.__setattr__(self, "delimiter", resolve_delimiter(self.delimiter))

    def with_changes(
        self,
        indent_width: Optional[int] = None,
        delimiter: Optional[str] = None,
    ) -> "FormattingOptions":
        """Return a copy with the given fields replaced."""
        changes = {}
        if indent_width is not None:
            changes["indent_width"] = indent_width
        if delimiter is not None:
            changes["delimiter"] = delimiter
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PlaygroundConfig:
    """Process-level playground settings."""
    tokenizer_encoding: str = "o200k_base"
    debounce_seconds: float = 0.3
    base_url: str = "http://127.0.0.1:8080/"
    copied_ack_seconds: float = 2.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PlaygroundConfig":
        return cls(
            tokenizer_encoding=data.get("tokenizer_encoding", "o200k_base"),
            debounce_seconds=max(0.0, float(data.get("debounce_seconds", 0.3))),
            base_url=data.get("base_url", "http://127.0.0.1:8080/"),
            copied_ack_seconds=max(0.0, float(data.get("copied_ack_seconds", 2.0))),
        )


def get_config_path(home: Optional[str] = None) -> Path:
    """Get the config file path (defaults to ~/.toonplay/config.json)."""
    base = Path(home) if home else Path.home()
    return base / ".toonplay" / "config.json"


def load_config(path: Optional[str] = None) -> PlaygroundConfig:
    """Load playground configuration. Returns defaults if not found."""
    config_file = Path(path) if path else get_config_path()

    if not config_file.exists():
        return PlaygroundConfig()

    try:
        with open(config_file) as f:
            data = json.load(f)
        return PlaygroundConfig.from_dict(data)
    except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError):
        return PlaygroundConfig()


def save_config(config: PlaygroundConfig, path: Optional[str] = None) -> Path:
    """Save playground configuration."""
    config_file = Path(path) if path else get_config_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
    return config_file
