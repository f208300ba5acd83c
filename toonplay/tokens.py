"""
Token cost calculator.

Counts tokens per representation with tiktoken and compares each
representation against the canonical one. Display-only: nothing here
affects synchronization.

The encoder is loaded lazily (encoding files may be downloaded), so every
count is None until it arrives.
"""

from dataclasses import dataclass
from typing import Optional

import tiktoken

DEFAULT_ENCODING = "o200k_base"


def load_encoder(name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Load a tiktoken encoding. Blocking; may hit the network."""
    return tiktoken.get_encoding(name)


@dataclass(frozen=True)
class Savings:
    """Relative cost of one representation against the canonical one."""
    diff: int
    percent: str
    sign: str
    is_improvement: bool

    def label(self) -> str:
        return f"{self.sign}{self.percent}%"

    def to_dict(self) -> dict:
        return {
            "diff": self.diff,
            "percent": self.percent,
            "sign": self.sign,
            "isImprovement": self.is_improvement,
        }


def savings(base_count: Optional[int], compare_count: Optional[int]) -> Optional[Savings]:
    """Compare two token counts.

    Returns None unless both counts are present and non-zero.

    Examples:
        savings(100, 80) -> diff 20, "20.0", "-", improvement
        savings(80, 100) -> diff -20, "25.0", "+", no improvement
    """
    if not base_count or not compare_count:
        return None

    diff = base_count - compare_count
    percent = abs(diff / base_count) * 100
    return Savings(
        diff=diff,
        percent=f"{percent:.1f}",
        sign="-" if diff > 0 else "+",
        is_improvement=diff > 0,
    )


class TokenCounter:
    """Counts tokens once an encoder is available."""

    def __init__(self, encoder=None):
        self._encoder = encoder

    @property
    def available(self) -> bool:
        return self._encoder is not None

    def set_encoder(self, encoder) -> None:
        self._encoder = encoder

    def count(self, text: str) -> Optional[int]:
        """Token count, or None while the encoder is missing or text is empty."""
        if self._encoder is None or not text:
            return None
        # special-token markers in user text are counted as plain text
        return len(self._encoder.encode(text, disallowed_special=()))
