"""
UX utilities for the toonplay CLI.

Consistent icons, optional colors, and the token comparison table.

Usage:
    from toonplay.ux import print_error, print_token_table

    print_error("File not found")
    print_token_table(playground.controller.representations.values())
"""

import sys
from typing import Iterable, List, Optional

from toonplay.tokens import Savings


# =============================================================================
# Status Icons
# =============================================================================

ICONS = {
    "error": "✗",
    "pending": "○",
}

# ANSI color codes (optional, can be disabled)
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "red": "\033[31m",
    "green": "\033[32m",
}

# Global flag for color support
_use_colors = sys.stdout.isatty()


def set_colors(enabled: bool) -> None:
    """Enable or disable color output."""
    global _use_colors
    _use_colors = enabled


def _color(text: str, color: str) -> str:
    """Apply color if colors are enabled."""
    if _use_colors and color in COLORS:
        return f"{COLORS[color]}{text}{COLORS['reset']}"
    return text


# =============================================================================
# Message Formatting
# =============================================================================

def print_error(message: str, file=None) -> None:
    """Print an error message (stderr by default)."""
    icon = _color(ICONS["error"], "red")
    print(f"{icon} {message}", file=file or sys.stderr)


def print_header(title: str, char: str = "=") -> None:
    """Print a section header."""
    print(_color(title, "bold"))
    print(char * len(title))


# =============================================================================
# Token Costs
# =============================================================================

def format_token_count(count: Optional[int]) -> str:
    """Token count, or a pending marker while the tokenizer is loading."""
    if count is None:
        return ICONS["pending"]
    return f"{count:,}"


def format_savings(value: Optional[Savings]) -> str:
    """Signed percentage; green when cheaper than the canonical pane."""
    if value is None:
        return ""
    return _color(value.label(), "green" if value.is_improvement else "red")


def print_table(headers: List[str], rows: List[List[str]]) -> None:
    """Print a simple table."""
    if not rows:
        return

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(_strip(str(cell))))

    print("  ".join(_color(h.ljust(w), "bold") for h, w in zip(headers, widths)))
    print("-" * sum(widths) + "-" * (len(widths) - 1) * 2)

    for row in rows:
        print("  ".join(_pad(str(cell), w) for cell, w in zip(row, widths)).rstrip())


def print_token_table(representations: Iterable) -> None:
    """Print token count and savings per representation."""
    rows = [
        [rep.id, format_token_count(rep.token_count), format_savings(rep.savings)]
        for rep in representations
    ]
    print_table(["Format", "Tokens", "vs JSON"], rows)


def _strip(text: str) -> str:
    for code in COLORS.values():
        text = text.replace(code, "")
    return text


def _pad(text: str, width: int) -> str:
    return text + " " * (width - len(_strip(text)))
