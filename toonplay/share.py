"""
Share-state codec.

A session is reduced to {json, delimiter, indent}, serialized as compact
JSON, zlib-compressed and written as unpadded URL-safe base64. The token
lives in the URL fragment and is replaced in place on every change.

decode_state never raises: any malformed token yields None and the caller
falls back to the default session.
"""

import base64
import binascii
import json
import logging
import zlib
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urldefrag

from toonplay.config import DELIMITERS, DEFAULT_DELIMITER, DEFAULT_INDENT, MIN_INDENT, MAX_INDENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Minimal data needed to rebuild a playground session."""
    json: str
    delimiter: str = DEFAULT_DELIMITER
    indent: int = DEFAULT_INDENT

    def to_dict(self) -> dict:
        return {"json": self.json, "delimiter": self.delimiter, "indent": self.indent}

    @classmethod
    def from_dict(cls, data) -> Optional["SessionState"]:
        """Build a state from decoded data, or None if the shape is wrong."""
        if not isinstance(data, dict):
            return None
        text = data.get("json")
        delimiter = data.get("delimiter")
        indent = data.get("indent")
        if not isinstance(text, str):
            return None
        if delimiter not in DELIMITERS.values():
            return None
        if isinstance(indent, bool) or not isinstance(indent, int):
            return None
        if not MIN_INDENT <= indent <= MAX_INDENT:
            return None
        return cls(json=text, delimiter=delimiter, indent=indent)


def encode_state(state: SessionState) -> str:
    """Session state -> URL-safe share token."""
    payload = json.dumps(state.to_dict(), ensure_ascii=False, separators=(",", ":"))
    compressed = zlib.compress(payload.encode("utf-8"), 9)
    return base64.urlsafe_b64encode(compressed).decode("ascii").rstrip("=")


def decode_state(token) -> Optional[SessionState]:
    """Share token -> session state, or None on any failure."""
    if not isinstance(token, str) or not token:
        return None
    try:
        padded = token + "=" * (-len(token) % 4)
        compressed = base64.b64decode(padded, altchars=b"-_", validate=True)
        payload = zlib.decompress(compressed).decode("utf-8")
        data = json.loads(payload)
    except (binascii.Error, zlib.error, ValueError, RecursionError) as e:
        logger.debug(f"Discarding share token: {e}")
        return None
    return SessionState.from_dict(data)


def share_url(base_url: str, state: SessionState) -> str:
    """Build a link that restores the given state."""
    base, _ = urldefrag(base_url)
    return f"{base}#{encode_state(state)}"


class AddressBar:
    """The page URL; the fragment is replaced in place, never pushed."""

    def __init__(self, url: str):
        self._url = url
        self._history = [url]

    @property
    def url(self) -> str:
        return self._url

    @property
    def fragment(self) -> str:
        return urldefrag(self._url)[1]

    @property
    def history_length(self) -> int:
        return len(self._history)

    def replace_fragment(self, fragment: str) -> None:
        base, _ = urldefrag(self._url)
        self._url = f"{base}#{fragment}" if fragment else base
        self._history[-1] = self._url
