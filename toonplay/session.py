"""
Playground session - the composition root.

Wires the sync controller to:
- the lazy loader (format libraries + tokenizer)
- the debounced share-link sync into the address bar
- the clipboard payloads (share link, per-pane text)

Usage:
    playground = Playground(address_bar=AddressBar(url))
    await playground.start()
    playground.focus("yaml")
    playground.edit("yaml", "a: 1\\n")
    playground.share()
"""

import asyncio
import logging
import time
from functools import partial
from typing import Any, Callable, Dict, Optional

from toonplay.config import FormattingOptions, PlaygroundConfig
from toonplay.controller import SyncController
from toonplay.debounce import Debouncer
from toonplay.formats import CANONICAL_ID, FORMAT_IDS, adapter_factories
from toonplay.loader import DependencyLoader
from toonplay.presets import DEFAULT_DOCUMENT_TEXT
from toonplay.share import AddressBar, SessionState, decode_state, encode_state
from toonplay.tokens import TokenCounter, load_encoder

logger = logging.getLogger(__name__)

TOKENIZER = "tokenizer"


def default_session() -> SessionState:
    """The example document with comma delimiter and indent 2."""
    return SessionState(json=DEFAULT_DOCUMENT_TEXT)


def restore_session(address_bar: AddressBar) -> SessionState:
    """Rebuild the session from the URL fragment, falling back to defaults."""
    fragment = address_bar.fragment
    if fragment:
        state = decode_state(fragment)
        if state is not None:
            logger.debug("Restored session from share link")
            return state
        logger.debug("Share link unreadable; using default session")
    return default_session()


class Playground:
    """One interactive session over the four representations."""

    def __init__(
        self,
        state: Optional[SessionState] = None,
        config: Optional[PlaygroundConfig] = None,
        tokenizer_factory: Optional[Callable[[], Any]] = None,
        format_factories: Optional[Dict[str, Callable[[], Any]]] = None,
        address_bar: Optional[AddressBar] = None,
    ):
        self.config = config or PlaygroundConfig()
        self.address_bar = address_bar or AddressBar(self.config.base_url)
        if state is None:
            state = restore_session(self.address_bar)

        self.controller = SyncController(
            state.json,
            options=FormattingOptions(indent_width=state.indent, delimiter=state.delimiter),
            counter=TokenCounter(),
        )
        self.controller.subscribe(self._on_change)

        self._url_sync = Debouncer(self.config.debounce_seconds)
        self._copied_until = 0.0

        if tokenizer_factory is None:
            encoding = self.config.tokenizer_encoding
            tokenizer_factory = partial(load_encoder, encoding)
        if format_factories is None:
            format_factories = adapter_factories()

        self.loader = DependencyLoader()
        for format_id, factory in format_factories.items():
            self.loader.register(format_id, factory, on_ready=self.controller.install_adapter)
        self.loader.register(TOKENIZER, tokenizer_factory, on_ready=self._install_tokenizer)

    async def start(self) -> None:
        """Load format libraries and the tokenizer."""
        await self.loader.load_all()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def focus(self, format_id: str) -> None:
        self.controller.focus(format_id)

    def edit(self, format_id: str, text: str) -> None:
        self.controller.edit(format_id, text)

    def set_options(self, indent_width: Optional[int] = None, delimiter: Optional[str] = None) -> None:
        self.controller.set_options(indent_width=indent_width, delimiter=delimiter)

    def restore(self, token: str) -> bool:
        """Load a shared session in place; unreadable tokens load the defaults.

        Returns:
            True if the token was decoded
        """
        state = decode_state(token)
        restored = state is not None
        if not restored:
            state = default_session()
        self.controller.focus(CANONICAL_ID)
        self.controller.set_options(indent_width=state.indent, delimiter=state.delimiter)
        self.controller.edit(CANONICAL_ID, state.json)
        return restored

    def share(self) -> str:
        """Bring the share link up to date and return it (clipboard payload)."""
        self._url_sync.cancel()
        self.sync_url()
        self._mark_copied()
        return self.address_bar.url

    def copy_text(self, format_id: str) -> str:
        """Current text of one pane (clipboard payload)."""
        text = self.controller.text(format_id)
        self._mark_copied()
        return text

    @property
    def copied(self) -> bool:
        """True for a short while after share() or copy_text()."""
        return time.monotonic() < self._copied_until

    # ------------------------------------------------------------------
    # Share link
    # ------------------------------------------------------------------

    def sync_url(self) -> None:
        """Write the current session into the URL fragment."""
        token = encode_state(self.controller.session_state())
        self.address_bar.replace_fragment(token)

    def flush(self) -> None:
        """Run a pending debounced URL sync now."""
        self._url_sync.flush()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def snapshot(self) -> dict:
        """JSON-ready view of the whole session."""
        controller = self.controller
        return {
            "active": controller.active,
            "error": controller.error,
            "options": {
                "indent": controller.options.indent_width,
                "delimiter": controller.options.delimiter,
            },
            "representations": [
                controller.representations[fid].to_dict() for fid in FORMAT_IDS
            ],
            "dependencies": self.loader.status(),
            "url": self.address_bar.url,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_change(self, event: str) -> None:
        self._url_sync.call(self.sync_url)

    def _install_tokenizer(self, encoder) -> None:
        self.controller.counter.set_encoder(encoder)
        self.controller.recount()

    def _mark_copied(self) -> None:
        self._copied_until = time.monotonic() + self.config.copied_ack_seconds


def run_playground(state: SessionState, **kwargs) -> Playground:
    """Build a playground and load its dependencies synchronously."""
    playground = Playground(state=state, **kwargs)
    asyncio.run(playground.start())
    return playground
