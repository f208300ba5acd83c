"""
Synchronization controller.

Owns the canonical document and the four text panes:
- json (canonical) - source of truth
- toon - derived-only
- yaml, csv - editable alternates

Rules:
- exactly one pane is active (the one being typed into); default json
- derivation never overwrites the active pane's text
- a canonical parse error freezes every other pane at its last-good text
- a parse error in an alternate pane is tolerated silently (mid-edit)
- option changes re-derive every non-active pane

Mutations are serialized: a mutation requested while another is being
applied (e.g. from a listener) runs after the current one completes.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional

from toonplay.config import FormattingOptions
from toonplay.document import DocumentModel
from toonplay.formats import CANONICAL_ID, FORMAT_IDS, JsonAdapter, is_editable
from toonplay.formats.base import FormatAdapter, ParseError
from toonplay.share import SessionState
from toonplay.tokens import Savings, TokenCounter, savings

logger = logging.getLogger(__name__)

# Listener events
TEXT_CHANGED = "text"
OPTIONS_CHANGED = "options"


@dataclass
class Representation:
    """One text pane."""
    id: str
    editable: bool
    text: str = ""
    token_count: Optional[int] = None
    savings: Optional[Savings] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "editable": self.editable,
            "text": self.text,
            "tokenCount": self.token_count,
            "savings": self.savings.to_dict() if self.savings else None,
        }


class SyncController:
    """Keeps the panes consistent with the canonical document."""

    def __init__(
        self,
        canonical_text: str,
        options: Optional[FormattingOptions] = None,
        counter: Optional[TokenCounter] = None,
    ):
        self.options = options or FormattingOptions()
        self.counter = counter or TokenCounter()
        self.model = DocumentModel()
        self.active = CANONICAL_ID
        self.representations: Dict[str, Representation] = {
            fid: Representation(id=fid, editable=is_editable(fid)) for fid in FORMAT_IDS
        }
        self._adapters: Dict[str, FormatAdapter] = {CANONICAL_ID: JsonAdapter()}
        self._listeners: List[Callable[[str], None]] = []
        self._queue: Deque[Callable[[], None]] = deque()
        self._applying = False

        self.representations[CANONICAL_ID].text = canonical_text
        self.model.set_from_text(canonical_text, self._adapters[CANONICAL_ID], self.options)
        self._derive()
        self.recount()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def error(self) -> Optional[str]:
        """Canonical parse error, the only user-visible error."""
        return self.model.error

    @property
    def canonical_text(self) -> str:
        return self.representations[CANONICAL_ID].text

    def text(self, format_id: str) -> str:
        return self._get(format_id).text

    def document(self) -> Any:
        return self.model.snapshot()

    def has_adapter(self, format_id: str) -> bool:
        return format_id in self._adapters

    def session_state(self) -> SessionState:
        return SessionState(
            json=self.canonical_text,
            delimiter=self.options.delimiter,
            indent=self.options.indent_width,
        )

    def subscribe(self, listener: Callable[[str], None]) -> None:
        """Call listener(event) after canonical text or options change."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def focus(self, format_id: str) -> None:
        """Mark a pane active. Bookkeeping only."""
        self._get(format_id)
        self._apply(lambda: setattr(self, "active", format_id))

    def edit(self, format_id: str, text: str) -> None:
        """Record new text for a pane and propagate it if it drives the document."""
        rep = self._get(format_id)
        if not rep.editable:
            logger.debug(f"Ignoring edit on derived-only pane '{format_id}'")
            return
        self._apply(lambda: self._edit(rep, text))

    def set_options(
        self,
        indent_width: Optional[int] = None,
        delimiter: Optional[str] = None,
    ) -> None:
        """Change formatting options and re-derive non-active panes.

        Raises:
            ValueError: unsupported delimiter
        """
        options = self.options.with_changes(indent_width=indent_width, delimiter=delimiter)
        self._apply(lambda: self._set_options(options))

    def install_adapter(self, adapter: FormatAdapter) -> None:
        """Make a lazily loaded adapter usable and run one resync pass."""
        def install():
            self._adapters[adapter.format_id] = adapter
            self._derive()
            self.recount()
        self._apply(install)

    def resync(self) -> None:
        """Re-derive every non-active pane from the current document."""
        def run():
            self._derive()
            self.recount()
        self._apply(run)

    def recount(self) -> None:
        """Recompute token counts and savings for every pane."""
        base = self.counter.count(self.canonical_text)
        for rep in self.representations.values():
            rep.token_count = self.counter.count(rep.text)
            if rep.id == CANONICAL_ID:
                rep.savings = None
            else:
                rep.savings = savings(base, rep.token_count)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get(self, format_id: str) -> Representation:
        try:
            return self.representations[format_id]
        except KeyError:
            raise KeyError(f"Unknown representation: {format_id}") from None

    def _apply(self, mutation: Callable[[], None]) -> None:
        self._queue.append(mutation)
        if self._applying:
            return
        self._applying = True
        try:
            while self._queue:
                self._queue.popleft()()
        finally:
            self._applying = False
            self._queue.clear()

    def _edit(self, rep: Representation, text: str) -> None:
        rep.text = text

        if rep.id == CANONICAL_ID:
            result = self.model.set_from_text(text, self._adapters[CANONICAL_ID], self.options)
            if result.ok and self.active == rep.id:
                self._derive()
            self.recount()
            self._notify(TEXT_CHANGED)
            return

        if self.active != rep.id:
            self.recount()
            return

        adapter = self._adapters.get(rep.id)
        if adapter is None:
            logger.debug(f"Adapter '{rep.id}' not loaded yet; edit not propagated")
            self.recount()
            return

        try:
            document = adapter.parse(text, self.options)
        except ParseError as e:
            logger.debug(f"Tolerating mid-edit parse error: {e}")
            self.recount()
            return

        self.model.replace(document)
        self._derive()
        self.recount()
        self._notify(TEXT_CHANGED)

    def _set_options(self, options: FormattingOptions) -> None:
        if options == self.options:
            return
        self.options = options
        self._derive()
        self.recount()
        self._notify(OPTIONS_CHANGED)

    def _derive(self) -> None:
        if self.model.has_error:
            return
        document = self.model.snapshot()
        for fid, rep in self.representations.items():
            if fid == self.active:
                continue
            adapter = self._adapters.get(fid)
            if adapter is None:
                continue
            rep.text = adapter.serialize(document, self.options)

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event)
