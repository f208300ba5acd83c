"""Coalesce bursts of calls into the last one."""

import asyncio
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """Run only the most recent call once `delay` seconds pass quietly.

    Each call() replaces the pending one; superseded calls are dropped
    without side effects. Outside a running event loop a call runs
    immediately.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[Tuple[Callable[..., Any], tuple]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def call(self, fn: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            fn(*args)
            return
        self._pending = (fn, args)
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> None:
        """Run the pending call now, if any."""
        if self._pending is None:
            return
        if self._handle is not None:
            self._handle.cancel()
        self._fire()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending = None

    def _fire(self) -> None:
        fn, args = self._pending
        self._handle = None
        self._pending = None
        fn(*args)
