"""
Lazy, one-time loading of optional dependencies.

Format libraries and the tokenizer are loaded after startup so the
canonical pane works immediately. Each dependency:
- loads at most once, in a worker thread
- fires its on_ready callbacks exactly once on success
- on failure is marked permanently unavailable (no retry)

Usage:
    loader = DependencyLoader()
    loader.register("yaml", lambda: load_adapter("yaml"), on_ready=controller.install_adapter)
    await loader.load_all()
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    PENDING = "pending"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class LazyDependency:
    """A value produced once by a blocking factory."""

    def __init__(self, name: str, factory: Callable[[], Any]):
        self.name = name
        self._factory = factory
        self._value: Any = None
        self._error: Optional[str] = None
        self._status = LoadStatus.PENDING
        self._callbacks: List[Callable[[Any], None]] = []
        self._task: Optional[asyncio.Task] = None

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def available(self) -> bool:
        return self._status == LoadStatus.READY

    @property
    def error(self) -> Optional[str]:
        return self._error

    def get(self) -> Any:
        """The loaded value, or None until ready."""
        return self._value if self.available else None

    def on_ready(self, callback: Callable[[Any], None]) -> None:
        """Run callback with the value once loaded (immediately if already)."""
        if self.available:
            callback(self._value)
        else:
            self._callbacks.append(callback)

    async def load(self) -> Any:
        """Load the dependency. Safe to await repeatedly; never raises."""
        if self._status in (LoadStatus.READY, LoadStatus.FAILED):
            return self.get()
        if self._task is None:
            self._task = asyncio.ensure_future(self._load())
        return await asyncio.shield(self._task)

    async def _load(self) -> Any:
        self._status = LoadStatus.LOADING
        try:
            value = await asyncio.to_thread(self._factory)
        except Exception as e:
            self._status = LoadStatus.FAILED
            self._error = str(e)
            logger.warning(f"Dependency '{self.name}' failed to load: {e}")
            self._callbacks.clear()
            return None

        self._value = value
        self._status = LoadStatus.READY
        logger.debug(f"Dependency '{self.name}' loaded")

        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(value)
        return value


class DependencyLoader:
    """Registry of lazy dependencies loaded together at startup."""

    def __init__(self):
        self._deps: Dict[str, LazyDependency] = {}

    def register(
        self,
        name: str,
        factory: Callable[[], Any],
        on_ready: Optional[Callable[[Any], None]] = None,
    ) -> LazyDependency:
        dep = LazyDependency(name, factory)
        if on_ready is not None:
            dep.on_ready(on_ready)
        self._deps[name] = dep
        return dep

    def get(self, name: str) -> LazyDependency:
        return self._deps[name]

    def __contains__(self, name: str) -> bool:
        return name in self._deps

    async def load_all(self) -> None:
        """Load every registered dependency concurrently."""
        await asyncio.gather(*(dep.load() for dep in self._deps.values()))

    def status(self) -> Dict[str, str]:
        return {name: dep.status.value for name, dep in self._deps.items()}
