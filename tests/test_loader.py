"""Tests for lazy, one-time dependency loading."""

import asyncio

from toonplay.loader import DependencyLoader, LazyDependency, LoadStatus


def test_loads_once_and_fires_callbacks_once():
    calls = []
    ready = []

    def factory():
        calls.append(1)
        return "value"

    async def main():
        dep = LazyDependency("thing", factory)
        dep.on_ready(ready.append)
        results = await asyncio.gather(dep.load(), dep.load())
        await dep.load()
        return dep, results

    dep, results = asyncio.run(main())

    assert calls == [1]
    assert ready == ["value"]
    assert results == ["value", "value"]
    assert dep.available
    assert dep.get() == "value"


def test_pending_dependency_is_unavailable():
    dep = LazyDependency("thing", lambda: 1)
    assert dep.status == LoadStatus.PENDING
    assert not dep.available
    assert dep.get() is None


def test_on_ready_after_load_runs_immediately():
    dep = LazyDependency("thing", lambda: 7)
    asyncio.run(dep.load())

    seen = []
    dep.on_ready(seen.append)
    assert seen == [7]


def test_failure_is_permanent_and_silent():
    calls = []
    ready = []

    def factory():
        calls.append(1)
        raise ImportError("network error")

    async def main():
        dep = LazyDependency("flaky", factory)
        dep.on_ready(ready.append)
        first = await dep.load()
        second = await dep.load()
        return dep, first, second

    dep, first, second = asyncio.run(main())

    assert first is None and second is None
    assert calls == [1]
    assert ready == []
    assert dep.status == LoadStatus.FAILED
    assert "network error" in dep.error
    assert dep.get() is None


def test_loader_loads_everything():
    installed = {}

    loader = DependencyLoader()
    loader.register("a", lambda: 1, on_ready=lambda v: installed.setdefault("a", v))
    loader.register("b", lambda: 2, on_ready=lambda v: installed.setdefault("b", v))
    loader.register("c", lambda: 1 / 0)

    asyncio.run(loader.load_all())

    assert installed == {"a": 1, "b": 2}
    assert loader.status() == {"a": "ready", "b": "ready", "c": "failed"}
    assert "a" in loader
    assert loader.get("b").get() == 2
