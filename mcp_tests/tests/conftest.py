import pytest

import core.cache as cache_mod


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


class FakeResolver:
    """Counting PathResolver: canonical form is the path under /real."""

    def __init__(self, *, keeps_parent: bool = True) -> None:
        self.calls = []
        self.prefix_calls = []
        self._keeps_parent = keeps_parent

    def canonicalize(self, path: str) -> str:
        self.calls.append(path)
        return "/real" + path

    def canonicalize_with_prefix(self, canonical_prefix: str, filename: str) -> str:
        self.prefix_calls.append((canonical_prefix, filename))
        return canonical_prefix + "/" + filename

    def keeps_parent(self, path: str, canonical: str) -> bool:
        return self._keeps_parent


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def resolver_factory():
    return FakeResolver


@pytest.fixture
def fake_resolver():
    return FakeResolver()


@pytest.fixture
def clock(monkeypatch):
    # Wall clock in milliseconds, as seen by core.cache
    t = {"ms": 0}

    def fake_time_ns():
        return t["ms"] * 1_000_000

    monkeypatch.setattr(cache_mod.time, "time_ns", fake_time_ns)
    return t
