import pytest

from slothash.consistent import ConsistentHashing
from slothash.ring import Ring


def pin_index(monkeypatch, hasher, mapping):
    """Force *hasher* to return mapping[str(key)] for each key."""
    monkeypatch.setattr(hasher, "index", lambda key: mapping[str(key)])


@pytest.fixture()
def ring5():
    return Ring(5)


@pytest.fixture()
def pinned_ring(monkeypatch):
    """Factory: a ring whose start indices come from a fixed table."""

    def _make(capacity, mapping):
        ring = Ring(capacity)
        pin_index(monkeypatch, ring.hasher, mapping)
        return ring

    return _make


@pytest.fixture()
def pinned_facade(monkeypatch):
    """Factory: a facade whose hashers (its own and the ring's) use a fixed table."""

    def _make(capacity, mapping):
        ch = ConsistentHashing(capacity)
        pin_index(monkeypatch, ch.ring.hasher, mapping)
        pin_index(monkeypatch, ch._hasher, mapping)
        return ch

    return _make
