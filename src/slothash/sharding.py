"""Sharding helpers for routing keys to ring slots."""

from typing import Any

from .murmur import RING_SEED, murmur3_32_str


class InvalidArgumentError(ValueError):
    pass


def check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(f"capacity must be an int, got {capacity!r}")
    if capacity <= 0:
        raise InvalidArgumentError(f"capacity must be > 0, got {capacity}")
    return capacity


class Hasher:
    """Map keys onto ``[0, capacity)`` with Murmur3-32 (seed 42).

    The key's ``str()`` form is hashed, so any value with a stable string
    representation can be placed.

    ``abs()`` is taken on the unbounded Python int: the 32-bit minimum
    ``-2**31`` becomes ``2**31`` rather than wrapping back to itself, so
    the index is never negative.
    """

    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def index(self, key: Any) -> int:
        raw = murmur3_32_str(str(key), RING_SEED)
        return abs(raw) % self._capacity

    def __repr__(self) -> str:
        return f"Hasher(capacity={self._capacity})"
