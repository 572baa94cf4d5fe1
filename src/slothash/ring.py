import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from .sharding import Hasher, InvalidArgumentError, check_capacity

log = logging.getLogger("slothash")

T = TypeVar("T")

# returned by add_entry when every slot is taken
NOT_PLACED = -1
# returned by find_entry when the ring is empty
NOT_FOUND = -1


def wraparound(start: int, capacity: int) -> Iterator[int]:
    """Yield ``start .. capacity-1`` then ``0 .. start-1``."""
    yield from range(start, capacity)
    yield from range(0, start)


def first_occupied(slots: list, start: int) -> int:
    for i in wraparound(start, len(slots)):
        if slots[i] is not None:
            return i
    return NOT_FOUND


class Ring(Generic[T]):
    """Fixed-capacity slot array with linear probing.

    Not thread-safe: callers must serialize ``add_entry``.
    """

    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self._slots: list[T | None] = [None] * self._capacity
        self._hasher = Hasher(self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    def get_snapshot(self) -> list[T | None]:
        """Return the live slot list. Not a copy."""
        return self._slots

    def add_entry(self, value: T) -> int:
        """Place *value* at its hashed slot or the next free one.

        Returns the slot index, or ``NOT_PLACED`` when the ring is full.
        """
        if value is None:
            raise InvalidArgumentError("None values are not allowed")

        start = self._hasher.index(value)
        if self._slots[start] is None:
            self._slots[start] = value
            log.debug("add_entry: %r -> slot %d", value, start)
            return start

        # start itself comes last in this order and is already occupied
        for i in wraparound(start + 1, self._capacity):
            if self._slots[i] is None:
                self._slots[i] = value
                log.debug("add_entry: %r -> slot %d (probed from %d)", value, i, start)
                return i

        log.warning("add_entry: ring full (capacity=%d), %r not placed", self._capacity, value)
        return NOT_PLACED

    def find_entry(self, value: T) -> int:
        """Return the slot index for *value*.

        A direct hit at the hashed slot is checked for equality. Past that,
        the first occupied slot scanning forward (with wraparound) is
        returned whatever it holds. ``NOT_FOUND`` when the ring is empty.
        """
        if value is None:
            raise InvalidArgumentError("None values are not allowed")

        start = self._hasher.index(value)
        if self._slots[start] == value:
            return start
        return first_occupied(self._slots, start)

    def is_full(self) -> bool:
        return all(s is not None for s in self._slots)

    def __len__(self) -> int:
        return sum(1 for s in self._slots if s is not None)

    def __repr__(self) -> str:
        return f"Ring(capacity={self._capacity}, occupied={len(self)})"
