"""Consistent-hashing front end over a fixed-capacity ring."""

import logging
from typing import Generic, TypeVar

from .ring import NOT_FOUND, Ring, first_occupied
from .sharding import Hasher, InvalidArgumentError, check_capacity

log = logging.getLogger("slothash")

T = TypeVar("T")


class ConsistentHashing(Generic[T]):
    """Register servers on a ring and map keys to them.

    The facade keeps its own ``Hasher`` next to the ring's; both are built
    from the same capacity so they always agree on slot indices.
    """

    def __init__(self, capacity: int):
        self._capacity = check_capacity(capacity)
        self._ring: Ring[T] = Ring(self._capacity)
        self._hasher = Hasher(self._capacity)

    @property
    def ring(self) -> Ring[T]:
        return self._ring

    @property
    def capacity(self) -> int:
        return self._capacity

    def add_server_entry_point(self, value: T) -> int:
        """Place a server on the ring; returns its slot or ``NOT_PLACED``."""
        if value is None:
            raise InvalidArgumentError("None values are not allowed")
        return self._ring.add_entry(value)

    def find_server_map(self, value: T) -> T | None:
        """Return the server responsible for *value*, or ``None``.

        A hashed index of 0 yields ``None`` outright. Otherwise the slot at
        the index is returned if occupied, else the first occupied slot
        scanning forward with wraparound.
        """
        if value is None:
            raise InvalidArgumentError("None values are not allowed")

        index = self._hasher.index(value)
        if index <= 0:
            log.debug("find_server_map: %r hashed to slot 0, no mapping", value)
            return None

        slots = self._ring.get_snapshot()
        if slots[index] is not None:
            return slots[index]

        found = first_occupied(slots, index)
        if found == NOT_FOUND:
            return None
        return slots[found]
