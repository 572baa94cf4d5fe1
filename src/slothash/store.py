"""Per-node bookkeeping that sits next to the ring: a health label and a
request log. The ring itself never touches these."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .sharding import InvalidArgumentError


class NodeStatus(StrEnum):
    WORKING = "working"
    NOT_WORKING = "not_working"

    @property
    def message(self) -> str:
        if self is NodeStatus.WORKING:
            return "The given node is working"
        return "The given node is not working"


@dataclass(frozen=True)
class Request:
    data: Any
    previous: int | None = None  # index of the prior request in the store


class Store:
    def __init__(self):
        self._nodes: list[Request] = []

    @property
    def node_list(self) -> list[Request]:
        return self._nodes

    def add_node(self, request: Request) -> bool:
        if request is None:
            raise InvalidArgumentError("request cannot be None")
        if request.previous is not None and not 0 <= request.previous < len(self._nodes):
            raise InvalidArgumentError(
                f"previous index {request.previous} out of range (size={len(self._nodes)})"
            )
        self._nodes.append(request)
        return True

    def remove(self, request: Request) -> bool:
        if request is None:
            raise InvalidArgumentError("request cannot be None")
        try:
            self._nodes.remove(request)
        except ValueError:
            return False
        return True

    def chain(self, index: int) -> Iterator[Request]:
        """Yield the request at *index*, then each predecessor in turn."""
        seen: set[int] = set()
        cur: int | None = index
        while cur is not None:
            if cur in seen or not 0 <= cur < len(self._nodes):
                break
            seen.add(cur)
            req = self._nodes[cur]
            yield req
            cur = req.previous

    def __len__(self) -> int:
        return len(self._nodes)
