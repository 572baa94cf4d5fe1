"""Unit tests for the request store and node status label."""

import pytest

from slothash.sharding import InvalidArgumentError
from slothash.store import NodeStatus, Request, Store


class TestNodeStatus:
    def test_messages(self):
        assert NodeStatus.WORKING.message == "The given node is working"
        assert NodeStatus.NOT_WORKING.message == "The given node is not working"

    def test_str_values(self):
        assert NodeStatus("working") is NodeStatus.WORKING
        assert str(NodeStatus.NOT_WORKING) == "not_working"


class TestRequest:
    def test_structural_equality(self):
        assert Request("payload", 0) == Request("payload", 0)
        assert Request("payload", 0) != Request("payload", 1)
        assert Request("payload") != Request("other")

    def test_hashable(self):
        assert len({Request("a"), Request("a"), Request("b")}) == 2


class TestStore:
    def test_add_and_list(self):
        store = Store()
        assert store.add_node(Request("a")) is True
        assert store.add_node(Request("b", previous=0)) is True
        assert store.node_list == [Request("a"), Request("b", 0)]
        assert len(store) == 2

    def test_remove(self):
        store = Store()
        store.add_node(Request("a"))
        store.add_node(Request("a"))
        assert store.remove(Request("a")) is True
        assert len(store) == 1
        assert store.remove(Request("zzz")) is False

    def test_rejects_none(self):
        store = Store()
        with pytest.raises(InvalidArgumentError):
            store.add_node(None)
        with pytest.raises(InvalidArgumentError):
            store.remove(None)

    def test_rejects_dangling_previous(self):
        store = Store()
        with pytest.raises(InvalidArgumentError):
            store.add_node(Request("a", previous=0))
        assert len(store) == 0

    def test_chain(self):
        store = Store()
        store.add_node(Request("first"))
        store.add_node(Request("unrelated"))
        store.add_node(Request("second", previous=0))
        store.add_node(Request("third", previous=2))
        assert [r.data for r in store.chain(3)] == ["third", "second", "first"]

    def test_chain_out_of_range(self):
        store = Store()
        store.add_node(Request("a"))
        assert list(store.chain(5)) == []
