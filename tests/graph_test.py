import logging
from typing import TYPE_CHECKING

import pytest
from mock import MagicMock

from governor.cancellation import Cancellation
from governor.entities.group_hierarchy import HierarchyEdge
from governor.exc import OperationCancelledException
from governor.graph import MembershipGraph

if TYPE_CHECKING:
    from _pytest.logging import LogCaptureFixture
    from typing import Tuple


def build_graph(*edges):
    # type: (*Tuple[str, str]) -> MembershipGraph
    """Build a graph from (parent, member) pairs."""
    return MembershipGraph([HierarchyEdge(parent, member) for parent, member in edges])


def test_chain():
    # type: () -> None
    graph = build_graph(("a", "b"), ("b", "c"))

    assert graph.groups_containing("c") == {"a", "b"}
    assert graph.groups_containing("b") == {"a"}
    assert graph.groups_containing("a") == set()
    assert graph.groups_nested_in("a") == {"b", "c"}
    assert graph.groups_nested_in("c") == set()


def test_diamond():
    # type: () -> None
    graph = build_graph(("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"))

    assert graph.groups_containing("d") == {"a", "b", "c"}
    assert graph.groups_nested_in("a") == {"b", "c", "d"}


def test_unknown_group():
    # type: () -> None
    graph = build_graph(("a", "b"))

    assert graph.groups_containing("z") == set()
    assert graph.groups_nested_in("z") == set()


def test_adjacency():
    # type: () -> None
    graph = build_graph(("a", "b"), ("a", "c"), ("b", "c"))

    adjacency = graph.adjacency()
    assert sorted(adjacency["a"]) == ["b", "c"]
    assert adjacency["b"] == ["c"]
    assert "c" not in adjacency


def test_from_repository():
    # type: () -> None
    repository = MagicMock()
    repository.list_hierarchy_edges.return_value = [HierarchyEdge("a", "b")]

    graph = MembershipGraph.from_repository(repository)
    assert graph.groups_containing("b") == {"a"}
    repository.list_hierarchy_edges.assert_called_once_with()


def test_from_repository_cancelled():
    # type: () -> None
    repository = MagicMock()
    cancellation = Cancellation()
    cancellation.cancel()

    with pytest.raises(OperationCancelledException):
        MembershipGraph.from_repository(repository, cancellation)
    assert repository.list_hierarchy_edges.call_count == 0


def test_logs_edge_count(caplog):
    # type: (LogCaptureFixture) -> None
    with caplog.at_level(logging.DEBUG, logger="governor.graph"):
        build_graph(("a", "b"), ("b", "c"))
    assert [r.getMessage() for r in caplog.records] == ["Loaded 2 hierarchy edges"]
