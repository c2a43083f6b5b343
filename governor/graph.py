import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from networkx import ancestors, descendants, DiGraph

from governor.cancellation import check_cancelled

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.entities.group_hierarchy import HierarchyEdge
    from governor.repositories.interfaces import GroupHierarchyRepository
    from typing import Dict, Iterable, List, Optional, Set


class MembershipGraph:
    """Snapshot of the group hierarchy.

    The hierarchy is held in a directed graph whose nodes are group ids and whose edges point from a
    member group to the parent group it is nested in, which is the direction membership flows.  So
    the descendants of a group are all the groups that (transitively) contain it, and its ancestors
    are all the groups nested (transitively) under it.

    Only groups that appear in some edge are nodes.  A group with no hierarchy edges is still a
    valid argument to every query; it simply has no containing or nested groups.

    The snapshot is read once and never refreshed.  Build a new one for every operation that needs
    current data.
    """

    def __init__(self, edges):
        # type: (Iterable[HierarchyEdge]) -> None
        self._graph = DiGraph()
        self._logger = logging.getLogger(__name__)
        for edge in edges:
            self._graph.add_edge(edge.member_group_id, edge.parent_group_id)
        self._logger.debug("Loaded %d hierarchy edges", self._graph.number_of_edges())

    @classmethod
    def from_repository(cls, group_hierarchy_repository, cancellation=None):
        # type: (GroupHierarchyRepository, Optional[Cancellation]) -> MembershipGraph
        check_cancelled(cancellation)
        edges = group_hierarchy_repository.list_hierarchy_edges()
        check_cancelled(cancellation)
        return cls(edges)

    def groups_containing(self, group_id):
        # type: (str) -> Set[str]
        """Every group that group_id is nested in, directly or through other groups."""
        if group_id not in self._graph:
            return set()
        return descendants(self._graph, group_id)

    def groups_nested_in(self, group_id):
        # type: (str) -> Set[str]
        """Every group nested in group_id, directly or through other groups."""
        if group_id not in self._graph:
            return set()
        return ancestors(self._graph, group_id)

    def adjacency(self):
        # type: () -> Dict[str, List[str]]
        """Map each parent group to the groups directly nested in it."""
        out = defaultdict(list)  # type: Dict[str, List[str]]
        for member, parent in self._graph.edges:
            out[parent].append(member)
        return out
