import logging
from typing import TYPE_CHECKING

from governor.cancellation import check_cancelled
from governor.entities.group import GroupNotFoundException
from governor.entities.group_hierarchy import GroupHierarchyExistsException
from governor.graph import MembershipGraph
from governor.usecases.interfaces import GroupHierarchyInterface

if TYPE_CHECKING:
    from datetime import datetime
    from governor.cancellation import Cancellation
    from governor.repositories.interfaces import GroupHierarchyRepository, GroupRepository
    from typing import Dict, Iterator, List, Optional, Set, Tuple


def _path_revisited_from(start, adjacency, cancellation=None):
    # type: (str, Dict[str, List[str]], Optional[Cancellation]) -> bool
    """Depth-first search from start, reporting whether it ever steps onto its own active path.

    Nodes whose subtrees were fully explored without reaching the active path are not explored
    again during this search, which keeps one search linear in the size of the graph.
    """
    on_path = {start}  # type: Set[str]
    finished = set()  # type: Set[str]
    stack = [(start, iter(adjacency.get(start, [])))]  # type: List[Tuple[str, Iterator[str]]]
    while stack:
        check_cancelled(cancellation)
        node, members = stack[-1]
        for member in members:
            if member in on_path:
                return True
            if member not in finished:
                on_path.add(member)
                stack.append((member, iter(adjacency.get(member, []))))
                break
        else:
            stack.pop()
            on_path.discard(node)
            finished.add(node)
    return False


def has_cycle(adjacency, cancellation=None):
    # type: (Dict[str, List[str]], Optional[Cancellation]) -> bool
    """Whether the parent-to-members adjacency list contains a directed cycle."""
    for start in list(adjacency):
        if _path_revisited_from(start, adjacency, cancellation):
            return True
    return False


class GroupHierarchyService(GroupHierarchyInterface):
    """Guard and mutate the group hierarchy.

    would_create_cycle is a pure predicate.  It only protects a write if lock_hierarchy was the
    first call of the transaction that runs both the guard and the write.  Every hierarchy writer
    holds that lock until commit, so no other edge can appear between the guard and the write.
    The hierarchy use cases follow that order.
    """

    def __init__(self, group_repository, group_hierarchy_repository):
        # type: (GroupRepository, GroupHierarchyRepository) -> None
        self.group_repository = group_repository
        self.group_hierarchy_repository = group_hierarchy_repository
        self._logger = logging.getLogger(__name__)

    def group_exists(self, group_id):
        # type: (str) -> bool
        group = self.group_repository.get_group(group_id)
        return group is not None and not group.deleted

    def lock_hierarchy(self):
        # type: () -> None
        self.group_hierarchy_repository.lock_hierarchy()

    def hierarchy_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> bool
        return self.group_hierarchy_repository.hierarchy_exists(parent_group_id, member_group_id)

    def would_create_cycle(self, parent_group_id, member_group_id, cancellation=None):
        # type: (str, str, Optional[Cancellation]) -> bool
        if parent_group_id == member_group_id:
            return True
        for group_id in (parent_group_id, member_group_id):
            if not self.group_exists(group_id):
                raise GroupNotFoundException(group_id)

        graph = MembershipGraph.from_repository(self.group_hierarchy_repository, cancellation)
        adjacency = graph.adjacency()
        adjacency.setdefault(parent_group_id, []).append(member_group_id)
        cycle = has_cycle(adjacency, cancellation)
        if cycle:
            self._logger.info(
                "Nesting %s in %s would create a cycle", member_group_id, parent_group_id
            )
        return cycle

    def add_member_group(self, parent_group_id, member_group_id, expires_at=None):
        # type: (str, str, Optional[datetime]) -> None
        if self.hierarchy_exists(parent_group_id, member_group_id):
            raise GroupHierarchyExistsException(parent_group_id, member_group_id)
        self.group_hierarchy_repository.add_hierarchy(
            parent_group_id, member_group_id, expires_at
        )

    def remove_member_group(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        self.group_hierarchy_repository.remove_hierarchy(parent_group_id, member_group_id)

    def update_member_group_expiry(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        self.group_hierarchy_repository.update_hierarchy_expiry(
            parent_group_id, member_group_id, expires_at
        )
