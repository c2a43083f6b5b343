"""Transitive closure of group memberships.

Every membership, direct or inherited, starts at a direct membership row.  Closure seeds one
entry per direct membership in scope, copies each of them to every group that transitively
contains the seed's group, then collapses all entries for the same (group, user) pair into a
single EnumeratedMembership:

    direct     = OR over the pair's entries
    is_admin   = OR over the pair's entries (inherited entries are never admin)
    expires_at = latest direct expiry if direct, else None (inherited entries never expire)

An explicit grant therefore always wins over a projection of it through nesting.
"""

import logging
from typing import TYPE_CHECKING

from governor.cancellation import check_cancelled
from governor.entities.membership import EnumeratedMembership
from governor.graph import MembershipGraph
from governor.usecases.interfaces import MembershipInterface

if TYPE_CHECKING:
    from datetime import datetime
    from governor.cancellation import Cancellation
    from governor.entities.membership import DirectMembership
    from governor.repositories.interfaces import (
        GroupHierarchyRepository,
        GroupMembershipRepository,
    )
    from governor.services.hydration import MembershipHydrator
    from typing import Dict, Iterable, List, Optional, Set, Tuple


class _MembershipPaths:
    """Accumulates every path found from one user to one group."""

    __slots__ = ("direct", "is_admin", "expires_at")

    def __init__(self):
        # type: () -> None
        self.direct = False
        self.is_admin = False
        self.expires_at = None  # type: Optional[datetime]

    def add_direct(self, membership):
        # type: (DirectMembership) -> None
        self.direct = True
        self.is_admin = self.is_admin or membership.is_admin

        # Like SQL MAX, a null expiry never beats a real one.
        if membership.expires_at is not None:
            if self.expires_at is None or membership.expires_at > self.expires_at:
                self.expires_at = membership.expires_at

    def to_membership(self, group_id, user_id):
        # type: (str, str) -> EnumeratedMembership
        return EnumeratedMembership(
            group_id=group_id,
            user_id=user_id,
            is_admin=self.is_admin,
            expires_at=self.expires_at if self.direct else None,
            direct=self.direct,
        )


def enumerate_closure(
    seeds,  # type: Iterable[DirectMembership]
    graph,  # type: MembershipGraph
    cancellation=None,  # type: Optional[Cancellation]
    only_group_id=None,  # type: Optional[str]
):
    # type: (...) -> List[EnumeratedMembership]
    """Expand direct memberships through the hierarchy and collapse them to one entry per pair.

    If only_group_id is given, entries for any other group are dropped, but seeds in other groups
    are still expanded since they may reach only_group_id through nesting.
    """
    paths = {}  # type: Dict[Tuple[str, str], _MembershipPaths]
    containing = {}  # type: Dict[str, Set[str]]

    def paths_for(group_id, user_id):
        # type: (str, str) -> _MembershipPaths
        key = (group_id, user_id)
        if key not in paths:
            paths[key] = _MembershipPaths()
        return paths[key]

    for seed in seeds:
        check_cancelled(cancellation)

        if only_group_id is None or seed.group_id == only_group_id:
            paths_for(seed.group_id, seed.user_id).add_direct(seed)

        if seed.group_id not in containing:
            containing[seed.group_id] = graph.groups_containing(seed.group_id)
        for group_id in containing[seed.group_id]:
            if only_group_id is None or group_id == only_group_id:
                paths_for(group_id, seed.user_id)

    return [paths[key].to_membership(*key) for key in sorted(paths)]


class MembershipService(MembershipInterface):
    """Enumerate direct and inherited memberships.

    Stateless: every call reads a fresh snapshot of direct memberships and hierarchy edges, so
    results are never stale and there is nothing to invalidate.  Storage failures propagate as
    RepositoryUnavailableException and cancellation as OperationCancelledException; neither ever
    yields a partial result.
    """

    def __init__(self, group_membership_repository, group_hierarchy_repository, hydrator):
        # type: (GroupMembershipRepository, GroupHierarchyRepository, MembershipHydrator) -> None
        self.group_membership_repository = group_membership_repository
        self.group_hierarchy_repository = group_hierarchy_repository
        self.hydrator = hydrator
        self._logger = logging.getLogger(__name__)

    def enumerate_all(self, cancellation=None, hydrate=False):
        # type: (Optional[Cancellation], bool) -> List[EnumeratedMembership]
        graph = MembershipGraph.from_repository(self.group_hierarchy_repository, cancellation)
        seeds = self.group_membership_repository.list_direct_memberships()
        memberships = enumerate_closure(seeds, graph, cancellation)
        self._logger.debug(
            "Enumerated %d memberships from %d direct memberships", len(memberships), len(seeds)
        )
        return self._finish(memberships, hydrate, cancellation)

    def enumerate_for_user(self, user_id, cancellation=None, hydrate=False):
        # type: (str, Optional[Cancellation], bool) -> List[EnumeratedMembership]
        check_cancelled(cancellation)
        seeds = self.group_membership_repository.list_direct_memberships(user_id=user_id)
        if not seeds:
            return []
        graph = MembershipGraph.from_repository(self.group_hierarchy_repository, cancellation)
        memberships = enumerate_closure(seeds, graph, cancellation)
        self._logger.debug("Enumerated %d memberships of user %s", len(memberships), user_id)
        return self._finish(memberships, hydrate, cancellation)

    def enumerate_for_group(self, group_id, cancellation=None, hydrate=False):
        # type: (str, Optional[Cancellation], bool) -> List[EnumeratedMembership]
        graph = MembershipGraph.from_repository(self.group_hierarchy_repository, cancellation)

        # The group itself is always a root, even if no hierarchy edge mentions it.
        roots = {group_id} | graph.groups_nested_in(group_id)
        seeds = self.group_membership_repository.list_direct_memberships(group_ids=roots)
        memberships = enumerate_closure(seeds, graph, cancellation, only_group_id=group_id)
        self._logger.debug(
            "Enumerated %d members of group %s across %d groups",
            len(memberships),
            group_id,
            len(roots),
        )
        return self._finish(memberships, hydrate, cancellation)

    def _finish(
        self,
        memberships,  # type: List[EnumeratedMembership]
        hydrate,  # type: bool
        cancellation,  # type: Optional[Cancellation]
    ):
        # type: (...) -> List[EnumeratedMembership]
        check_cancelled(cancellation)
        if hydrate:
            return self.hydrator.hydrate(memberships, cancellation)
        return memberships
