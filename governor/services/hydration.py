import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import TYPE_CHECKING

from governor.cancellation import check_cancelled

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.entities.membership import EnumeratedMembership
    from governor.repositories.interfaces import GroupRepository, UserRepository
    from typing import List, Optional


class MembershipHydrator:
    """Attach full Group and User records to enumerated memberships.

    Issues exactly two bulk lookups, one for all distinct group ids and one for all distinct user
    ids, no matter how many entries there are.  The lookups are independent and run concurrently.
    If either fails, its exception is raised and nothing is returned.

    A group or user the store doesn't return (deleted, or not yet visible) leaves the reference as
    None rather than failing the whole hydration.
    """

    def __init__(self, group_repository, user_repository):
        # type: (GroupRepository, UserRepository) -> None
        self.group_repository = group_repository
        self.user_repository = user_repository
        self._logger = logging.getLogger(__name__)

    def hydrate(self, memberships, cancellation=None):
        # type: (List[EnumeratedMembership], Optional[Cancellation]) -> List[EnumeratedMembership]
        if not memberships:
            return []
        check_cancelled(cancellation)

        group_ids = sorted({m.group_id for m in memberships})
        user_ids = sorted({m.user_id for m in memberships})

        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="hydrate") as executor:
            groups_future = executor.submit(self.group_repository.fetch_groups_by_ids, group_ids)
            users_future = executor.submit(self.user_repository.fetch_users_by_ids, user_ids)

            # result() re-raises the lookup's exception.  Leaving the with block waits for the
            # other lookup before the exception propagates.
            groups = {g.id: g for g in groups_future.result()}
            users = {u.id: u for u in users_future.result()}

        check_cancelled(cancellation)
        self._logger.debug(
            "Hydrated %d memberships with %d of %d groups and %d of %d users",
            len(memberships),
            len(groups),
            len(group_ids),
            len(users),
            len(user_ids),
        )
        return [
            replace(m, group=groups.get(m.group_id), user=users.get(m.user_id))
            for m in memberships
        ]
