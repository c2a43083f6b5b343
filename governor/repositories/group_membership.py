from typing import TYPE_CHECKING

from governor.entities.membership import DirectMembership
from governor.models.base.session import storage_errors
from governor.models.group_membership import GroupMembership
from governor.repositories.interfaces import GroupMembershipRepository

if TYPE_CHECKING:
    from datetime import datetime
    from governor.models.base.session import Session
    from typing import Iterable, List, Optional


class SQLGroupMembershipRepository(GroupMembershipRepository):
    """SQL storage layer for direct group memberships."""

    def __init__(self, session):
        # type: (Session) -> None
        self.session = session

    @storage_errors
    def add_membership(self, group_id, user_id, is_admin=False, expires_at=None):
        # type: (str, str, bool, Optional[datetime]) -> None
        membership = GroupMembership(
            group_id=group_id, user_id=user_id, is_admin=is_admin, expires_at=expires_at
        )
        membership.add(self.session)
        self.session.flush()

    @storage_errors
    def list_direct_memberships(self, user_id=None, group_ids=None):
        # type: (Optional[str], Optional[Iterable[str]]) -> List[DirectMembership]
        query = self.session.query(GroupMembership)
        if user_id is not None:
            query = query.filter(GroupMembership.user_id == user_id)
        if group_ids is not None:
            ids = list(group_ids)
            if not ids:
                return []
            query = query.filter(GroupMembership.group_id.in_(ids))
        return [
            DirectMembership(
                group_id=m.group_id,
                user_id=m.user_id,
                is_admin=m.is_admin,
                expires_at=m.expires_at,
            )
            for m in query
        ]
