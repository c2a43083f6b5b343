from typing import TYPE_CHECKING

from sqlalchemy import update
from sqlalchemy.orm import aliased

from governor.entities.group_hierarchy import GroupHierarchyNotFoundException, HierarchyEdge
from governor.exc import RepositoryUnavailableException
from governor.models.base.model_base import utcnow_without_ms
from governor.models.base.session import storage_errors
from governor.models.group import Group as SQLGroup
from governor.models.group_hierarchy import GroupHierarchy
from governor.models.hierarchy_lock import HIERARCHY_LOCK_ID, HierarchyLock
from governor.repositories.interfaces import GroupHierarchyRepository

if TYPE_CHECKING:
    from datetime import datetime
    from governor.models.base.session import Session
    from typing import List, Optional


class SQLGroupHierarchyRepository(GroupHierarchyRepository):
    """SQL storage layer for group hierarchy edges."""

    def __init__(self, session):
        # type: (Session) -> None
        self.session = session

    def _get(self, parent_group_id, member_group_id):
        # type: (str, str) -> Optional[GroupHierarchy]
        return GroupHierarchy.get(
            self.session, parent_group_id=parent_group_id, member_group_id=member_group_id
        )

    @storage_errors
    def add_hierarchy(self, parent_group_id, member_group_id, expires_at=None):
        # type: (str, str, Optional[datetime]) -> None
        hierarchy = GroupHierarchy(
            parent_group_id=parent_group_id, member_group_id=member_group_id, expires_at=expires_at
        )
        hierarchy.add(self.session)
        self.session.flush()

    @storage_errors
    def hierarchy_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> bool
        return self._get(parent_group_id, member_group_id) is not None

    @storage_errors
    def list_hierarchy_edges(self):
        # type: () -> List[HierarchyEdge]
        parent = aliased(SQLGroup)
        member = aliased(SQLGroup)
        rows = (
            self.session.query(GroupHierarchy)
            .join(parent, parent.id == GroupHierarchy.parent_group_id)
            .join(member, member.id == GroupHierarchy.member_group_id)
            .filter(parent.deleted_at.is_(None), member.deleted_at.is_(None))
        )
        return [
            HierarchyEdge(
                parent_group_id=row.parent_group_id,
                member_group_id=row.member_group_id,
                expires_at=row.expires_at,
            )
            for row in rows
        ]

    @storage_errors
    def lock_hierarchy(self):
        # type: () -> None
        statement = (
            update(HierarchyLock)
            .where(HierarchyLock.id == HIERARCHY_LOCK_ID)
            .values(locked_at=utcnow_without_ms())
            .execution_options(synchronize_session=False)
        )
        if self.session.execute(statement).rowcount == 0:
            raise RepositoryUnavailableException("hierarchy lock row missing, run sync_db")

    @storage_errors
    def remove_hierarchy(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        hierarchy = self._get(parent_group_id, member_group_id)
        if not hierarchy:
            raise GroupHierarchyNotFoundException(parent_group_id, member_group_id)
        hierarchy.delete(self.session)
        self.session.flush()

    @storage_errors
    def update_hierarchy_expiry(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        hierarchy = self._get(parent_group_id, member_group_id)
        if not hierarchy:
            raise GroupHierarchyNotFoundException(parent_group_id, member_group_id)
        hierarchy.expires_at = expires_at
        self.session.flush()
