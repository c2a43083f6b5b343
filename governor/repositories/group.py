from typing import TYPE_CHECKING

from governor.entities.group import Group, GroupNotFoundException
from governor.models.base.model_base import utcnow_without_ms
from governor.models.base.session import Session, storage_errors
from governor.models.group import Group as SQLGroup
from governor.models.group_membership import GroupMembership
from governor.repositories.interfaces import GroupRepository
from governor.util import slugify

if TYPE_CHECKING:
    from typing import Iterable, List, Optional


def _to_group(sql_group):
    # type: (SQLGroup) -> Group
    return Group(
        id=sql_group.id,
        name=sql_group.name,
        slug=sql_group.slug,
        deleted_at=sql_group.deleted_at,
    )


class SQLGroupRepository(GroupRepository):
    """SQL storage layer for groups.

    fetch_groups_by_ids may be called from a worker thread while another lookup is in flight, so it
    opens its own short-lived session on the same engine rather than sharing the injected one.  It
    therefore sees only committed data.
    """

    def __init__(self, session):
        # type: (Session) -> None
        self.session = session

    @storage_errors
    def create_group(self, name, slug=None):
        # type: (str, Optional[str]) -> str
        group = SQLGroup(name=name, slug=slug or slugify(name))
        group.add(self.session)
        self.session.flush()
        return group.id

    @storage_errors
    def delete_group(self, group_id):
        # type: (str) -> None
        group = SQLGroup.get(self.session, id=group_id)
        if not group:
            raise GroupNotFoundException(group_id)
        group.deleted_at = utcnow_without_ms()
        self.session.query(GroupMembership).filter(GroupMembership.group_id == group_id).delete(
            synchronize_session=False
        )
        self.session.flush()

    @storage_errors
    def fetch_groups_by_ids(self, group_ids):
        # type: (Iterable[str]) -> List[Group]
        ids = list(set(group_ids))
        if not ids:
            return []
        with Session(bind=self.session.get_bind()) as session:
            groups = session.query(SQLGroup).filter(
                SQLGroup.id.in_(ids), SQLGroup.deleted_at.is_(None)
            )
            return [_to_group(g) for g in groups]

    @storage_errors
    def get_group(self, group_id):
        # type: (str) -> Optional[Group]
        group = SQLGroup.get(self.session, id=group_id)
        return _to_group(group) if group else None
