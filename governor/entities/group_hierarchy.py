from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from typing import Optional


@dataclass(frozen=True)
class HierarchyEdge:
    """A group nested inside another group.

    Every member of member_group_id, direct or inherited, is an inherited member of
    parent_group_id.
    """

    parent_group_id: str
    member_group_id: str
    expires_at: Optional[datetime] = None


class GroupHierarchyExistsException(Exception):
    """Attempt to nest a group inside a group that already contains it."""

    def __init__(self, parent_group_id: str, member_group_id: str) -> None:
        super().__init__(f"Group {member_group_id} is already a member of {parent_group_id}")


class GroupHierarchyNotFoundException(Exception):
    """Attempt to operate on a hierarchy edge not found in the storage layer."""

    def __init__(self, parent_group_id: str, member_group_id: str) -> None:
        super().__init__(f"Group {member_group_id} is not a member of {parent_group_id}")
