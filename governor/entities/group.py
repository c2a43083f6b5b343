from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from typing import Optional


@dataclass(frozen=True)
class Group:
    id: str
    name: str
    slug: str
    deleted_at: Optional[datetime] = None

    @property
    def deleted(self) -> bool:
        return self.deleted_at is not None


class GroupNotFoundException(Exception):
    """Attempt to operate on a group not found in the storage layer."""

    def __init__(self, group_id: str) -> None:
        super().__init__(f"Group {group_id} not found")
        self.group_id = group_id
