from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from governor.entities.group import Group
    from governor.entities.user import User
    from typing import Optional, Tuple


@dataclass(frozen=True)
class DirectMembership:
    """An explicit user-to-group assignment."""

    group_id: str
    user_id: str
    is_admin: bool = False
    expires_at: Optional[datetime] = None


@dataclass(frozen=True)
class EnumeratedMembership:
    """A computed membership of a user in a group, direct or inherited through nesting.

    is_admin and expires_at only ever come from a direct membership, so an inherited-only
    membership always has is_admin False and expires_at None.  The group and user references are
    filled in by hydration and do not take part in equality or hashing, so two enumerations of the
    same data compare equal whether or not they were hydrated.
    """

    group_id: str
    user_id: str
    is_admin: bool
    expires_at: Optional[datetime]
    direct: bool
    group: Optional[Group] = field(default=None, compare=False, repr=False)
    user: Optional[User] = field(default=None, compare=False, repr=False)

    @property
    def key(self) -> Tuple[str, str]:
        return (self.group_id, self.user_id)
