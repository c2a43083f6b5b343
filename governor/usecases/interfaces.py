"""Service interfaces that use cases depend on.

Each use case module defines its own UI interface next to the use case; only the backend services
shared between use cases live here, and their names end in Interface.
"""

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from governor.cancellation import Cancellation
    from governor.entities.group import Group
    from governor.entities.membership import EnumeratedMembership
    from governor.entities.user import User
    from typing import ContextManager, List, Optional


class GroupInterface(metaclass=ABCMeta):
    """Abstract base class for group operations and queries."""

    @abstractmethod
    def create_group(self, name, slug=None):
        # type: (str, Optional[str]) -> str
        pass

    @abstractmethod
    def delete_group(self, group_id):
        # type: (str) -> None
        pass

    @abstractmethod
    def group(self, group_id):
        # type: (str) -> Optional[Group]
        pass


class GroupHierarchyInterface(metaclass=ABCMeta):
    """Abstract base class for the group hierarchy and its cycle guard."""

    @abstractmethod
    def add_member_group(self, parent_group_id, member_group_id, expires_at=None):
        # type: (str, str, Optional[datetime]) -> None
        pass

    @abstractmethod
    def group_exists(self, group_id):
        # type: (str) -> bool
        pass

    @abstractmethod
    def hierarchy_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> bool
        pass

    @abstractmethod
    def lock_hierarchy(self):
        # type: () -> None
        pass

    @abstractmethod
    def remove_member_group(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def update_member_group_expiry(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        pass

    @abstractmethod
    def would_create_cycle(self, parent_group_id, member_group_id, cancellation=None):
        # type: (str, str, Optional[Cancellation]) -> bool
        pass


class MembershipInterface(metaclass=ABCMeta):
    """Abstract base class for membership enumeration."""

    @abstractmethod
    def enumerate_all(self, cancellation=None, hydrate=False):
        # type: (Optional[Cancellation], bool) -> List[EnumeratedMembership]
        pass

    @abstractmethod
    def enumerate_for_group(self, group_id, cancellation=None, hydrate=False):
        # type: (str, Optional[Cancellation], bool) -> List[EnumeratedMembership]
        pass

    @abstractmethod
    def enumerate_for_user(self, user_id, cancellation=None, hydrate=False):
        # type: (str, Optional[Cancellation], bool) -> List[EnumeratedMembership]
        pass


class SchemaInterface(metaclass=ABCMeta):
    """Abstract base class for low-level schema manipulation."""

    @abstractmethod
    def initialize_schema(self):
        # type: () -> List[str]
        """Create whatever is missing and return the names of the tables created."""
        pass


class TransactionInterface(metaclass=ABCMeta):
    """Abstract base class for starting and committing transactions."""

    @abstractmethod
    def transaction(self):
        # type: () -> ContextManager[None]
        pass


class UserInterface(metaclass=ABCMeta):
    """Abstract base class for user operations and queries."""

    @abstractmethod
    def add_user_to_group(self, user_id, group_id, is_admin=False, expires_at=None):
        # type: (str, str, bool, Optional[datetime]) -> None
        pass

    @abstractmethod
    def create_user(self, name, email):
        # type: (str, str) -> str
        pass

    @abstractmethod
    def user(self, user_id):
        # type: (str) -> Optional[User]
        pass
