"""Storage interfaces consumed by the membership engine.

The engine only ever reads through list_direct_memberships, list_hierarchy_edges,
fetch_groups_by_ids and fetch_users_by_ids.  The remaining methods are used by the hierarchy use
cases and by test setup.  Every implementation must raise RepositoryUnavailableException, and
nothing else, when the underlying store fails.
"""

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from governor.entities.group import Group
    from governor.entities.group_hierarchy import HierarchyEdge
    from governor.entities.membership import DirectMembership
    from governor.entities.user import User
    from governor.repositories.schema import SchemaRepository
    from governor.repositories.transaction import TransactionRepository
    from typing import Iterable, List, Optional


class GroupRepository(metaclass=ABCMeta):
    """Abstract base class for group repositories."""

    @abstractmethod
    def create_group(self, name, slug=None):
        # type: (str, Optional[str]) -> str
        pass

    @abstractmethod
    def delete_group(self, group_id):
        # type: (str) -> None
        """Soft-delete a group and drop its direct memberships.

        The group row and its hierarchy edges stay in storage.
        """
        pass

    @abstractmethod
    def fetch_groups_by_ids(self, group_ids):
        # type: (Iterable[str]) -> List[Group]
        pass

    @abstractmethod
    def get_group(self, group_id):
        # type: (str) -> Optional[Group]
        """Return the group, deleted or not."""
        pass


class GroupHierarchyRepository(metaclass=ABCMeta):
    """Abstract base class for group hierarchy repositories."""

    @abstractmethod
    def add_hierarchy(self, parent_group_id, member_group_id, expires_at=None):
        # type: (str, str, Optional[datetime]) -> None
        pass

    @abstractmethod
    def hierarchy_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> bool
        pass

    @abstractmethod
    def list_hierarchy_edges(self):
        # type: () -> List[HierarchyEdge]
        """Return every hierarchy edge whose parent and member groups are both not deleted."""
        pass

    @abstractmethod
    def lock_hierarchy(self):
        # type: () -> None
        """Block every other hierarchy writer until the current transaction ends.

        Must be the first statement of the transaction, so that reads that follow see every
        hierarchy write committed before the lock was granted.
        """
        pass

    @abstractmethod
    def remove_hierarchy(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def update_hierarchy_expiry(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        pass


class GroupMembershipRepository(metaclass=ABCMeta):
    """Abstract base class for direct group membership repositories."""

    @abstractmethod
    def add_membership(self, group_id, user_id, is_admin=False, expires_at=None):
        # type: (str, str, bool, Optional[datetime]) -> None
        pass

    @abstractmethod
    def list_direct_memberships(self, user_id=None, group_ids=None):
        # type: (Optional[str], Optional[Iterable[str]]) -> List[DirectMembership]
        """Return direct memberships, optionally restricted to one user and/or a set of groups."""
        pass


class UserRepository(metaclass=ABCMeta):
    """Abstract base class for user repositories."""

    @abstractmethod
    def create_user(self, name, email):
        # type: (str, str) -> str
        pass

    @abstractmethod
    def fetch_users_by_ids(self, user_ids):
        # type: (Iterable[str]) -> List[User]
        pass

    @abstractmethod
    def get_user(self, user_id):
        # type: (str) -> Optional[User]
        pass


class RepositoryFactory(metaclass=ABCMeta):
    """Abstract base class for repository factories."""

    @abstractmethod
    def create_group_repository(self):
        # type: () -> GroupRepository
        pass

    @abstractmethod
    def create_group_hierarchy_repository(self):
        # type: () -> GroupHierarchyRepository
        pass

    @abstractmethod
    def create_group_membership_repository(self):
        # type: () -> GroupMembershipRepository
        pass

    @abstractmethod
    def create_schema_repository(self):
        # type: () -> SchemaRepository
        pass

    @abstractmethod
    def create_transaction_repository(self):
        # type: () -> TransactionRepository
        pass

    @abstractmethod
    def create_user_repository(self):
        # type: () -> UserRepository
        pass
