from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.exc import RepositoryUnavailableException
from governor.membership_diff import find_member_diff

if TYPE_CHECKING:
    from datetime import datetime
    from governor.cancellation import Cancellation
    from governor.entities.membership import EnumeratedMembership
    from governor.usecases.interfaces import (
        GroupHierarchyInterface,
        MembershipInterface,
        TransactionInterface,
    )
    from typing import List, Optional


class AddMemberGroupUI(metaclass=ABCMeta):
    """Abstract base class for UI for AddMemberGroup."""

    @abstractmethod
    def add_member_group_failed_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def add_member_group_failed_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def add_member_group_failed_not_found(self, group_id):
        # type: (str) -> None
        pass

    @abstractmethod
    def add_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        pass

    @abstractmethod
    def added_member_group(self, parent_group_id, member_group_id, members_added):
        # type: (str, str, List[EnumeratedMembership]) -> None
        """Called after commit.

        members_added holds every membership that exists only because of the new nesting, suitable
        for membership-created notifications.
        """
        pass


class AddMemberGroup:
    """Nest one group inside another.

    The hierarchy lock is taken before anything else is read, and the existence checks, the cycle
    guard and the insert all run in that same transaction.  A concurrent writer therefore waits
    for this insert to commit or roll back before running its own guard.
    """

    def __init__(
        self,
        ui,  # type: AddMemberGroupUI
        group_hierarchy_service,  # type: GroupHierarchyInterface
        membership_service,  # type: MembershipInterface
        transaction_service,  # type: TransactionInterface
    ):
        # type: (...) -> None
        self.ui = ui
        self.group_hierarchy_service = group_hierarchy_service
        self.membership_service = membership_service
        self.transaction_service = transaction_service

    def add_member_group(
        self,
        parent_group_id,  # type: str
        member_group_id,  # type: str
        expires_at=None,  # type: Optional[datetime]
        cancellation=None,  # type: Optional[Cancellation]
    ):
        # type: (...) -> None
        try:
            with self.transaction_service.transaction():
                self.group_hierarchy_service.lock_hierarchy()
                for group_id in (parent_group_id, member_group_id):
                    if not self.group_hierarchy_service.group_exists(group_id):
                        self.ui.add_member_group_failed_not_found(group_id)
                        return
                if self.group_hierarchy_service.hierarchy_exists(parent_group_id, member_group_id):
                    self.ui.add_member_group_failed_exists(parent_group_id, member_group_id)
                    return
                if self.group_hierarchy_service.would_create_cycle(
                    parent_group_id, member_group_id, cancellation
                ):
                    self.ui.add_member_group_failed_cycle(parent_group_id, member_group_id)
                    return

                before = self.membership_service.enumerate_all(cancellation)
                self.group_hierarchy_service.add_member_group(
                    parent_group_id, member_group_id, expires_at
                )
                after = self.membership_service.enumerate_all(cancellation)
        except RepositoryUnavailableException as e:
            self.ui.add_member_group_failed_unavailable(parent_group_id, member_group_id, str(e))
            return

        self.ui.added_member_group(
            parent_group_id, member_group_id, find_member_diff(before, after)
        )
