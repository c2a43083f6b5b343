from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.exc import RepositoryUnavailableException
from governor.membership_diff import find_member_diff

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.entities.membership import EnumeratedMembership
    from governor.usecases.interfaces import (
        GroupHierarchyInterface,
        MembershipInterface,
        TransactionInterface,
    )
    from typing import List, Optional


class RemoveMemberGroupUI(metaclass=ABCMeta):
    """Abstract base class for UI for RemoveMemberGroup."""

    @abstractmethod
    def remove_member_group_failed_not_found(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def remove_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        pass

    @abstractmethod
    def removed_member_group(self, parent_group_id, member_group_id, members_removed):
        # type: (str, str, List[EnumeratedMembership]) -> None
        pass


class RemoveMemberGroup:
    """Stop nesting one group inside another.

    Holds the hierarchy lock so that the before and after snapshots differ only by this removal.
    """

    def __init__(
        self,
        ui,  # type: RemoveMemberGroupUI
        group_hierarchy_service,  # type: GroupHierarchyInterface
        membership_service,  # type: MembershipInterface
        transaction_service,  # type: TransactionInterface
    ):
        # type: (...) -> None
        self.ui = ui
        self.group_hierarchy_service = group_hierarchy_service
        self.membership_service = membership_service
        self.transaction_service = transaction_service

    def remove_member_group(self, parent_group_id, member_group_id, cancellation=None):
        # type: (str, str, Optional[Cancellation]) -> None
        try:
            with self.transaction_service.transaction():
                self.group_hierarchy_service.lock_hierarchy()
                if not self.group_hierarchy_service.hierarchy_exists(
                    parent_group_id, member_group_id
                ):
                    self.ui.remove_member_group_failed_not_found(parent_group_id, member_group_id)
                    return

                before = self.membership_service.enumerate_all(cancellation)
                self.group_hierarchy_service.remove_member_group(parent_group_id, member_group_id)
                after = self.membership_service.enumerate_all(cancellation)
        except RepositoryUnavailableException as e:
            self.ui.remove_member_group_failed_unavailable(
                parent_group_id, member_group_id, str(e)
            )
            return

        # Reversing the snapshots turns "gained" into "lost".
        self.ui.removed_member_group(
            parent_group_id, member_group_id, find_member_diff(after, before)
        )
