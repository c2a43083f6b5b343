from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.entities.group_hierarchy import GroupHierarchyNotFoundException
from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from datetime import datetime
    from governor.usecases.interfaces import GroupHierarchyInterface, TransactionInterface
    from typing import Optional


class UpdateMemberGroupUI(metaclass=ABCMeta):
    """Abstract base class for UI for UpdateMemberGroup."""

    @abstractmethod
    def update_member_group_failed_not_found(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def update_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        pass

    @abstractmethod
    def updated_member_group(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        pass


class UpdateMemberGroup:
    """Change when a group's nesting inside another group expires.

    Hierarchy expiry never reaches enumerated memberships, so there is no membership delta to
    report.
    """

    def __init__(self, ui, group_hierarchy_service, transaction_service):
        # type: (UpdateMemberGroupUI, GroupHierarchyInterface, TransactionInterface) -> None
        self.ui = ui
        self.group_hierarchy_service = group_hierarchy_service
        self.transaction_service = transaction_service

    def update_member_group(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        try:
            with self.transaction_service.transaction():
                self.group_hierarchy_service.lock_hierarchy()
                self.group_hierarchy_service.update_member_group_expiry(
                    parent_group_id, member_group_id, expires_at
                )
        except GroupHierarchyNotFoundException:
            self.ui.update_member_group_failed_not_found(parent_group_id, member_group_id)
            return
        except RepositoryUnavailableException as e:
            self.ui.update_member_group_failed_unavailable(
                parent_group_id, member_group_id, str(e)
            )
            return
        self.ui.updated_member_group(parent_group_id, member_group_id, expires_at)
