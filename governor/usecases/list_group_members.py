from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.entities.group import Group
    from governor.entities.membership import EnumeratedMembership
    from governor.usecases.interfaces import GroupInterface, MembershipInterface
    from typing import List, Optional


class ListGroupMembersUI(metaclass=ABCMeta):
    """Abstract base class for UI for ListGroupMembers."""

    @abstractmethod
    def list_group_members_failed_not_found(self, group_id):
        # type: (str) -> None
        pass

    @abstractmethod
    def list_group_members_failed_unavailable(self, group_id, message):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def listed_group_members(self, group, members):
        # type: (Group, List[EnumeratedMembership]) -> None
        pass


class ListGroupMembers:
    """List every direct and inherited member of a group, with user records attached."""

    def __init__(self, ui, group_service, membership_service):
        # type: (ListGroupMembersUI, GroupInterface, MembershipInterface) -> None
        self.ui = ui
        self.group_service = group_service
        self.membership_service = membership_service

    def list_group_members(self, group_id, cancellation=None):
        # type: (str, Optional[Cancellation]) -> None
        try:
            group = self.group_service.group(group_id)
            if not group:
                self.ui.list_group_members_failed_not_found(group_id)
                return
            members = self.membership_service.enumerate_for_group(
                group_id, cancellation, hydrate=True
            )
        except RepositoryUnavailableException as e:
            self.ui.list_group_members_failed_unavailable(group_id, str(e))
            return
        self.ui.listed_group_members(group, members)
