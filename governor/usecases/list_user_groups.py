from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.entities.membership import EnumeratedMembership
    from governor.entities.user import User
    from governor.usecases.interfaces import MembershipInterface, UserInterface
    from typing import List, Optional


class ListUserGroupsUI(metaclass=ABCMeta):
    """Abstract base class for UI for ListUserGroups."""

    @abstractmethod
    def list_user_groups_failed_not_found(self, user_id):
        # type: (str) -> None
        pass

    @abstractmethod
    def list_user_groups_failed_unavailable(self, user_id, message):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def listed_user_groups(self, user, memberships):
        # type: (User, List[EnumeratedMembership]) -> None
        pass


class ListUserGroups:
    """List every group a user belongs to, directly or through nesting."""

    def __init__(self, ui, user_service, membership_service):
        # type: (ListUserGroupsUI, UserInterface, MembershipInterface) -> None
        self.ui = ui
        self.user_service = user_service
        self.membership_service = membership_service

    def list_user_groups(self, user_id, cancellation=None):
        # type: (str, Optional[Cancellation]) -> None
        try:
            user = self.user_service.user(user_id)
            if not user:
                self.ui.list_user_groups_failed_not_found(user_id)
                return
            memberships = self.membership_service.enumerate_for_user(
                user_id, cancellation, hydrate=True
            )
        except RepositoryUnavailableException as e:
            self.ui.list_user_groups_failed_unavailable(user_id, str(e))
            return
        self.ui.listed_user_groups(user, memberships)
