from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

from governor.entities.group import GroupNotFoundException
from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from governor.cancellation import Cancellation
    from governor.usecases.interfaces import GroupHierarchyInterface
    from typing import Optional


class CheckMemberGroupCycleUI(metaclass=ABCMeta):
    """Abstract base class for UI for CheckMemberGroupCycle."""

    @abstractmethod
    def check_member_group_cycle_failed_not_found(self, group_id):
        # type: (str) -> None
        pass

    @abstractmethod
    def check_member_group_cycle_failed_unavailable(
        self, parent_group_id, member_group_id, message
    ):
        # type: (str, str, str) -> None
        pass

    @abstractmethod
    def member_group_would_create_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass

    @abstractmethod
    def member_group_would_not_create_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        pass


class CheckMemberGroupCycle:
    """Ask whether nesting one group in another would close a cycle, without changing anything."""

    def __init__(self, ui, group_hierarchy_service):
        # type: (CheckMemberGroupCycleUI, GroupHierarchyInterface) -> None
        self.ui = ui
        self.group_hierarchy_service = group_hierarchy_service

    def check_member_group_cycle(self, parent_group_id, member_group_id, cancellation=None):
        # type: (str, str, Optional[Cancellation]) -> None
        try:
            cycle = self.group_hierarchy_service.would_create_cycle(
                parent_group_id, member_group_id, cancellation
            )
        except GroupNotFoundException as e:
            self.ui.check_member_group_cycle_failed_not_found(e.group_id)
            return
        except RepositoryUnavailableException as e:
            self.ui.check_member_group_cycle_failed_unavailable(
                parent_group_id, member_group_id, str(e)
            )
            return

        if cycle:
            self.ui.member_group_would_create_cycle(parent_group_id, member_group_id)
        else:
            self.ui.member_group_would_not_create_cycle(parent_group_id, member_group_id)
