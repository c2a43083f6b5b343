from typing import TYPE_CHECKING

from governor.usecases.add_member_group import AddMemberGroup
from governor.usecases.check_member_group_cycle import CheckMemberGroupCycle
from governor.usecases.initialize_schema import InitializeSchema
from governor.usecases.list_group_members import ListGroupMembers
from governor.usecases.list_user_groups import ListUserGroups
from governor.usecases.remove_member_group import RemoveMemberGroup
from governor.usecases.update_member_group import UpdateMemberGroup

if TYPE_CHECKING:
    from governor.services.factory import ServiceFactory
    from governor.settings import Settings
    from governor.usecases.add_member_group import AddMemberGroupUI
    from governor.usecases.check_member_group_cycle import CheckMemberGroupCycleUI
    from governor.usecases.initialize_schema import InitializeSchemaUI
    from governor.usecases.list_group_members import ListGroupMembersUI
    from governor.usecases.list_user_groups import ListUserGroupsUI
    from governor.usecases.remove_member_group import RemoveMemberGroupUI
    from governor.usecases.update_member_group import UpdateMemberGroupUI


class UseCaseFactory:
    """Create use cases with dependency injection.

    Every use case gets its services from the same ServiceFactory, so in a SQL deployment all of
    them share one session and one transaction scope.
    """

    def __init__(self, settings, service_factory):
        # type: (Settings, ServiceFactory) -> None
        self.settings = settings
        self.service_factory = service_factory

    def create_add_member_group_usecase(self, ui):
        # type: (AddMemberGroupUI) -> AddMemberGroup
        group_hierarchy_service = self.service_factory.create_group_hierarchy_service()
        membership_service = self.service_factory.create_membership_service()
        transaction_service = self.service_factory.create_transaction_service()
        return AddMemberGroup(ui, group_hierarchy_service, membership_service, transaction_service)

    def create_check_member_group_cycle_usecase(self, ui):
        # type: (CheckMemberGroupCycleUI) -> CheckMemberGroupCycle
        group_hierarchy_service = self.service_factory.create_group_hierarchy_service()
        return CheckMemberGroupCycle(ui, group_hierarchy_service)

    def create_initialize_schema_usecase(self, ui):
        # type: (InitializeSchemaUI) -> InitializeSchema
        schema_service = self.service_factory.create_schema_service()
        return InitializeSchema(ui, schema_service)

    def create_list_group_members_usecase(self, ui):
        # type: (ListGroupMembersUI) -> ListGroupMembers
        group_service = self.service_factory.create_group_service()
        membership_service = self.service_factory.create_membership_service()
        return ListGroupMembers(ui, group_service, membership_service)

    def create_list_user_groups_usecase(self, ui):
        # type: (ListUserGroupsUI) -> ListUserGroups
        user_service = self.service_factory.create_user_service()
        membership_service = self.service_factory.create_membership_service()
        return ListUserGroups(ui, user_service, membership_service)

    def create_remove_member_group_usecase(self, ui):
        # type: (RemoveMemberGroupUI) -> RemoveMemberGroup
        group_hierarchy_service = self.service_factory.create_group_hierarchy_service()
        membership_service = self.service_factory.create_membership_service()
        transaction_service = self.service_factory.create_transaction_service()
        return RemoveMemberGroup(
            ui, group_hierarchy_service, membership_service, transaction_service
        )

    def create_update_member_group_usecase(self, ui):
        # type: (UpdateMemberGroupUI) -> UpdateMemberGroup
        group_hierarchy_service = self.service_factory.create_group_hierarchy_service()
        transaction_service = self.service_factory.create_transaction_service()
        return UpdateMemberGroup(ui, group_hierarchy_service, transaction_service)
