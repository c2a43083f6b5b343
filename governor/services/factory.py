from typing import TYPE_CHECKING

from governor.services.group import GroupService
from governor.services.group_hierarchy import GroupHierarchyService
from governor.services.hydration import MembershipHydrator
from governor.services.membership import MembershipService
from governor.services.schema import SchemaService
from governor.services.transaction import TransactionService
from governor.services.user import UserService

if TYPE_CHECKING:
    from governor.repositories.interfaces import RepositoryFactory
    from governor.settings import Settings
    from governor.usecases.interfaces import (
        GroupHierarchyInterface,
        GroupInterface,
        MembershipInterface,
        SchemaInterface,
        TransactionInterface,
        UserInterface,
    )


class ServiceFactory:
    """Construct backend services."""

    def __init__(self, settings, repository_factory):
        # type: (Settings, RepositoryFactory) -> None
        self.settings = settings
        self.repository_factory = repository_factory

    def create_group_service(self):
        # type: () -> GroupInterface
        group_repository = self.repository_factory.create_group_repository()
        return GroupService(group_repository)

    def create_group_hierarchy_service(self):
        # type: () -> GroupHierarchyInterface
        group_repository = self.repository_factory.create_group_repository()
        group_hierarchy_repository = self.repository_factory.create_group_hierarchy_repository()
        return GroupHierarchyService(group_repository, group_hierarchy_repository)

    def create_membership_hydrator(self):
        # type: () -> MembershipHydrator
        group_repository = self.repository_factory.create_group_repository()
        user_repository = self.repository_factory.create_user_repository()
        return MembershipHydrator(group_repository, user_repository)

    def create_membership_service(self):
        # type: () -> MembershipInterface
        group_membership_repository = self.repository_factory.create_group_membership_repository()
        group_hierarchy_repository = self.repository_factory.create_group_hierarchy_repository()
        return MembershipService(
            group_membership_repository,
            group_hierarchy_repository,
            self.create_membership_hydrator(),
        )

    def create_schema_service(self):
        # type: () -> SchemaInterface
        schema_repository = self.repository_factory.create_schema_repository()
        return SchemaService(schema_repository)

    def create_transaction_service(self):
        # type: () -> TransactionInterface
        transaction_repository = self.repository_factory.create_transaction_repository()
        return TransactionService(transaction_repository)

    def create_user_service(self):
        # type: () -> UserInterface
        user_repository = self.repository_factory.create_user_repository()
        group_membership_repository = self.repository_factory.create_group_membership_repository()
        return UserService(user_repository, group_membership_repository)
