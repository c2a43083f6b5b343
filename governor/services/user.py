from typing import TYPE_CHECKING

from governor.usecases.interfaces import UserInterface

if TYPE_CHECKING:
    from datetime import datetime
    from governor.entities.user import User
    from governor.repositories.interfaces import GroupMembershipRepository, UserRepository
    from typing import Optional


class UserService(UserInterface):
    """High-level logic to manipulate users and their direct memberships."""

    def __init__(self, user_repository, group_membership_repository):
        # type: (UserRepository, GroupMembershipRepository) -> None
        self.user_repository = user_repository
        self.group_membership_repository = group_membership_repository

    def add_user_to_group(self, user_id, group_id, is_admin=False, expires_at=None):
        # type: (str, str, bool, Optional[datetime]) -> None
        self.group_membership_repository.add_membership(group_id, user_id, is_admin, expires_at)

    def create_user(self, name, email):
        # type: (str, str) -> str
        return self.user_repository.create_user(name, email)

    def user(self, user_id):
        # type: (str) -> Optional[User]
        return self.user_repository.get_user(user_id)
