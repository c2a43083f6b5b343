from typing import TYPE_CHECKING

from governor.usecases.interfaces import GroupInterface

if TYPE_CHECKING:
    from governor.entities.group import Group
    from governor.repositories.interfaces import GroupRepository
    from typing import Optional


class GroupService(GroupInterface):
    """High-level logic to manipulate groups."""

    def __init__(self, group_repository):
        # type: (GroupRepository) -> None
        self.group_repository = group_repository

    def create_group(self, name, slug=None):
        # type: (str, Optional[str]) -> str
        return self.group_repository.create_group(name, slug)

    def delete_group(self, group_id):
        # type: (str) -> None
        self.group_repository.delete_group(group_id)

    def group(self, group_id):
        # type: (str) -> Optional[Group]
        """Return a group, or None if it doesn't exist or has been deleted."""
        group = self.group_repository.get_group(group_id)
        if group and group.deleted:
            return None
        return group
