from typing import TYPE_CHECKING

from governor.ctl.group import GroupCommand
from governor.ctl.hierarchy import HierarchyCommand
from governor.ctl.sync_db import SyncDbCommand
from governor.ctl.user import UserCommand

if TYPE_CHECKING:
    from argparse import _SubParsersAction
    from governor.ctl.base import CtlCommand
    from governor.ctl.settings import CtlSettings
    from governor.usecases.factory import UseCaseFactory


class UnknownCommand(Exception):
    """Attempted to run a command with no known class."""

    pass


class CtlCommandFactory:
    """Construct and add parsers for governor-ctl commands."""

    @staticmethod
    def add_all_parsers(subparsers):
        # type: (_SubParsersAction) -> None
        """Initialize parsers for all governor-ctl commands.

        This is a static method since it has to be called before command-line parsing, but
        constructing a CtlCommandFactory requires a UseCaseFactory, which in turn requires the
        database URL that may be overridden on the command line.
        """
        parser = subparsers.add_parser("group", help="Inspect groups")
        GroupCommand.add_arguments(parser)
        parser = subparsers.add_parser("hierarchy", help="Change and check group nesting")
        HierarchyCommand.add_arguments(parser)
        parser = subparsers.add_parser("sync_db", help="Create database schema")
        SyncDbCommand.add_arguments(parser)
        parser = subparsers.add_parser("user", help="Inspect users")
        UserCommand.add_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def construct_command(self, command):
        # type: (str) -> CtlCommand
        if command == "group":
            return self.construct_group_command()
        elif command == "hierarchy":
            return self.construct_hierarchy_command()
        elif command == "sync_db":
            return self.construct_sync_db_command()
        elif command == "user":
            return self.construct_user_command()
        else:
            raise UnknownCommand("unknown command {}".format(command))

    def construct_group_command(self):
        # type: () -> GroupCommand
        return GroupCommand(self.settings, self.usecase_factory)

    def construct_hierarchy_command(self):
        # type: () -> HierarchyCommand
        return HierarchyCommand(self.settings, self.usecase_factory)

    def construct_sync_db_command(self):
        # type: () -> SyncDbCommand
        return SyncDbCommand(self.usecase_factory)

    def construct_user_command(self):
        # type: () -> UserCommand
        return UserCommand(self.settings, self.usecase_factory)
