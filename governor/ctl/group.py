import logging
import sys
from typing import TYPE_CHECKING

from governor.cancellation import Cancellation
from governor.ctl.base import CtlCommand
from governor.ctl.util import format_expiry
from governor.usecases.list_group_members import ListGroupMembersUI

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace
    from governor.ctl.settings import CtlSettings
    from governor.entities.group import Group
    from governor.entities.membership import EnumeratedMembership
    from governor.usecases.factory import UseCaseFactory
    from typing import List


class ListGroupMembersCommand(CtlCommand, ListGroupMembersUI):
    """Print every direct and inherited member of a group."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        parser.add_argument("group_id", help="ID of the group")

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def list_group_members_failed_not_found(self, group_id):
        # type: (str) -> None
        logging.critical("group %s not found", group_id)
        sys.exit(1)

    def list_group_members_failed_unavailable(self, group_id, message):
        # type: (str, str) -> None
        logging.critical("cannot list members of group %s: %s", group_id, message)
        sys.exit(1)

    def listed_group_members(self, group, members):
        # type: (Group, List[EnumeratedMembership]) -> None
        logging.info("group %s (%s) has %d members", group.name, group.id, len(members))
        for member in members:
            print(
                "\t".join(
                    [
                        member.user_id,
                        member.user.email if member.user else "-",
                        "direct" if member.direct else "inherited",
                        "admin" if member.is_admin else "member",
                        format_expiry(self.settings, member.expires_at),
                    ]
                )
            )

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_list_group_members_usecase(self)
        usecase.list_group_members(args.group_id, Cancellation.from_settings(self.settings))


class GroupCommand(CtlCommand):
    """Commands to inspect groups."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        subparser = parser.add_subparsers(dest="subcommand")
        parser = subparser.add_parser("members", help="List direct and inherited members")
        ListGroupMembersCommand.add_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def run(self, args):
        # type: (Namespace) -> None
        if args.subcommand == "members":
            subcommand = ListGroupMembersCommand(self.settings, self.usecase_factory)
            subcommand.run(args)
        else:
            raise ValueError("unknown subcommand {}".format(args.subcommand))
