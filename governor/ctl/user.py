import logging
import sys
from typing import TYPE_CHECKING

from governor.cancellation import Cancellation
from governor.ctl.base import CtlCommand
from governor.ctl.util import format_expiry
from governor.usecases.list_user_groups import ListUserGroupsUI

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace
    from governor.ctl.settings import CtlSettings
    from governor.entities.membership import EnumeratedMembership
    from governor.entities.user import User
    from governor.usecases.factory import UseCaseFactory
    from typing import List


class ListUserGroupsCommand(CtlCommand, ListUserGroupsUI):
    """Print every group a user belongs to."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        parser.add_argument("user_id", help="ID of the user")

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def list_user_groups_failed_not_found(self, user_id):
        # type: (str) -> None
        logging.critical("user %s not found", user_id)
        sys.exit(1)

    def list_user_groups_failed_unavailable(self, user_id, message):
        # type: (str, str) -> None
        logging.critical("cannot list groups of user %s: %s", user_id, message)
        sys.exit(1)

    def listed_user_groups(self, user, memberships):
        # type: (User, List[EnumeratedMembership]) -> None
        logging.info("user %s is in %d groups", user.email, len(memberships))
        for membership in memberships:
            # A group deleted since enumeration hydrates to None.
            group_name = membership.group.name if membership.group else "-"
            print(
                "\t".join(
                    [
                        membership.group_id,
                        group_name,
                        "direct" if membership.direct else "inherited",
                        "admin" if membership.is_admin else "member",
                        format_expiry(self.settings, membership.expires_at),
                    ]
                )
            )

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_list_user_groups_usecase(self)
        usecase.list_user_groups(args.user_id, Cancellation.from_settings(self.settings))


class UserCommand(CtlCommand):
    """Commands to inspect users."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        subparser = parser.add_subparsers(dest="subcommand")
        parser = subparser.add_parser("groups", help="List direct and inherited groups")
        ListUserGroupsCommand.add_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def run(self, args):
        # type: (Namespace) -> None
        if args.subcommand == "groups":
            subcommand = ListUserGroupsCommand(self.settings, self.usecase_factory)
            subcommand.run(args)
        else:
            raise ValueError("unknown subcommand {}".format(args.subcommand))
