import logging
import sys
from typing import TYPE_CHECKING

from governor.cancellation import Cancellation
from governor.ctl.base import CtlCommand
from governor.ctl.util import argparse_validate_date, format_expiry
from governor.usecases.add_member_group import AddMemberGroupUI
from governor.usecases.check_member_group_cycle import CheckMemberGroupCycleUI
from governor.usecases.remove_member_group import RemoveMemberGroupUI
from governor.usecases.update_member_group import UpdateMemberGroupUI

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace
    from datetime import datetime
    from governor.ctl.settings import CtlSettings
    from governor.entities.membership import EnumeratedMembership
    from governor.usecases.factory import UseCaseFactory
    from typing import List, Optional


def _add_edge_arguments(parser):
    # type: (ArgumentParser) -> None
    parser.add_argument("parent_group_id", help="ID of the containing group")
    parser.add_argument("member_group_id", help="ID of the nested group")


class AddMemberGroupCommand(CtlCommand, AddMemberGroupUI):
    """Nest a group inside another group."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        parser.add_argument(
            "--expires",
            type=argparse_validate_date,
            default=None,
            help="Expiration date of the nesting (YYYY-MM-DD, UTC)",
        )
        _add_edge_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def add_member_group_failed_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.critical("adding %s to %s would create a cycle", member_group_id, parent_group_id)
        sys.exit(1)

    def add_member_group_failed_exists(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.critical("%s is already a member of %s", member_group_id, parent_group_id)
        sys.exit(1)

    def add_member_group_failed_not_found(self, group_id):
        # type: (str) -> None
        logging.critical("group %s not found", group_id)
        sys.exit(1)

    def add_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        logging.critical("cannot add %s to %s: %s", member_group_id, parent_group_id, message)
        sys.exit(1)

    def added_member_group(self, parent_group_id, member_group_id, members_added):
        # type: (str, str, List[EnumeratedMembership]) -> None
        logging.info(
            "added %s to %s, %d new memberships",
            member_group_id,
            parent_group_id,
            len(members_added),
        )
        for membership in members_added:
            logging.info("membership created: user %s in group %s", *membership.key)

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_add_member_group_usecase(self)
        usecase.add_member_group(
            args.parent_group_id,
            args.member_group_id,
            args.expires,
            Cancellation.from_settings(self.settings),
        )


class RemoveMemberGroupCommand(CtlCommand, RemoveMemberGroupUI):
    """Stop nesting a group inside another group."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        _add_edge_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def remove_member_group_failed_not_found(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.critical("%s is not a member of %s", member_group_id, parent_group_id)
        sys.exit(1)

    def remove_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        logging.critical("cannot remove %s from %s: %s", member_group_id, parent_group_id, message)
        sys.exit(1)

    def removed_member_group(self, parent_group_id, member_group_id, members_removed):
        # type: (str, str, List[EnumeratedMembership]) -> None
        logging.info(
            "removed %s from %s, %d memberships lost",
            member_group_id,
            parent_group_id,
            len(members_removed),
        )
        for membership in members_removed:
            logging.info("membership deleted: user %s in group %s", *membership.key)

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_remove_member_group_usecase(self)
        usecase.remove_member_group(
            args.parent_group_id,
            args.member_group_id,
            Cancellation.from_settings(self.settings),
        )


class UpdateMemberGroupCommand(CtlCommand, UpdateMemberGroupUI):
    """Change or clear the expiration of a nesting."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        parser.add_argument(
            "--expires",
            type=argparse_validate_date,
            default=None,
            help="New expiration date (YYYY-MM-DD, UTC), omit to never expire",
        )
        _add_edge_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def update_member_group_failed_not_found(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.critical("%s is not a member of %s", member_group_id, parent_group_id)
        sys.exit(1)

    def update_member_group_failed_unavailable(self, parent_group_id, member_group_id, message):
        # type: (str, str, str) -> None
        logging.critical("cannot update %s in %s: %s", member_group_id, parent_group_id, message)
        sys.exit(1)

    def updated_member_group(self, parent_group_id, member_group_id, expires_at):
        # type: (str, str, Optional[datetime]) -> None
        logging.info(
            "membership of %s in %s now expires %s",
            member_group_id,
            parent_group_id,
            format_expiry(self.settings, expires_at),
        )

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_update_member_group_usecase(self)
        usecase.update_member_group(args.parent_group_id, args.member_group_id, args.expires)


class CheckMemberGroupCycleCommand(CtlCommand, CheckMemberGroupCycleUI):
    """Report whether nesting a group would create a cycle.  Exits 1 if it would."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        _add_edge_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def check_member_group_cycle_failed_not_found(self, group_id):
        # type: (str) -> None
        logging.critical("group %s not found", group_id)
        sys.exit(1)

    def check_member_group_cycle_failed_unavailable(
        self, parent_group_id, member_group_id, message
    ):
        # type: (str, str, str) -> None
        logging.critical("cannot check hierarchy: %s", message)
        sys.exit(1)

    def member_group_would_create_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.warning("adding %s to %s would create a cycle", member_group_id, parent_group_id)
        sys.exit(1)

    def member_group_would_not_create_cycle(self, parent_group_id, member_group_id):
        # type: (str, str) -> None
        logging.info("%s can be added to %s", member_group_id, parent_group_id)

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_check_member_group_cycle_usecase(self)
        usecase.check_member_group_cycle(
            args.parent_group_id,
            args.member_group_id,
            Cancellation.from_settings(self.settings),
        )


class HierarchyCommand(CtlCommand):
    """Commands to change and check group nesting."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        subparser = parser.add_subparsers(dest="subcommand")
        parser = subparser.add_parser("add", help="Nest a group inside another")
        AddMemberGroupCommand.add_arguments(parser)
        parser = subparser.add_parser("check-cycle", help="Check whether a nesting is allowed")
        CheckMemberGroupCycleCommand.add_arguments(parser)
        parser = subparser.add_parser("remove", help="Remove a nested group")
        RemoveMemberGroupCommand.add_arguments(parser)
        parser = subparser.add_parser("update", help="Change when a nesting expires")
        UpdateMemberGroupCommand.add_arguments(parser)

    def __init__(self, settings, usecase_factory):
        # type: (CtlSettings, UseCaseFactory) -> None
        self.settings = settings
        self.usecase_factory = usecase_factory

    def run(self, args):
        # type: (Namespace) -> None
        if args.subcommand == "add":
            AddMemberGroupCommand(self.settings, self.usecase_factory).run(args)
        elif args.subcommand == "check-cycle":
            CheckMemberGroupCycleCommand(self.settings, self.usecase_factory).run(args)
        elif args.subcommand == "remove":
            RemoveMemberGroupCommand(self.settings, self.usecase_factory).run(args)
        elif args.subcommand == "update":
            UpdateMemberGroupCommand(self.settings, self.usecase_factory).run(args)
        else:
            raise ValueError("unknown subcommand {}".format(args.subcommand))
