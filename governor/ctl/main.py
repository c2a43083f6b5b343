import sys
from typing import TYPE_CHECKING

from governor.ctl.factory import CtlCommandFactory
from governor.ctl.settings import CtlSettings
from governor.initialization import create_sql_usecase_factory
from governor.repositories.factory import SessionFactory, SingletonSessionFactory
from governor.setup import build_arg_parser, setup_logging

if TYPE_CHECKING:
    from governor.models.base.session import Session
    from typing import List, Optional


def main(sys_argv=sys.argv, session=None):
    # type: (List[str], Optional[Session]) -> None
    """Entry point for governor-ctl.

    A session may be injected so that tests see the commands' writes in their own session.
    """
    parser = build_arg_parser("Governor Control")
    subparsers = parser.add_subparsers(dest="command")
    CtlCommandFactory.add_all_parsers(subparsers)
    args = parser.parse_args(sys_argv[1:])
    if not args.command:
        parser.print_help()
        sys.exit(1)

    settings = CtlSettings.from_config(args.config)
    if args.database_url:
        settings.database = args.database_url
    setup_logging(args, settings.log_format)

    if session:
        session_factory = SingletonSessionFactory(session)  # type: SessionFactory
    else:
        session_factory = SessionFactory(settings)

    usecase_factory = create_sql_usecase_factory(settings, session_factory)
    command = CtlCommandFactory(settings, usecase_factory).construct_command(args.command)
    command.run(args)
