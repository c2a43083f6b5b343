import logging
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from governor import __version__
from governor.settings import default_settings_path
from governor.util import get_loglevel

if TYPE_CHECKING:
    from argparse import Namespace


def build_arg_parser(description):
    # type: (str) -> ArgumentParser
    """Parser with the options every Governor command line shares."""
    parser = ArgumentParser(description=description)
    parser.add_argument(
        "-c", "--config", default=default_settings_path(), help="Path to config file."
    )
    parser.add_argument(
        "-d", "--database-url", default=None, help="Database URL, overriding the config file."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More logging, may be repeated."
    )
    parser.add_argument(
        "-q", "--quiet", action="count", default=0, help="Less logging, may be repeated."
    )
    parser.add_argument(
        "-V", "--version", action="version", version="%(prog)s {}".format(__version__)
    )
    return parser


def setup_logging(args, log_format):
    # type: (Namespace, str) -> None
    log_level = get_loglevel(args)
    logging.basicConfig(level=log_level, format=log_format)

    # Below DEBUG, also log every SQL statement.
    if log_level < logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
