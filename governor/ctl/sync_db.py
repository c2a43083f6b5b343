import logging
from typing import TYPE_CHECKING

from governor.ctl.base import CtlCommand
from governor.usecases.initialize_schema import InitializeSchemaUI

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace
    from governor.usecases.factory import UseCaseFactory
    from typing import List


class SyncDbCommand(CtlCommand, InitializeSchemaUI):
    """Create any missing tables and the hierarchy lock row."""

    @staticmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        return

    def __init__(self, usecase_factory):
        # type: (UseCaseFactory) -> None
        self.usecase_factory = usecase_factory

    def initialized_schema(self, created_tables):
        # type: (List[str]) -> None
        if not created_tables:
            logging.info("Database schema is up to date")
        for table in created_tables:
            logging.info("Created table %s", table)

    def run(self, args):
        # type: (Namespace) -> None
        usecase = self.usecase_factory.create_initialize_schema_usecase(self)
        usecase.initialize_schema()
