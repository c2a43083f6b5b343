from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace


class CtlCommand(metaclass=ABCMeta):
    """A governor-ctl subcommand.

    CtlCommandFactory calls add_arguments while building the parser and constructs the command only
    if it was selected.  Commands that drive a use case usually also implement its UI.
    """

    @staticmethod
    @abstractmethod
    def add_arguments(parser):
        # type: (ArgumentParser) -> None
        pass

    @abstractmethod
    def run(self, args):
        # type: (Namespace) -> None
        pass
