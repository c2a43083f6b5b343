from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from governor.exc import RepositoryUnavailableException

if TYPE_CHECKING:
    from governor.models.base.session import Session
    from types import TracebackType
    from typing import Literal, Optional


class SQLTransaction:
    """Returned by a TransactionRepository as a context manager."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def __enter__(self) -> None:
        pass

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> Literal[False]:
        if exc_type:
            self.session.rollback()
            return False
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logging.exception("Commit failed, rolling back")
            self.session.rollback()
            raise RepositoryUnavailableException(str(e)) from e
        return False


class TransactionRepository:
    """Manage storage layer transactions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def transaction(self) -> SQLTransaction:
        return SQLTransaction(self.session)
