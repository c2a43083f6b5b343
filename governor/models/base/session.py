import functools
import hashlib
import logging
from threading import Lock
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.exc import ArgumentError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session as _Session, sessionmaker

from governor.exc import RepositoryUnavailableException
from governor.settings import InvalidSettingsError
from governor.util import singleton

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from typing import Any, Callable, Dict, TypeVar

    T = TypeVar("T")

# Seconds before a pooled connection is replaced, shorter than typical server idle timeouts.
POOL_RECYCLE = 300


def storage_errors(method):
    # type: (Callable[..., T]) -> Callable[..., T]
    """Translate SQLAlchemy failures into RepositoryUnavailableException.

    Wraps repository methods so that nothing above the repository layer has to catch driver
    errors.  The transaction, if any, is rolled back by whoever opened it.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        # type: (Any, *Any, **Any) -> T
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logging.exception("Storage operation %s failed", method.__qualname__)
            raise RepositoryUnavailableException(str(e)) from e

    return wrapper


def get_db_engine(url):
    # type: (str) -> Engine
    options = {"pool_recycle": POOL_RECYCLE}  # type: Dict[str, Any]
    if not url.lower().startswith("sqlite"):
        options["max_overflow"] = 25
    try:
        return create_engine(url, **options)
    except (ArgumentError, OperationalError):
        logging.exception("Cannot create database engine")
        raise InvalidSettingsError("Cannot create database engine from configured URL")


class SessionWithoutAdd(_Session):
    """Session that refuses add, add_all and delete.

    Rows are added and deleted through Model.add and Model.delete instead, which call the
    underscored originals kept here.
    """

    _add = _Session.add
    _add_all = _Session.add_all
    _delete = _Session.delete

    def add(self, *args, **kwargs):
        raise NotImplementedError("Call add() on the model instead")

    def add_all(self, *args, **kwargs):
        raise NotImplementedError("Call add() on each model instead")

    def delete(self, *args, **kwargs):
        raise NotImplementedError("Call delete() on the model instead")


Session = sessionmaker(class_=SessionWithoutAdd)


@singleton
def DbEngineManager():
    # type: () -> _DbEngineManager
    return _DbEngineManager()


class _DbEngineManager:
    """Process-wide cache of one engine (and so one connection pool) per database URL."""

    def __init__(self):
        # type: () -> None
        self._engines = {}  # type: Dict[str, Engine]
        self._lock = Lock()

    def get_db_engine(self, url):
        # type: (str) -> Engine
        engine = self._engines.get(url)
        if engine is None:
            with self._lock:
                engine = self._engines.get(url)
                if engine is None:
                    engine = get_db_engine(url)
                    self._engines[url] = engine
                    url_hash = hashlib.sha256(url.encode()).hexdigest()
                    logging.info("Created engine %d for database %s", id(engine), url_hash)
        return engine
