from typing import TYPE_CHECKING

from governor.models.base.session import DbEngineManager, Session
from governor.repositories.group import SQLGroupRepository
from governor.repositories.group_hierarchy import SQLGroupHierarchyRepository
from governor.repositories.group_membership import SQLGroupMembershipRepository
from governor.repositories.interfaces import RepositoryFactory
from governor.repositories.schema import SchemaRepository
from governor.repositories.transaction import TransactionRepository
from governor.repositories.user import SQLUserRepository

if TYPE_CHECKING:
    from governor.repositories.interfaces import (
        GroupHierarchyRepository,
        GroupMembershipRepository,
        GroupRepository,
        UserRepository,
    )
    from governor.settings import Settings
    from typing import Optional


class SessionFactory:
    """Open sessions on the engine for the configured database."""

    def __init__(self, settings):
        # type: (Settings) -> None
        self.settings = settings
        self._db_engine_manager = DbEngineManager()

    def create_session(self):
        # type: () -> Session
        return Session(bind=self._db_engine_manager.get_db_engine(self.settings.database))


class SingletonSessionFactory(SessionFactory):
    """Hand out one existing session, so a test and the code under test share it."""

    def __init__(self, session):
        # type: (Session) -> None
        self.session = session

    def create_session(self):
        # type: () -> Session
        return self.session


class SQLRepositoryFactory(RepositoryFactory):
    """Create repositories backed by the SQL database.

    The session is created lazily so that commands that run before the database exists, such as
    creating the schema, can still be constructed.  All repositories share that one session, so a
    transaction opened through the transaction repository covers every repository's reads and
    writes.
    """

    def __init__(self, settings, session_factory):
        # type: (Settings, SessionFactory) -> None
        self.settings = settings
        self.session_factory = session_factory
        self._session = None  # type: Optional[Session]

    @property
    def session(self):
        # type: () -> Session
        if not self._session:
            self._session = self.session_factory.create_session()
        return self._session

    def create_group_repository(self):
        # type: () -> GroupRepository
        return SQLGroupRepository(self.session)

    def create_group_hierarchy_repository(self):
        # type: () -> GroupHierarchyRepository
        return SQLGroupHierarchyRepository(self.session)

    def create_group_membership_repository(self):
        # type: () -> GroupMembershipRepository
        return SQLGroupMembershipRepository(self.session)

    def create_schema_repository(self):
        # type: () -> SchemaRepository
        return SchemaRepository(self.settings)

    def create_transaction_repository(self):
        # type: () -> TransactionRepository
        return TransactionRepository(self.session)

    def create_user_repository(self):
        # type: () -> UserRepository
        return SQLUserRepository(self.session)
