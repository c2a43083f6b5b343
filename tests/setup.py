"""Utilities to set up test cases.

Provides a SetupTest object that creates the database, provides repository, service, and use case
factories for individual tests, and provides methods to create objects in the test database.
Objects are referred to by name (groups) or email (users) and created whenever needed, so one can
just call:

    with setup.transaction():
        setup.add_user_to_group("gary@a.co", "some-group")

without creating the user and group first.  The generated ids are available afterwards through
group_id() and user_id().
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING

from governor.repositories.factory import (
    SessionFactory,
    SingletonSessionFactory,
    SQLRepositoryFactory,
)
from governor.repositories.schema import SchemaRepository
from governor.services.factory import ServiceFactory
from governor.settings import Settings
from governor.usecases.factory import UseCaseFactory
from tests.path_util import db_url

if TYPE_CHECKING:
    from datetime import datetime
    from py._path.local import LocalPath
    from typing import Dict, Iterator, Optional


class SetupTest:
    """Set up the environment for a test.

    Most actions should be done inside of a transaction, created via the transaction() method and
    used as a context handler.  This will ensure that the test setup is committed to the database
    before the test starts running.

    Attributes:
        settings: Settings object for tests (only the database is configured)
        session: The underlying database session
        repository_factory: Factory for repository objects
        service_factory: Factory for service objects
        usecase_factory: Factory for usecase objects
    """

    def __init__(self, tmpdir: LocalPath) -> None:
        self.settings = Settings()
        self.settings.database = db_url(tmpdir)
        self._group_ids = {}  # type: Dict[str, str]
        self._user_ids = {}  # type: Dict[str, str]

        self.initialize_database()
        self.open_database()

    def initialize_database(self) -> None:
        schema_repository = SchemaRepository(self.settings)

        # If using a persistent database, clear the database first.
        if "GOVERNOR_TEST_DATABASE" in os.environ:
            schema_repository.drop_schema()

        schema_repository.initialize_schema()

    def open_database(self) -> None:
        self.session = SessionFactory(self.settings).create_session()
        session_factory = SingletonSessionFactory(self.session)
        self.repository_factory = SQLRepositoryFactory(self.settings, session_factory)
        self.service_factory = ServiceFactory(self.settings, self.repository_factory)
        self.usecase_factory = UseCaseFactory(self.settings, self.service_factory)
        self._transaction_service = self.service_factory.create_transaction_service()

    def close(self) -> None:
        self.session.close()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._transaction_service.transaction():
            yield

    def group_id(self, name: str) -> str:
        return self._group_ids[name]

    def user_id(self, email: str) -> str:
        return self._user_ids[email]

    def create_group(self, name: str) -> str:
        """Create a group, does nothing if it already exists."""
        if name not in self._group_ids:
            group_service = self.service_factory.create_group_service()
            self._group_ids[name] = group_service.create_group(name)
        return self._group_ids[name]

    def create_user(self, email: str) -> str:
        """Create a user, does nothing if it already exists."""
        if email not in self._user_ids:
            user_service = self.service_factory.create_user_service()
            self._user_ids[email] = user_service.create_user(email.split("@")[0], email)
        return self._user_ids[email]

    def add_user_to_group(
        self, user: str, group: str, is_admin: bool = False, expires_at: Optional[datetime] = None
    ) -> None:
        user_id = self.create_user(user)
        group_id = self.create_group(group)
        user_service = self.service_factory.create_user_service()
        user_service.add_user_to_group(user_id, group_id, is_admin, expires_at)

    def add_group_to_group(
        self, member: str, group: str, expires_at: Optional[datetime] = None
    ) -> None:
        """Nest member inside group without running the cycle guard."""
        member_id = self.create_group(member)
        group_id = self.create_group(group)
        group_hierarchy_repository = self.repository_factory.create_group_hierarchy_repository()
        group_hierarchy_repository.add_hierarchy(group_id, member_id, expires_at)

    def delete_group(self, group: str) -> None:
        group_service = self.service_factory.create_group_service()
        group_service.delete_group(self.group_id(group))
