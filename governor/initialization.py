"""Setup functions common to all Governor UIs."""

from typing import TYPE_CHECKING

from governor.repositories.factory import SessionFactory, SQLRepositoryFactory
from governor.services.factory import ServiceFactory
from governor.usecases.factory import UseCaseFactory

if TYPE_CHECKING:
    from governor.settings import Settings
    from typing import Optional


def create_sql_usecase_factory(settings, session_factory=None):
    # type: (Settings, Optional[SessionFactory]) -> UseCaseFactory
    """Create a SQL-backed UseCaseFactory, with optional injection of a session factory.

    Session factory injection is supported primarily for tests.  If not injected, sessions will be
    created on demand from the configured database.
    """
    if not session_factory:
        session_factory = SessionFactory(settings)
    repository_factory = SQLRepositoryFactory(settings, session_factory)
    service_factory = ServiceFactory(settings, repository_factory)
    return UseCaseFactory(settings, service_factory)
