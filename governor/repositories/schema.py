"""Manage the database schema.

SQLAlchemy schema operations through the ORM determine the list of tables through metaclasses when
a class representing a database table is created.  This means that every underlying model must be
imported when performing global schema operations, such as initializing or dropping the schema, so
that SQLAlchemy will know what tables to create or delete.

This class therefore imports *every* model to ensure SQLAlchemy has a complete view.  If any new
models are added, be sure to also add them to the import list.
"""

from typing import TYPE_CHECKING

from sqlalchemy import inspect

from governor.models.base.model_base import Model
from governor.models.base.session import DbEngineManager, Session
from governor.models.group import Group  # noqa: F401
from governor.models.group_hierarchy import GroupHierarchy  # noqa: F401
from governor.models.group_membership import GroupMembership  # noqa: F401
from governor.models.hierarchy_lock import HIERARCHY_LOCK_ID, HierarchyLock
from governor.models.user import User  # noqa: F401

if TYPE_CHECKING:
    from governor.settings import Settings
    from typing import List


class SchemaRepository:
    """Manipulate the database schema."""

    def __init__(self, settings):
        # type: (Settings) -> None
        self.settings = settings

    def drop_schema(self):
        # type: () -> None
        """Drop every table.  Not exposed through a service; tests use it to reset the database."""
        db_engine = DbEngineManager().get_db_engine(self.settings.database)
        Model.metadata.drop_all(db_engine)

    def initialize_schema(self):
        # type: () -> List[str]
        """Create missing tables and the hierarchy lock row.

        Safe to run against an existing database.  Returns the names of the tables it created.
        """
        db_engine = DbEngineManager().get_db_engine(self.settings.database)
        existing = set(inspect(db_engine).get_table_names())
        Model.metadata.create_all(db_engine)

        with Session(bind=db_engine) as session:
            if not HierarchyLock.get(session, id=HIERARCHY_LOCK_ID):
                HierarchyLock(id=HIERARCHY_LOCK_ID).add(session)
                session.commit()

        return [t.name for t in Model.metadata.sorted_tables if t.name not in existing]
