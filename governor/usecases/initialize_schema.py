from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from governor.usecases.interfaces import SchemaInterface
    from typing import List


class InitializeSchemaUI(metaclass=ABCMeta):
    """Abstract base class for UI for InitializeSchema."""

    @abstractmethod
    def initialized_schema(self, created_tables):
        # type: (List[str]) -> None
        """created_tables is empty if the database was already up to date."""
        pass


class InitializeSchema:
    """Bring a database up to the current schema, creating tables and the hierarchy lock row."""

    def __init__(self, ui, schema_service):
        # type: (InitializeSchemaUI, SchemaInterface) -> None
        self.ui = ui
        self.schema_service = schema_service

    def initialize_schema(self):
        # type: () -> None
        created_tables = self.schema_service.initialize_schema()
        self.ui.initialized_schema(created_tables)
