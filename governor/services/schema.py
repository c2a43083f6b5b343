import logging
from typing import TYPE_CHECKING

from governor.usecases.interfaces import SchemaInterface

if TYPE_CHECKING:
    from governor.repositories.schema import SchemaRepository
    from typing import List


class SchemaService(SchemaInterface):
    def __init__(self, schema_repository):
        # type: (SchemaRepository) -> None
        self.schema_repository = schema_repository
        self._logger = logging.getLogger(__name__)

    def initialize_schema(self):
        # type: () -> List[str]
        created_tables = self.schema_repository.initialize_schema()
        for table in created_tables:
            self._logger.debug("Created table %s", table)
        return created_tables
