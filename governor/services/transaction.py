from typing import TYPE_CHECKING

from governor.usecases.interfaces import TransactionInterface

if TYPE_CHECKING:
    from governor.repositories.transaction import TransactionRepository
    from typing import ContextManager


class TransactionService(TransactionInterface):
    """Manage storage layer transactions encompassing multiple service actions."""

    def __init__(self, transaction_repository):
        # type: (TransactionRepository) -> None
        self.transaction_repository = transaction_repository

    def transaction(self):
        # type: () -> ContextManager[None]
        return self.transaction_repository.transaction()
