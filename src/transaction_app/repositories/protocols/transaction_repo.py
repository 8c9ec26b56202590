"""Transaction repository protocol."""

from typing import Protocol

from transaction_app.domain.models import Transaction


class TransactionRepository(Protocol):
    """
    Interface for transaction data access.

    Every mutating method is a single atomic check-and-act step;
    implementations never expose separate existence checks.
    """

    def create(self, transaction: Transaction) -> Transaction:
        """Insert a transaction if its id is absent, else raise DuplicateKeyError."""
        ...

    def update(
        self,
        txn_id: str,
        transaction: Transaction,
        preserve_timestamp: bool = False,
    ) -> Transaction:
        """Replace the transaction stored at txn_id, else raise NotFoundError."""
        ...

    def delete(self, txn_id: str) -> None:
        """Remove the transaction stored at txn_id, else raise NotFoundError."""
        ...

    def get_by_id(self, txn_id: str) -> Transaction:
        """Retrieve a transaction by id, else raise NotFoundError."""
        ...

    def list_all(self) -> list[Transaction]:
        """Snapshot of all transactions, in no particular order."""
        ...

    def count(self) -> int:
        """Number of live transactions."""
        ...
