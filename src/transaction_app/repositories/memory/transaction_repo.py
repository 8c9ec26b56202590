"""In-memory implementation of TransactionRepository."""

import threading
from dataclasses import replace

from transaction_app.core.exceptions import DuplicateKeyError, NotFoundError
from transaction_app.domain.models import Transaction


class InMemoryTransactionRepository:
    """
    Thread-safe dict-backed transaction store.

    A single lock guards the dict and is held only for one dict operation,
    so create/update/delete are atomic insert-if-absent, replace-if-present
    and remove-if-present. Values go in and come out as copies.
    """

    def __init__(self):
        self._items: dict[str, Transaction] = {}
        self._lock = threading.Lock()

    def create(self, transaction: Transaction) -> Transaction:
        """Insert a transaction if its id is absent."""
        stored = replace(transaction)
        with self._lock:
            existing = self._items.setdefault(stored.id, stored)
        if existing is not stored:
            raise DuplicateKeyError("Transaction", transaction.id)
        return replace(stored)

    def update(
        self,
        txn_id: str,
        transaction: Transaction,
        preserve_timestamp: bool = False,
    ) -> Transaction:
        """Replace the transaction at txn_id, pinning its id to the key."""
        stored = replace(transaction, id=txn_id)
        with self._lock:
            current = self._items.get(txn_id)
            if current is None:
                raise NotFoundError("Transaction", txn_id)
            if preserve_timestamp:
                stored.timestamp = current.timestamp
            self._items[txn_id] = stored
        return replace(stored)

    def delete(self, txn_id: str) -> None:
        """Remove the transaction at txn_id."""
        with self._lock:
            removed = self._items.pop(txn_id, None)
        if removed is None:
            raise NotFoundError("Transaction", txn_id)

    def get_by_id(self, txn_id: str) -> Transaction:
        """Retrieve a transaction by id."""
        with self._lock:
            current = self._items.get(txn_id)
        if current is None:
            raise NotFoundError("Transaction", txn_id)
        return replace(current)

    def list_all(self) -> list[Transaction]:
        """Snapshot copy of all transactions."""
        with self._lock:
            values = list(self._items.values())
        return [replace(t) for t in values]

    def count(self) -> int:
        """Number of live transactions."""
        with self._lock:
            return len(self._items)
