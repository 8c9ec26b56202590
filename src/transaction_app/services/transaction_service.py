"""Transaction service - the single entry point for record operations."""

import logging
from dataclasses import replace
from typing import Optional

import pytz

from transaction_app.core.exceptions import DuplicateKeyError, NotFoundError
from transaction_app.core.timezone import DEFAULT_TZ, now
from transaction_app.domain.models import Transaction
from transaction_app.repositories.protocols import TransactionRepository, ListingCache

logger = logging.getLogger(__name__)


class TransactionService:
    """
    Facade over the transaction store and the listing cache.

    Store errors (DuplicateKeyError, NotFoundError) propagate unchanged,
    after a WARNING log line. Every successful mutation writes to the
    store first, then invalidates the listing cache.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        listing_cache: ListingCache,
        refresh_timestamp_on_update: bool = True,
        tz: Optional[pytz.BaseTzInfo] = None,
    ):
        self._transaction_repo = transaction_repo
        self._listing_cache = listing_cache
        self._refresh_timestamp_on_update = refresh_timestamp_on_update
        self._tz = tz or DEFAULT_TZ

    @property
    def timezone(self) -> pytz.BaseTzInfo:
        """Zone used for timestamps this service stamps."""
        return self._tz

    def create_transaction(self, transaction: Transaction) -> Transaction:
        """Store a new transaction; raises DuplicateKeyError if the id is taken."""
        try:
            created = self._transaction_repo.create(transaction)
        except DuplicateKeyError:
            logger.warning("Rejected duplicate transaction %s", transaction.id)
            raise
        self._listing_cache.invalidate()
        logger.info("Created transaction %s", created.id)
        return created

    def update_transaction(
        self,
        txn_id: str,
        transaction: Transaction,
        explicit_timestamp: bool = False,
    ) -> Transaction:
        """
        Replace the transaction at txn_id.

        The stored id is always txn_id, whatever the payload says. When the
        caller supplied the timestamp (``explicit_timestamp``) it is stored
        as given. Otherwise, with ``refresh_timestamp_on_update`` the
        replacement is stamped with the current time, and without it the
        original timestamp is kept.
        """
        if not explicit_timestamp and self._refresh_timestamp_on_update:
            transaction = replace(transaction, timestamp=now(self._tz))
        try:
            updated = self._transaction_repo.update(
                txn_id,
                transaction,
                preserve_timestamp=not explicit_timestamp
                and not self._refresh_timestamp_on_update,
            )
        except NotFoundError:
            logger.warning("Update of missing transaction %s", txn_id)
            raise
        self._listing_cache.invalidate()
        logger.info("Updated transaction %s", txn_id)
        return updated

    def delete_transaction(self, txn_id: str) -> None:
        """Remove the transaction at txn_id; raises NotFoundError if absent."""
        try:
            self._transaction_repo.delete(txn_id)
        except NotFoundError:
            logger.warning("Delete of missing transaction %s", txn_id)
            raise
        self._listing_cache.invalidate()
        logger.info("Deleted transaction %s", txn_id)

    def get_transaction(self, txn_id: str) -> Transaction:
        """Get a transaction by id; raises NotFoundError if absent."""
        try:
            return self._transaction_repo.get_by_id(txn_id)
        except NotFoundError:
            logger.warning("Transaction %s not found", txn_id)
            raise

    def list_transactions(self) -> list[Transaction]:
        """List all transactions, served from the cache when it is warm."""
        cached = self._listing_cache.get()
        if cached is not None:
            return cached

        token = self._listing_cache.begin()
        snapshot = self._transaction_repo.list_all()
        self._listing_cache.put(snapshot, token)
        logger.debug("Listing cache refilled with %d transactions", len(snapshot))
        return snapshot

    def count_transactions(self) -> int:
        """Number of live transactions."""
        return self._transaction_repo.count()
