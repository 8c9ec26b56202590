"""Application context owning the store, cache and service.

The context is built explicitly and handed to whatever consumes it (the
FastAPI app, tests, scripts); there is no module-level store.
"""

from typing import Optional

import pytz

from transaction_app.config.settings import Settings, get_settings
from transaction_app.core.timezone import get_zone
from transaction_app.repositories.memory import (
    InMemoryTransactionRepository,
    InMemoryListingCache,
    NullListingCache,
)
from transaction_app.repositories.protocols import ListingCache, TransactionRepository
from transaction_app.services import TransactionService


class AppContext:
    """
    Composition root for in-process service access.

    Each context owns exactly one transaction store; two contexts never
    share records.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize application context.

        Args:
            settings: Optional settings. If not provided, uses the global settings.
        """
        self._settings = settings or get_settings()
        self._timezone = get_zone(self._settings.timezone)

        self._transaction_repo: TransactionRepository = InMemoryTransactionRepository()
        self._listing_cache: ListingCache = (
            InMemoryListingCache() if self._settings.cache_enabled else NullListingCache()
        )

        # Service instance (lazy initialized)
        self._transaction_service: Optional[TransactionService] = None

    @property
    def settings(self) -> Settings:
        """Get the settings this context was built with."""
        return self._settings

    @property
    def timezone(self) -> pytz.BaseTzInfo:
        """Get the zone this context stamps new records in."""
        return self._timezone

    @property
    def transactions(self) -> TransactionService:
        """Get the TransactionService instance."""
        if self._transaction_service is None:
            self._transaction_service = TransactionService(
                transaction_repo=self._transaction_repo,
                listing_cache=self._listing_cache,
                refresh_timestamp_on_update=self._settings.refresh_timestamp_on_update,
                tz=self._timezone,
            )
        return self._transaction_service
