"""In-memory repository implementations."""

from transaction_app.repositories.memory.transaction_repo import InMemoryTransactionRepository
from transaction_app.repositories.memory.cache_repo import (
    InMemoryListingCache,
    NullListingCache,
)

__all__ = [
    "InMemoryTransactionRepository",
    "InMemoryListingCache",
    "NullListingCache",
]
