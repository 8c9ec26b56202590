"""Repository protocol definitions (interfaces)."""

from transaction_app.repositories.protocols.transaction_repo import TransactionRepository
from transaction_app.repositories.protocols.cache_repo import ListingCache

__all__ = [
    "TransactionRepository",
    "ListingCache",
]
