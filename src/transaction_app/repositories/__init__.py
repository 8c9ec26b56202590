"""Repository layer - data access abstractions and implementations."""

from transaction_app.repositories.protocols import (
    TransactionRepository,
    ListingCache,
)

__all__ = [
    "TransactionRepository",
    "ListingCache",
]
