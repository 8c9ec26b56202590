"""Domain models package."""

from transaction_app.domain.models.enums import TransactionType
from transaction_app.domain.models.transaction import Transaction

__all__ = [
    "TransactionType",
    "Transaction",
]
