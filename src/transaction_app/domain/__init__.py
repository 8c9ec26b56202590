"""Domain layer - pure business models with no external dependencies."""

from transaction_app.domain.models import Transaction, TransactionType

__all__ = [
    "Transaction",
    "TransactionType",
]
