"""Service layer - business logic orchestration."""

from transaction_app.services.transaction_service import TransactionService

__all__ = [
    "TransactionService",
]
