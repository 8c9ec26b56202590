"""Dependency injection for FastAPI."""

from fastapi import Depends, Request

from transaction_app.app_context import AppContext
from transaction_app.services import TransactionService


def get_app_context(request: Request) -> AppContext:
    """Provide the AppContext owned by the running application."""
    return request.app.state.context


def get_transaction_service(
    context: AppContext = Depends(get_app_context),
) -> TransactionService:
    """Provide TransactionService instance."""
    return context.transactions
