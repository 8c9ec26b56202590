"""Pydantic schemas for API request/response."""

from transaction_app.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
)
from transaction_app.api.schemas.error import ErrorResponse

__all__ = [
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionResponse",
    "ErrorResponse",
]
