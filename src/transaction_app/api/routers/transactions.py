"""Transaction CRUD endpoints."""

from fastapi import APIRouter, Depends, Path, Response

from transaction_app.api.deps import get_transaction_service
from transaction_app.api.schemas import (
    ErrorResponse,
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
)
from transaction_app.api.schemas.transaction import ID_PATTERN
from transaction_app.services import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def create_transaction(
    data: TransactionCreateRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """Create a new transaction."""
    created = service.create_transaction(data.to_domain(service.timezone))
    return TransactionResponse.model_validate(created)


@router.get("", response_model=list[TransactionResponse])
def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
):
    """List all transactions (order unspecified)."""
    return [TransactionResponse.model_validate(t) for t in service.list_transactions()]


@router.get(
    "/{txn_id}",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_transaction(
    txn_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Get a single transaction."""
    return TransactionResponse.model_validate(service.get_transaction(txn_id))


@router.put(
    "/{txn_id}",
    response_model=TransactionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_transaction(
    data: TransactionUpdateRequest,
    txn_id: str = Path(..., pattern=ID_PATTERN),
    service: TransactionService = Depends(get_transaction_service),
):
    """Replace an existing transaction."""
    updated = service.update_transaction(
        txn_id,
        data.to_domain(txn_id, service.timezone),
        explicit_timestamp=data.has_timestamp,
    )
    return TransactionResponse.model_validate(updated)


@router.delete(
    "/{txn_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def delete_transaction(
    txn_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    """Delete a transaction."""
    service.delete_transaction(txn_id)
    return Response(status_code=204)
