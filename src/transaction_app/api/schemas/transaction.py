"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import pytz
from pydantic import BaseModel, Field, field_validator

from transaction_app.core.timezone import localize, now
from transaction_app.domain.models import Transaction, TransactionType

ID_PATTERN = r"^[a-zA-Z0-9-]+$"
AMOUNT_SCALE = 2


def check_amount_scale(value: Any) -> Any:
    """
    Reject amounts written with more than two fractional digits.

    Runs on the raw input, since pydantic strips trailing zeros before its
    own decimal_places check ("100.000" would otherwise pass).
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        return value
    try:
        exponent = Decimal(str(value).strip()).as_tuple().exponent
    except InvalidOperation:
        return value  # left for pydantic to report
    if isinstance(exponent, int) and exponent < -AMOUNT_SCALE:
        raise ValueError(f"Amount must have at most {AMOUNT_SCALE} decimal places")
    return value


class TransactionCreateRequest(BaseModel):
    """Request schema for creating a transaction."""

    id: str = Field(
        ...,
        pattern=ID_PATTERN,
        description="Transaction ID (letters, digits and hyphens only)",
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=12,
        decimal_places=2,
        description="Positive amount, at most 10 integer and 2 fractional digits",
    )
    type: TransactionType = Field(..., description="CREDIT or DEBIT")
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[str] = None
    timestamp: Optional[datetime] = Field(
        default=None,
        description="Transaction time; defaults to now",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def amount_scale(cls, v: Any) -> Any:
        return check_amount_scale(v)

    def to_domain(self, tz: Optional[pytz.BaseTzInfo] = None) -> Transaction:
        """Build the domain record from this request, stamped in ``tz``."""
        return _build(self.id, self, tz)


class TransactionUpdateRequest(BaseModel):
    """
    Request schema for replacing a transaction (full update).

    ``id`` is accepted for symmetry with create but the path id always wins.
    A supplied ``timestamp`` is stored as given; without one the service's
    update timestamp policy applies.
    """

    id: Optional[str] = Field(default=None, pattern=ID_PATTERN)
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    type: TransactionType
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[str] = None
    timestamp: Optional[datetime] = None

    @field_validator("amount", mode="before")
    @classmethod
    def amount_scale(cls, v: Any) -> Any:
        return check_amount_scale(v)

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None

    def to_domain(self, txn_id: str, tz: Optional[pytz.BaseTzInfo] = None) -> Transaction:
        """Build the domain record stored under txn_id."""
        return _build(txn_id, self, tz)


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: str
    amount: Decimal
    type: TransactionType
    description: Optional[str] = None
    category: Optional[str] = None
    timestamp: datetime


def _build(
    txn_id: str,
    data: TransactionCreateRequest | TransactionUpdateRequest,
    tz: Optional[pytz.BaseTzInfo],
) -> Transaction:
    if data.timestamp is not None:
        timestamp = localize(data.timestamp, tz)
    else:
        timestamp = now(tz)
    return Transaction(
        id=txn_id,
        amount=data.amount,
        type=data.type,
        description=data.description,
        category=data.category,
        timestamp=timestamp,
    )
