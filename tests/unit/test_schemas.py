"""
Unit tests for request schemas (field validation).

Validation happens here, before any record reaches the service.
"""

from datetime import datetime
from decimal import Decimal

import pytest
import pytz
from pydantic import ValidationError as PydanticValidationError

from transaction_app.api.schemas import TransactionCreateRequest, TransactionUpdateRequest
from transaction_app.domain.models import TransactionType


def _valid(**overrides) -> dict:
    data = {"id": "t-1", "amount": "100.00", "type": "CREDIT"}
    data.update(overrides)
    return data


class TestCreateRequestValidation:
    """Constraint checks on TransactionCreateRequest."""

    def test_valid_minimal(self):
        request = TransactionCreateRequest(**_valid())

        assert request.amount == Decimal("100.00")
        assert request.type == TransactionType.CREDIT
        assert request.description is None

    @pytest.mark.parametrize("txn_id", ["", "has space", "under_score", "dot.id", "ü"])
    def test_bad_id(self, txn_id):
        with pytest.raises(PydanticValidationError):
            TransactionCreateRequest(**_valid(id=txn_id))

    @pytest.mark.parametrize("amount", ["0", "-5.00", "1.001", "100.000", "12345678901.00"])
    def test_bad_amount(self, amount):
        with pytest.raises(PydanticValidationError):
            TransactionCreateRequest(**_valid(amount=amount))

    @pytest.mark.parametrize("amount", ["0.01", "1234567890.12", "7"])
    def test_amount_boundaries(self, amount):
        assert TransactionCreateRequest(**_valid(amount=amount)).amount == Decimal(amount)

    def test_missing_required_fields(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            TransactionCreateRequest()

        missing = {err["loc"][0] for err in exc_info.value.errors()}
        assert missing == {"id", "amount", "type"}

    def test_bad_type(self):
        with pytest.raises(PydanticValidationError):
            TransactionCreateRequest(**_valid(type="TRANSFER"))

    def test_description_length(self):
        TransactionCreateRequest(**_valid(description="x" * 500))
        with pytest.raises(PydanticValidationError):
            TransactionCreateRequest(**_valid(description="x" * 501))


class TestToDomain:
    """Conversion from requests to domain records."""

    def test_create_to_domain_sets_timestamp(self):
        transaction = TransactionCreateRequest(**_valid(category="rent")).to_domain()

        assert transaction.id == "t-1"
        assert transaction.category == "rent"
        assert transaction.timestamp.tzinfo is not None

    def test_explicit_naive_timestamp_is_localized(self):
        transaction = TransactionCreateRequest(
            **_valid(timestamp="2024-06-15T14:30:00")
        ).to_domain()

        assert transaction.timestamp.tzinfo is not None
        assert transaction.timestamp.replace(tzinfo=None) == datetime(2024, 6, 15, 14, 30)

    def test_update_to_domain_uses_path_id(self):
        request = TransactionUpdateRequest(id="other", amount="5.00", type="DEBIT")

        transaction = request.to_domain("t-1")

        assert transaction.id == "t-1"
        assert transaction.type == TransactionType.DEBIT

    def test_update_id_optional(self):
        request = TransactionUpdateRequest(amount="5.00", type="DEBIT")

        assert request.id is None


class TestAmountScale:
    """Amounts written with trailing zeros past two places are rejected."""

    def test_update_rejects_three_places(self):
        with pytest.raises(PydanticValidationError):
            TransactionUpdateRequest(amount="5.000", type="DEBIT")

    def test_numeric_amount_within_scale(self):
        assert TransactionCreateRequest(**_valid(amount=42.5)).amount == Decimal("42.5")

    def test_garbage_amount_still_reported(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            TransactionCreateRequest(**_valid(amount="abc"))

        assert exc_info.value.errors()[0]["loc"] == ("amount",)

    def test_to_domain_uses_given_zone(self):
        shanghai = pytz.timezone("Asia/Shanghai")

        transaction = TransactionCreateRequest(**_valid()).to_domain(shanghai)

        assert transaction.timestamp.tzinfo.zone == "Asia/Shanghai"
