"""
Pytest configuration and fixtures for the transaction records service tests.

This module provides:
- Settings fixtures (cache on/off, timestamp policy)
- Repository, cache and service fixtures
- Factory helpers for transactions
- FastAPI test client bound to a fresh AppContext
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
import pytz
from fastapi.testclient import TestClient

from transaction_app.app_context import AppContext
from transaction_app.config.settings import Settings, reset_settings
from transaction_app.domain.models import Transaction, TransactionType
from transaction_app.main import create_app
from transaction_app.repositories.memory import (
    InMemoryTransactionRepository,
    InMemoryListingCache,
    NullListingCache,
)
from transaction_app.services import TransactionService


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in UTC."""
    return pytz.utc.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture(autouse=True)
def clean_state():
    """Reset global settings between tests."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def transaction_repo() -> InMemoryTransactionRepository:
    """Provide an empty in-memory TransactionRepository."""
    return InMemoryTransactionRepository()


@pytest.fixture
def listing_cache() -> InMemoryListingCache:
    """Provide an empty listing cache."""
    return InMemoryListingCache()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture(params=[True, False], ids=["cached", "uncached"])
def cache_enabled(request) -> bool:
    """Run a test once with the listing cache and once without."""
    return request.param


@pytest.fixture
def transaction_service(transaction_repo, cache_enabled) -> TransactionService:
    """Provide test TransactionService, parametrized over caching."""
    return TransactionService(
        transaction_repo=transaction_repo,
        listing_cache=InMemoryListingCache() if cache_enabled else NullListingCache(),
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for Transaction objects with sensible defaults."""

    def _make(
        txn_id: str = "t1",
        amount: str = "100.00",
        txn_type: TransactionType = TransactionType.CREDIT,
        description: Optional[str] = "Test transaction",
        category: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> Transaction:
        transaction = Transaction(
            id=txn_id,
            amount=Decimal(amount),
            type=txn_type,
            description=description,
            category=category,
        )
        if timestamp is not None:
            transaction.timestamp = timestamp
        return transaction

    return _make


@pytest.fixture
def transaction_payload() -> Callable[..., dict]:
    """Factory for JSON request bodies."""

    def _payload(txn_id: str = "test-id", **overrides) -> dict:
        payload = {
            "id": txn_id,
            "amount": "100.00",
            "type": "CREDIT",
            "description": "Test transaction",
        }
        payload.update(overrides)
        return payload

    return _payload


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def app_context(cache_enabled) -> AppContext:
    """Provide a fresh AppContext (fresh store) per test."""
    return AppContext(Settings(cache_enabled=cache_enabled, _env_file=None))


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to a fresh AppContext."""
    app = create_app(app_context)
    with TestClient(app) as c:
        yield c
