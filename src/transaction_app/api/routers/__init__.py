"""API routers package."""

from transaction_app.api.routers.transactions import router as transactions_router

__all__ = [
    "transactions_router",
]
