"""Error response schema shared by all exception handlers."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from transaction_app.core.timezone import now


class ErrorResponse(BaseModel):
    """Body returned for every non-2xx response."""

    error: str
    message: str
    status: int
    timestamp: datetime = Field(default_factory=now)
    details: Optional[list[str]] = None
