"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from transaction_app.core.timezone import now
from transaction_app.domain.models.enums import TransactionType


@dataclass
class Transaction:
    """
    A single transaction record.

    Instances are values: the repository stores its own copy and hands out
    copies, so mutating a returned record never changes stored state.
    Field constraints (id pattern, amount precision, description length)
    are enforced at the API boundary, not here.
    """

    id: str
    amount: Decimal
    type: TransactionType
    description: Optional[str] = None
    category: Optional[str] = None
    timestamp: datetime = field(default_factory=now)

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = TransactionType(self.type)
        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))
