"""Cache protocol for the derived transaction listing."""

from typing import Protocol, Optional

from transaction_app.domain.models import Transaction


class ListingCache(Protocol):
    """
    Interface for the read-through cache in front of the full listing.

    Readers call ``begin()`` before computing a snapshot and pass the token
    to ``put()``; a put is discarded if ``invalidate()`` ran in between.
    """

    def get(self) -> Optional[list[Transaction]]:
        """Return the cached listing, or None on a miss."""
        ...

    def begin(self) -> int:
        """Return a token identifying the current cache generation."""
        ...

    def put(self, snapshot: list[Transaction], token: int) -> None:
        """Store a snapshot computed during generation ``token``."""
        ...

    def invalidate(self) -> None:
        """Drop the cached listing."""
        ...
