"""In-memory implementations of ListingCache."""

import threading
from dataclasses import replace
from typing import Optional

from transaction_app.domain.models import Transaction


class InMemoryListingCache:
    """
    Single-snapshot cache for the full transaction listing.

    ``invalidate()`` clears the snapshot and bumps a generation counter;
    ``put()`` only stores a snapshot whose reader began in the current
    generation, so a listing computed before a mutation is never cached
    after that mutation's invalidation.
    """

    def __init__(self):
        self._snapshot: Optional[list[Transaction]] = None
        self._generation = 0
        self._lock = threading.Lock()

    def get(self) -> Optional[list[Transaction]]:
        with self._lock:
            snapshot = self._snapshot
        if snapshot is None:
            return None
        return [replace(t) for t in snapshot]

    def begin(self) -> int:
        with self._lock:
            return self._generation

    def put(self, snapshot: list[Transaction], token: int) -> None:
        frozen = [replace(t) for t in snapshot]
        with self._lock:
            if token == self._generation:
                self._snapshot = frozen

    def invalidate(self) -> None:
        with self._lock:
            self._generation += 1
            self._snapshot = None


class NullListingCache:
    """Cache that never holds anything (caching disabled)."""

    def get(self) -> Optional[list[Transaction]]:
        return None

    def begin(self) -> int:
        return 0

    def put(self, snapshot: list[Transaction], token: int) -> None:
        return None

    def invalidate(self) -> None:
        return None
