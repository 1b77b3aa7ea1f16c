from __future__ import annotations

from time import monotonic
from typing import Optional

from pagewise.typing import SARowDict, RecordId

from .base import RecordStoreBase


class CountCachingStore(RecordStoreBase):
    """ A store wrapper that remembers the total count for `ttl` seconds

    Counting is a full scan of the active set, and offset pagination counts on every page.
    This wrapper trades accuracy for speed: within the `ttl` interval, the count may be stale
    while the data is not. Data scans always go to the wrapped store.

    Example:
        store = CountCachingStore(SARecordStore(connection, User), ttl=30)
    """

    def __init__(self, store: RecordStoreBase, ttl: float):
        assert ttl > 0, 'ttl must be positive'
        self.store = store
        self.ttl = ttl
        self._count: Optional[int] = None
        self._counted_at: float = 0.0

    __slots__ = 'store', 'ttl', '_count', '_counted_at'

    @property
    def key(self) -> str:  # type: ignore[override]
        return self.store.key

    def scan_after(self, after: RecordId, limit: int) -> list[SARowDict]:
        return self.store.scan_after(after, limit)

    def scan_offset(self, skip: int, limit: int) -> list[SARowDict]:
        return self.store.scan_offset(skip, limit)

    def count(self) -> int:
        if self._count is None or monotonic() - self._counted_at >= self.ttl:
            self._count = self.store.count()
            self._counted_at = monotonic()
        return self._count

    def invalidate(self):
        """ Forget the cached count """
        self._count = None
