from __future__ import annotations

from collections import abc
from typing import Optional

from pagewise.typing import SARowDict, RecordId

from .base import RecordStoreBase


class ListRecordStore(RecordStoreBase):
    """ In-memory store: paginates a list of dicts

    Useful for tests and for APIs that have to paginate data that does not come from a database.

    Example:
        store = ListRecordStore([{'id': 1}, {'id': 2}], where=lambda row: row.get('is_active', True))
    """

    def __init__(self, records: abc.Iterable[SARowDict], *, key: str = 'id', where: Optional[abc.Callable[[SARowDict], bool]] = None):
        self.key = key
        self.where = where
        self.records = list(records)

    __slots__ = 'key', 'where', 'records'

    def scan_after(self, after: RecordId, limit: int) -> list[SARowDict]:
        rows = (row for row in self._active_records() if row[self.key] > after)
        return [row for row, _ in zip(rows, range(limit))]

    def scan_offset(self, skip: int, limit: int) -> list[SARowDict]:
        return self._active_records()[skip:skip + limit]

    def count(self) -> int:
        return len(self._active_records())

    def _active_records(self) -> list[SARowDict]:
        """ Active records, sorted by key """
        rows = self.records if self.where is None else filter(self.where, self.records)
        return sorted(rows, key=lambda row: row[self.key])
