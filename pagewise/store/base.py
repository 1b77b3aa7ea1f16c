""" Record store: the collaborator that holds records

The paginator only reads from it. Every method returns records ordered by their key, ascending.
"""

from __future__ import annotations

from pagewise.typing import SARowDict, RecordId


class RecordStoreBase:
    """ Record store base

    Base for classes that implement:
    * Range scan: records with key > X, ascending, limit N
    * Offset scan: records ascending, skip N, limit M
    * Count of all records

    Only "active" records participate. What "active" means is up to the store.
    """

    # Name of the record key: unique, increasing, never reused
    key: str = 'id'

    def scan_after(self, after: RecordId, limit: int) -> list[SARowDict]:
        """ Load records whose key is greater than `after`

        Args:
            after: Lower bound for the key, exclusive. May be negative.
            limit: The max number of records to load
        """
        raise NotImplementedError

    def scan_offset(self, skip: int, limit: int) -> list[SARowDict]:
        """ Load records by position

        Args:
            skip: The number of records to skip
            limit: The max number of records to load
        """
        raise NotImplementedError

    def count(self) -> int:
        """ Count all records """
        raise NotImplementedError
