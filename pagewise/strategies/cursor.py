from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from pagewise.request import PaginationType, CursorPagination
from pagewise.request.base import check_int64

from .base import PaginationStrategy, FetchResult
from .page_info import CursorPageInfo


if TYPE_CHECKING:
    from pagewise.settings import PaginationSettings
    from pagewise.store import RecordStoreBase


class CursorStrategy(PaginationStrategy[CursorPagination]):
    """ Cursor (keyset) pagination: load records with key > cursor

    The cursor is the last id the client has seen.
    We always load one more row than requested (the peek row) to check if there's a next page.
    The peek row is never returned.

    Going backwards is approximate: the lower bound is moved back by two pages.
    This only works when ids have no gaps. Keyset pagination has no way back without
    remembering where the previous windows started.
    """
    type = PaginationType.CURSOR

    __slots__ = ()

    def __init__(self, request: CursorPagination, settings: PaginationSettings):
        super().__init__(request, settings)

        # The peek row and the rewind both move the numbers further than the request says
        check_int64('pageSize', self.page_size + 1)
        check_int64('cursor', self.lower_bound)

    @property
    def lower_bound(self) -> int:
        """ Key lower bound, exclusive. May be negative """
        if self.request.is_previous_page:
            return self.request.cursor - 2 * self.page_size
        else:
            return self.request.cursor

    def fetch(self, store: RecordStoreBase) -> FetchResult:
        # Load one more row to see if there's a next page
        items = store.scan_after(self.lower_bound, self.page_size + 1)

        # Total count: only if requested.
        # Cursor pagination is a walk, not an index: the total is optional.
        total_count = store.count() if self.request.include_total_count else None
        return FetchResult(items=items, total_count=total_count)

    def inspect(self, result: FetchResult, *, key: str = 'id') -> CursorPageInfo:
        rows = result.items
        cursor = self.request.cursor

        # Have next page?
        has_next_page = len(rows) > self.page_size

        # We've loaded one extra row. Now remove it.
        if has_next_page:
            del rows[self.page_size:]

        # Next cursor: the last id on the page
        next_cursor: Optional[int]
        if has_next_page and rows:
            next_cursor = rows[-1][key]
        else:
            next_cursor = None

        # Ids start with 1: cursor 0 is always the beginning
        has_previous_page = cursor > 0

        return CursorPageInfo(
            total_count=result.total_count,
            next_cursor=next_cursor,
            previous_cursor=cursor if has_previous_page else None,
            has_previous_page=has_previous_page,
            has_next_page=has_next_page,
        )
