from __future__ import annotations

import math
from typing import TYPE_CHECKING

from pagewise.request import PaginationType, OffsetPagination
from pagewise.request.base import check_int64

from .base import PaginationStrategy, FetchResult
from .page_info import OffsetPageInfo


if TYPE_CHECKING:
    from pagewise.settings import PaginationSettings
    from pagewise.store import RecordStoreBase


class OffsetStrategy(PaginationStrategy[OffsetPagination]):
    """ Offset pagination: skip (page-1)*page_size records, take page_size

    Every call counts the active records: the page count is needed to tell whether there's a next page.
    Concurrent inserts and deletes shift records between pages: this drift is not corrected.
    """
    type = PaginationType.OFFSET

    __slots__ = ()

    def __init__(self, request: OffsetPagination, settings: PaginationSettings):
        super().__init__(request, settings)

        # Far pages overflow the OFFSET even when the page number itself is fine
        check_int64('page offset', self.skip)

    @property
    def skip(self) -> int:
        return (self.request.page - 1) * self.page_size

    def fetch(self, store: RecordStoreBase) -> FetchResult:
        items = store.scan_offset(self.skip, self.page_size)
        total_count = store.count()
        return FetchResult(items=items, total_count=total_count)

    def inspect(self, result: FetchResult, *, key: str = 'id') -> OffsetPageInfo:
        page = self.request.page
        total_count = result.total_count or 0
        total_pages = math.ceil(total_count / self.page_size)

        # A page beyond the last one is empty, but it's not an error
        return OffsetPageInfo(
            page=page,
            page_size=self.page_size,
            total_count=total_count,
            total_pages=total_pages,
            has_previous_page=page > 1,
            has_next_page=page < total_pages,
        )
