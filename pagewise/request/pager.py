""" Pagination request payloads: one class per pagination type """

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, TypedDict

from pagewise import exc

from .base import RequestInputBase, parse_int_field, parse_bool_field, check_int64
from .types import PaginationType


class OffsetPaginationDict(TypedDict, total=False):
    """ Dict representation of the offset pagination payload """
    page: int
    pageSize: Optional[int]


class CursorPaginationDict(TypedDict, total=False):
    """ Dict representation of the cursor pagination payload """
    cursor: int
    isPreviousPage: bool
    includeTotalCount: bool
    pageSize: Optional[int]


@dataclass(frozen=True)
class OffsetPagination(RequestInputBase):
    """ Offset pagination request: page number + page size

    The page number is 1-based.
    """
    type: ClassVar[PaginationType] = PaginationType.OFFSET

    # Page number: 1, 2, 3, ...
    page: int = 1

    # Page size. `None` means: use the default from the settings
    page_size: Optional[int] = None

    def __post_init__(self):
        _check_int('page', self.page)
        _check_optional_int('pageSize', self.page_size)

        if self.page < 1:
            raise exc.InvalidRequestError('page must be ≥ 1')
        check_int64('page', self.page)
        if self.page_size is not None:
            check_int64('pageSize', self.page_size)

    @classmethod
    def from_request_dict(cls, payload: OffsetPaginationDict):  # type: ignore[override]
        page = parse_int_field('page', payload.get('page'))
        return cls(
            page=1 if page is None else page,
            page_size=parse_int_field('pageSize', payload.get('pageSize')),
        )

    def export(self) -> OffsetPaginationDict:
        return OffsetPaginationDict(page=self.page, pageSize=self.page_size)


@dataclass(frozen=True)
class CursorPagination(RequestInputBase):
    """ Cursor pagination request: the last seen id + page size

    The cursor is the `id` of the last record the client has seen. 0 means "start of collection".
    """
    type: ClassVar[PaginationType] = PaginationType.CURSOR

    # Cursor: the last seen id
    cursor: int = 0

    # Page size. `None` means: use the default from the settings
    page_size: Optional[int] = None

    # Going backwards?
    is_previous_page: bool = False

    # Run an additional query to count all records?
    include_total_count: bool = False

    def __post_init__(self):
        _check_int('cursor', self.cursor)
        _check_optional_int('pageSize', self.page_size)
        if not isinstance(self.is_previous_page, bool):
            raise exc.InvalidRequestError('"isPreviousPage" must be a boolean')
        if not isinstance(self.include_total_count, bool):
            raise exc.InvalidRequestError('"includeTotalCount" must be a boolean')

        if self.cursor < 0:
            raise exc.InvalidRequestError('cursor must be non-negative')
        check_int64('cursor', self.cursor)
        if self.page_size is not None:
            check_int64('pageSize', self.page_size)

    @classmethod
    def from_request_dict(cls, payload: CursorPaginationDict):  # type: ignore[override]
        cursor = parse_int_field('cursor', payload.get('cursor'))
        return cls(
            cursor=0 if cursor is None else cursor,
            page_size=parse_int_field('pageSize', payload.get('pageSize')),
            is_previous_page=bool(parse_bool_field('isPreviousPage', payload.get('isPreviousPage'))),
            include_total_count=bool(parse_bool_field('includeTotalCount', payload.get('includeTotalCount'))),
        )

    def export(self) -> CursorPaginationDict:
        return CursorPaginationDict(
            cursor=self.cursor,
            isPreviousPage=self.is_previous_page,
            includeTotalCount=self.include_total_count,
            pageSize=self.page_size,
        )


def _check_int(name: str, value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise exc.InvalidRequestError(f'"{name}" must be an integer')


def _check_optional_int(name: str, value):
    if value is not None:
        _check_int(name, value)
