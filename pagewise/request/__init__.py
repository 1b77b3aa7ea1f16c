""" Pagination requests: parsing and validation

These classes only represent the request. They never touch the record store.
"""

from .types import PaginationType
from .base import RequestInputBase
from .pager import OffsetPagination, CursorPagination, OffsetPaginationDict, CursorPaginationDict
from .request import PaginationRequest, PaginationRequestDict, parse_request, ensure_request, export_request
