from dataclasses import dataclass
from typing import Optional


@dataclass
class OffsetPageInfo:
    """ Page info for the "offset" strategy """
    # Current page number, 1-based
    page: int

    # Page size
    page_size: int

    # Total number of active records
    total_count: int

    # Total number of pages
    total_pages: int

    # Do we have any prev page?
    has_previous_page: bool

    # Do we have any next page?
    has_next_page: bool


@dataclass
class CursorPageInfo:
    """ Page info for the "cursor" strategy """
    # Total number of active records. Only if requested
    total_count: Optional[int]

    # Cursor to get the next page: the last id on this page
    next_cursor: Optional[int]

    # Cursor to get the previous page: the input cursor, verbatim
    previous_cursor: Optional[int]

    # Do we have any prev page?
    has_previous_page: bool

    # Do we have any next page?
    has_next_page: bool
