""" Pagination strategies: offset and cursor """

from .base import PaginationStrategy, FetchResult
from .page_info import OffsetPageInfo, CursorPageInfo
from .offset import OffsetStrategy
from .cursor import CursorStrategy
