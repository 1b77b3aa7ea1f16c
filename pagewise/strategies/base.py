from __future__ import annotations

from typing import ClassVar, Generic, NamedTuple, Optional, TypeVar, TYPE_CHECKING

from pagewise.request import PaginationType, RequestInputBase
from pagewise.typing import SARowDict


if TYPE_CHECKING:
    from pagewise.settings import PaginationSettings
    from pagewise.store import RecordStoreBase


RequestT = TypeVar('RequestT', bound=RequestInputBase)


class FetchResult(NamedTuple):
    """ What a strategy has loaded from the store """
    # Loaded records. May contain one extra row beyond the page: the peek row
    items: list[SARowDict]

    # Total number of active records, if counted
    total_count: Optional[int]


class PaginationStrategy(Generic[RequestT]):
    """ Base for pagination strategies. Defines the interface

    A strategy is created for a single request:
    1. fetch(): load rows from the store
    2. inspect(): look at the rows, compute the page info, drop extra rows
    """
    # Pagination type this strategy implements
    type: ClassVar[PaginationType]

    # The request to handle
    request: RequestT

    # The settings
    settings: PaginationSettings

    # Page size: the final value, after the settings have been applied
    page_size: int

    def __init__(self, request: RequestT, settings: PaginationSettings):
        """ Prepare to paginate

        Raises:
            exc.InvalidRequestError: invalid page size
        """
        self.request = request
        self.settings = settings
        self.page_size = settings.get_final_page_size(request.page_size)  # type: ignore[attr-defined]

    __slots__ = 'request', 'settings', 'page_size'

    def fetch(self, store: RecordStoreBase) -> FetchResult:
        """ Load the page, and the total count, if necessary """
        raise NotImplementedError

    def inspect(self, result: FetchResult, *, key: str = 'id'):
        """ Inspect the loaded rows: compute the page info

        May modify `result.items` in place.

        Args:
            result: What fetch() has loaded
            key: Name of the record key
        """
        raise NotImplementedError
