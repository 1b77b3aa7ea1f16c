from __future__ import annotations

import dataclasses
from typing import Optional, TYPE_CHECKING

from pagewise import exc
from pagewise.util import camel_case


if TYPE_CHECKING:
    from pagewise.engine.paginator import Paginator
    from pagewise.typing import SARowDict


@dataclasses.dataclass
class PaginationSettings:
    """ Settings for the Paginator

    This object defines additional behavior that may be used with pagination:
    page size defaults and limits, result customization, API field naming.
    """
    # The `page_size` you get by default, if not specified
    default_page_size: int = 50

    # The max number of items you get per page, regardless of the page size requested
    max_page_size: Optional[int] = None

    # What to do with `page_size <= 0`?
    # False: reject the request. True: replace it with `default_page_size`
    clamp_invalid_page_size: bool = False

    def __post_init__(self):
        assert self.default_page_size > 0, 'default_page_size must be positive'
        assert self.max_page_size is None or self.max_page_size > 0, 'max_page_size must be positive'

    # ### Callbacks for Paginator
    # Paginator and strategies will use these methods to apply the settings

    def get_final_page_size(self, page_size: Optional[int]) -> int:
        """ Callback that fine-tunes the `page_size` of a request by applying default and max sizes

        Used by: strategies to decide how many rows to put on a page.

        Raises:
            exc.InvalidRequestError: non-positive page size, unless `clamp_invalid_page_size`
        """
        # Apply default page size
        if page_size is None:
            page_size = self.default_page_size

        # Non-positive: reject, or use the default
        if page_size <= 0:
            if not self.clamp_invalid_page_size:
                raise exc.InvalidRequestError('pageSize must be > 0')
            page_size = self.default_page_size

        # Apply max page size
        if self.max_page_size:
            page_size = min(page_size, self.max_page_size)

        # Done
        return page_size

    def get_api_field_name(self, name: str) -> str:
        """ Callback: convert a response field name (e.g. snake_case) to API field name (e.g. camelCase) """
        return camel_case(name)

    def customize_result(self, paginator: Paginator, rows: list[SARowDict]) -> list[SARowDict]:
        """ Callback that customizes page results

        Used by: Paginator to customize rows right before they are put into the envelope.
        Receives the trimmed page: the peek row is already gone.

        Default behavior: none
        You can override this method for custom behavior
        """
        return rows
