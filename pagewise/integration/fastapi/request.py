import fastapi
from typing import Optional

from pagewise.request import PaginationRequest, PaginationRequestDict, parse_request


def pagination_request(*,
        pagination_type: Optional[str] = fastapi.Query(
            None,
            alias='paginationType',
            title='Pagination type',
            description='`offset` or `cursor`. Numeric values are accepted: `0` for offset, `1` for cursor.',
        ),
        offset_page: Optional[str] = fastapi.Query(
            None,
            alias='offsetPagination.page',
            title='Offset pagination. Page number, starting with 1.',
        ),
        offset_page_size: Optional[str] = fastapi.Query(
            None,
            alias='offsetPagination.pageSize',
            title='Offset pagination. The number of items per page.',
        ),
        cursor: Optional[str] = fastapi.Query(
            None,
            alias='cursorPagination.cursor',
            title='Cursor pagination. The last seen id; `0` to start from the beginning.',
        ),
        cursor_is_previous_page: Optional[str] = fastapi.Query(
            None,
            alias='cursorPagination.isPreviousPage',
            title='Cursor pagination. Go to the previous page.',
        ),
        cursor_include_total_count: Optional[str] = fastapi.Query(
            None,
            alias='cursorPagination.includeTotalCount',
            title='Cursor pagination. Count all items.',
        ),
        cursor_page_size: Optional[str] = fastapi.Query(
            None,
            alias='cursorPagination.pageSize',
            title='Cursor pagination. The number of items per page.',
        ),
) -> PaginationRequest:
    """ Get the pagination request from the request parameters

    Example:
        /api/users?paginationType=cursor&cursorPagination.cursor=50&cursorPagination.pageSize=10

    A payload is present when any of its parameters is given.
    Values are passed as strings: parse_request() converts them.

    Raises:
        exc.InvalidRequestError
    """
    offset_payload = _payload(
        page=offset_page,
        pageSize=offset_page_size,
    )
    cursor_payload = _payload(
        cursor=cursor,
        isPreviousPage=cursor_is_previous_page,
        includeTotalCount=cursor_include_total_count,
        pageSize=cursor_page_size,
    )

    # Parse
    request_dict = PaginationRequestDict(
        paginationType=pagination_type,  # type: ignore[typeddict-item]
        offsetPagination=offset_payload,  # type: ignore[typeddict-item]
        cursorPagination=cursor_payload,  # type: ignore[typeddict-item]
    )
    return parse_request(request_dict)


def _payload(**fields: Optional[str]) -> Optional[dict]:
    """ Make a payload dict from the given parameters, or None if none are given """
    payload = {name: value for name, value in fields.items() if value is not None}
    return payload or None
