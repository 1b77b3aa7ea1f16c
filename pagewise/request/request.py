""" Pagination request: a discriminated union of payloads """

from __future__ import annotations

from typing import Optional, Union, TypedDict

from pagewise import exc

from .base import RequestInputBase
from .pager import OffsetPagination, CursorPagination, OffsetPaginationDict, CursorPaginationDict
from .types import PaginationType


# Pagination request: exactly one of the payload variants.
# The variant class is the discriminator: a payload cannot mismatch its type.
PaginationRequest = Union[OffsetPagination, CursorPagination]


class PaginationRequestDict(TypedDict, total=False):
    """ Dict representation of a pagination request, as it comes from the client """
    paginationType: Union[int, str]
    offsetPagination: Optional[OffsetPaginationDict]
    cursorPagination: Optional[CursorPaginationDict]


# Pagination type => payload class
PAYLOAD_CLASSES: dict[PaginationType, type[RequestInputBase]] = {
    PaginationType.OFFSET: OffsetPagination,
    PaginationType.CURSOR: CursorPagination,
}


def parse_request(request: PaginationRequestDict) -> PaginationRequest:
    """ Validate a pagination request dict and convert it into a payload object

    Example:
        parse_request({'paginationType': 'cursor', 'cursorPagination': {'cursor': 50}})
        => CursorPagination(cursor=50)

    Raises:
        exc.InvalidRequestError: unknown type, missing or mismatched payload, invalid values
    """
    if not isinstance(request, dict):
        raise exc.InvalidRequestError(f'Request must be an object, "{type(request).__name__}" given')

    # Discriminator
    if request.get('paginationType') is None:
        raise exc.InvalidRequestError('"paginationType" is required')
    pagination_type = PaginationType.from_request_value(request['paginationType'])

    # Exactly one payload: the one that matches the type
    for other_type in PaginationType:
        if other_type is not pagination_type and request.get(other_type.payload_key) is not None:  # type: ignore[misc]
            raise exc.InvalidRequestError(
                f'"{other_type.payload_key}" cannot be used with pagination type "{pagination_type.name.lower()}"'
            )

    payload = request.get(pagination_type.payload_key)  # type: ignore[misc]
    if payload is None:
        raise exc.InvalidRequestError(f'"{pagination_type.payload_key}" is required')
    if not isinstance(payload, dict):
        raise exc.InvalidRequestError(f'"{pagination_type.payload_key}" must be an object')

    # Parse
    return PAYLOAD_CLASSES[pagination_type].from_request_dict(payload)


def ensure_request(input: Union[PaginationRequest, PaginationRequestDict]) -> PaginationRequest:
    """ Construct a pagination request from any valid input """
    if isinstance(input, (OffsetPagination, CursorPagination)):
        return input
    elif isinstance(input, dict):
        return parse_request(input)
    else:
        raise exc.InvalidRequestError(f'Request must be an object, "{type(input).__name__}" given')


def export_request(request: PaginationRequest) -> PaginationRequestDict:
    """ Convert a pagination request back into its dict """
    return {  # type: ignore[misc,return-value]
        'paginationType': request.type.name.lower(),
        request.type.payload_key: request.export(),
    }
