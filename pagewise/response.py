""" Response envelopes: a page of records + position metadata """

from __future__ import annotations

import dataclasses
from collections import abc
from dataclasses import dataclass, field
from typing import Optional, Union

from pagewise.strategies import OffsetPageInfo, CursorPageInfo
from pagewise.typing import SARowDict
from pagewise.util import camel_case


@dataclass
class PaginationEnvelope:
    """ Response: the page and its metadata. Fields common to all pagination types """
    # Records on this page, ordered by key
    data: list[SARowDict] = field(default_factory=list)

    # Total number of active records, if known
    total_count: Optional[int] = None

    # Is there a next page?
    has_next_page: bool = False

    # Is there a previous page?
    has_previous_page: bool = False

    def export(self, field_name: abc.Callable[[str], str] = None) -> dict:
        """ Convert the envelope into a JSON dict

        Args:
            field_name: Callback to convert field names into API names. See: PaginationSettings.get_api_field_name()
        """
        field_name = field_name or camel_case
        return {
            field_name(f.name): getattr(self, f.name)
            for f in dataclasses.fields(self)
        }


@dataclass
class OffsetEnvelope(PaginationEnvelope):
    """ Response for offset pagination """
    page: int = 1
    page_size: int = 0
    total_pages: int = 0


@dataclass
class CursorEnvelope(PaginationEnvelope):
    """ Response for cursor pagination """
    next_cursor: Optional[int] = None
    previous_cursor: Optional[int] = None


Envelope = Union[OffsetEnvelope, CursorEnvelope]


def build_envelope(rows: list[SARowDict], page_info: Union[OffsetPageInfo, CursorPageInfo]) -> Envelope:
    """ Put the rows into an envelope with the metadata that matches the strategy

    Args:
        rows: Records for the page. The peek row must already be removed.
        page_info: Page info computed by the strategy
    """
    if isinstance(page_info, OffsetPageInfo):
        return OffsetEnvelope(
            data=rows,
            total_count=page_info.total_count,
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            page=page_info.page,
            page_size=page_info.page_size,
            total_pages=page_info.total_pages,
        )
    elif isinstance(page_info, CursorPageInfo):
        return CursorEnvelope(
            data=rows,
            total_count=page_info.total_count,
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            next_cursor=page_info.next_cursor,
            previous_cursor=page_info.previous_cursor,
        )
    else:
        raise NotImplementedError(type(page_info).__name__)
