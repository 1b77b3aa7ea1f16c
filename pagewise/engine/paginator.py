""" Paginator: validates a request, runs the strategy against a store, builds the envelope """

from __future__ import annotations

import logging
from functools import partial
from typing import Union

from pagewise import exc
from pagewise.request import PaginationType, PaginationRequest, PaginationRequestDict, ensure_request
from pagewise.response import Envelope, build_envelope
from pagewise.settings import PaginationSettings
from pagewise.store import RecordStoreBase
from pagewise.strategies import PaginationStrategy, OffsetStrategy, CursorStrategy

logger = logging.getLogger(__name__)


class Paginator:
    """ Paginator: serves pages from a record store

    The store is the only collaborator. The paginator keeps no state between requests:
    every call to paginate() is independent.

    Example:
        paginator = Paginator(SARecordStore(connection, models.User))
        envelope = paginator.paginate({'paginationType': 'offset', 'offsetPagination': {'page': 2}})
        return envelope.export()
    """
    # The store to load records from
    store: RecordStoreBase

    # Pagination settings
    settings: PaginationSettings

    def __init__(self, store: RecordStoreBase, settings: PaginationSettings = None):
        self.store = store
        self.settings = settings or self.DEFAULT_SETTINGS

    __slots__ = 'store', 'settings'

    @classmethod
    def prepare(cls, settings: PaginationSettings = None):
        """ Prepare a paginator factory with the provided settings

        Example:
            user_paginator = Paginator.prepare(PaginationSettings(max_page_size=100))
            envelope = user_paginator(store).paginate(request)
        """
        return partial(cls, settings=settings)

    def paginate(self, request: Union[PaginationRequest, PaginationRequestDict]) -> Envelope:
        """ Load a page

        Args:
            request: A pagination request, parsed, or its dict

        Raises:
            exc.InvalidRequestError: the request is invalid. Raised before the store is touched.
            exc.StorageFailure: the store has failed
        """
        # Validate
        request = ensure_request(request)
        strategy = self.get_strategy(request)
        logger.debug('Paginating: %s', request)

        # Load
        result = self._fetch(strategy)

        # Inspect
        page_info = strategy.inspect(result, key=self.store.key)
        rows = self.settings.customize_result(self, result.items)

        # Done
        return build_envelope(rows, page_info)

    def export(self, envelope: Envelope) -> dict:
        """ Convert an envelope into a JSON dict, with API field names from the settings """
        return envelope.export(self.settings.get_api_field_name)

    def get_strategy(self, request: PaginationRequest) -> PaginationStrategy:
        """ Init a strategy for the request """
        cls = get_strategy_cls(request.type)
        return cls(request, self.settings)  # type: ignore[arg-type]

    def _fetch(self, strategy: PaginationStrategy):
        """ Run the strategy against the store. Report failures """
        pagination_type = strategy.type.name.lower()

        try:
            return strategy.fetch(self.store)
        except exc.StorageFailure as e:
            e.pagination_type = pagination_type
            logger.exception('Error occurred. PaginationType: %s', pagination_type)
            raise
        except Exception as e:
            logger.exception('Error occurred. PaginationType: %s', pagination_type)
            raise exc.StorageFailure(f'{type(e).__name__}', pagination_type=pagination_type) from e

    # Default settings object
    DEFAULT_SETTINGS = PaginationSettings()


# Pagination type => strategy class
STRATEGIES: dict[PaginationType, type[PaginationStrategy]] = {
    PaginationType.OFFSET: OffsetStrategy,
    PaginationType.CURSOR: CursorStrategy,
}


def get_strategy_cls(pagination_type: PaginationType) -> type[PaginationStrategy]:
    """ Given a pagination type, get the class that implements it, or fail """
    try:
        return STRATEGIES[pagination_type]
    except KeyError:
        raise NotImplementedError(pagination_type)
