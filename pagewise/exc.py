from typing import Optional


class BasePaginationException(Exception):
    pass


class InvalidRequestError(BasePaginationException):
    """ Invalid pagination request provided by the User

    Reported when the request is malformed: unknown pagination type, missing or mismatched payload,
    wrong field types, out-of-range values.
    This is a client error: it is never reported as an operational failure.
    """

    def __init__(self, err: str):
        self.err = err
        super().__init__(f'Invalid pagination request: {err}')


class StorageFailure(BasePaginationException):
    """ The record store has failed to load the data

    Connectivity issues, timeouts, query errors.
    The original error is available as `__cause__`. Its details are never shown to the User.
    """

    # Pagination type that was running when the store has failed
    pagination_type: Optional[str]

    def __init__(self, err: str, *, pagination_type: Optional[str] = None):
        self.err = err
        self.pagination_type = pagination_type
        super().__init__(f'Storage failure: {err}')
