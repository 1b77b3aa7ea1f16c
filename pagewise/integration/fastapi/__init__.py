from .request import pagination_request
from .errors import register_exception_handlers, invalid_request_handler, storage_failure_handler
