from importlib.metadata import version

__version__ = version('pagewise')

from .engine import Paginator
from .settings import PaginationSettings
from .request import PaginationType, PaginationRequest, PaginationRequestDict, OffsetPagination, CursorPagination
from .response import PaginationEnvelope, OffsetEnvelope, CursorEnvelope

from . import exc
from . import store
