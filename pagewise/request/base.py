import re
from typing import Any, Optional

from pagewise import exc


class RequestInputBase:
    """ Base class for pagination request payloads

    A payload is a parsed sub-object of the pagination request
    """

    @classmethod
    def from_request_dict(cls, payload: dict) -> Any:
        """ Convert the input value into an object """
        raise NotImplementedError

    def export(self) -> Any:
        """ Export the input back into some jsonable value """
        raise NotImplementedError


def parse_int_field(name: str, value: Any) -> Optional[int]:
    """ Parse an integer field. Query parameters come as strings, so digit strings are accepted too.

    Raises:
        exc.InvalidRequestError
    """
    # bool is an int, but not for us
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    elif isinstance(value, str) and INT_STRING.fullmatch(value.strip()):
        # Very long digit strings exceed the int conversion limit
        try:
            return int(value)
        except ValueError as e:
            raise exc.InvalidRequestError(f'"{name}" must be an integer') from e
    else:
        raise exc.InvalidRequestError(f'"{name}" must be an integer')


def check_int64(name: str, value: int):
    """ Check that a value fits into a BIGINT column: the store can't compare keys with anything larger

    Raises:
        exc.InvalidRequestError
    """
    if not -INT64_MAX <= value <= INT64_MAX:
        raise exc.InvalidRequestError(f'{name} is out of range')


def parse_bool_field(name: str, value: Any) -> Optional[bool]:
    """ Parse a boolean field. Accepts bools and their string forms: true/false/1/0

    Raises:
        exc.InvalidRequestError
    """
    if value is None or isinstance(value, bool):
        return value
    elif isinstance(value, str) and value.strip().lower() in BOOL_STRINGS:
        return BOOL_STRINGS[value.strip().lower()]
    else:
        raise exc.InvalidRequestError(f'"{name}" must be a boolean')


INT_STRING = re.compile(r'-?\d+', re.ASCII)

INT64_MAX = 2 ** 63 - 1

BOOL_STRINGS = {
    'true': True, '1': True,
    'false': False, '0': False,
}
