from __future__ import annotations

from enum import IntEnum
from typing import Union

from pagewise import exc

from .base import INT_STRING, parse_int_field


class PaginationType(IntEnum):
    """ Pagination type: the request discriminator """
    OFFSET = 0
    CURSOR = 1

    @classmethod
    def from_request_value(cls, value: Union[int, str, None]) -> PaginationType:
        """ Parse the discriminator: an int (0, 1), a digit string, or a name ("offset", "cursor")

        Raises:
            exc.InvalidRequestError: unknown pagination type
        """
        if isinstance(value, cls):
            return value
        elif isinstance(value, int) and not isinstance(value, bool):
            number = value
        elif isinstance(value, str) and INT_STRING.fullmatch(value.strip()):
            number = parse_int_field('paginationType', value)  # type: ignore[assignment]
        elif isinstance(value, str) and value.strip().upper() in cls.__members__:
            return cls[value.strip().upper()]
        else:
            raise exc.InvalidRequestError(f'Invalid pagination type: {value!r}')

        try:
            return cls(number)
        except ValueError as e:
            raise exc.InvalidRequestError(f'Invalid pagination type: {value!r}') from e

    @property
    def payload_key(self) -> str:
        """ Name of the request key that holds the payload for this type """
        return f'{self.name.lower()}Pagination'
