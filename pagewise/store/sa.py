""" Record store for SqlAlchemy tables and models """

from __future__ import annotations

from collections import abc
from typing import Optional

import sqlalchemy as sa

from pagewise import exc
from pagewise.typing import SAModelOrTable, SARowDict, RecordId

from .base import RecordStoreBase


class SARecordStore(RecordStoreBase):
    """ Record store: loads records from an SqlAlchemy table

    Uses Core statements, not ORM objects: every record is a dict of the table's columns.

    Example:
        with engine.connect() as connection:
            store = SARecordStore(connection, models.User, where=[models.User.is_active == True])
            paginator = Paginator(store)
    """
    # The table to select from
    table: sa.Table

    # Filter conditions for "active" records
    where: tuple[sa.sql.ColumnElement, ...]

    def __init__(self, connection: sa.engine.Connection, Model: SAModelOrTable, *,
                 key: str = 'id', where: Optional[abc.Iterable[sa.sql.ColumnElement]] = None):
        """ Prepare a store for the given model

        Args:
            connection: The connection to execute statements with
            Model: SqlAlchemy model class or Table
            key: Name of the key column: unique, monotonically increasing
            where: Conditions that select active records
        """
        self.connection = connection
        self.table = Model if isinstance(Model, sa.Table) else sa.inspect(Model).local_table  # type: ignore[union-attr]
        self.key = key
        self.where = tuple(where or ())

        if key not in self.table.c:
            raise ValueError(f'Invalid key column "{key}" for "{self.table.name}"')

    __slots__ = 'connection', 'table', 'key', 'where'

    @property
    def key_column(self) -> sa.Column:
        return self.table.c[self.key]

    # Statements

    def select_statement(self) -> sa.sql.Select:
        """ Prepare the SELECT statement for active records, sorted by key """
        return (
            sa.select(self.table)
            .where(*self.where)
            .order_by(self.key_column.asc())
        )

    def scan_after_statement(self, after: RecordId, limit: int) -> sa.sql.Select:
        return self.select_statement().where(self.key_column > after).limit(limit)

    def scan_offset_statement(self, skip: int, limit: int) -> sa.sql.Select:
        return self.select_statement().offset(skip).limit(limit)

    def count_statement(self) -> sa.sql.Select:
        return sa.select(sa.func.count()).select_from(self.table).where(*self.where)

    # Loading

    def scan_after(self, after: RecordId, limit: int) -> list[SARowDict]:
        return self._load_results(self.scan_after_statement(after, limit))

    def scan_offset(self, skip: int, limit: int) -> list[SARowDict]:
        return self._load_results(self.scan_offset_statement(skip, limit))

    def count(self) -> int:
        try:
            res: sa.engine.CursorResult = self.connection.execute(self.count_statement())
            return res.scalar_one()
        except sa.exc.SQLAlchemyError as e:
            raise exc.StorageFailure(f'count query failed: {type(e).__name__}') from e

    def _load_results(self, stmt: sa.sql.Select) -> list[SARowDict]:
        """ Execute the statement, get the rows as dicts """
        # We use `.mappings()` to convert a list of rows `list[RowMapping]` into a list of dicts `list[dict]`
        try:
            res: sa.engine.CursorResult = self.connection.execute(stmt)
            return [dict(row) for row in res.mappings()]
        except sa.exc.SQLAlchemyError as e:
            raise exc.StorageFailure(f'scan query failed: {type(e).__name__}') from e
