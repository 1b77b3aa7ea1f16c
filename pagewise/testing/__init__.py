""" Tools for testing """

from .profile import timeit, Timing

from .recreate_tables import created_tables, create_tables, drop_tables
from .table_data import insert, insert_batched
from .users import UserMixin, user_fields, seed_users

from .stmt_text import stmt2sql
from .query_logger import LoggedQuery, QueryLogger, ExpectedQueryCounter
