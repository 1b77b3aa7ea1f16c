from typing import Union

import sqlalchemy as sa
import sqlalchemy.orm


# Annotation for SqlAlchemy models
SAModel = type

# Annotation for something a record store can select from: a model or a table
SAModelOrTable = Union[SAModel, sa.Table]

# Annotation for dict rows (result rows returned as dicts)
# Every record has an "id" key: the pagination key
SARowDict = dict

# Pagination key value
RecordId = int
