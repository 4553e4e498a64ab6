from typing import Annotated

from pydantic import Field

# Largest value a BIGINT primary key (and SQLite INTEGER) can hold
MAX_DB_ID = 2**63 - 1
# Upper bound of a 32-bit INTEGER column
MAX_INT32 = 2**31 - 1
MAX_PAGE_SIZE = 100
MAX_LINE_QUANTITY = 10_000

DbId = Annotated[int, Field(ge=1, le=MAX_DB_ID)]
Count = Annotated[int, Field(ge=0, le=MAX_INT32)]
