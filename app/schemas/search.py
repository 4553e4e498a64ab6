from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import DbId, MAX_DB_ID, MAX_PAGE_SIZE


class SearchItemsRequest(BaseModel):
    query: Optional[str] = None
    category_id: Optional[DbId] = None
    store_id: Optional[DbId] = None
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)
    in_stock_only: bool = False
    limit: int = Field(default=20, gt=0, le=MAX_PAGE_SIZE)
    offset: int = Field(default=0, ge=0, le=MAX_DB_ID)

    @field_validator("query")
    @classmethod
    def _blank_query_is_absent(cls, value):
        if value is None or not value.strip():
            return None
        return value
