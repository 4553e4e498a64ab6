from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, Field, HttpUrl, TypeAdapter, ValidationError, constr

from app.schemas.common import Count, DbId

_URL = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    # validate but keep the string exactly as entered (HttpUrl would normalise it)
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError(f"not a valid URL: {value!r}")
    return value


ImageUrl = Annotated[str, AfterValidator(_check_url)]
Name = constr(strip_whitespace=True, min_length=1, max_length=200)
Price = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]


class CreateCategoryRequest(BaseModel):
    name: Name
    description: Optional[str] = None


class CreateStoreRequest(BaseModel):
    name: Name
    description: Optional[str] = None
    owner_email: EmailStr


class CreateItemRequest(BaseModel):
    name: Name
    description: Optional[str] = None
    price: Price
    stock_quantity: Count = 0
    images: List[ImageUrl] = Field(default_factory=list)
    category_id: DbId
    store_id: DbId


class UpdateItemRequest(BaseModel):
    """Partial update; only the fields present in the payload are applied."""

    name: Optional[Name] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    stock_quantity: Optional[Count] = None
    images: Optional[List[ImageUrl]] = None
    category_id: Optional[DbId] = None
    store_id: Optional[DbId] = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        # description is the only column that may be cleared
        return {k: v for k, v in data.items() if v is not None or k == "description"}
