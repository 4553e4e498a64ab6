from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, constr

from models.order import OrderStatus
from app.schemas.common import DbId, MAX_LINE_QUANTITY

GuestText = constr(strip_whitespace=True, min_length=1)


class OrderLineRequest(BaseModel):
    item_id: DbId
    quantity: int = Field(..., gt=0, le=MAX_LINE_QUANTITY)


class CreateOrderRequest(BaseModel):
    guest_email: EmailStr
    guest_name: GuestText
    guest_address: GuestText
    items: List[OrderLineRequest] = Field(..., min_length=1)


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus
    payment_intent_id: Optional[constr(strip_whitespace=True, min_length=1)] = None
