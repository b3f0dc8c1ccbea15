# backend/schemas/orders.py
from datetime import datetime
from typing import List, Optional, Literal

from pydantic import Field

from schemas.base import CamelModel

OrderStatus = Literal["DRAFT", "PAID", "CANCELED"]


class OrderCreate(CamelModel):
    restaurant_id: str = Field(min_length=1)


class OrderItemIn(CamelModel):
    menu_item_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class OrderItemUpdate(CamelModel):
    quantity: int = Field(ge=1)


class CheckoutPayload(CamelModel):
    payment_method_id: str = Field(min_length=1)


class OrderItemOut(CamelModel):
    id: str
    order_id: str
    menu_item_id: str
    menu_item_name: Optional[str] = None
    quantity: int
    unit_price_cents: int
    line_total_cents: int
    created_at: datetime


class RestaurantSummary(CamelModel):
    id: str
    name: str
    country: str
    status: str


class OrderOut(CamelModel):
    id: str
    user_id: str
    restaurant_id: str
    country: str
    status: OrderStatus
    total_amount_cents: int
    currency: str
    payment_method_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    restaurant: Optional[RestaurantSummary] = None
    items: List[OrderItemOut] = []
