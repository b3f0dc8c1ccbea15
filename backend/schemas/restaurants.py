# backend/schemas/restaurants.py
from datetime import datetime
from typing import Optional, Literal

from pydantic import constr

from schemas.base import CamelModel

NameStr = constr(strip_whitespace=True, min_length=1, max_length=255)
Country = Literal["IN", "US"]
RestaurantStatus = Literal["ACTIVE", "INACTIVE"]


class RestaurantCreate(CamelModel):
    name: NameStr
    country: Country
    status: Optional[RestaurantStatus] = None


class RestaurantUpdate(CamelModel):
    name: Optional[NameStr] = None
    country: Optional[Country] = None
    status: Optional[RestaurantStatus] = None


class RestaurantOut(CamelModel):
    id: str
    name: str
    country: Country
    status: RestaurantStatus
    created_at: datetime
    updated_at: datetime


class MenuItemOut(CamelModel):
    id: str
    restaurant_id: str
    name: str
    description: Optional[str] = None
    price_cents: int
    currency: str
    available: bool
    created_at: datetime
    updated_at: datetime
