# backend/schemas/payment_methods.py
from datetime import datetime
from typing import Optional, Literal

from pydantic import Field, constr

from schemas.base import CamelModel

Country = Literal["IN", "US"]


class PaymentMethodCreate(CamelModel):
    label: constr(strip_whitespace=True, min_length=1, max_length=255)
    last4: Optional[constr(pattern=r"^\d{4}$")] = None
    exp_month: Optional[int] = Field(default=None, ge=1, le=12)
    exp_year: Optional[int] = Field(default=None, ge=2024)
    country: Optional[Country] = None
    is_default: bool = False


class PaymentMethodUpdate(CamelModel):
    label: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    active: Optional[bool] = None
    is_default: Optional[bool] = None


class PaymentMethodOut(CamelModel):
    id: str
    provider: str
    label: str
    brand: Optional[str] = None
    last4: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    country: Optional[Country] = None
    active: bool
    is_default: bool
    created_by_user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
