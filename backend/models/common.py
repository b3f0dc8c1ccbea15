# backend/models/common.py
import enum
import uuid
from datetime import datetime, timezone


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


class Country(str, enum.Enum):
    IN = "IN"
    US = "US"


class Currency(str, enum.Enum):
    INR = "INR"
    USD = "USD"


class RestaurantStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class OrderStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PAID = "PAID"
    CANCELED = "CANCELED"


class PaymentProvider(str, enum.Enum):
    MOCK = "MOCK"


class PaymentStatus(str, enum.Enum):
    SUCCEEDED = "SUCCEEDED"
    CANCELED = "CANCELED"


CURRENCY_BY_COUNTRY = {
    Country.IN: Currency.INR,
    Country.US: Currency.USD,
}


def currency_for(country) -> Currency:
    return CURRENCY_BY_COUNTRY[Country(country)]


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


def check_in(column: str, enum_cls) -> str:
    values = ",".join(f"'{m.value}'" for m in enum_cls)
    return f"{column} in ({values})"
