# backend/schemas/__init__.py

# users / auth
from .users import SignupPayload, LoginPayload, LoginResponse, UserOut, UpdateUserRole, UpdateUserCountry

# restaurants
from .restaurants import RestaurantCreate, RestaurantUpdate, RestaurantOut, MenuItemOut

# orders
from .orders import (
    OrderCreate, OrderItemIn, OrderItemUpdate, CheckoutPayload,
    OrderOut, OrderItemOut, RestaurantSummary, OrderStatus,
)

# payment methods
from .payment_methods import PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodOut

__all__ = [
    # users / auth
    "SignupPayload", "LoginPayload", "LoginResponse", "UserOut", "UpdateUserRole", "UpdateUserCountry",
    # restaurants
    "RestaurantCreate", "RestaurantUpdate", "RestaurantOut", "MenuItemOut",
    # orders
    "OrderCreate", "OrderItemIn", "OrderItemUpdate", "CheckoutPayload",
    "OrderOut", "OrderItemOut", "RestaurantSummary", "OrderStatus",
    # payment methods
    "PaymentMethodCreate", "PaymentMethodUpdate", "PaymentMethodOut",
]
