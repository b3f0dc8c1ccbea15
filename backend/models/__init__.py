# backend/models/__init__.py
from .user_model import User
from .auth_token_model import AuthToken
from .restaurant_model import Restaurant
from .menu_item_model import MenuItem
from .order_model import Order
from .order_item_model import OrderItem
from .payment_method_model import PaymentMethod
from .payment_model import Payment
