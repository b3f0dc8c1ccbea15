# backend/services/errors.py
"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
``main.py`` turn them into the JSON error envelope. Routers never catch them.
"""


class AppError(Exception):
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400
    error = "Bad Request"


class AuthenticationError(AppError):
    status_code = 401
    error = "Unauthorized"


class AuthorizationError(AppError):
    status_code = 403
    error = "Forbidden"


class NotFoundError(AppError):
    status_code = 404
    error = "Not Found"


class InvalidStateError(AppError):
    status_code = 422
    error = "Unprocessable Entity"


class Messages:
    UNEXPECTED_ERROR = "Unexpected error occurred"
    VALIDATION_ERROR = "Validation error"
    INTERNAL_SERVER_ERROR = "Internal server error"

    NO_TOKEN_PROVIDED = "No authorization token provided"
    INVALID_OR_EXPIRED_TOKEN = "Invalid or expired token"
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_ALREADY_EXISTS = "Email already exists"
    USER_NOT_FOUND = "User not found"
    ACCESS_DENIED_ROLE_REQUIRED = "Access denied: Required role(s)"
    CANNOT_REMOVE_OWN_ADMIN = "Cannot remove your own ADMIN role"

    RESTAURANT_NOT_FOUND = "Restaurant not found"
    RESTAURANT_COUNTRY_LOCKED = "Cannot change country when orders exist"
    ORDER_NOT_FOUND = "Order not found"
    ORDER_ITEM_NOT_FOUND = "Order item not found"
    ORDER_NOT_DRAFT = "Order is not in DRAFT status and cannot be modified"
    ORDER_INVALID_STATUS_FOR_CHECKOUT = "Order status must be DRAFT for checkout"
    ORDER_INVALID_STATUS_FOR_CANCEL = "Only PAID orders can be canceled"
    ORDER_EMPTY = "Order must have at least one item before checkout"
    QUANTITY_TOO_LOW = "Quantity must be at least 1"
    MENU_ITEM_NOT_FOUND = "Menu item not found"
    MENU_ITEM_NOT_AVAILABLE = "Menu item is not available"
    MENU_ITEM_WRONG_RESTAURANT = "Menu item does not belong to the order restaurant"
    MENU_ITEM_CURRENCY_MISMATCH = "Menu item currency does not match the order currency"
    PAYMENT_METHOD_NOT_FOUND = "Payment method not found"
    PAYMENT_METHOD_INACTIVE = "Payment method is not active"
    PAYMENT_METHOD_INACTIVE_DEFAULT = "An inactive payment method cannot be the default"
    PAYMENT_METHOD_WRONG_COUNTRY = "Payment method is not valid for the order country"
