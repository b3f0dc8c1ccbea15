# frontend/clients/role_check.py
"""
Client-side mirror of the server's role rules, used to hide actions the
current user cannot perform. The server still enforces every rule.
"""
from typing import Any, Dict, Iterable, Optional

ROLE_NAMES = {
    "ADMIN": "Administrator",
    "MANAGER": "Manager",
    "MEMBER": "Member",
}

UNAVAILABLE_MESSAGES = {
    "checkout": "Only Administrators and Managers can checkout orders. Please contact your administrator for assistance.",
    "cancel": "Only Administrators and Managers can cancel orders. Please contact your administrator for assistance.",
    "payment-methods": "Only Administrators can manage payment methods. Please contact your administrator for assistance.",
}


def _role(user: Optional[Dict[str, Any]]) -> Optional[str]:
    return (user or {}).get("role")


def has_role(user, role: str) -> bool:
    return _role(user) == role


def has_any_role(user, roles: Iterable[str]) -> bool:
    r = _role(user)
    return r is not None and r in set(roles)


def is_admin(user) -> bool:
    return has_role(user, "ADMIN")


def can_checkout(user) -> bool:
    return has_any_role(user, ("ADMIN", "MANAGER"))


def can_cancel_orders(user) -> bool:
    return has_any_role(user, ("ADMIN", "MANAGER"))


def can_manage_payment_methods(user) -> bool:
    return is_admin(user)


def role_display_name(user) -> str:
    return ROLE_NAMES.get(_role(user), "Guest")


def unavailable_feature_message(feature: str) -> str:
    return UNAVAILABLE_MESSAGES[feature]
