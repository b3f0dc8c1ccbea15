# backend/services/policy.py
"""
Role/country policy.

``POLICY`` is the single source of truth for which roles may perform which
action. Routers declare the action they need (see ``routers.deps.require``);
services call ``ensure_in_scope`` for the country half of the rule.
"""
import enum
import logging
from typing import Dict, FrozenSet

from models.common import Role
from services.errors import AuthorizationError, NotFoundError, Messages

log = logging.getLogger(__name__)


class Action(str, enum.Enum):
    RESTAURANT_READ = "restaurant.read"
    RESTAURANT_LIST_ALL = "restaurant.list_all"
    RESTAURANT_CREATE = "restaurant.create"
    RESTAURANT_UPDATE = "restaurant.update"

    USER_LIST = "user.list"
    USER_UPDATE_ROLE = "user.update_role"
    USER_UPDATE_COUNTRY = "user.update_country"

    ORDER_CREATE = "order.create"
    ORDER_READ = "order.read"
    ORDER_EDIT_ITEMS = "order.edit_items"
    ORDER_CHECKOUT = "order.checkout"
    ORDER_CANCEL = "order.cancel"

    PAYMENT_METHOD_LIST = "payment_method.list"
    PAYMENT_METHOD_CREATE = "payment_method.create"
    PAYMENT_METHOD_UPDATE = "payment_method.update"


ADMIN_ONLY = frozenset({Role.ADMIN})
STAFF = frozenset({Role.ADMIN, Role.MANAGER})
EVERYONE = frozenset(Role)

POLICY: Dict[Action, FrozenSet[Role]] = {
    Action.RESTAURANT_READ: EVERYONE,
    Action.RESTAURANT_LIST_ALL: ADMIN_ONLY,
    Action.RESTAURANT_CREATE: ADMIN_ONLY,
    Action.RESTAURANT_UPDATE: ADMIN_ONLY,

    Action.USER_LIST: ADMIN_ONLY,
    Action.USER_UPDATE_ROLE: ADMIN_ONLY,
    Action.USER_UPDATE_COUNTRY: ADMIN_ONLY,

    Action.ORDER_CREATE: EVERYONE,
    Action.ORDER_READ: EVERYONE,
    Action.ORDER_EDIT_ITEMS: EVERYONE,
    Action.ORDER_CHECKOUT: STAFF,
    Action.ORDER_CANCEL: STAFF,

    Action.PAYMENT_METHOD_LIST: EVERYONE,
    Action.PAYMENT_METHOD_CREATE: ADMIN_ONLY,
    Action.PAYMENT_METHOD_UPDATE: ADMIN_ONLY,
}


def allowed_roles(action: Action) -> FrozenSet[Role]:
    # unknown actions are denied
    return POLICY.get(action, frozenset())


def is_allowed(role, action: Action) -> bool:
    try:
        return Role(role) in allowed_roles(action)
    except ValueError:
        return False


def authorize(user, action: Action) -> None:
    """Raise AuthorizationError unless ``user.role`` may perform ``action``."""
    if is_allowed(user.role, action):
        return
    required = ", ".join(sorted(r.value for r in allowed_roles(action)))
    log.warning(f"[Policy] user={user.id} role={user.role} denied {action.value} (requires {required})")
    raise AuthorizationError(f"{Messages.ACCESS_DENIED_ROLE_REQUIRED}: {required}")


def sees_all_countries(user) -> bool:
    return user.role == Role.ADMIN.value


def scope_country(user):
    """Country filter for list queries; None means unrestricted."""
    return None if sees_all_countries(user) else user.country


def ensure_in_scope(user, country: str, not_found_message: str) -> None:
    # out-of-country entities are reported as missing, not forbidden
    if not sees_all_countries(user) and country != user.country:
        raise NotFoundError(not_found_message)
