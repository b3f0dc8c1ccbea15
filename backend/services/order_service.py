# backend/services/order_service.py
"""
Order lifecycle.

    DRAFT --checkout--> PAID --cancel--> CANCELED

Items can only change while the order is DRAFT, and every change recomputes
``total_amount_cents`` from the captured unit prices. CANCELED is absorbing.
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from models.common import OrderStatus, RestaurantStatus, currency_for
from models.menu_item_model import MenuItem
from models.order_item_model import OrderItem
from models.order_model import Order
from models.restaurant_model import Restaurant
from queries import order_queries
from services.errors import NotFoundError, ValidationError, InvalidStateError, Messages
from services.payment_gateway import gateway
from services.payment_method_service import get_payment_method
from services.policy import scope_country, ensure_in_scope

log = logging.getLogger(__name__)

# status -> statuses reachable from it
TRANSITIONS = {
    OrderStatus.DRAFT: {OrderStatus.PAID},
    OrderStatus.PAID: {OrderStatus.CANCELED},
    OrderStatus.CANCELED: set(),
}


def can_transition(current, target) -> bool:
    return OrderStatus(target) in TRANSITIONS[OrderStatus(current)]


def _load(db: Session, user, order_id: str) -> Order:
    order = order_queries.get_order(db, order_id)
    if not order:
        raise NotFoundError(Messages.ORDER_NOT_FOUND)
    ensure_in_scope(user, order.country, Messages.ORDER_NOT_FOUND)
    return order


def _ensure_draft(order: Order) -> None:
    if order.status != OrderStatus.DRAFT.value:
        log.warning(f"[Order: {order.id}] item change refused in status {order.status}")
        raise InvalidStateError(Messages.ORDER_NOT_DRAFT)


def _ensure_quantity(quantity: int) -> None:
    if quantity is None or quantity < 1:
        raise ValidationError(Messages.QUANTITY_TOO_LOW)


def _commit(db: Session, order: Order) -> Order:
    db.commit()
    db.refresh(order)
    return order


def list_orders(db: Session, user) -> List[Order]:
    return order_queries.list_orders(db, country=scope_country(user))


def get_order(db: Session, user, order_id: str) -> Order:
    return _load(db, user, order_id)


def create_order(db: Session, user, restaurant_id: str) -> Order:
    restaurant = db.get(Restaurant, restaurant_id)
    if not restaurant or restaurant.status != RestaurantStatus.ACTIVE.value:
        raise NotFoundError(Messages.RESTAURANT_NOT_FOUND)
    ensure_in_scope(user, restaurant.country, Messages.RESTAURANT_NOT_FOUND)

    order = Order(
        user_id=user.id,
        restaurant_id=restaurant.id,
        country=restaurant.country,
        currency=currency_for(restaurant.country).value,
        status=OrderStatus.DRAFT.value,
        total_amount_cents=0,
    )
    db.add(order)
    db.commit()
    log.info(f"[Order: {order.id}] created by {user.id} at restaurant {restaurant.id} ({order.currency})")
    return _load(db, user, order.id)


def add_item(db: Session, user, order_id: str, menu_item_id: str, quantity: int) -> Order:
    _ensure_quantity(quantity)
    order = _load(db, user, order_id)
    _ensure_draft(order)

    menu_item = db.get(MenuItem, menu_item_id)
    if not menu_item:
        raise NotFoundError(Messages.MENU_ITEM_NOT_FOUND)
    if menu_item.restaurant_id != order.restaurant_id:
        log.warning(
            f"[Order: {order.id}] menu item {menu_item.id} belongs to restaurant "
            f"{menu_item.restaurant_id}, not {order.restaurant_id}"
        )
        raise ValidationError(Messages.MENU_ITEM_WRONG_RESTAURANT)
    if not menu_item.available:
        raise ValidationError(Messages.MENU_ITEM_NOT_AVAILABLE)
    if menu_item.currency != order.currency:
        log.warning(
            f"[Order: {order.id}] menu item {menu_item.id} is priced in {menu_item.currency}, "
            f"order is {order.currency}"
        )
        raise ValidationError(Messages.MENU_ITEM_CURRENCY_MISMATCH)

    existing = order_queries.find_item_for_menu_item(order, menu_item.id)
    if existing:
        existing.quantity += quantity
        log.info(f"[Order: {order.id}] item {existing.id} quantity -> {existing.quantity}")
    else:
        order.items.append(OrderItem(
            menu_item_id=menu_item.id,
            quantity=quantity,
            unit_price_cents=menu_item.price_cents,
        ))
        log.info(f"[Order: {order.id}] added {quantity} x {menu_item.id} @ {menu_item.price_cents}")

    order.recompute_total()
    return _commit(db, order)


def update_item_quantity(db: Session, user, order_id: str, item_id: str, quantity: int) -> Order:
    _ensure_quantity(quantity)
    order = _load(db, user, order_id)
    _ensure_draft(order)

    item = order_queries.find_item(order, item_id)
    if not item:
        raise NotFoundError(Messages.ORDER_ITEM_NOT_FOUND)
    item.quantity = quantity

    order.recompute_total()
    log.info(f"[Order: {order.id}] item {item.id} quantity set to {quantity}")
    return _commit(db, order)


def remove_item(db: Session, user, order_id: str, item_id: str) -> Order:
    order = _load(db, user, order_id)
    _ensure_draft(order)

    item = order_queries.find_item(order, item_id)
    if not item:
        raise NotFoundError(Messages.ORDER_ITEM_NOT_FOUND)
    order.items.remove(item)

    order.recompute_total()
    log.info(f"[Order: {order.id}] item {item_id} removed")
    return _commit(db, order)


def checkout(db: Session, user, order_id: str, payment_method_id: str) -> Order:
    order = _load(db, user, order_id)

    if not can_transition(order.status, OrderStatus.PAID):
        log.warning(f"[Order: {order.id}] checkout refused in status {order.status}")
        raise InvalidStateError(Messages.ORDER_INVALID_STATUS_FOR_CHECKOUT)
    if not order.items:
        raise InvalidStateError(Messages.ORDER_EMPTY)

    method = get_payment_method(db, payment_method_id)
    if not method.active:
        log.warning(f"[Order: {order.id}] payment method {method.id} is inactive")
        raise ValidationError(Messages.PAYMENT_METHOD_INACTIVE)
    if method.country and method.country != order.country:
        log.warning(f"[Order: {order.id}] payment method {method.id} is for {method.country}, order is {order.country}")
        raise ValidationError(Messages.PAYMENT_METHOD_WRONG_COUNTRY)

    # totals are already kept in sync; recompute so the charge matches the items
    order.recompute_total()
    gateway.charge(db, order, method)
    order.payment_method_id = method.id
    order.status = OrderStatus.PAID.value

    log.info(f"[Order: {order.id}] DRAFT -> PAID ({order.total_amount_cents} {order.currency})")
    return _commit(db, order)


def cancel(db: Session, user, order_id: str) -> Order:
    order = _load(db, user, order_id)

    if not can_transition(order.status, OrderStatus.CANCELED):
        log.warning(f"[Order: {order.id}] cancel refused in status {order.status}")
        raise InvalidStateError(Messages.ORDER_INVALID_STATUS_FOR_CANCEL)

    previous = order.status
    order.status = OrderStatus.CANCELED.value
    gateway.cancel_for_order(db, order.id)

    log.info(f"[Order: {order.id}] {previous} -> CANCELED")
    return _commit(db, order)
