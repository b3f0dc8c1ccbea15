# backend/routers/orders_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.order_model import Order
from models.user_model import User
from routers.deps import require
from schemas.orders import (
    OrderCreate, OrderItemIn, OrderItemUpdate, CheckoutPayload,
    OrderOut, OrderItemOut, RestaurantSummary,
)
from services import order_service
from services.policy import Action

router = APIRouter(prefix="/orders", tags=["orders"])


def _order_to_response(o: Order) -> OrderOut:
    items: List[OrderItemOut] = []
    for it in o.items:
        items.append(OrderItemOut(
            id=it.id,
            order_id=it.order_id,
            menu_item_id=it.menu_item_id,
            menu_item_name=it.menu_item.name if it.menu_item else None,
            quantity=it.quantity,
            unit_price_cents=it.unit_price_cents,
            line_total_cents=it.unit_price_cents * it.quantity,
            created_at=it.created_at,
        ))
    return OrderOut(
        id=o.id,
        user_id=o.user_id,
        restaurant_id=o.restaurant_id,
        country=o.country,
        status=o.status,
        total_amount_cents=o.total_amount_cents,
        currency=o.currency,
        payment_method_id=o.payment_method_id,
        created_at=o.created_at,
        updated_at=o.updated_at,
        restaurant=RestaurantSummary.model_validate(o.restaurant) if o.restaurant else None,
        items=items,
    )


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    body: OrderCreate,
    user: User = Depends(require(Action.ORDER_CREATE)),
    db: Session = Depends(get_db),
):
    return _order_to_response(order_service.create_order(db, user, body.restaurant_id))


@router.get("", response_model=List[OrderOut])
def list_orders(
    user: User = Depends(require(Action.ORDER_READ)),
    db: Session = Depends(get_db),
):
    return [_order_to_response(o) for o in order_service.list_orders(db, user)]


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    user: User = Depends(require(Action.ORDER_READ)),
    db: Session = Depends(get_db),
):
    return _order_to_response(order_service.get_order(db, user, order_id))


@router.post("/{order_id}/items", response_model=OrderOut, status_code=201)
def add_item(
    order_id: str,
    body: OrderItemIn,
    user: User = Depends(require(Action.ORDER_EDIT_ITEMS)),
    db: Session = Depends(get_db),
):
    o = order_service.add_item(db, user, order_id, body.menu_item_id, body.quantity)
    return _order_to_response(o)


@router.patch("/{order_id}/items/{item_id}", response_model=OrderOut)
def update_item(
    order_id: str,
    item_id: str,
    body: OrderItemUpdate,
    user: User = Depends(require(Action.ORDER_EDIT_ITEMS)),
    db: Session = Depends(get_db),
):
    o = order_service.update_item_quantity(db, user, order_id, item_id, body.quantity)
    return _order_to_response(o)


@router.delete("/{order_id}/items/{item_id}", response_model=OrderOut)
def remove_item(
    order_id: str,
    item_id: str,
    user: User = Depends(require(Action.ORDER_EDIT_ITEMS)),
    db: Session = Depends(get_db),
):
    return _order_to_response(order_service.remove_item(db, user, order_id, item_id))


@router.post("/{order_id}/checkout", response_model=OrderOut)
def checkout(
    order_id: str,
    body: CheckoutPayload,
    user: User = Depends(require(Action.ORDER_CHECKOUT)),
    db: Session = Depends(get_db),
):
    o = order_service.checkout(db, user, order_id, body.payment_method_id)
    return _order_to_response(o)


@router.post("/{order_id}/cancel", response_model=OrderOut)
def cancel(
    order_id: str,
    user: User = Depends(require(Action.ORDER_CANCEL)),
    db: Session = Depends(get_db),
):
    return _order_to_response(order_service.cancel(db, user, order_id))
