# backend/queries/order_queries.py
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session, joinedload, selectinload

from models.order_model import Order
from models.order_item_model import OrderItem


def get_order(db: Session, order_id: str) -> Optional[Order]:
    return (
        db.query(Order)
        .options(
            joinedload(Order.restaurant),
            selectinload(Order.items).joinedload(OrderItem.menu_item),
        )
        .filter(Order.id == order_id)
        .first()
    )


def list_orders(db: Session, country: Optional[str] = None) -> List[Order]:
    q = (
        db.query(Order)
        .options(
            joinedload(Order.restaurant),
            selectinload(Order.items).joinedload(OrderItem.menu_item),
        )
    )
    if country:
        q = q.filter(Order.country == country)
    return q.order_by(Order.created_at.desc()).all()


def restaurant_has_orders(db: Session, restaurant_id: str) -> bool:
    count = db.execute(
        select(func.count(Order.id)).where(Order.restaurant_id == restaurant_id)
    ).scalar()
    return bool(count)


def find_item(order: Order, item_id: str) -> Optional[OrderItem]:
    return next((it for it in order.items if it.id == item_id), None)


def find_item_for_menu_item(order: Order, menu_item_id: str) -> Optional[OrderItem]:
    return next((it for it in order.items if it.menu_item_id == menu_item_id), None)
