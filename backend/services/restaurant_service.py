# backend/services/restaurant_service.py
import logging
from typing import List, Optional

from sqlalchemy import true
from sqlalchemy.orm import Session

from models.common import Country, RestaurantStatus, currency_for
from models.menu_item_model import MenuItem
from models.restaurant_model import Restaurant
from queries.order_queries import restaurant_has_orders
from services.errors import NotFoundError, ValidationError, Messages
from services.policy import scope_country, ensure_in_scope

log = logging.getLogger(__name__)


def _get(db: Session, restaurant_id: str) -> Restaurant:
    r = db.get(Restaurant, restaurant_id)
    if not r:
        raise NotFoundError(Messages.RESTAURANT_NOT_FOUND)
    return r


def list_restaurants(db: Session, user) -> List[Restaurant]:
    """Restaurants visible to ``user``: ADMIN sees every country."""
    q = db.query(Restaurant)
    country = scope_country(user)
    if country:
        q = q.filter(Restaurant.country == country)
    return q.order_by(Restaurant.name.asc()).all()


def list_all_restaurants(db: Session) -> List[Restaurant]:
    return db.query(Restaurant).order_by(Restaurant.name.asc()).all()


def get_restaurant(db: Session, user, restaurant_id: str) -> Restaurant:
    r = _get(db, restaurant_id)
    ensure_in_scope(user, r.country, Messages.RESTAURANT_NOT_FOUND)
    return r


def get_menu(db: Session, user, restaurant_id: str) -> List[MenuItem]:
    r = get_restaurant(db, user, restaurant_id)
    return (
        db.query(MenuItem)
        .filter(MenuItem.restaurant_id == r.id, MenuItem.available == true())
        .order_by(MenuItem.name.asc())
        .all()
    )


def create_restaurant(db: Session, name: str, country: str, status: Optional[str] = None) -> Restaurant:
    r = Restaurant(
        name=name,
        country=Country(country).value,
        status=RestaurantStatus(status).value if status else RestaurantStatus.ACTIVE.value,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    log.info(f"[Restaurants] created {r.id} '{r.name}' ({r.country})")
    return r


def update_restaurant(
    db: Session,
    restaurant_id: str,
    name: Optional[str] = None,
    country: Optional[str] = None,
    status: Optional[str] = None,
) -> Restaurant:
    r = _get(db, restaurant_id)

    if country is not None and Country(country).value != r.country:
        if restaurant_has_orders(db, r.id):
            log.warning(f"[Restaurants] country change refused for {r.id}: orders exist")
            raise ValidationError(Messages.RESTAURANT_COUNTRY_LOCKED)
        r.country = Country(country).value
        # menu prices follow the restaurant's currency; amounts are not converted
        currency = currency_for(r.country).value
        for item in r.menu_items:
            item.currency = currency
        log.info(f"[Restaurants] {r.id} moved to {r.country}, menu repriced in {currency}")
    if name is not None:
        r.name = name
    if status is not None:
        r.status = RestaurantStatus(status).value

    db.commit()
    db.refresh(r)
    log.info(f"[Restaurants] updated {r.id} (name='{r.name}', country={r.country}, status={r.status})")
    return r
