# backend/routers/restaurants_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from routers.deps import require
from schemas.restaurants import RestaurantCreate, RestaurantUpdate, RestaurantOut, MenuItemOut
from services import restaurant_service
from services.policy import Action

router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@router.get("", response_model=List[RestaurantOut])
def list_restaurants(
    user: User = Depends(require(Action.RESTAURANT_READ)),
    db: Session = Depends(get_db),
):
    return [RestaurantOut.model_validate(r) for r in restaurant_service.list_restaurants(db, user)]


# must be declared before /{restaurant_id}
@router.get("/all", response_model=List[RestaurantOut])
def list_all_restaurants(
    _admin: User = Depends(require(Action.RESTAURANT_LIST_ALL)),
    db: Session = Depends(get_db),
):
    return [RestaurantOut.model_validate(r) for r in restaurant_service.list_all_restaurants(db)]


@router.get("/{restaurant_id}", response_model=RestaurantOut)
def get_restaurant(
    restaurant_id: str,
    user: User = Depends(require(Action.RESTAURANT_READ)),
    db: Session = Depends(get_db),
):
    return RestaurantOut.model_validate(restaurant_service.get_restaurant(db, user, restaurant_id))


@router.get("/{restaurant_id}/menu", response_model=List[MenuItemOut])
def get_menu(
    restaurant_id: str,
    user: User = Depends(require(Action.RESTAURANT_READ)),
    db: Session = Depends(get_db),
):
    return [MenuItemOut.model_validate(m) for m in restaurant_service.get_menu(db, user, restaurant_id)]


@router.post("", response_model=RestaurantOut, status_code=201)
def create_restaurant(
    body: RestaurantCreate,
    _admin: User = Depends(require(Action.RESTAURANT_CREATE)),
    db: Session = Depends(get_db),
):
    r = restaurant_service.create_restaurant(db, body.name, body.country, body.status)
    return RestaurantOut.model_validate(r)


@router.patch("/{restaurant_id}", response_model=RestaurantOut)
def update_restaurant(
    restaurant_id: str,
    body: RestaurantUpdate,
    _admin: User = Depends(require(Action.RESTAURANT_UPDATE)),
    db: Session = Depends(get_db),
):
    r = restaurant_service.update_restaurant(
        db, restaurant_id, name=body.name, country=body.country, status=body.status
    )
    return RestaurantOut.model_validate(r)
