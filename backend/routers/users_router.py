# backend/routers/users_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from routers.deps import require
from schemas.users import UserOut, UpdateUserRole, UpdateUserCountry
from services import user_service
from services.policy import Action

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserOut])
def list_users(
    _admin: User = Depends(require(Action.USER_LIST)),
    db: Session = Depends(get_db),
):
    return [UserOut.model_validate(u) for u in user_service.list_users(db)]


@router.patch("/{user_id}/role", response_model=UserOut)
def update_user_role(
    user_id: str,
    body: UpdateUserRole,
    admin: User = Depends(require(Action.USER_UPDATE_ROLE)),
    db: Session = Depends(get_db),
):
    return UserOut.model_validate(user_service.update_role(db, user_id, body.role, admin))


@router.patch("/{user_id}/country", response_model=UserOut)
def update_user_country(
    user_id: str,
    body: UpdateUserCountry,
    _admin: User = Depends(require(Action.USER_UPDATE_COUNTRY)),
    db: Session = Depends(get_db),
):
    return UserOut.model_validate(user_service.update_country(db, user_id, body.country))
