# backend/services/user_service.py
import logging
from typing import List

from sqlalchemy.orm import Session

from models.common import Role, Country
from models.user_model import User
from services.errors import NotFoundError, ValidationError, Messages

log = logging.getLogger(__name__)


def _get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError(Messages.USER_NOT_FOUND)
    return user


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.asc()).all()


def update_role(db: Session, user_id: str, role: str, acting_user: User) -> User:
    role = Role(role)

    # no self-demotion: an admin keeps their own ADMIN role
    if user_id == acting_user.id and role != Role.ADMIN:
        log.warning(f"[Users] admin {acting_user.id} tried to demote themselves to {role.value}")
        raise ValidationError(Messages.CANNOT_REMOVE_OWN_ADMIN)

    user = _get_user(db, user_id)
    old_role = user.role
    user.role = role.value
    db.commit()
    db.refresh(user)
    log.info(f"[Users] user {user.id} role {old_role} -> {user.role} (by {acting_user.id})")
    return user


def update_country(db: Session, user_id: str, country: str) -> User:
    user = _get_user(db, user_id)
    old_country = user.country
    user.country = Country(country).value
    db.commit()
    db.refresh(user)
    log.info(f"[Users] user {user.id} country {old_country} -> {user.country}")
    return user
