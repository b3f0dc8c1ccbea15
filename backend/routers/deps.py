# backend/routers/deps.py
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from services import auth_service
from services.errors import AuthenticationError, Messages
from services.policy import Action, authorize


def bearer_token(authorization: Optional[str] = Header(None)) -> str:
    if not authorization:
        raise AuthenticationError(Messages.NO_TOKEN_PROVIDED)
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError(Messages.NO_TOKEN_PROVIDED)
    return token.strip()


def get_current_user(token: str = Depends(bearer_token), db: Session = Depends(get_db)) -> User:
    return auth_service.resolve_token(db, token)


def require(action: Action):
    """Dependency factory: the current user, after checking the policy table for ``action``."""
    def _dep(user: User = Depends(get_current_user)) -> User:
        authorize(user, action)
        return user
    return _dep
