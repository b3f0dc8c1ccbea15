# backend/services/auth_service.py
import logging
import secrets
from datetime import timedelta
from typing import Optional, Tuple

from argon2 import PasswordHasher
from argon2.exceptions import VerifyMismatchError, InvalidHash
from sqlalchemy.orm import Session

from config.settings import TOKEN_TTL_HOURS
from models.auth_token_model import AuthToken
from models.common import Role, Country, utcnow
from models.user_model import User
from services.errors import AuthenticationError, ValidationError, Messages

log = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, InvalidHash):
        return False


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def signup(db: Session, email: str, password: str, country: Optional[str] = None) -> User:
    email = _normalize_email(email)
    if db.query(User).filter(User.email == email).count() > 0:
        log.warning(f"[Auth] signup rejected, email already registered: {email}")
        raise ValidationError(Messages.EMAIL_ALREADY_EXISTS)

    user = User(
        email=email,
        password_hash=hash_password(password),
        role=Role.MEMBER.value,
        country=Country(country).value if country else Country.IN.value,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    log.info(f"[Auth] user {user.id} signed up (country={user.country})")
    return user


def login(db: Session, email: str, password: str) -> Tuple[AuthToken, User]:
    user = db.query(User).filter(User.email == _normalize_email(email)).first()
    if not user or not verify_password(user.password_hash, password):
        log.warning(f"[Auth] failed login for {email}")
        raise AuthenticationError(Messages.INVALID_CREDENTIALS)

    if _hasher.check_needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)

    now = utcnow()
    purged = db.query(AuthToken).filter(AuthToken.expires_at <= now).delete(synchronize_session=False)
    if purged:
        log.info(f"[Auth] purged {purged} expired token(s)")

    token = AuthToken(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=now + timedelta(hours=TOKEN_TTL_HOURS),
    )
    db.add(token)
    db.commit()
    log.info(f"[Auth] user {user.id} logged in")
    return token, user


def logout(db: Session, token: str) -> None:
    deleted = db.query(AuthToken).filter(AuthToken.token == token).delete()
    db.commit()
    if deleted:
        log.info("[Auth] token revoked")


def resolve_token(db: Session, token: Optional[str]) -> User:
    """Return the user owning ``token`` or raise AuthenticationError."""
    if not token:
        raise AuthenticationError(Messages.NO_TOKEN_PROVIDED)

    row = db.get(AuthToken, token)
    if not row or row.expires_at <= utcnow():
        if row:
            db.delete(row)
            db.commit()
        raise AuthenticationError(Messages.INVALID_OR_EXPIRED_TOKEN)

    user = db.get(User, row.user_id)
    if not user:
        raise AuthenticationError(Messages.INVALID_OR_EXPIRED_TOKEN)
    return user
