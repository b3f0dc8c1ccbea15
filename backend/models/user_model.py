# backend/models/user_model.py
from sqlalchemy import Column, String, Boolean, DateTime, CheckConstraint
from sqlalchemy.types import Unicode

from database.session import Base
from models.common import Role, Country, new_id, utcnow, check_in


class User(Base):
    __tablename__ = "users"

    id                = Column(String(36), primary_key=True, default=new_id)
    email             = Column(Unicode(255), unique=True, nullable=False, index=True)
    password_hash     = Column(Unicode(255), nullable=False)
    role              = Column(String(20), nullable=False, default=Role.MEMBER.value)
    country           = Column(String(2), nullable=False, default=Country.IN.value)
    is_email_verified = Column(Boolean, nullable=False, default=False)
    created_at        = Column(DateTime, nullable=False, default=utcnow)
    updated_at        = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint(check_in("role", Role), name="ck_users_role"),
        CheckConstraint(check_in("country", Country), name="ck_users_country"),
    )
