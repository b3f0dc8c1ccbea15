# backend/models/auth_token_model.py
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from database.session import Base
from models.common import utcnow


class AuthToken(Base):
    __tablename__ = "auth_tokens"

    token      = Column(String(64), primary_key=True)
    user_id    = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    expires_at = Column(DateTime, nullable=False)

    user = relationship("User")
