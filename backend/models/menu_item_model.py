# backend/models/menu_item_model.py
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship

from database.session import Base
from models.common import Currency, new_id, utcnow


class MenuItem(Base):
    __tablename__ = "menu_items"

    id            = Column(String(36), primary_key=True, default=new_id)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False, index=True)
    name          = Column(Unicode(255), nullable=False)
    description   = Column(UnicodeText, nullable=True)
    price_cents   = Column(Integer, nullable=False)
    currency      = Column(String(3), nullable=False, default=Currency.INR.value)
    available     = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime, nullable=False, default=utcnow)
    updated_at    = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    restaurant = relationship("Restaurant", back_populates="menu_items")

    __table_args__ = (
        CheckConstraint("price_cents >= 0", name="ck_menu_items_price"),
    )
