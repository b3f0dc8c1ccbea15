# backend/models/restaurant_model.py
from sqlalchemy import Column, String, DateTime, CheckConstraint
from sqlalchemy.types import Unicode
from sqlalchemy.orm import relationship

from database.session import Base
from models.common import Country, RestaurantStatus, new_id, utcnow, check_in


class Restaurant(Base):
    __tablename__ = "restaurants"

    id         = Column(String(36), primary_key=True, default=new_id)
    name       = Column(Unicode(255), nullable=False)
    country    = Column(String(2), nullable=False, index=True)
    status     = Column(String(20), nullable=False, default=RestaurantStatus.ACTIVE.value, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    menu_items = relationship("MenuItem", back_populates="restaurant", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint(check_in("country", Country), name="ck_restaurants_country"),
        CheckConstraint(check_in("status", RestaurantStatus), name="ck_restaurants_status"),
    )
