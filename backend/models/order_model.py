# backend/models/order_model.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from database.session import Base
from models.common import Country, OrderStatus, new_id, utcnow, check_in


class Order(Base):
    __tablename__ = "orders"

    id                 = Column(String(36), primary_key=True, default=new_id)
    user_id            = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    restaurant_id      = Column(String(36), ForeignKey("restaurants.id"), nullable=False, index=True)
    country            = Column(String(2), nullable=False, index=True)
    status             = Column(String(20), nullable=False, default=OrderStatus.DRAFT.value, index=True)
    total_amount_cents = Column(Integer, nullable=False, default=0)
    currency           = Column(String(3), nullable=False)
    payment_method_id  = Column(String(36), ForeignKey("payment_methods.id"), nullable=True)
    created_at         = Column(DateTime, nullable=False, default=utcnow)
    updated_at         = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    user       = relationship("User")
    restaurant = relationship("Restaurant")
    items      = relationship(
        "OrderItem",
        cascade="all, delete-orphan",
        back_populates="order",
        order_by="OrderItem.created_at",
    )

    __table_args__ = (
        CheckConstraint(check_in("status", OrderStatus), name="ck_orders_status"),
        CheckConstraint(check_in("country", Country), name="ck_orders_country"),
        CheckConstraint("total_amount_cents >= 0", name="ck_orders_total"),
    )

    def recompute_total(self) -> int:
        self.total_amount_cents = sum(it.unit_price_cents * it.quantity for it in self.items)
        return self.total_amount_cents
