# backend/models/order_item_model.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, CheckConstraint, UniqueConstraint
from sqlalchemy.orm import relationship

from database.session import Base
from models.common import new_id, utcnow


class OrderItem(Base):
    __tablename__ = "order_items"

    id               = Column(String(36), primary_key=True, default=new_id)
    order_id         = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    menu_item_id     = Column(String(36), ForeignKey("menu_items.id"), nullable=False)
    quantity         = Column(Integer, nullable=False)
    unit_price_cents = Column(Integer, nullable=False)
    created_at       = Column(DateTime, nullable=False, default=utcnow)

    order     = relationship("Order", back_populates="items")
    menu_item = relationship("MenuItem")

    __table_args__ = (
        UniqueConstraint("order_id", "menu_item_id", name="uq_order_items_order_menu_item"),
        CheckConstraint("quantity > 0", name="ck_order_items_quantity"),
        CheckConstraint("unit_price_cents >= 0", name="ck_order_items_unit_price"),
    )
