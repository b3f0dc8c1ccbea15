# backend/models/payment_model.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, CheckConstraint

from database.session import Base
from models.common import PaymentStatus, new_id, utcnow, check_in


class Payment(Base):
    __tablename__ = "payments"

    id                = Column(String(36), primary_key=True, default=new_id)
    order_id          = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    payment_method_id = Column(String(36), ForeignKey("payment_methods.id"), nullable=False)
    provider          = Column(String(20), nullable=False)
    amount_cents      = Column(Integer, nullable=False)
    currency          = Column(String(3), nullable=False)
    status            = Column(String(20), nullable=False)
    transaction_id    = Column(String(64), nullable=True)
    created_at        = Column(DateTime, nullable=False, default=utcnow)
    updated_at        = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint(check_in("status", PaymentStatus), name="ck_payments_status"),
        CheckConstraint("amount_cents >= 0", name="ck_payments_amount"),
    )
