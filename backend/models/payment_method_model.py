# backend/models/payment_method_model.py
from sqlalchemy import Column, String, Boolean, SmallInteger, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.types import Unicode

from database.session import Base
from models.common import PaymentProvider, new_id, utcnow


class PaymentMethod(Base):
    __tablename__ = "payment_methods"

    id                 = Column(String(36), primary_key=True, default=new_id)
    provider           = Column(String(20), nullable=False, default=PaymentProvider.MOCK.value)
    label              = Column(Unicode(255), nullable=False)
    brand              = Column(Unicode(50), nullable=True)
    last4              = Column(String(4), nullable=True)
    exp_month          = Column(SmallInteger, nullable=True)
    exp_year           = Column(SmallInteger, nullable=True)
    country            = Column(String(2), nullable=True, index=True)
    active             = Column(Boolean, nullable=False, default=True, index=True)
    is_default         = Column(Boolean, nullable=False, default=False)
    created_by_user_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at         = Column(DateTime, nullable=False, default=utcnow)
    updated_at         = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        CheckConstraint("length(last4) = 4 OR last4 IS NULL", name="ck_payment_methods_last4"),
        CheckConstraint("exp_month BETWEEN 1 AND 12 OR exp_month IS NULL", name="ck_payment_methods_exp_month"),
    )
