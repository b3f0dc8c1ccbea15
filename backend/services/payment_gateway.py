# backend/services/payment_gateway.py
"""
Mock payment gateway.

Payments never leave the database: a charge is a ``Payment`` row with a
generated ``mock_txn_*`` transaction id. Validation of the payment method
(active, country) happens in the order service before a charge is attempted.
"""
import logging
import uuid
from typing import Optional

from sqlalchemy.orm import Session

from models.common import PaymentProvider, PaymentStatus
from models.order_model import Order
from models.payment_method_model import PaymentMethod
from models.payment_model import Payment

log = logging.getLogger(__name__)


class MockPaymentGateway:
    provider = PaymentProvider.MOCK

    def charge(self, db: Session, order: Order, method: PaymentMethod) -> Payment:
        txn_id = f"mock_txn_{uuid.uuid4()}"
        payment = Payment(
            order_id=order.id,
            payment_method_id=method.id,
            provider=self.provider.value,
            amount_cents=order.total_amount_cents,
            currency=order.currency,
            status=PaymentStatus.SUCCEEDED.value,
            transaction_id=txn_id,
        )
        db.add(payment)
        log.info(
            f"[Order: {order.id}] charged {order.total_amount_cents} {order.currency} "
            f"via {method.id} (TxID: {txn_id})"
        )
        return payment

    def find_for_order(self, db: Session, order_id: str) -> Optional[Payment]:
        return (
            db.query(Payment)
            .filter(Payment.order_id == order_id, Payment.status == PaymentStatus.SUCCEEDED.value)
            .order_by(Payment.created_at.desc())
            .first()
        )

    def cancel_for_order(self, db: Session, order_id: str) -> Optional[Payment]:
        payment = self.find_for_order(db, order_id)
        if not payment:
            log.info(f"[Order: {order_id}] no payment to cancel")
            return None
        payment.status = PaymentStatus.CANCELED.value
        log.info(f"[Order: {order_id}] payment {payment.id} canceled")
        return payment


gateway = MockPaymentGateway()
