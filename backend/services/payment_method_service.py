# backend/services/payment_method_service.py
import logging
import random
from typing import List, Optional

from sqlalchemy import true
from sqlalchemy.orm import Session

from models.common import PaymentProvider, Country
from models.payment_method_model import PaymentMethod
from services.errors import NotFoundError, ValidationError, Messages

log = logging.getLogger(__name__)

MOCK_BRAND = "MOCK"


def _mock_last4() -> str:
    return f"{random.randint(0, 9999):04d}"


def _clear_default(db: Session, keep_id: Optional[str] = None) -> None:
    q = db.query(PaymentMethod).filter(PaymentMethod.is_default == true())
    if keep_id:
        q = q.filter(PaymentMethod.id != keep_id)
    for pm in q.all():
        pm.is_default = False


def get_payment_method(db: Session, payment_method_id: str) -> PaymentMethod:
    pm = db.get(PaymentMethod, payment_method_id)
    if not pm:
        raise NotFoundError(Messages.PAYMENT_METHOD_NOT_FOUND)
    return pm


def list_active(db: Session) -> List[PaymentMethod]:
    return (
        db.query(PaymentMethod)
        .filter(PaymentMethod.active == true())
        .order_by(PaymentMethod.is_default.desc(), PaymentMethod.created_at.asc())
        .all()
    )


def create_payment_method(
    db: Session,
    created_by_user_id: str,
    label: str,
    last4: Optional[str] = None,
    exp_month: Optional[int] = None,
    exp_year: Optional[int] = None,
    country: Optional[str] = None,
    is_default: bool = False,
) -> PaymentMethod:
    if is_default:
        _clear_default(db)

    pm = PaymentMethod(
        provider=PaymentProvider.MOCK.value,
        label=label,
        brand=MOCK_BRAND,
        last4=last4 or _mock_last4(),
        exp_month=exp_month,
        exp_year=exp_year,
        country=Country(country).value if country else None,
        active=True,
        is_default=bool(is_default),
        created_by_user_id=created_by_user_id,
    )
    db.add(pm)
    db.commit()
    db.refresh(pm)
    log.info(f"[PaymentMethods] created {pm.id} '{pm.label}' default={pm.is_default}")
    return pm


def update_payment_method(
    db: Session,
    payment_method_id: str,
    label: Optional[str] = None,
    active: Optional[bool] = None,
    is_default: Optional[bool] = None,
) -> PaymentMethod:
    pm = get_payment_method(db, payment_method_id)

    will_be_active = pm.active if active is None else active
    if is_default and not will_be_active:
        log.warning(f"[PaymentMethods] refused to make inactive method {pm.id} the default")
        raise ValidationError(Messages.PAYMENT_METHOD_INACTIVE_DEFAULT)

    if label is not None:
        pm.label = label
    if active is not None:
        pm.active = active
        if not active:
            # a deactivated method never stays the default
            pm.is_default = False
    if is_default is not None and will_be_active:
        if is_default:
            _clear_default(db, keep_id=pm.id)
        pm.is_default = is_default

    db.commit()
    db.refresh(pm)
    log.info(f"[PaymentMethods] updated {pm.id} (active={pm.active}, default={pm.is_default})")
    return pm
