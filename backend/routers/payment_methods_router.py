# backend/routers/payment_methods_router.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from routers.deps import require
from schemas.payment_methods import PaymentMethodCreate, PaymentMethodUpdate, PaymentMethodOut
from services import payment_method_service
from services.policy import Action

router = APIRouter(prefix="/payment-methods", tags=["payment-methods"])


@router.get("", response_model=List[PaymentMethodOut])
def list_payment_methods(
    _user: User = Depends(require(Action.PAYMENT_METHOD_LIST)),
    db: Session = Depends(get_db),
):
    return [PaymentMethodOut.model_validate(pm) for pm in payment_method_service.list_active(db)]


@router.post("", response_model=PaymentMethodOut, status_code=201)
def create_payment_method(
    body: PaymentMethodCreate,
    admin: User = Depends(require(Action.PAYMENT_METHOD_CREATE)),
    db: Session = Depends(get_db),
):
    pm = payment_method_service.create_payment_method(
        db,
        created_by_user_id=admin.id,
        label=body.label,
        last4=body.last4,
        exp_month=body.exp_month,
        exp_year=body.exp_year,
        country=body.country,
        is_default=body.is_default,
    )
    return PaymentMethodOut.model_validate(pm)


@router.patch("/{payment_method_id}", response_model=PaymentMethodOut)
def update_payment_method(
    payment_method_id: str,
    body: PaymentMethodUpdate,
    _admin: User = Depends(require(Action.PAYMENT_METHOD_UPDATE)),
    db: Session = Depends(get_db),
):
    pm = payment_method_service.update_payment_method(
        db, payment_method_id, label=body.label, active=body.active, is_default=body.is_default
    )
    return PaymentMethodOut.model_validate(pm)
