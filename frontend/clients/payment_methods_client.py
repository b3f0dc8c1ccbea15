# frontend/clients/payment_methods_client.py
from typing import Any, Dict, List, Optional

from clients.api_client import ApiClient


def get_payment_methods(client: ApiClient) -> List[Dict[str, Any]]:
    return client.get("payment-methods")


def default_payment_method(client: ApiClient) -> Optional[Dict[str, Any]]:
    methods = get_payment_methods(client)
    return next((m for m in methods if m.get("isDefault")), methods[0] if methods else None)


def create_payment_method(
    client: ApiClient,
    label: str,
    last4: Optional[str] = None,
    exp_month: Optional[int] = None,
    exp_year: Optional[int] = None,
    country: Optional[str] = None,
    is_default: bool = False,
) -> Dict[str, Any]:
    payload = {
        "label": label,
        "last4": last4,
        "expMonth": exp_month,
        "expYear": exp_year,
        "country": country,
        "isDefault": is_default,
    }
    return client.post("payment-methods", {k: v for k, v in payload.items() if v is not None})


def update_payment_method(
    client: ApiClient,
    payment_method_id: str,
    label: Optional[str] = None,
    active: Optional[bool] = None,
    is_default: Optional[bool] = None,
) -> Dict[str, Any]:
    payload = {"label": label, "active": active, "isDefault": is_default}
    return client.patch(
        f"payment-methods/{payment_method_id}",
        {k: v for k, v in payload.items() if v is not None},
    )
