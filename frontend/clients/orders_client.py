# frontend/clients/orders_client.py
from typing import Any, Dict, List

from clients.api_client import ApiClient


def get_orders(client: ApiClient) -> List[Dict[str, Any]]:
    return client.get("orders")


def get_order(client: ApiClient, order_id: str) -> Dict[str, Any]:
    return client.get(f"orders/{order_id}")


def create_order(client: ApiClient, restaurant_id: str) -> Dict[str, Any]:
    return client.post("orders", {"restaurantId": restaurant_id})


def add_item(client: ApiClient, order_id: str, menu_item_id: str, quantity: int = 1) -> Dict[str, Any]:
    return client.post(f"orders/{order_id}/items", {"menuItemId": menu_item_id, "quantity": quantity})


def update_item(client: ApiClient, order_id: str, item_id: str, quantity: int) -> Dict[str, Any]:
    return client.patch(f"orders/{order_id}/items/{item_id}", {"quantity": quantity})


def remove_item(client: ApiClient, order_id: str, item_id: str) -> Dict[str, Any]:
    return client.delete(f"orders/{order_id}/items/{item_id}")


def checkout(client: ApiClient, order_id: str, payment_method_id: str) -> Dict[str, Any]:
    return client.post(f"orders/{order_id}/checkout", {"paymentMethodId": payment_method_id})


def cancel(client: ApiClient, order_id: str) -> Dict[str, Any]:
    return client.post(f"orders/{order_id}/cancel")


def place_order(client: ApiClient, restaurant_id: str, cart: Dict[str, int], payment_method_id: str) -> Dict[str, Any]:
    """Create an order from ``{menu_item_id: quantity}`` and check it out."""
    order = create_order(client, restaurant_id)
    for menu_item_id, quantity in cart.items():
        order = add_item(client, order["id"], menu_item_id, quantity)
    return checkout(client, order["id"], payment_method_id)
