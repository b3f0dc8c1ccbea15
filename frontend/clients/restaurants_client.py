# frontend/clients/restaurants_client.py
from typing import Any, Dict, List, Optional

from clients.api_client import ApiClient


def get_restaurants(client: ApiClient) -> List[Dict[str, Any]]:
    return client.get("restaurants")


def get_all_restaurants(client: ApiClient) -> List[Dict[str, Any]]:
    return client.get("restaurants/all")


def get_restaurant(client: ApiClient, restaurant_id: str) -> Dict[str, Any]:
    return client.get(f"restaurants/{restaurant_id}")


def get_menu(client: ApiClient, restaurant_id: str) -> List[Dict[str, Any]]:
    return client.get(f"restaurants/{restaurant_id}/menu")


def create_restaurant(client: ApiClient, name: str, country: str, status: Optional[str] = None) -> Dict[str, Any]:
    payload = {"name": name, "country": country}
    if status:
        payload["status"] = status
    return client.post("restaurants", payload)


def update_restaurant(client: ApiClient, restaurant_id: str, **changes) -> Dict[str, Any]:
    """``changes``: any of name, country, status."""
    return client.patch(f"restaurants/{restaurant_id}", changes)
