# frontend/clients/users_client.py
from typing import Any, Dict, List

from clients.api_client import ApiClient


def get_all_users(client: ApiClient) -> List[Dict[str, Any]]:
    return client.get("users")


def update_user_role(client: ApiClient, user_id: str, role: str) -> Dict[str, Any]:
    return client.patch(f"users/{user_id}/role", {"role": role})


def update_user_country(client: ApiClient, user_id: str, country: str) -> Dict[str, Any]:
    return client.patch(f"users/{user_id}/country", {"country": country})
