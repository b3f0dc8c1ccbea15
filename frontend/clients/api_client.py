# frontend/clients/api_client.py
import os
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
API_PREFIX = "/api"


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def create_session() -> requests.Session:
    session = requests.Session()

    # only idempotent methods are retried (urllib3 default)
    retry_strategy = Retry(
        total=2,
        backoff_factor=0.3,
        status_forcelist=[500, 502, 503, 504],
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


def _err(resp: requests.Response) -> str:
    try:
        j = resp.json()
        if isinstance(j, dict):
            if "message" in j:
                return str(j["message"])
            if "detail" in j:
                return str(j["detail"])
        return str(j)
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"


class ApiClient:
    """Thin wrapper around the food ordering API holding the bearer token."""

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout=10):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.session = session or create_session()
        self.timeout = timeout
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None

    def _url(self, p: str) -> str:
        return f"{self.base_url}{API_PREFIX}/{p.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            r = self.session.request(
                method,
                self._url(path),
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise ApiError(f"Connection error: {e}")
        if r.status_code >= 400:
            raise ApiError(_err(r), r.status_code)
        if not r.content:
            return None
        return r.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", path, json=json)

    def patch(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    # ---- auth ----
    def signup(self, email: str, password: str, country: Optional[str] = None) -> Dict[str, Any]:
        payload = {"email": email, "password": password}
        if country:
            payload["country"] = country
        return self.post("auth/signup", payload)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self.post("auth/login", {"email": email, "password": password})
        self.token = data["accessToken"]
        self.user = data["user"]
        return self.user

    def logout(self) -> None:
        if self.token:
            try:
                self.post("auth/logout")
            finally:
                self.token = None
                self.user = None

    def me(self) -> Dict[str, Any]:
        self.user = self.get("auth/me")
        return self.user

    @property
    def is_logged_in(self) -> bool:
        return self.token is not None
