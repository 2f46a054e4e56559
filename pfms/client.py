# pfms/client.py
"""
HTTP client for the PFMS API and the dashboard state built on top of it.

Every mutation (add/delete transaction, set budget) is followed by a full
refresh: all state is fetched again and every view is recomputed from
scratch. Listeners registered with ``on_refresh`` receive each new
``DashboardState``.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import httpx

from pfms.utils.views import DashboardView, build_dashboard

logger = logging.getLogger(__name__)

DashboardState = DashboardView
RefreshListener = Callable[[DashboardState], None]


class ApiClientError(Exception):
    """A request that did not come back with ``ok: true``."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class Session:
    user_id: int
    token: str
    expires_at: datetime

    @property
    def is_active(self) -> bool:
        return datetime.now(timezone.utc) < self.expires_at


class PfmsClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self.session: Optional[Session] = None
        self._listeners: List[RefreshListener] = []

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PfmsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ────────────────────────────────────────────────────────────────
    # Transport
    # ────────────────────────────────────────────────────────────────
    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        headers = kwargs.pop("headers", {})
        if self.session is not None and not self.session.is_active:
            logger.info("Session expired, signing out")
            self.session = None
        if self.session is not None:
            headers["Authorization"] = f"Bearer {self.session.token}"
        try:
            response = self.http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiClientError("Network error") from e

        try:
            body = response.json()
        except ValueError:
            raise ApiClientError(response.text or "Invalid response", response.status_code)

        if response.is_error or not body.get("ok"):
            raise ApiClientError(body.get("error") or "Request failed", response.status_code)
        return body

    # ────────────────────────────────────────────────────────────────
    # Session
    # ────────────────────────────────────────────────────────────────
    def login(self, username: str, password: str) -> Session:
        """Open a session; a failed login leaves any previous state cleared."""
        self.session = None
        if not username or not password:
            raise ApiClientError("Provide username & password")
        body = self._request("POST", "/api/login", json={"username": username, "password": password})
        self.session = Session(
            user_id=body["userId"],
            token=body["token"],
            expires_at=datetime.fromisoformat(body["expiresAt"]),
        )
        return self.session

    def logout(self) -> None:
        self.session = None

    @property
    def logged_in(self) -> bool:
        return self.session is not None and self.session.is_active

    def ping(self) -> int:
        return self._request("GET", "/api/ping")["ts"]

    # ────────────────────────────────────────────────────────────────
    # Raw API
    # ────────────────────────────────────────────────────────────────
    def list_transactions(self, month: Optional[int] = None, year: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {}
        if month is not None and year is not None:
            params = {"month": month, "year": year}
        return self._request("GET", "/api/transactions", params=params)["transactions"]

    def create_transaction(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/transactions", json=payload)["transaction"]

    def delete_transaction(self, transaction_id: int) -> int:
        return self._request("DELETE", f"/api/transactions/{transaction_id}")["deleted"]

    def list_budgets(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/budgets")["budgets"]

    def put_budget(self, month: int, year: int, amount: float) -> bool:
        body = self._request("POST", "/api/budgets", json={"month": month, "year": year, "amount": amount})
        return body["upserted"]

    # ────────────────────────────────────────────────────────────────
    # Dashboard actions
    # ────────────────────────────────────────────────────────────────
    def on_refresh(self, listener: RefreshListener) -> None:
        self._listeners.append(listener)

    def refresh(self, month: int) -> DashboardState:
        """Re-fetch everything for the selected month of the current year and rebuild all views."""
        year = datetime.now().year
        all_transactions = self.list_transactions()
        month_transactions = self.list_transactions(month, year)
        budgets = self.list_budgets()
        state = build_dashboard(all_transactions, month_transactions, budgets, month, year)
        for listener in self._listeners:
            listener(state)
        return state

    def add_transaction(
        self,
        month: int,
        date: str,
        type: str,
        amount: float,
        category: Optional[str] = None,
        description: str = "",
    ) -> DashboardState:
        if not date or not amount:
            raise ApiClientError("Provide date and amount")
        self.create_transaction({
            "date": date,
            "type": type,
            "category": category,
            "description": description,
            "amount": amount,
        })
        return self.refresh(month)

    def remove_transaction(self, month: int, transaction_id: int) -> DashboardState:
        self.delete_transaction(transaction_id)
        return self.refresh(month)

    def set_budget(self, month: int, amount: Optional[float]) -> DashboardState:
        """Budget for ``month`` of the current year; an empty amount stores 0 (no budget)."""
        self.put_budget(month, datetime.now().year, amount or 0)
        return self.refresh(month)
