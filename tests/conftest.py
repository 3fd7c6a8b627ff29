"""Shared fixtures for the payments_ui test suite."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx
import pytest

from payments_ui.client import AuthenticatedClient
from payments_ui.lib.storage import MemoryStorage
from payments_ui.models.session import User
from payments_ui.models.transaction import Transaction, TransactionPage
from payments_ui.services.transaction_service import TransactionService
from payments_ui.session import SessionStore

BASE_URL = "http://payments.test/api"


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Build a mock httpx.Response with a JSON body."""
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json"},
    )


@pytest.fixture
def store() -> SessionStore:
    return SessionStore(MemoryStorage())


@pytest.fixture
def logged_in_store(store: SessionStore) -> SessionStore:
    store.set("tok-123", User(name="Asha", email="asha@example.com"))
    return store


@pytest.fixture
def make_client() -> Callable[..., AuthenticatedClient]:
    """Factory for an AuthenticatedClient whose transport is a handler function."""

    def _make(store: SessionStore, handler: Callable[[httpx.Request], httpx.Response]):
        http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        return AuthenticatedClient(store, http=http)

    return _make


@dataclass
class PendingCall:
    operation: str
    args: Any
    future: asyncio.Future = field(repr=False)

    def succeed(self, *rows: Transaction, total: int | None = None) -> None:
        self.future.set_result(
            TransactionPage(items=list(rows), total=len(rows) if total is None else total)
        )

    def fail(self, exc: Exception) -> None:
        self.future.set_exception(exc)


class ControlledService(TransactionService):
    """
    Service whose calls stay pending until the test resolves them.

    Lets a test decide the completion order of overlapping fetches.
    """

    def __init__(self) -> None:
        self.calls: list[PendingCall] = []

    async def _pending(self, operation: str, args: Any) -> Any:
        future = asyncio.get_running_loop().create_future()
        self.calls.append(PendingCall(operation, args, future))
        return await future

    async def list_transactions(self, params: dict[str, Any]) -> TransactionPage:
        return await self._pending("list_transactions", params)

    async def list_school_transactions(
        self, school_id: str, params: dict[str, Any]
    ) -> TransactionPage:
        return await self._pending("list_school_transactions", (school_id, params))

    async def get_transaction_status(self, custom_order_id: str) -> Transaction | None:
        return await self._pending("get_transaction_status", custom_order_id)


@pytest.fixture
def controlled_service() -> ControlledService:
    return ControlledService()
