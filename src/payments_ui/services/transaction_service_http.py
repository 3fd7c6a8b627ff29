"""
Backend implementation of TransactionService.

Maps each query onto its REST endpoint and parses the response:

- GET /transactions
- GET /transactions/school/{school_id}
- GET /transaction-status/{custom_order_id}

All requests go through the shared AuthenticatedClient, so bearer
credentials and 401 handling are applied uniformly.
"""

from typing import Any, Mapping
from urllib.parse import quote

from payments_ui.client import AuthenticatedClient
from payments_ui.models.transaction import Transaction, TransactionPage
from payments_ui.services.transaction_service import TransactionService


class HttpTransactionService(TransactionService):
    """Transaction queries served by the payments backend."""

    def __init__(self, client: AuthenticatedClient) -> None:
        self._client = client

    async def list_transactions(self, params: dict[str, Any]) -> TransactionPage:
        payload = await self._client.get("/transactions", params=params)
        return TransactionPage.from_payload(payload)

    async def list_school_transactions(
        self, school_id: str, params: dict[str, Any]
    ) -> TransactionPage:
        payload = await self._client.get(
            f"/transactions/school/{_segment(school_id)}", params=params
        )
        return TransactionPage.from_payload(payload)

    async def get_transaction_status(self, custom_order_id: str) -> Transaction | None:
        payload = await self._client.get(f"/transaction-status/{_segment(custom_order_id)}")
        if isinstance(payload, Mapping):
            transaction = payload.get("transaction")
            if isinstance(transaction, Mapping):
                return transaction
        return None


def _segment(value: str) -> str:
    """Escape a user-entered identifier for use as a single path segment."""
    return quote(value, safe="")
