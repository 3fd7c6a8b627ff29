"""
Demo implementation of TransactionService using static in-memory data.

This service is useful for:
- Local development without a running payments backend
- Testing screens with realistic data
- Demonstrating the dashboard without credentials

It honours the same query parameters as the backend (filters, sort,
1-indexed page and limit) so every screen behaves as it would live.
"""

from typing import Any, Sequence

from payments_ui.data.demo_transactions import DEMO_TRANSACTIONS
from payments_ui.models.transaction import Transaction, TransactionPage, student_name
from payments_ui.services.transaction_service import TransactionService


class DemoTransactionService(TransactionService):
    """
    In-memory transaction service backed by static demo data.

    Attributes:
        calls: Every query received, as (operation, arguments) pairs.
    """

    def __init__(self, transactions: Sequence[Transaction] | None = None) -> None:
        """
        Initialize with transaction data.

        Args:
            transactions: Custom records, or None to use DEMO_TRANSACTIONS.
        """
        self._transactions: Sequence[Transaction] = (
            DEMO_TRANSACTIONS if transactions is None else transactions
        )
        self.calls: list[tuple[str, Any]] = []

    async def list_transactions(self, params: dict[str, Any]) -> TransactionPage:
        self.calls.append(("list_transactions", dict(params)))
        return self._page(self._filter(self._transactions, params), params)

    async def list_school_transactions(
        self, school_id: str, params: dict[str, Any]
    ) -> TransactionPage:
        self.calls.append(("list_school_transactions", (school_id, dict(params))))
        rows = [t for t in self._transactions if t.get("school_id") == school_id]
        return self._page(rows, params)

    async def get_transaction_status(self, custom_order_id: str) -> Transaction | None:
        self.calls.append(("get_transaction_status", custom_order_id))
        for transaction in self._transactions:
            if transaction.get("custom_order_id") == custom_order_id:
                return transaction
        return None

    def _filter(
        self, rows: Sequence[Transaction], params: dict[str, Any]
    ) -> list[Transaction]:
        """Apply the backend's filter parameters to the demo rows."""
        result = list(rows)
        for name in ("status", "school_id", "gateway"):
            if params.get(name):
                result = [t for t in result if t.get(name) == params[name]]
        if params.get("date_from"):
            result = [t for t in result if _day(t) >= params["date_from"]]
        if params.get("date_to"):
            result = [t for t in result if _day(t) <= params["date_to"]]
        if params.get("search"):
            needle = str(params["search"]).lower()
            result = [t for t in result if needle in _searchable(t)]
        if params.get("sort"):
            result.sort(
                key=lambda t: str(t.get(params["sort"]) or ""),
                reverse=params.get("order") == "desc",
            )
        return result

    @staticmethod
    def _page(rows: Sequence[Transaction], params: dict[str, Any]) -> TransactionPage:
        page = max(int(params.get("page", 1)), 1)
        limit = max(int(params.get("limit", 10)), 1)
        start = (page - 1) * limit
        return TransactionPage(items=list(rows[start : start + limit]), total=len(rows))


def _day(transaction: Transaction) -> str:
    """Return the ISO date part of the payment time."""
    return str(transaction.get("payment_time") or "")[:10]


def _searchable(transaction: Transaction) -> str:
    terms = [
        transaction.get("custom_order_id"),
        transaction.get("collect_id"),
        student_name(transaction),
    ]
    return " ".join(str(term).lower() for term in terms if term)
