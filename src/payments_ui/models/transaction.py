"""
Transaction payload helpers.

Transactions are owned by the backend: amounts, statuses and gateway
semantics are authoritative there, so records are passed through as
plain mappings. This module only reads the few fields the dashboard
needs to key, count and page them.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

Transaction = Mapping[str, Any]

STATUSES = ("success", "pending", "failed")


@dataclass(slots=True)
class TransactionPage:
    """
    One page of transactions as reported by the backend.

    Attributes:
        items: Records on this page, in server order.
        total: Total number of matching records across all pages.
    """

    items: Sequence[Transaction] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "TransactionPage":
        """
        Build a page from a list response.

        The total is read from ``pagination.total_records`` when present,
        then from ``total``, and falls back to the number of rows.
        """
        if not isinstance(payload, Mapping):
            return cls()
        items = list(payload.get("transactions") or [])
        return cls(items=items, total=_reported_total(payload, len(items)))


def _reported_total(payload: Mapping[str, Any], fallback: int) -> int:
    pagination = payload.get("pagination")
    if isinstance(pagination, Mapping) and pagination.get("total_records") is not None:
        return int(pagination["total_records"])
    if payload.get("total") is not None:
        return int(payload["total"])
    return fallback


def row_key(transaction: Transaction, index: int) -> str:
    """
    Return a stable key for a table row.

    Prefers ``collect_id``, then ``custom_order_id``; neither is assumed
    to be present.
    """
    for name in ("collect_id", "custom_order_id"):
        value = transaction.get(name)
        if value:
            return str(value)
    return f"payment-{index}"


def student_name(transaction: Transaction) -> str:
    """Return the student name from either the nested or flat payload shape."""
    info = transaction.get("student_info")
    if isinstance(info, Mapping) and info.get("name"):
        return str(info["name"])
    return str(transaction.get("student_name") or "")
