"""
Data models for the payments dashboard.

This package provides:
- Session models (User, Session)
- Transaction payload helpers (TransactionPage, row keys)
- Controller state models (PageCursor, SummaryStats, ViewModel)

All models use Python dataclasses; the Reflex-facing row model lives in
reflex_models and is imported only by the presentation layer.
"""

from payments_ui.models.common import (
    PAGE_SIZE_OPTIONS,
    PageCursor,
    SummaryStats,
    ViewModel,
)
from payments_ui.models.session import Session, User
from payments_ui.models.transaction import (
    STATUSES,
    Transaction,
    TransactionPage,
    row_key,
    student_name,
)

__all__ = [
    "PAGE_SIZE_OPTIONS",
    "PageCursor",
    "STATUSES",
    "Session",
    "SummaryStats",
    "Transaction",
    "TransactionPage",
    "User",
    "ViewModel",
    "row_key",
    "student_name",
]
