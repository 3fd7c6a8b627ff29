"""
Common state models for the query controllers.

This module defines the objects every screen shares:

- PageCursor: zero-based page position, page size and reported total
- SummaryStats: status counts derived from the rows on screen
- ViewModel: the render-ready state a controller exposes

All models are plain dataclasses; the presentation layer copies them
into its own reactive state.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from payments_ui.models.transaction import STATUSES, Transaction

PAGE_SIZE_OPTIONS = (5, 10, 25, 50)


@dataclass
class PageCursor:
    """
    Tracks server-side pagination for one screen.

    Attributes:
        page: Current page number (0-indexed, as the pager shows it).
        page_size: Number of items per page.
        total_count: Total number of matching records reported by the server.
    """

    page: int = 0
    page_size: int = 10
    total_count: int = 0

    @property
    def wire_page(self) -> int:
        """Page number as the backend expects it (1-indexed)."""
        return self.page + 1

    @property
    def page_count(self) -> int:
        """Number of pages for the reported total, never less than one."""
        return max(1, math.ceil(self.total_count / self.page_size))


@dataclass
class SummaryStats:
    """
    Status counts for the dashboard cards.

    The per-status counts are a page-local aggregate: they are computed
    from the rows of the current page only, not from every matching
    record. ``total`` is the server-reported total across all pages.
    """

    total: int = 0
    success: int = 0
    pending: int = 0
    failed: int = 0

    @classmethod
    def from_rows(cls, rows: Sequence[Transaction], total: int) -> "SummaryStats":
        counts = Counter(row.get("status") for row in rows)
        return cls(total=total, **{status: counts[status] for status in STATUSES})


@dataclass
class ViewModel:
    """
    Render-ready state of one screen.

    Attributes:
        rows: Records for the current page.
        total_count: Total matching records (0 while in an error state).
        loading: True from the moment a fetch starts until the latest
            fetch completes.
        error_message: User-facing error text, empty when there is none.
        error_kind: Kind of the error shown ("unauthorized", "http",
            "network", "validation"), empty when there is none.
        summary: Page-local status counts.
    """

    rows: list[Transaction] = field(default_factory=list)
    total_count: int = 0
    loading: bool = False
    error_message: str = ""
    error_kind: str = ""
    summary: SummaryStats = field(default_factory=SummaryStats)

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)

    @property
    def is_empty(self) -> bool:
        """True when nothing is loading, no error is shown and no rows exist."""
        return not self.loading and not self.has_error and not self.rows
