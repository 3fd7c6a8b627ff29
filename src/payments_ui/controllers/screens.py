"""
Controllers for the four transaction screens.

- DashboardController: recent transactions with status cards; refetches on
  every filter or pager change
- TransactionsController: full search over every filter; filters apply on
  an explicit search
- SchoolTransactionsController: one school's transactions; nothing is
  fetched until the user runs a search
- TransactionStatusController: single order lookup by custom order id
"""

from typing import Any

from payments_ui import config
from payments_ui.controllers.base import QueryController
from payments_ui.errors import HttpError, ValidationError
from payments_ui.models.common import ViewModel
from payments_ui.models.transaction import Transaction, TransactionPage


class DashboardController(QueryController):
    """Dashboard list: newest payments first, live filtering."""

    kind = "dashboard"
    filter_defaults = {"status": "", "school_id": "", "search": ""}
    base_params = {"sort": "payment_time", "order": "desc"}
    default_page_size = 10

    fetch_on_mount = True
    fetch_on_filter_change = True
    fetch_on_reset = True

    async def _load(self, params: dict[str, Any]) -> TransactionPage:
        return await self.service.list_transactions(params)


class TransactionsController(QueryController):
    """Global transaction search. Filter edits wait for on_search()."""

    kind = "transactions"
    filter_defaults = {
        "status": "",
        "date_from": "",
        "date_to": "",
        "school_id": "",
        "gateway": "",
    }
    default_page_size = 25

    fetch_on_mount = True
    fetch_on_reset = True

    async def _load(self, params: dict[str, Any]) -> TransactionPage:
        return await self.service.list_transactions(params)


class SchoolTransactionsController(QueryController):
    """
    School-scoped search.

    The school id field starts with a placeholder, so the screen never
    fetches on mount. Pager changes fetch only after a search has been
    run, and always for the school id that search used, not whatever is
    in the field now.

    Attributes:
        search_performed: True once on_search() has passed validation.
    """

    kind = "school"
    filter_defaults = {"school_id": config.DEFAULT_SCHOOL_ID}
    default_page_size = 10
    error_fallback = "Failed to fetch school transactions"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.search_performed = False
        self._searched_school_id = ""

    @property
    def searched_school_id(self) -> str:
        return self._searched_school_id

    def request_params(self) -> dict[str, Any]:
        # The school id travels in the path
        return {"page": self.cursor.wire_page, "limit": self.cursor.page_size}

    def validate(self) -> None:
        if not self._searched_school_id:
            raise ValidationError("Please enter a school ID")

    async def on_search(self) -> ViewModel:
        school_id = self.filters["school_id"].strip()
        if not school_id:
            return self.fail_validation("Please enter a school ID")
        self._searched_school_id = school_id
        self.search_performed = True
        return await super().on_search()

    def _fetches_on_paginate(self) -> bool:
        return self.search_performed

    async def _load(self, params: dict[str, Any]) -> TransactionPage:
        return await self.service.list_school_transactions(self._searched_school_id, params)


class TransactionStatusController(QueryController):
    """Single order lookup. The result is shown as a one-row view."""

    kind = "status"
    filter_defaults = {"custom_order_id": ""}
    paginated = False
    error_fallback = "Transaction not found"

    @property
    def transaction(self) -> Transaction | None:
        return self.view.rows[0] if self.view.rows else None

    def validate(self) -> None:
        if not self.filters["custom_order_id"].strip():
            raise ValidationError("Please enter a custom order ID")

    async def _load(self, params: dict[str, Any]) -> TransactionPage:
        transaction = await self.service.get_transaction_status(params["custom_order_id"])
        if transaction is None:
            raise HttpError(404, self.error_fallback)
        return TransactionPage(items=[transaction], total=1)
