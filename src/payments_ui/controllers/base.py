"""
Query controller shared by every transaction screen.

A controller owns one screen's filters and pagination cursor, turns them
into request parameters, runs the fetch through a TransactionService and
publishes the outcome as a ViewModel.

Overlapping fetches are resolved with a request epoch. Every fetch takes
the next epoch number when it starts; when it completes, its result is
applied only if no newer fetch has started since. A superseded result is
dropped without touching the view model, including the loading flag,
which belongs to the newest fetch. Nothing is cancelled on the network.

Screens differ only in when they fetch. The primitive operations
(set_filter, set_page, set_page_size, reset) never fetch; the ``on_*``
event methods combine a primitive with the screen's triggering policy,
which subclasses configure through class attributes.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping

from payments_ui.errors import ApiError, HttpError, ValidationError
from payments_ui.lib import logs
from payments_ui.models.common import (
    PAGE_SIZE_OPTIONS,
    PageCursor,
    SummaryStats,
    ViewModel,
)
from payments_ui.models.transaction import TransactionPage
from payments_ui.services.transaction_service import TransactionService

LOG = logs.logger(__file__)


class QueryController(ABC):
    """
    Base class for per-screen query state.

    Subclasses implement _load() and set the policy attributes below.

    Attributes:
        service: Data source for the screen.
        filters: Current filter values by name. Empty means no constraint.
        cursor: Current pagination position.
        view: Render-ready state.
    """

    kind: ClassVar[str] = ""
    filter_defaults: ClassVar[Mapping[str, str]] = {}
    base_params: ClassVar[Mapping[str, Any]] = {}
    default_page_size: ClassVar[int] = 10
    page_size_options: ClassVar[tuple[int, ...]] = PAGE_SIZE_OPTIONS
    paginated: ClassVar[bool] = True
    error_fallback: ClassVar[str] = "Failed to fetch transactions"

    fetch_on_mount: ClassVar[bool] = False
    fetch_on_filter_change: ClassVar[bool] = False
    fetch_on_paginate: ClassVar[bool] = True
    fetch_on_reset: ClassVar[bool] = False

    def __init__(self, service: TransactionService) -> None:
        self.service = service
        self.filters: dict[str, str] = dict(self.filter_defaults)
        self.cursor = PageCursor(page_size=self.default_page_size)
        self.view = ViewModel()
        self._epoch = 0

    @property
    def epoch(self) -> int:
        """Number of the most recently started fetch."""
        return self._epoch

    # Primitives: state changes only, never a fetch

    def set_filter(self, field: str, value: str | None) -> None:
        """
        Update one filter.

        Raises:
            KeyError: If the screen has no such filter.
        """
        if field not in self.filters:
            raise KeyError(f"Unknown filter for {self.kind}: {field}")
        self.filters[field] = "" if value is None else str(value)

    def set_page(self, page: int) -> None:
        """Move to a zero-based page. The server clamps out-of-range pages."""
        if page < 0:
            raise ValueError(f"Page must be zero or positive: {page}")
        self.cursor.page = page

    def set_page_size(self, page_size: int) -> None:
        """Change the page size; a different size always returns to page 0."""
        if page_size not in self.page_size_options:
            raise ValueError(
                f"Page size must be one of {self.page_size_options}: {page_size}"
            )
        if page_size != self.cursor.page_size:
            self.cursor.page_size = page_size
            self.cursor.page = 0

    def reset(self) -> None:
        """Restore default filters and return to page 0."""
        self.filters = dict(self.filter_defaults)
        self.cursor.page = 0

    def active_filters(self) -> dict[str, str]:
        """Return the non-empty filters, stripped of surrounding whitespace."""
        return {
            name: value.strip()
            for name, value in self.filters.items()
            if value and value.strip()
        }

    def request_params(self) -> dict[str, Any]:
        """
        Build the query parameters for the next fetch.

        Contains the 1-indexed page and limit (for paginated screens), the
        screen's fixed parameters, and only the non-empty filters.
        """
        params: dict[str, Any] = {}
        if self.paginated:
            params["page"] = self.cursor.wire_page
            params["limit"] = self.cursor.page_size
        params.update(self.base_params)
        params.update(self.active_filters())
        return params

    # Fetch lifecycle

    def validate(self) -> None:
        """
        Check local preconditions before a fetch.

        Raises:
            ValidationError: If a required input is missing.
        """

    @abstractmethod
    async def _load(self, params: dict[str, Any]) -> TransactionPage:
        """Run the screen's query. Raises ApiError on failure."""

    async def trigger_fetch(self) -> ViewModel:
        """
        Start a new fetch and apply its outcome if it is still the latest.

        Never raises for request failures: every outcome is resolved into
        the view model.
        """
        self._epoch += 1
        epoch = self._epoch
        try:
            self.validate()
        except ValidationError as exc:
            return self._fail(exc)

        params = self.request_params()
        self.view.loading = True
        LOG.info("%s fetch #%s - params:%s", self.kind, epoch, params)
        try:
            page = await self._load(params)
        except ApiError as exc:
            if self._is_stale(epoch):
                return self.view
            self._apply_error(exc)
        except Exception:
            if self._is_stale(epoch):
                return self.view
            LOG.error("%s fetch #%s failed", self.kind, epoch, exc_info=True)
            self._apply_error(ApiError(self.error_fallback))
        else:
            if self._is_stale(epoch):
                return self.view
            self._apply_page(page)
        self.view.loading = False
        return self.view

    def fail_validation(self, message: str) -> ViewModel:
        """Show a local validation error and supersede any fetch in flight."""
        self._epoch += 1
        return self._fail(ValidationError(message))

    def close(self) -> None:
        """Detach from the screen; completions of fetches in flight are ignored."""
        self._epoch += 1
        self.view.loading = False

    def _is_stale(self, epoch: int) -> bool:
        if epoch != self._epoch:
            LOG.debug("%s fetch #%s superseded by #%s", self.kind, epoch, self._epoch)
            return True
        return False

    def _fail(self, exc: ApiError) -> ViewModel:
        self._apply_error(exc)
        self.view.loading = False
        return self.view

    def _apply_page(self, page: TransactionPage) -> None:
        rows = list(page.items)
        self.view.rows = rows
        self.view.total_count = page.total
        self.view.error_message = ""
        self.view.error_kind = ""
        self.view.summary = SummaryStats.from_rows(rows, page.total)
        self.cursor.total_count = page.total

    def _apply_error(self, exc: ApiError) -> None:
        if isinstance(exc, HttpError):
            message = exc.detail or self.error_fallback
        else:
            message = exc.message or self.error_fallback
        self.view.rows = []
        self.view.total_count = 0
        self.view.error_message = message
        self.view.error_kind = exc.kind
        self.view.summary = SummaryStats()
        self.cursor.total_count = 0

    # Screen events: primitives combined with the screen's fetch policy

    async def on_mount(self) -> ViewModel:
        if self.fetch_on_mount:
            await self.trigger_fetch()
        return self.view

    async def on_filter_change(self, field: str, value: str | None) -> ViewModel:
        self.set_filter(field, value)
        if self.fetch_on_filter_change:
            self.set_page(0)
            await self.trigger_fetch()
        return self.view

    async def on_paginate(self, page: int, page_size: int | None = None) -> ViewModel:
        if not self.paginated:
            return self.view
        if page_size is not None and page_size != self.cursor.page_size:
            self.set_page_size(page_size)
        else:
            self.set_page(page)
        if self._fetches_on_paginate():
            await self.trigger_fetch()
        return self.view

    async def on_search(self) -> ViewModel:
        self.set_page(0)
        return await self.trigger_fetch()

    async def on_reset(self) -> ViewModel:
        self.reset()
        if self.fetch_on_reset:
            await self.trigger_fetch()
        return self.view

    async def refresh(self) -> ViewModel:
        return await self.trigger_fetch()

    def _fetches_on_paginate(self) -> bool:
        return self.fetch_on_paginate
