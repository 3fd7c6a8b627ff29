"""Tests for the per-screen query controllers."""

import asyncio
from itertools import permutations

import httpx
import pytest

from conftest import json_response
from payments_ui.controllers import (
    DashboardController,
    SchoolTransactionsController,
    TransactionsController,
    TransactionStatusController,
    create_controller,
)
from payments_ui.errors import UNAUTHORIZED_MESSAGE, HttpError, NetworkError
from payments_ui.models import SummaryStats
from payments_ui.services import DemoTransactionService, HttpTransactionService


async def started(coro):
    """Schedule a controller call and let it run up to its first await."""
    task = asyncio.create_task(coro)
    await asyncio.sleep(0)
    return task


class TestRequestParams:
    def test_only_non_empty_filters_are_sent(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_filter("status", "success")
        controller.set_filter("school_id", "S1")
        controller.set_filter("gateway", "   ")
        controller.set_page_size(25)

        assert controller.request_params() == {
            "page": 1,
            "limit": 25,
            "status": "success",
            "school_id": "S1",
        }

    def test_page_is_sent_one_indexed(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_page(3)

        assert controller.request_params()["page"] == 4

    def test_dashboard_sorts_newest_first(self, controlled_service):
        controller = DashboardController(controlled_service)
        controller.set_filter("search", " ORD-1 ")

        assert controller.request_params() == {
            "page": 1,
            "limit": 10,
            "sort": "payment_time",
            "order": "desc",
            "search": "ORD-1",
        }

    def test_unknown_filter_is_rejected(self, controlled_service):
        controller = DashboardController(controlled_service)

        with pytest.raises(KeyError):
            controller.set_filter("gateway", "PhonePe")

    def test_reset_restores_defaults_and_first_page(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_filter("status", "failed")
        controller.set_page(2)

        controller.reset()

        assert controller.active_filters() == {}
        assert controller.cursor.page == 0


class TestPagination:
    def test_changing_page_size_returns_to_first_page(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_page(4)

        controller.set_page_size(50)

        assert controller.cursor.page == 0
        assert controller.cursor.page_size == 50

    def test_same_page_size_keeps_page(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_page(4)

        controller.set_page_size(25)

        assert controller.cursor.page == 4

    def test_invalid_page_and_size_are_rejected(self, controlled_service):
        controller = TransactionsController(controlled_service)

        with pytest.raises(ValueError):
            controller.set_page(-1)
        with pytest.raises(ValueError):
            controller.set_page_size(7)

    async def test_paginate_with_new_size_fetches_first_page(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_page(3)

        task = await started(controller.on_paginate(3, page_size=10))
        controlled_service.calls[0].succeed()
        await task

        assert controlled_service.calls[0].args == {"page": 1, "limit": 10}

    async def test_total_count_updates_page_count(self, controlled_service):
        controller = TransactionsController(controlled_service)

        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].succeed({"collect_id": "C1"}, total=60)
        await task

        assert controller.cursor.total_count == 60
        assert controller.cursor.page_count == 3


class TestOrdering:
    @pytest.mark.parametrize("order", list(permutations(range(3))))
    async def test_latest_fetch_wins_for_any_completion_order(self, controlled_service, order):
        controller = DashboardController(controlled_service)
        tasks = [await started(controller.trigger_fetch()) for _ in range(3)]

        for index in order:
            controlled_service.calls[index].succeed(
                {"collect_id": f"C{index}", "status": "success"}, total=index + 1
            )
            await tasks[index]

        assert [row["collect_id"] for row in controller.view.rows] == ["C2"]
        assert controller.view.total_count == 3
        assert controller.view.loading is False

    async def test_older_completion_leaves_newer_fetch_loading(self, controlled_service):
        controller = DashboardController(controlled_service)
        first = await started(controller.trigger_fetch())
        await started(controller.trigger_fetch())

        controlled_service.calls[0].succeed({"collect_id": "OLD"})
        await first

        assert controller.view.loading is True
        assert controller.view.rows == []

    async def test_stale_error_is_dropped(self, controlled_service):
        controller = DashboardController(controlled_service)
        first = await started(controller.trigger_fetch())
        second = await started(controller.trigger_fetch())

        controlled_service.calls[1].succeed({"collect_id": "NEW"})
        await second
        controlled_service.calls[0].fail(NetworkError())
        await first

        assert controller.view.error_message == ""
        assert [row["collect_id"] for row in controller.view.rows] == ["NEW"]

    async def test_filter_change_supersedes_pending_fetch(self, controlled_service):
        controller = DashboardController(controlled_service)
        first = await started(controller.on_mount())
        second = await started(controller.on_filter_change("status", "failed"))

        assert controlled_service.calls[1].args["status"] == "failed"
        controlled_service.calls[1].succeed({"collect_id": "F1", "status": "failed"})
        await second
        controlled_service.calls[0].succeed({"collect_id": "ALL"})
        await first

        assert [row["collect_id"] for row in controller.view.rows] == ["F1"]

    async def test_close_discards_in_flight_result(self, controlled_service):
        controller = DashboardController(controlled_service)
        task = await started(controller.trigger_fetch())

        controller.close()
        assert controller.view.loading is False

        controlled_service.calls[0].succeed({"collect_id": "LATE"})
        await task

        assert controller.view.rows == []
        assert controller.view.loading is False


class TestOutcomes:
    async def test_success_sets_rows_total_and_summary(self, controlled_service):
        controller = DashboardController(controlled_service)
        task = await started(controller.trigger_fetch())
        assert controller.view.loading is True

        controlled_service.calls[0].succeed(
            {"collect_id": "A", "status": "success"},
            {"collect_id": "B", "status": "pending"},
            {"collect_id": "C", "status": "success"},
            total=30,
        )
        view = await task

        assert view.loading is False
        assert view.total_count == 30
        assert view.summary == SummaryStats(total=30, success=2, pending=1, failed=0)

    async def test_error_replaces_previous_rows(self, controlled_service):
        controller = DashboardController(controlled_service)
        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].succeed({"collect_id": "A", "status": "success"})
        await task

        task = await started(controller.refresh())
        controlled_service.calls[1].fail(NetworkError())
        view = await task

        assert view.rows == []
        assert view.total_count == 0
        assert view.summary == SummaryStats()
        assert view.error_message == "Unable to reach the server"
        assert view.error_kind == "network"
        assert view.loading is False

    async def test_server_message_shown_for_http_error(self, controlled_service):
        controller = TransactionsController(controlled_service)
        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].fail(HttpError(400, "Invalid date range"))
        view = await task

        assert view.error_message == "Invalid date range"
        assert view.error_kind == "http"

    async def test_fallback_message_when_server_sends_none(self, controlled_service):
        controller = TransactionsController(controlled_service)
        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].fail(HttpError(500))
        view = await task

        assert view.error_message == "Failed to fetch transactions"

    async def test_unexpected_exception_becomes_fallback_error(self, controlled_service):
        controller = TransactionsController(controlled_service)
        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].fail(RuntimeError("bad payload"))
        view = await task

        assert view.error_message == "Failed to fetch transactions"
        assert view.loading is False

    async def test_next_success_clears_error(self, controlled_service):
        controller = TransactionsController(controlled_service)
        task = await started(controller.trigger_fetch())
        controlled_service.calls[0].fail(NetworkError())
        await task

        task = await started(controller.refresh())
        controlled_service.calls[1].succeed({"collect_id": "A"})
        view = await task

        assert view.error_message == ""
        assert view.error_kind == ""
        assert len(view.rows) == 1


class TestTriggerPolicies:
    async def test_dashboard_fetches_on_mount_and_filter_change(self, controlled_service):
        controller = DashboardController(controlled_service)
        controller.set_page(2)

        task = await started(controller.on_filter_change("school_id", "S1"))
        controlled_service.calls[0].succeed()
        await task

        assert controlled_service.calls[0].args["page"] == 1
        assert controlled_service.calls[0].args["school_id"] == "S1"

    async def test_transactions_filters_wait_for_search(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_page(2)

        await controller.on_filter_change("status", "pending")
        assert controlled_service.calls == []

        task = await started(controller.on_search())
        controlled_service.calls[0].succeed()
        await task

        assert controlled_service.calls[0].args == {"page": 1, "limit": 25, "status": "pending"}

    async def test_reset_refetches_with_defaults(self, controlled_service):
        controller = TransactionsController(controlled_service)
        controller.set_filter("gateway", "PhonePe")

        task = await started(controller.on_reset())
        controlled_service.calls[0].succeed()
        await task

        assert controlled_service.calls[0].args == {"page": 1, "limit": 25}


class TestSchoolScreen:
    async def test_nothing_fetched_before_search(self, controlled_service):
        controller = SchoolTransactionsController(controlled_service)

        await controller.on_mount()
        await controller.on_paginate(1)

        assert controlled_service.calls == []
        assert controller.search_performed is False

    async def test_blank_school_id_is_a_validation_error(self, controlled_service):
        controller = SchoolTransactionsController(controlled_service)
        controller.set_filter("school_id", "  ")

        view = await controller.on_search()

        assert controlled_service.calls == []
        assert view.error_message == "Please enter a school ID"
        assert view.error_kind == "validation"
        assert controller.search_performed is False

    async def test_paging_uses_the_searched_school(self, controlled_service):
        controller = SchoolTransactionsController(controlled_service)
        controller.set_filter("school_id", " S1 ")

        task = await started(controller.on_search())
        controlled_service.calls[0].succeed({"collect_id": "A"}, total=25)
        await task

        controller.set_filter("school_id", "S2")
        task = await started(controller.on_paginate(1))
        controlled_service.calls[1].succeed({"collect_id": "B"}, total=25)
        await task

        assert controlled_service.calls[0].args == ("S1", {"page": 1, "limit": 10})
        assert controlled_service.calls[1].args == ("S1", {"page": 2, "limit": 10})
        assert controller.searched_school_id == "S1"


class TestStatusLookup:
    async def test_blank_order_id_makes_no_request(self, controlled_service):
        controller = TransactionStatusController(controlled_service)

        view = await controller.on_search()

        assert controlled_service.calls == []
        assert view.error_message == "Please enter a custom order ID"
        assert view.loading is False

    async def test_validation_supersedes_pending_lookup(self, controlled_service):
        controller = TransactionStatusController(controlled_service)
        controller.set_filter("custom_order_id", "ORD-1")
        task = await started(controller.on_search())

        controller.set_filter("custom_order_id", "")
        await controller.on_search()
        controlled_service.calls[0].succeed({"custom_order_id": "ORD-1"})
        await task

        assert controller.transaction is None
        assert controller.view.error_message == "Please enter a custom order ID"

    async def test_found_transaction_is_exposed(self, controlled_service):
        controller = TransactionStatusController(controlled_service)
        controller.set_filter("custom_order_id", " ORD-1 ")

        task = await started(controller.on_search())
        controlled_service.calls[0].future.set_result(
            {"custom_order_id": "ORD-1", "status": "pending"}
        )
        await task

        assert controlled_service.calls[0].args == "ORD-1"
        assert controller.transaction["status"] == "pending"

    async def test_missing_transaction_is_not_found(self, controlled_service):
        controller = TransactionStatusController(controlled_service)
        controller.set_filter("custom_order_id", "ORD-404")

        task = await started(controller.on_search())
        controlled_service.calls[0].future.set_result(None)
        view = await task

        assert controller.transaction is None
        assert view.error_message == "Transaction not found"

    async def test_pager_is_ignored(self, controlled_service):
        controller = TransactionStatusController(controlled_service)

        await controller.on_paginate(2)

        assert controlled_service.calls == []
        assert controller.cursor.page == 0


class TestAgainstBackend:
    async def test_filtered_search_round_trip(self, logged_in_store, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(
                {
                    "transactions": [
                        {"collect_id": "C1", "status": "success", "school_id": "S1"},
                        {"collect_id": "C2", "status": "success", "school_id": "S1"},
                    ],
                    "pagination": {"total_records": 2},
                }
            )

        service = HttpTransactionService(make_client(logged_in_store, handler))
        controller = TransactionsController(service)
        controller.set_filter("status", "success")
        controller.set_filter("school_id", "S1")
        controller.set_page_size(25)

        view = await controller.on_search()

        assert seen[0].url.path == "/api/transactions"
        assert dict(seen[0].url.params) == {
            "page": "1",
            "limit": "25",
            "status": "success",
            "school_id": "S1",
        }
        assert len(view.rows) == 2
        assert view.total_count == 2
        assert view.error_message == ""

    async def test_expired_session_returns_to_login(self, logged_in_store, make_client):
        client = make_client(logged_in_store, lambda request: httpx.Response(401))
        navigations = []
        client.subscribe_unauthorized(lambda: navigations.append("login"))
        controller = DashboardController(HttpTransactionService(client))

        view = await controller.on_mount()

        assert logged_in_store.get().token is None
        assert navigations == ["login"]
        assert view.error_message == UNAUTHORIZED_MESSAGE
        assert view.error_kind == "unauthorized"
        assert view.rows == []

    async def test_school_lookup_path_is_escaped(self, logged_in_store, make_client):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response({"transactions": []})

        service = HttpTransactionService(make_client(logged_in_store, handler))
        controller = SchoolTransactionsController(service)
        controller.set_filter("school_id", "a/b")

        view = await controller.on_search()

        assert seen[0].url.raw_path.startswith(b"/api/transactions/school/a%2Fb")
        assert view.is_empty


class TestRegistry:
    def test_create_controller_by_kind(self):
        service = DemoTransactionService()

        controller = create_controller("school", service)

        assert isinstance(controller, SchoolTransactionsController)
        assert controller.service is service

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValueError):
            create_controller("reports", DemoTransactionService())

    async def test_controllers_do_not_share_state(self):
        service = DemoTransactionService()
        first = create_controller("dashboard", service)
        second = create_controller("dashboard", service)

        await first.on_filter_change("status", "failed")

        assert second.filters["status"] == ""
