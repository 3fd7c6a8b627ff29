"""
Reflex application entry point for the payments dashboard.

This module initializes the Reflex app and registers one page per screen.
Every page except /login is guarded by AuthState.require_login.
"""

import reflex as rx

from payments_ui import config
from payments_ui.components import (
    login_form,
    navigation,
    search_actions,
    select_filter,
    stats_cards,
    status_card,
    text_filter,
    transaction_table,
)
from payments_ui.components.filters import GATEWAY_OPTIONS, STATUS_OPTIONS
from payments_ui.components.transaction_table import error_alert
from payments_ui.lib import logs
from payments_ui.state import (
    AuthState,
    DashboardState,
    SchoolTransactionsState,
    TransactionsState,
    TransactionStatusState,
)

LOG = logs.logger(__file__)

LOG.info("API base URL: %s service:%s", config.API_BASE_URL, config.SERVICE_KIND)


def _page(title: str, state, *children: rx.Component) -> rx.Component:
    """Wrap a screen with the navigation bar and mount/unmount hooks."""
    return rx.box(
        navigation(),
        rx.box(
            rx.heading(title, size="6", as_="h2", class_name="page-title"),
            *children,
            class_name="page-content",
            on_mount=state.mount,
            on_unmount=state.unmount,
        ),
        class_name="app-shell",
    )


def dashboard() -> rx.Component:
    state = DashboardState
    return _page(
        "Dashboard",
        state,
        stats_cards(state),
        rx.card(
            rx.hstack(
                select_filter(state, "status", "Payment Status", STATUS_OPTIONS),
                text_filter(state, "school_id", "School ID", "Enter specific school ID"),
                text_filter(state, "search", "Search", "Search by student name, order ID..."),
                rx.button("Refresh Data", on_click=state.refresh, loading=state.loading),
                align="end",
            ),
            class_name="filter-panel",
        ),
        transaction_table(state),
    )


def all_transactions() -> rx.Component:
    state = TransactionsState
    return _page(
        "All Transactions",
        state,
        rx.card(
            rx.hstack(
                select_filter(state, "status", "Status", STATUS_OPTIONS),
                text_filter(state, "date_from", "From Date", type_="date"),
                text_filter(state, "date_to", "To Date", type_="date"),
                text_filter(state, "school_id", "School ID", "Enter school ID"),
                select_filter(state, "gateway", "Gateway", GATEWAY_OPTIONS),
                search_actions(state),
                align="end",
            ),
            class_name="filter-panel",
        ),
        transaction_table(state),
    )


def school_transactions() -> rx.Component:
    state = SchoolTransactionsState
    return _page(
        "School Transactions",
        state,
        rx.card(
            rx.hstack(
                text_filter(state, "school_id", "School ID", "Enter school ID"),
                search_actions(state, reset=False),
                align="end",
            ),
            class_name="filter-panel",
        ),
        rx.cond(
            state.searched_school_id != "",
            rx.text(
                "Found ",
                rx.text.strong(state.total_count),
                " transactions for school ID: ",
                rx.text.strong(state.searched_school_id),
            ),
        ),
        transaction_table(state),
    )


def transaction_status() -> rx.Component:
    state = TransactionStatusState
    return _page(
        "Transaction Status",
        state,
        rx.card(
            rx.hstack(
                text_filter(state, "custom_order_id", "Custom Order ID", "Enter custom order ID"),
                search_actions(state, reset=False),
                align="end",
            ),
            class_name="filter-panel",
        ),
        rx.cond(state.error_message != "", error_alert(state.error_message)),
        rx.cond(state.has_transaction, status_card(state.rows[0])),
    )


def login() -> rx.Component:
    return login_form()


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
)

app.add_page(login, route="/login", title="Login", on_load=AuthState.redirect_if_logged_in)
app.add_page(dashboard, route="/", title=config.APP_TITLE, on_load=AuthState.require_login)
app.add_page(
    all_transactions,
    route="/transactions",
    title="All Transactions",
    on_load=AuthState.require_login,
)
app.add_page(
    school_transactions,
    route="/transactions-by-school",
    title="School Transactions",
    on_load=AuthState.require_login,
)
app.add_page(
    transaction_status,
    route="/transaction-status",
    title="Transaction Status",
    on_load=AuthState.require_login,
)


def main() -> None:
    """Entrypoint used by `payments-ui`; runs the Reflex dev server."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(config.APP_PORT)]
    )


if __name__ == "__main__":
    main()
