"""
Transaction table component for Reflex.

Renders one screen's rows with loading, error and empty states and a
server-side pager. Every builder takes the screen's state class so the
same table serves the dashboard, search and school screens.
"""

import reflex as rx

from payments_ui.models.reflex_models import TransactionModel

_COLUMNS = (
    "Order ID",
    "School ID",
    "Student Name",
    "Amount",
    "Status",
    "Gateway",
    "Payment Mode",
    "Payment Time",
)


def transaction_table(state) -> rx.Component:
    """
    Build the results container for a screen.

    Args:
        state: A QueryScreenState subclass.
    """
    return rx.box(
        rx.cond(state.error_message != "", error_alert(state.error_message)),
        rx.cond(
            state.is_empty,
            _empty(),
            rx.box(
                rx.table.root(
                    rx.table.header(
                        rx.table.row(
                            *[rx.table.column_header_cell(name) for name in _COLUMNS]
                        )
                    ),
                    rx.table.body(rx.foreach(state.rows, _row)),
                    class_name="transactions-table",
                ),
                rx.cond(state.loading, _loader()),
            ),
        ),
        pager(state),
        class_name="results",
    )


def status_badge(status) -> rx.Component:
    """Colored badge for a payment status."""
    return rx.badge(
        rx.cond(status != "", status.upper(), "UNKNOWN"),
        color_scheme=rx.match(
            status,
            ("success", "green"),
            ("pending", "amber"),
            ("failed", "red"),
            "gray",
        ),
    )


def error_alert(message) -> rx.Component:
    return rx.callout(message, icon="triangle-alert", color_scheme="red", class_name="error-alert")


def pager(state) -> rx.Component:
    """Previous/next buttons, page position and page size selector."""
    return rx.hstack(
        rx.text(
            state.total_count.to_string() + " transactions",
            class_name="muted",
        ),
        rx.spacer(),
        rx.select(
            state.page_size_options,
            value=state.page_size.to_string(),
            on_change=state.change_page_size,
            size="1",
        ),
        rx.button(
            rx.icon("chevron-left", size=16),
            on_click=state.previous_page,
            disabled=state.loading | (state.page == 0),
            variant="soft",
        ),
        rx.text(state.page_label),
        rx.button(
            rx.icon("chevron-right", size=16),
            on_click=state.next_page,
            disabled=state.loading | (state.page + 1 >= state.page_count),
            variant="soft",
        ),
        class_name="pager",
        align="center",
    )


def _row(transaction: TransactionModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(transaction.custom_order_id, class_name="cell-monospace"),
        rx.table.cell(transaction.school_id, class_name="cell-monospace"),
        rx.table.cell(rx.cond(transaction.student_name != "", transaction.student_name, "N/A")),
        rx.table.cell(f"₹{transaction.order_amount}"),
        rx.table.cell(status_badge(transaction.status)),
        rx.table.cell(transaction.gateway),
        rx.table.cell(transaction.payment_mode.upper()),
        rx.table.cell(rx.moment(transaction.payment_time, format="DD MMM YYYY, HH:mm")),
        key=transaction.id,
    )


def _empty() -> rx.Component:
    """Build the empty state when no transactions are found."""
    return rx.box(
        rx.icon("inbox", class_name="empty-icon", size=48),
        rx.heading("No transactions found", size="3", as_="h3"),
        rx.text("Try changing the filters.", class_name="muted"),
        class_name="card empty-state",
    )


def _loader() -> rx.Component:
    return rx.box(
        rx.spinner(),
        rx.text("Loading transactions...", class_name="muted"),
        class_name="loading-state",
    )
