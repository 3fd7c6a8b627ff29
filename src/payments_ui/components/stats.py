"""
Status summary cards for the dashboard.

The per-status counts cover the rows on the current page only; the
first card shows the server-reported total across all pages.
"""

import reflex as rx


def stats_cards(state) -> rx.Component:
    return rx.grid(
        _card("Total Transactions", state.summary_total, "bar-chart-3"),
        _card("Successful (this page)", state.summary_success, "circle-check"),
        _card("Pending (this page)", state.summary_pending, "hourglass"),
        _card("Failed (this page)", state.summary_failed, "circle-x"),
        columns="4",
        spacing="4",
        class_name="stats-section",
    )


def _card(title: str, value, icon: str) -> rx.Component:
    return rx.card(
        rx.hstack(
            rx.icon(icon, size=28),
            rx.vstack(
                rx.text(title, class_name="muted"),
                rx.heading(value, size="6"),
                spacing="1",
            ),
            align="center",
        ),
        class_name="stats-card",
    )
