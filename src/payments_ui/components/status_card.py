"""
Detail card for the single-order status lookup.
"""

import reflex as rx

from payments_ui.components.transaction_table import status_badge
from payments_ui.models.reflex_models import TransactionModel


def status_card(transaction: TransactionModel) -> rx.Component:
    """
    Build the card describing one transaction.

    Args:
        transaction: The looked-up transaction.
    """
    return rx.card(
        rx.hstack(
            status_badge(transaction.status),
            rx.moment(transaction.payment_time, format="DD MMM YYYY, HH:mm"),
            justify="between",
        ),
        rx.grid(
            _section(
                "Transaction",
                _info_row("Custom Order ID", transaction.custom_order_id),
                _info_row("Collect ID", transaction.collect_id),
                _info_row("School ID", transaction.school_id),
                _info_row("Gateway", transaction.gateway),
            ),
            _section(
                "Student",
                _info_row("Student Name", transaction.student_name),
                _info_row("Student ID", transaction.student_id),
                _info_row("Student Email", transaction.student_email),
            ),
            _section(
                "Payment",
                _info_row("Order Amount", f"₹{transaction.order_amount}"),
                _info_row("Transaction Amount", f"₹{transaction.transaction_amount}"),
                _info_row("Payment Mode", transaction.payment_mode.upper()),
                _info_row("Bank Reference", transaction.bank_reference),
            ),
            columns="3",
            spacing="4",
        ),
        rx.cond(
            (transaction.error_message != "") & (transaction.error_message != "NA"),
            rx.callout(transaction.error_message, icon="info", color_scheme="red"),
        ),
        class_name="status-card",
    )


def _section(title: str, *rows: rx.Component) -> rx.Component:
    return rx.vstack(rx.heading(title, size="3", as_="h3"), *rows, class_name="info-section")


def _info_row(label: str, value) -> rx.Component:
    return rx.hstack(
        rx.text(label, class_name="label"),
        rx.text(rx.cond(value != "", value, "N/A"), class_name="value"),
        justify="between",
        width="100%",
    )
