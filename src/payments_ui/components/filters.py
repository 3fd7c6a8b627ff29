"""
Filter panel inputs for the transaction screens.

Inputs are bound to a screen state's ``filters`` dict and report edits
through its ``set_filter`` event; whether an edit fetches is decided by
the screen's controller.
"""

import reflex as rx

from payments_ui.state import ANY_OPTION

STATUS_OPTIONS = [("", "All Statuses"), ("success", "Success"), ("pending", "Pending"), ("failed", "Failed")]
GATEWAY_OPTIONS = [("", "All Gateways"), ("razorpay", "Razorpay"), ("payu", "PayU"), ("cashfree", "Cashfree")]


def text_filter(state, field: str, label: str, placeholder: str = "", type_: str = "text") -> rx.Component:
    return rx.box(
        rx.text(label, class_name="input-label"),
        rx.input(
            value=state.filters[field].to(str),
            placeholder=placeholder,
            type=type_,
            on_change=lambda value: state.set_filter(field, value),
            debounce_timeout=300,
            class_name="text-input",
        ),
        class_name="input-group",
    )


def select_filter(state, field: str, label: str, options: list[tuple[str, str]]) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="input-label"),
        rx.select.root(
            rx.select.trigger(),
            rx.select.content(
                *[rx.select.item(text, value=value or ANY_OPTION) for value, text in options]
            ),
            value=rx.cond(state.filters[field].to(str) != "", state.filters[field].to(str), ANY_OPTION),
            on_change=lambda value: state.set_filter(field, value),
        ),
        class_name="input-group",
    )


def search_actions(state, reset: bool = True) -> rx.Component:
    """Search (and optionally reset) buttons for screens with manual search."""
    return rx.hstack(
        rx.button(
            rx.icon("search", size=16),
            "Search",
            on_click=state.search,
            loading=state.loading,
        ),
        rx.button("Reset", on_click=state.reset, variant="outline") if reset else rx.fragment(),
        class_name="filter-actions",
    )
