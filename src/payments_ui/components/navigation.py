"""
Navigation bar shown on every protected page.
"""

import reflex as rx

from payments_ui import config
from payments_ui.state import AuthState

NAV_LINKS = (
    ("Dashboard", "/", "layout-dashboard"),
    ("School Transactions", "/transactions-by-school", "school"),
    ("Transaction Status", "/transaction-status", "search"),
    ("All Transactions", "/transactions", "list"),
)


def navigation() -> rx.Component:
    """Build the header with brand, page links, current user and logout."""
    return rx.hstack(
        rx.heading(config.APP_TITLE, size="5", as_="h1", class_name="nav-title"),
        rx.hstack(
            *[_nav_link(label, route, icon) for label, route, icon in NAV_LINKS],
            class_name="nav-menu",
        ),
        rx.spacer(),
        rx.text(AuthState.user_name, class_name="muted"),
        rx.button(
            rx.icon("log-out", size=16),
            "Logout",
            on_click=AuthState.logout,
            variant="ghost",
        ),
        class_name="nav-header",
        align="center",
    )


def _nav_link(label: str, route: str, icon: str) -> rx.Component:
    return rx.link(
        rx.hstack(rx.icon(icon, size=16), rx.text(label), align="center"),
        href=route,
        class_name="nav-link",
    )
