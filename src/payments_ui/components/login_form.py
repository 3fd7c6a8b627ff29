"""
Login form component.
"""

import reflex as rx

from payments_ui import config
from payments_ui.components.transaction_table import error_alert
from payments_ui.state import AuthState


def login_form() -> rx.Component:
    return rx.center(
        rx.card(
            rx.vstack(
                rx.heading(config.APP_TITLE, size="6", as_="h1"),
                rx.text("Sign in to continue", class_name="muted"),
                rx.cond(AuthState.login_error != "", error_alert(AuthState.login_error)),
                rx.input(
                    placeholder="Email",
                    type="email",
                    value=AuthState.email,
                    on_change=AuthState.set_email,
                    width="100%",
                ),
                rx.input(
                    placeholder="Password",
                    type="password",
                    value=AuthState.password,
                    on_change=AuthState.set_password,
                    width="100%",
                ),
                rx.button(
                    "Login",
                    on_click=AuthState.login,
                    loading=AuthState.is_submitting,
                    width="100%",
                ),
                spacing="3",
                width="100%",
            ),
            class_name="login-card",
        ),
        class_name="login-page",
    )
