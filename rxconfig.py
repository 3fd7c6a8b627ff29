"""Reflex configuration for the payments dashboard."""

import reflex as rx

config = rx.Config(
    app_name="payments_ui",
    # Use the src directory structure
    app_module_import="payments_ui.app",
)
