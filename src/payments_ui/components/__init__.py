"""
Reflex UI components for the payments dashboard.

This package provides modular, composable components:
- navigation: Header with page links and logout
- filters: Filter inputs bound to a screen state
- transaction_table: Results table with loading/error/empty states and pager
- stats: Page-local status summary cards
- status_card: Detail card for the single-order lookup
- login_form: Email/password form

Screen-agnostic builders take the screen's state class as an argument.
"""

from payments_ui.components.filters import search_actions, select_filter, text_filter
from payments_ui.components.login_form import login_form
from payments_ui.components.navigation import navigation
from payments_ui.components.stats import stats_cards
from payments_ui.components.status_card import status_card
from payments_ui.components.transaction_table import error_alert, transaction_table

__all__ = [
    "error_alert",
    "login_form",
    "navigation",
    "search_actions",
    "select_filter",
    "stats_cards",
    "status_card",
    "text_filter",
    "transaction_table",
]
