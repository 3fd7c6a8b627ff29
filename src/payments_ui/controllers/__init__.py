"""
Controller factory for the payments dashboard screens.

Each screen gets its own controller instance; controllers are never
shared between screens or browser sessions.

Available kinds:
- dashboard: DashboardController
- transactions: TransactionsController
- school: SchoolTransactionsController
- status: TransactionStatusController
"""

from typing import Dict, Type

from payments_ui.controllers.base import QueryController
from payments_ui.controllers.screens import (
    DashboardController,
    SchoolTransactionsController,
    TransactionsController,
    TransactionStatusController,
)
from payments_ui.services.transaction_service import TransactionService

_CONTROLLER_REGISTRY: Dict[str, Type[QueryController]] = {
    controller.kind: controller
    for controller in (
        DashboardController,
        TransactionsController,
        SchoolTransactionsController,
        TransactionStatusController,
    )
}


def create_controller(kind: str, service: TransactionService) -> QueryController:
    """
    Create a controller for a screen.

    Args:
        kind: Screen kind (see module docstring).
        service: Data source of the browser client the screen belongs to.

    Raises:
        ValueError: If the kind is unknown.
    """
    try:
        controller_cls = _CONTROLLER_REGISTRY[kind]
    except KeyError as exc:
        msg = f"Unknown controller kind: {kind}"
        raise ValueError(msg) from exc
    return controller_cls(service)


__all__ = [
    "DashboardController",
    "QueryController",
    "SchoolTransactionsController",
    "TransactionStatusController",
    "TransactionsController",
    "create_controller",
]
