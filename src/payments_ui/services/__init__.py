"""
Service factories for the payments dashboard.

Available implementations:
- http: Queries the payments backend through an authenticated client
- demo: In-memory service with static transaction data (no backend required)

Services are built per browser client around that client's
AuthenticatedClient, so one visitor's session never authenticates
another's requests. Configure via the PAYMENTS_UI_SERVICE environment
variable.
"""

from typing import Callable, Dict

from payments_ui import config
from payments_ui.client import AuthenticatedClient
from payments_ui.lib import logs
from payments_ui.services.auth_service import AuthService, DemoAuthService
from payments_ui.services.transaction_service import TransactionService
from payments_ui.services.transaction_service_demo import DemoTransactionService
from payments_ui.services.transaction_service_http import HttpTransactionService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[AuthenticatedClient], TransactionService]] = {
    "demo": lambda client: DemoTransactionService(),
    "http": HttpTransactionService,
}

_AUTH_REGISTRY: Dict[str, Callable[[AuthenticatedClient], AuthService]] = {
    "demo": lambda client: DemoAuthService(client, client.store),
    "http": lambda client: AuthService(client, client.store),
}


def _resolve(kind: str | None) -> str:
    return (kind or config.SERVICE_KIND).lower()


def create_transaction_service(
    client: AuthenticatedClient, kind: str | None = None
) -> TransactionService:
    """Return the configured transaction service for one browser client."""
    resolved_kind = _resolve(kind)
    LOG.debug("create_transaction_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown transaction service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory(client)


def create_auth_service(client: AuthenticatedClient, kind: str | None = None) -> AuthService:
    """Return the auth service matching the configured transaction service."""
    resolved_kind = _resolve(kind)
    try:
        factory = _AUTH_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown auth service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory(client)


__all__ = [
    "AuthService",
    "DemoAuthService",
    "DemoTransactionService",
    "HttpTransactionService",
    "TransactionService",
    "create_auth_service",
    "create_transaction_service",
]
