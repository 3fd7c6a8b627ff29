"""
Authenticated HTTP client shared by every screen.

Wraps a single httpx.AsyncClient and adds the session handling every
call needs:

- Attaches ``Authorization: Bearer <token>`` when the session store holds
  a token. Without one the request goes out unauthenticated, which keeps
  endpoints like login reachable.
- Classifies every outcome into a payload or a typed ApiError.
- On HTTP 401, from any endpoint, clears the session store and notifies
  the navigation listeners so the presentation layer can return to the
  login screen. The notification fires once per 401 received.

The client holds no per-request state, so any number of controllers can
await it concurrently on the same event loop.
"""

from typing import Any, Callable

import httpx

from payments_ui import config
from payments_ui.errors import HttpError, NetworkError, UnauthorizedError
from payments_ui.lib import logs
from payments_ui.session import SessionStore

LOG = logs.logger(__file__)

UnauthorizedListener = Callable[[], None]


class AuthenticatedClient:
    """
    Session-aware JSON client for the payments backend.

    Attributes:
        store: Session store the bearer token is read from.
    """

    def __init__(
        self,
        store: SessionStore,
        base_url: str | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            store: Session store providing the token.
            base_url: Backend base URL. Defaults to PAYMENTS_UI_API_BASE_URL.
            http: Pre-built httpx client, mainly for tests. When omitted a
                client with the transport's default timeouts is created.
        """
        self.store = store
        self._http = http or httpx.AsyncClient(base_url=base_url or config.API_BASE_URL)
        self._unauthorized_listeners: list[UnauthorizedListener] = []

    async def __aenter__(self) -> "AuthenticatedClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    def subscribe_unauthorized(self, listener: UnauthorizedListener) -> Callable[[], None]:
        """
        Register a "go to login" listener, fired once per 401 response.

        Returns:
            A function that removes the subscription.
        """
        self._unauthorized_listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._unauthorized_listeners:
                self._unauthorized_listeners.remove(listener)

        return unsubscribe

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: dict[str, Any] | None = None) -> Any:
        return await self.request("POST", path, body=body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send a request and classify the outcome.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            params: Query parameters.
            body: JSON body.

        Returns:
            The deserialized JSON body of a 2xx response, or None when the
            body is empty.

        Raises:
            UnauthorizedError: The backend answered 401. The session has
                already been cleared and listeners notified.
            HttpError: Any other non-2xx status, or a 2xx body that is not
                JSON.
            NetworkError: No response was received.
        """
        headers = {"Accept": "application/json"}
        token = self.store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"

        method = method.upper()
        LOG.info("%s %s params:%s", method, path, params)
        try:
            response = await self._http.request(
                method, path, params=params, json=body, headers=headers
            )
        except httpx.RequestError as exc:
            LOG.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError() from exc

        if response.status_code == 401:
            self._handle_unauthorized(method, path)
            raise UnauthorizedError()

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise HttpError(response.status_code, "Invalid response from server") from exc

        message = _server_message(response)
        LOG.warning("%s %s -> %s %s", method, path, response.status_code, message)
        raise HttpError(response.status_code, message)

    def _handle_unauthorized(self, method: str, path: str) -> None:
        LOG.warning("%s %s -> 401, clearing session", method, path)
        self.store.clear()
        for listener in list(self._unauthorized_listeners):
            try:
                listener()
            except Exception:
                LOG.error("Unauthorized listener failed", exc_info=True)


def _server_message(response: httpx.Response) -> str | None:
    """Extract the backend's error message, if the body carries one."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None
