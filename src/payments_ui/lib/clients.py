"""
Per-browser client sessions.

Every browser client connected to the app gets its own ClientSession:
a SessionStore, an AuthenticatedClient reading that store, the services
built on the client, and one controller per screen. Logging in, logging
out and a 401 therefore affect only the browser they happen in.

Sessions are kept in a bounded ClientRegistry keyed by Reflex's client
token. A tab that closes without unmounting its screens is eventually
evicted as the least recently active client. Eviction loses nothing the
user cares about: the token and user live in the browser's localStorage
and are restored into a fresh session on the next page load or action.

Only the underlying httpx connection pool is shared process-wide.
"""

import asyncio
import functools
from collections import OrderedDict
from typing import Awaitable, Callable

import httpx

from payments_ui import config
from payments_ui.client import AuthenticatedClient
from payments_ui.controllers import QueryController, create_controller
from payments_ui.lib import logs
from payments_ui.models.common import ViewModel
from payments_ui.models.session import Session, User
from payments_ui.services import create_auth_service, create_transaction_service
from payments_ui.session import SessionStore

LOG = logs.logger(__file__)

ControllerAction = Callable[[QueryController], Awaitable[ViewModel]]


@functools.cache
def http_client() -> httpx.AsyncClient:
    """Return the connection pool shared by every browser client."""
    return httpx.AsyncClient(base_url=config.API_BASE_URL)


class ClientSession:
    """
    Session, API client, services and screen controllers of one browser.

    Attributes:
        client_token: Reflex client token identifying the browser tab.
        store: The browser's session store.
        api: Authenticated client bound to ``store``.
        transactions: Transaction service used by the screens.
        auth: Login/logout service writing ``store``.
    """

    def __init__(
        self,
        client_token: str,
        http: httpx.AsyncClient | None = None,
        kind: str | None = None,
    ) -> None:
        self.client_token = client_token
        self.store = SessionStore()
        self.api = AuthenticatedClient(self.store, http=http or http_client())
        self.transactions = create_transaction_service(self.api, kind)
        self.auth = create_auth_service(self.api, kind)
        self._controllers: dict[str, QueryController] = {}
        self.api.subscribe_unauthorized(self._log_rejection)

    def controller(self, screen: str) -> QueryController:
        """Return the screen's controller, creating it on first use."""
        if screen not in self._controllers:
            self._controllers[screen] = create_controller(screen, self.transactions)
        return self._controllers[screen]

    def drop_controller(self, screen: str) -> None:
        controller = self._controllers.pop(screen, None)
        if controller is not None:
            controller.close()

    @property
    def screens(self) -> list[str]:
        return list(self._controllers)

    def close(self) -> None:
        """Detach every screen; fetches still in flight are ignored."""
        for screen in list(self._controllers):
            self.drop_controller(screen)

    def restore(self, token: str | None, user_json: str | None) -> Session:
        """
        Align the store with the session the browser holds.

        The browser's localStorage is authoritative: a token there is
        loaded into the store, and no token there means logged out.
        """
        if not token:
            self.store.clear()
        elif token != self.store.token:
            self.store.set(token, User.from_json(user_json))
        return self.store.get()

    def persisted(self) -> tuple[str, str]:
        """Return the (token, user) values to write to localStorage."""
        session = self.store.get()
        return session.token or "", session.user.to_json() if session.user else ""

    def action(self, screen: str, action: ControllerAction) -> "ScreenAction":
        return ScreenAction(self, self.controller(screen), action)

    def _log_rejection(self) -> None:
        LOG.warning("Backend rejected the session of client %s", self.client_token[:8])


class ScreenAction:
    """
    One controller action run on behalf of a screen.

    While the action runs it listens for the client's unauthorized signal,
    from its own requests or any other request of the same browser. A
    rejection means the screen must go back to login even when the fetch
    that received the 401 was superseded and its result dropped.
    """

    def __init__(
        self, session: ClientSession, controller: QueryController, action: ControllerAction
    ) -> None:
        self.session = session
        self.controller = controller
        self._action = action
        self._rejected = False
        self._task: asyncio.Task | None = None
        self._unsubscribe: Callable[[], None] | None = None

    async def start(self) -> ViewModel:
        """Start the action and let it run up to its first network wait."""
        self._unsubscribe = self.session.api.subscribe_unauthorized(self._on_unauthorized)
        self._task = asyncio.create_task(self._action(self.controller))
        await asyncio.sleep(0)
        return self.controller.view

    async def finish(self) -> ViewModel:
        """Wait for the action to complete and stop listening."""
        try:
            return await self._task
        finally:
            self._unsubscribe()

    @property
    def login_required(self) -> bool:
        """True when the session was rejected or is gone."""
        return self._rejected or not self.session.store.is_authenticated

    def _on_unauthorized(self) -> None:
        self._rejected = True


class ClientRegistry:
    """
    Bounded map from client token to ClientSession.

    The least recently used session is closed and evicted once more than
    ``max_clients`` browsers are known.
    """

    def __init__(
        self,
        max_clients: int | None = None,
        factory: Callable[[str], ClientSession] = ClientSession,
    ) -> None:
        self.max_clients = max_clients or config.MAX_CLIENTS
        self._factory = factory
        self._sessions: OrderedDict[str, ClientSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, client_token: str) -> bool:
        return client_token in self._sessions

    def get(self, client_token: str) -> ClientSession:
        """Return the client's session, creating it if needed."""
        session = self._sessions.get(client_token)
        if session is not None:
            self._sessions.move_to_end(client_token)
            return session
        session = self._factory(client_token)
        self._sessions[client_token] = session
        while len(self._sessions) > self.max_clients:
            evicted_token, evicted = self._sessions.popitem(last=False)
            LOG.info("Evicting idle client %s", evicted_token[:8])
            evicted.close()
        return session

    def peek(self, client_token: str) -> ClientSession | None:
        """Return the client's session without creating it or marking it used."""
        return self._sessions.get(client_token)

    def drop(self, client_token: str) -> None:
        session = self._sessions.pop(client_token, None)
        if session is not None:
            session.close()


@functools.cache
def registry() -> ClientRegistry:
    """Return the process-wide registry of browser client sessions."""
    return ClientRegistry()
