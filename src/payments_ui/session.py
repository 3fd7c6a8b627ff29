"""
Session store holding the bearer token and the logged-in user.

Each browser client owns one store, handed explicitly to its
authenticated client and auth service rather than held as global state.
Both fields live in a Storage backend under the fixed keys ``token`` and
``user``, the same keys the browser keeps them under in localStorage.

Clearing is idempotent: clearing an empty store is a no-op and does not
notify subscribers a second time, so concurrent 401 responses can all
call clear() safely.
"""

from typing import Callable

from payments_ui.lib import logs
from payments_ui.lib.storage import MemoryStorage, Storage
from payments_ui.models.session import Session, User

LOG = logs.logger(__file__)

TOKEN_KEY = "token"
USER_KEY = "user"

ClearListener = Callable[[], None]


class SessionStore:
    """
    Holder of one browser client's session.

    Attributes:
        storage: Backend the token and user are persisted to.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self.storage: Storage = storage if storage is not None else MemoryStorage()
        self._listeners: list[ClearListener] = []

    def get(self) -> Session:
        """Return the current token and user (either may be None)."""
        token = self.storage.get(TOKEN_KEY) or None
        return Session(token=token, user=User.from_dict(self.storage.get(USER_KEY)))

    @property
    def token(self) -> str | None:
        return self.storage.get(TOKEN_KEY) or None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def set(self, token: str, user: User | None) -> None:
        """
        Store a freshly issued session.

        Raises:
            ValueError: If the token is empty.
        """
        if not token:
            raise ValueError("Cannot store a session without a token")
        self.storage.set(TOKEN_KEY, token)
        if user is None:
            self.storage.delete(USER_KEY)
        else:
            self.storage.set(USER_KEY, user.to_dict())
        LOG.info("Session stored - user:%s", user.email if user else None)

    def clear(self) -> bool:
        """
        Remove the stored session.

        Returns:
            True if a session was removed, False if the store was already
            empty (in which case no subscriber is notified).
        """
        had_session = (
            self.storage.get(TOKEN_KEY) is not None
            or self.storage.get(USER_KEY) is not None
        )
        self.storage.delete(TOKEN_KEY)
        self.storage.delete(USER_KEY)
        if not had_session:
            return False
        LOG.info("Session cleared")
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                LOG.error("Session clear listener failed", exc_info=True)
        return True

    def subscribe(self, listener: ClearListener) -> Callable[[], None]:
        """
        Register a callback fired whenever a stored session is cleared.

        Returns:
            A function that removes the subscription.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
