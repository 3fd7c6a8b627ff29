"""
Login, registration and logout.

AuthService is the only writer of a new session: a successful login
stores the returned token and user in the session store. Logout clears
it; expiry is detected separately by the authenticated client on 401.
"""

from typing import Any, Mapping

from payments_ui.client import AuthenticatedClient
from payments_ui.errors import HttpError, UnauthorizedError, ValidationError
from payments_ui.lib import logs
from payments_ui.models.session import User
from payments_ui.session import SessionStore

LOG = logs.logger(__file__)


class AuthService:
    """Session lifecycle against the backend's /auth endpoints."""

    def __init__(self, client: AuthenticatedClient, store: SessionStore) -> None:
        self._client = client
        self.store = store

    async def login(self, email: str, password: str) -> User | None:
        """
        Exchange credentials for a token and store the session.

        Raises:
            ValidationError: Email or password is blank.
            HttpError: The backend rejected the credentials or returned no
                token.
            NetworkError: The backend could not be reached.
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Please enter your email and password")
        try:
            payload = await self._authenticate(email, password)
        except UnauthorizedError as exc:
            raise HttpError(401, "Invalid email or password") from exc
        token = payload.get("token") if isinstance(payload, Mapping) else None
        if not token:
            raise HttpError(502, "Login response did not include a token")
        user = User.from_dict(payload.get("user"))
        self.store.set(token, user)
        LOG.info("Logged in - email:%s", email)
        return user

    async def register(self, user_data: dict[str, Any]) -> Any:
        """Create an account; the backend's response is returned as-is."""
        return await self._client.post("/auth/register", body=user_data)

    def logout(self) -> None:
        self.store.clear()

    async def _authenticate(self, email: str, password: str) -> Any:
        return await self._client.post(
            "/auth/login", body={"email": email, "password": password}
        )


class DemoAuthService(AuthService):
    """Accepts any credentials and issues a local demo token."""

    async def _authenticate(self, email: str, password: str) -> Any:
        return {
            "token": "demo-token",
            "user": {"name": email.split("@")[0].title(), "email": email},
        }

    async def register(self, user_data: dict[str, Any]) -> Any:
        return {"user": user_data}
