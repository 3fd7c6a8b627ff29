"""
Error taxonomy for calls made by the dashboard.

Every failure a screen can show is one of four kinds:

- UnauthorizedError: the backend rejected the session (HTTP 401). The only
  kind with a global side effect: the session is cleared and the user is
  sent back to the login screen.
- HttpError: the request reached the server and was rejected.
- NetworkError: no response was received (connection failure, timeout).
- ValidationError: a local precondition failed; the network is never used.
"""

from http import HTTPStatus

UNAUTHORIZED_MESSAGE = "Session expired. Please log in again."
NETWORK_MESSAGE = "Unable to reach the server"


class ApiError(Exception):
    """Base class for every classified request failure."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthorizedError(ApiError):
    """The backend answered 401; the stored session is no longer valid."""

    kind = "unauthorized"

    def __init__(self, message: str = UNAUTHORIZED_MESSAGE) -> None:
        super().__init__(message)
        self.status = HTTPStatus.UNAUTHORIZED.value


class HttpError(ApiError):
    """
    The backend answered with a non-2xx status other than 401.

    Attributes:
        status: HTTP status code.
        detail: Message supplied by the server, None when it sent none.
    """

    kind = "http"

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__(message or generic_message(status))
        self.status = status
        self.detail = message

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"


class NetworkError(ApiError):
    """No HTTP response was received."""

    kind = "network"

    def __init__(self, message: str = NETWORK_MESSAGE) -> None:
        super().__init__(message)


class ValidationError(ApiError):
    """A required input was missing; raised before any request is made."""

    kind = "validation"


def generic_message(status: int) -> str:
    """Return a fallback phrase for a status code without a server message."""
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Request failed"
    return f"{phrase} (HTTP {status})"
