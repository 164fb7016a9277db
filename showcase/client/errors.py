"""
Error taxonomy shared by the HTTP client, the collection stores and the forms.

Every error carries a ``user_message``: the text a store writes into its
``error`` state and the CLI prints.
"""

import builtins

NETWORK_MESSAGE = "Network error. Please check your connection and try again."
TIMEOUT_MESSAGE = "Request timed out. Please try again."
AUTH_MESSAGE = "Authentication failed. Please login again."
SERVER_MESSAGE = "Server error. Please try again later."
UNKNOWN_MESSAGE = "Request failed"


class ShowcaseError(Exception):
    default_message = UNKNOWN_MESSAGE

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        return self.message


class ValidationError(ShowcaseError, ValueError):
    """Bad local input. Raised before anything is sent."""

    default_message = "Invalid input"


class SubmissionInProgress(ShowcaseError):
    default_message = "A submission is already in progress"


class NetworkError(ShowcaseError):
    """No response was received."""

    default_message = NETWORK_MESSAGE

    @property
    def user_message(self) -> str:
        return NETWORK_MESSAGE


class TimeoutError(NetworkError, builtins.TimeoutError):
    default_message = TIMEOUT_MESSAGE

    @property
    def user_message(self) -> str:
        return TIMEOUT_MESSAGE


class HttpError(ShowcaseError):
    """Non-2xx response."""

    def __init__(self, status: int, message: str | None = None):
        self.status = status
        super().__init__(message or f"HTTP {status}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class AuthError(HttpError):
    """401 from the backend, or no stored credential before a mutating call."""

    def __init__(self, message: str | None = None, status: int = 401):
        super().__init__(status, message or AUTH_MESSAGE)

    @property
    def user_message(self) -> str:
        return AUTH_MESSAGE


class MissingCredentialError(AuthError):
    """No stored token; the request was never sent."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Authentication token not found. Please login again.")

    @property
    def user_message(self) -> str:
        return self.message


class NotFoundError(HttpError):
    def __init__(self, message: str | None = None, status: int = 404):
        super().__init__(status, message or "Not found")


class ServerError(HttpError):
    def __init__(self, status: int = 500, message: str | None = None):
        super().__init__(status, message or SERVER_MESSAGE)

    @property
    def user_message(self) -> str:
        return SERVER_MESSAGE


class UnknownError(ShowcaseError):
    default_message = UNKNOWN_MESSAGE


def error_from_status(status: int, message: str | None = None) -> HttpError:
    """Map an HTTP status to the most specific error class."""
    if status == 401:
        return AuthError(message)
    if status == 404:
        return NotFoundError(message)
    if status >= 500:
        return ServerError(status, message)
    return HttpError(status, message)


def is_transient(error: BaseException) -> bool:
    """Transport failures and 5xx responses are worth retrying; everything else is final."""
    return isinstance(error, (NetworkError, ServerError))
