"""Errors raised by the users demo client."""


class UsersDemoError(RuntimeError):
    """Base class for users demo failures."""


class SessionEstablishmentError(UsersDemoError):
    """Raised when the bootstrap response carries no Set-Cookie header."""


class NetworkError(UsersDemoError):
    """Raised when a request cannot reach the remote service."""


class RemoteError(UsersDemoError):
    """Raised when the remote service answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Remote service returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body
