"""Domain models for the users demo."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """Represents a user held by the remote service."""

    id: int
    first_name: str
    last_name: str
    age: int


@dataclass(frozen=True)
class ApiResponse:
    """Status and raw body text of a remote call."""

    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
