"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from users_demo.adapters.users_api_client import UsersApiClient
from users_demo.config import Settings
from users_demo.domain.models import ApiResponse, UserRecord
from users_demo.domain.sessions import SessionHeader


@dataclass
class RecordingUsersApiClient(UsersApiClient):
    """Fake users API client that records every call."""

    cookies: list[str] | None = field(default_factory=lambda: ["a=1"])
    responses: dict[str, ApiResponse] = field(
        default_factory=lambda: {
            "create": ApiResponse(status_code=200, text="OK1"),
            "update": ApiResponse(status_code=200, text="OK2"),
            "delete": ApiResponse(status_code=200, text="OK3"),
            "list": ApiResponse(status_code=200, text="[]"),
        }
    )
    calls: list[tuple[str, object, dict[str, str] | None]] = field(
        default_factory=list
    )

    def fetch_session_cookies(self) -> list[str] | None:
        self.calls.append(("head", None, None))
        return self.cookies

    def list_users(self, headers: dict[str, str]) -> ApiResponse:
        self.calls.append(("list", None, headers))
        return self.responses["list"]

    def create_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        self.calls.append(("create", user, headers))
        return self.responses["create"]

    def update_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        self.calls.append(("update", user, headers))
        return self.responses["update"]

    def delete_user(self, user_id: int, headers: dict[str, str]) -> ApiResponse:
        self.calls.append(("delete", user_id, headers))
        return self.responses["delete"]

    @property
    def actions(self) -> list[str]:
        return [action for action, _, _ in self.calls]


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="http://users.test/api/users")


@pytest.fixture
def api_client() -> RecordingUsersApiClient:
    return RecordingUsersApiClient()


@pytest.fixture
def session() -> SessionHeader:
    return SessionHeader(cookie="a=1")
