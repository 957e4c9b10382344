"""Users API client adapter."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from users_demo.adapters.users_api_models import UserPayload
from users_demo.domain.errors import NetworkError
from users_demo.domain.models import ApiResponse, UserRecord

_logger = logging.getLogger(__name__)


class UsersApiClient(Protocol):
    """Interface for the remote /api/users resource."""

    def fetch_session_cookies(self) -> list[str] | None:
        """Issue a HEAD request and return its Set-Cookie values, if any."""

    def list_users(self, headers: dict[str, str]) -> ApiResponse:
        """Fetch all users."""

    def create_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        """Create a user."""

    def update_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        """Update a user addressed by its id."""

    def delete_user(self, user_id: int, headers: dict[str, str]) -> ApiResponse:
        """Delete a user by id."""


@dataclass
class HttpxUsersApiClient(UsersApiClient):
    """Users API client implemented with httpx."""

    base_url: str
    http_client: httpx.Client

    @classmethod
    def create(cls, base_url: str, timeout: float = 5.0) -> "HttpxUsersApiClient":
        """Create a users API client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.Client(timeout=timeout))

    def fetch_session_cookies(self) -> list[str] | None:
        """Read Set-Cookie values from a HEAD response."""
        response = self._send("HEAD", self.base_url)
        cookies = response.headers.get_list("set-cookie")
        return cookies or None

    def list_users(self, headers: dict[str, str]) -> ApiResponse:
        """Fetch all users with GET on the base URL."""
        response = self._send("GET", self.base_url, headers=headers)
        _logger.debug("Users list headers: %s", dict(response.headers))
        return _to_api_response(response)

    def create_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        """Create a user with POST on the base URL."""
        response = self._send(
            "POST",
            self.base_url,
            headers=headers,
            json=UserPayload.from_record(user).to_json_body(),
        )
        return _to_api_response(response)

    def update_user(self, user: UserRecord, headers: dict[str, str]) -> ApiResponse:
        """Update a user with PUT on the base URL."""
        response = self._send(
            "PUT",
            self.base_url,
            headers=headers,
            json=UserPayload.from_record(user).to_json_body(),
        )
        return _to_api_response(response)

    def delete_user(self, user_id: int, headers: dict[str, str]) -> ApiResponse:
        """Delete a user with DELETE on {base_url}/{id}."""
        url = f"{self.base_url.rstrip('/')}/{user_id}"
        response = self._send("DELETE", url, headers=headers)
        return _to_api_response(response)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        json: dict[str, object] | None = None,
    ) -> httpx.Response:
        try:
            response = self.http_client.request(method, url, headers=headers, json=json)
        except httpx.TransportError as exc:
            raise NetworkError(f"{method} {url} failed: {exc}") from exc
        _logger.info("Users API %s %s -> %s", method, url, response.status_code)
        return response


def _to_api_response(response: httpx.Response) -> ApiResponse:
    return ApiResponse(status_code=response.status_code, text=response.text)
