"""Demo sequence against the remote users resource."""

import logging
from dataclasses import dataclass

from pydantic import TypeAdapter

from users_demo.adapters.users_api_client import UsersApiClient
from users_demo.adapters.users_api_models import UserPayload
from users_demo.domain.errors import RemoteError
from users_demo.domain.models import ApiResponse, UserRecord
from users_demo.domain.sessions import SessionHeader

DEMO_USER_ID = 3
DEMO_CREATED_USER = UserRecord(
    id=DEMO_USER_ID, first_name="James", last_name="Brown", age=28
)
DEMO_UPDATED_USER = UserRecord(
    id=DEMO_USER_ID, first_name="Thomas", last_name="Shelby", age=5
)

_USER_LIST = TypeAdapter(list[UserPayload])

_logger = logging.getLogger(__name__)


@dataclass
class UserResourceClient:
    """Runs create, update and delete calls with an established session.

    By default response statuses are not inspected and every body, error or
    not, ends up in the combined result. With ``strict`` enabled the first
    non-2xx response raises ``RemoteError`` and the sequence stops.
    """

    api_client: UsersApiClient
    session: SessionHeader
    strict: bool = False

    def run_demo_sequence(self) -> str:
        """Create, update and delete the demo user; concatenate the bodies."""
        created = self.create_user()
        updated = self.update_user()
        deleted = self.delete_user()
        return created + updated + deleted

    def create_user(self) -> str:
        """Create the demo user and return the response body."""
        response = self.api_client.create_user(
            DEMO_CREATED_USER, headers=self.session.as_headers()
        )
        return self._body(response, action="create")

    def update_user(self) -> str:
        """Update the demo user and return the response body."""
        response = self.api_client.update_user(
            DEMO_UPDATED_USER, headers=self.session.as_headers()
        )
        return self._body(response, action="update")

    def delete_user(self) -> str:
        """Delete the demo user and return the response body."""
        response = self.api_client.delete_user(
            DEMO_USER_ID, headers=self.session.as_headers()
        )
        return self._body(response, action="delete")

    def list_users(self) -> list[UserRecord]:
        """Fetch every user known to the remote service."""
        response = self.api_client.list_users(headers=self.session.as_headers())
        if not response.is_success:
            raise RemoteError(response.status_code, response.text)
        payloads = _USER_LIST.validate_json(response.text)
        return [payload.to_record() for payload in payloads]

    def _body(self, response: ApiResponse, action: str) -> str:
        if not response.is_success:
            _logger.warning(
                "Users %s returned status=%s", action, response.status_code
            )
            if self.strict:
                raise RemoteError(response.status_code, response.text)
        return response.text
