"""Session bootstrap against the users API."""

import logging
from dataclasses import dataclass

from users_demo.adapters.users_api_client import UsersApiClient
from users_demo.domain.errors import SessionEstablishmentError
from users_demo.domain.sessions import SessionHeader

_logger = logging.getLogger(__name__)


@dataclass
class SessionBootstrapper:
    """Captures the session cookie used by every later request."""

    api_client: UsersApiClient

    def establish_session(self) -> SessionHeader:
        """Probe the endpoint with HEAD and build the Cookie header."""
        fragments = self.api_client.fetch_session_cookies()
        if fragments is None:
            raise SessionEstablishmentError(
                "Bootstrap response carried no Set-Cookie header"
            )
        session = SessionHeader.from_fragments(fragments)
        _logger.info("Session established: fragments=%s", len(fragments))
        return session
