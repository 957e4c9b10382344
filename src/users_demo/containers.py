"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

import httpx

from users_demo.adapters.users_api_client import HttpxUsersApiClient, UsersApiClient
from users_demo.config import Settings
from users_demo.services.sessions import SessionBootstrapper
from users_demo.services.users import UserResourceClient


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_client: UsersApiClient
    user_client: UserResourceClient
    close_resources: Callable[[], None]


def build_container(
    settings: Settings | None = None, http_client: httpx.Client | None = None
) -> AppContainer:
    """Create the default container, establishing the session on the way."""
    resolved_settings = settings or Settings()
    if http_client is None:
        api_client = HttpxUsersApiClient.create(
            base_url=resolved_settings.base_url,
            timeout=resolved_settings.request_timeout,
        )
    else:
        api_client = HttpxUsersApiClient(
            base_url=resolved_settings.base_url, http_client=http_client
        )
    try:
        session = SessionBootstrapper(api_client).establish_session()
    except Exception:
        api_client.close()
        raise
    user_client = UserResourceClient(
        api_client=api_client,
        session=session,
        strict=resolved_settings.strict,
    )

    return AppContainer(
        settings=resolved_settings,
        api_client=api_client,
        user_client=user_client,
        close_resources=api_client.close,
    )
