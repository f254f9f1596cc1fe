"""
Keycloak realm admin client.

Composes the resource families as sibling attributes over one shared
context, mirroring the admin API layout:

    async with KeycloakRealmAdmin("https://keycloak.example.com", token) as admin:
        providers = await admin.realms.user_storage.find("master")
        await admin.realms.identity_provider.remove("master", "github")
"""

import logging

import httpx

from keycloak_realm_admin.observability.logging import setup_logging
from keycloak_realm_admin.resources import (
    AuthenticationFlowResource,
    IdentityProviderResource,
    UserStorageResource,
)
from keycloak_realm_admin.settings import Settings
from keycloak_realm_admin.settings import settings as default_settings
from keycloak_realm_admin.utils.context import AdminContext

logger = logging.getLogger(__name__)


class RealmResources:
    """The realm-scoped resource families, all bound to the same context."""

    def __init__(self, context: AdminContext) -> None:
        self.user_storage = UserStorageResource(context)
        self.identity_provider = IdentityProviderResource(context)
        self.authentication_flow = AuthenticationFlowResource(context)


class KeycloakRealmAdmin:
    """
    Entry point of the library.

    The access token is supplied by the caller and may be replaced at any
    time with ``set_access_token``; requests already in flight keep the
    token they were sent with.
    """

    def __init__(
        self,
        server_url: str,
        access_token: str | None = None,
        verify_ssl: bool = True,
        timeout: float = 60,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.context = AdminContext(
            server_url,
            access_token=access_token,
            verify_ssl=verify_ssl,
            timeout=timeout,
            http_client=http_client,
        )
        self.realms = RealmResources(self.context)

        logger.info(f"Initialized Keycloak realm admin client for {server_url}")

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        configure_logging: bool = True,
    ) -> "KeycloakRealmAdmin":
        """
        Build a client from environment-driven settings.

        Unless ``configure_logging`` is False, the root logger is also set up
        from the logging settings (level, JSON output, correlation IDs).
        """
        settings = settings or default_settings
        if configure_logging:
            setup_logging(settings)
        return cls(
            settings.server_url,
            access_token=settings.access_token or None,
            verify_ssl=settings.verify_ssl,
            timeout=settings.request_timeout,
            http_client=http_client,
        )

    @property
    def base_url(self) -> str:
        return self.context.base_url

    def set_access_token(self, access_token: str | None) -> None:
        self.context.set_access_token(access_token)

    async def close(self) -> None:
        await self.context.close()

    async def __aenter__(self) -> "KeycloakRealmAdmin":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
