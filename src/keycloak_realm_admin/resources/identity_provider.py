"""
Identity provider instance administration.

Identity providers are keyed by their alias, which is unique per realm.
"""

from typing import Any

from keycloak_realm_admin.models.keycloak_api import IdentityProviderRepresentation
from keycloak_realm_admin.resources.base import RealmResource, payload_field

INSTANCES_PATH = "/identity-provider/instances"


class IdentityProviderResource(RealmResource):
    """Find, create, update, remove and export identity provider instances."""

    async def find(
        self, realm: str, options: dict[str, Any] | None = None
    ) -> list[dict[str, Any]] | dict[str, Any]:
        """
        Get the identity providers of a realm, or one of them.

        Args:
            realm: Realm name (not the realm id), e.g. "master"
            options: With an "alias" key, fetch that provider; otherwise
                every key is sent as a query parameter of the list request

        Returns:
            A list of providers, or a single provider when "alias" is given
        """
        options = options or {}
        if options.get("alias"):
            return await self.find_one(realm, options["alias"])
        return await self.find_many(realm, **options)

    async def find_one(self, realm: str, alias: str) -> dict[str, Any]:
        return await self._request(
            "GET", realm, f"{INSTANCES_PATH}/{alias}", 200
        )

    async def find_many(self, realm: str, /, **options: Any) -> list[dict[str, Any]]:
        return await self._request(
            "GET", realm, INSTANCES_PATH, 200, params=options or None
        )

    async def create(
        self,
        realm: str,
        identity_provider: IdentityProviderRepresentation | dict[str, Any],
    ) -> dict[str, Any]:
        """
        Create an identity provider and return it as stored by the server.

        The Location header of the 201 response ends with the alias, which is
        used to read the new provider back.
        """
        alias = await self._create(realm, INSTANCES_PATH, identity_provider)
        self.logger.info(
            f"Created identity provider '{alias}' in realm '{realm}'",
            extra={"operation": "create", "realm_name": realm},
        )
        return await self.find_one(realm, alias)

    async def update(
        self,
        realm: str,
        identity_provider: IdentityProviderRepresentation | dict[str, Any],
    ) -> Any:
        """Replace an identity provider; the payload must carry its "alias"."""
        alias = payload_field(identity_provider, "alias")
        if not alias:
            raise ValueError("Identity provider payload must include 'alias'")
        return await self._request(
            "PUT",
            realm,
            f"{INSTANCES_PATH}/{alias}",
            204,
            json=identity_provider,
        )

    async def remove(self, realm: str, alias: str) -> Any:
        return await self._request(
            "DELETE", realm, f"{INSTANCES_PATH}/{alias}", 204
        )

    async def export_configuration(self, realm: str, alias: str) -> Any:
        """Get the provider-specific configuration export (e.g. SAML SP metadata)."""
        return await self._request(
            "GET", realm, f"{INSTANCES_PATH}/{alias}/export", 200
        )
