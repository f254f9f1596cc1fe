"""
User storage provider administration.

User storage providers (LDAP, Kerberos, custom federation SPIs) are realm
components of type ``org.keycloak.storage.UserStorageProvider``. They are
keyed by the server-assigned component id.
"""

from typing import Any

from keycloak_realm_admin.models.keycloak_api import (
    USER_STORAGE_PROVIDER_TYPE,
    ComponentRepresentation,
)
from keycloak_realm_admin.resources.base import RealmResource, payload_field


class UserStorageResource(RealmResource):
    """Find, create, update, remove and synchronize user storage providers."""

    async def find(
        self, realm: str, options: dict[str, Any] | None = None
    ) -> list[dict[str, Any]] | dict[str, Any]:
        """
        Get the user storage providers of a realm, or one of them.

        Args:
            realm: Realm name (not the realm id), e.g. "master"
            options: With an "id" key, fetch that provider; otherwise every
                key is sent as a query parameter of the list request

        Returns:
            A list of providers, or a single provider when "id" is given
        """
        options = options or {}
        if options.get("id"):
            return await self.find_one(realm, options["id"])
        return await self.find_many(realm, **options)

    async def find_one(self, realm: str, id: str) -> dict[str, Any]:
        """Get a single user storage provider by component id."""
        return await self._request("GET", realm, f"/components/{id}", 200)

    async def find_many(self, realm: str, /, **options: Any) -> list[dict[str, Any]]:
        """List user storage providers; options become query parameters."""
        params = {"parent": realm, "type": USER_STORAGE_PROVIDER_TYPE, **options}
        return await self._request("GET", realm, "/components", 200, params=params)

    async def create(
        self, realm: str, user_storage: ComponentRepresentation | dict[str, Any]
    ) -> dict[str, Any]:
        """
        Create a user storage provider and return it as stored by the server.

        The create endpoint answers with an empty body, so the new provider
        is read back using the id from the Location header.
        """
        component_id = await self._create(realm, "/components", user_storage)
        self.logger.info(
            f"Created user storage provider {component_id} in realm '{realm}'",
            extra={"operation": "create", "realm_name": realm},
        )
        return await self.find_one(realm, component_id)

    async def update(
        self, realm: str, user_storage: ComponentRepresentation | dict[str, Any]
    ) -> Any:
        """
        Replace a user storage provider.

        The payload must carry the provider's "id". Keycloak answers 204, so
        the result is normally None.
        """
        component_id = payload_field(user_storage, "id")
        if not component_id:
            raise ValueError("User storage payload must include 'id'")
        return await self._request(
            "PUT",
            realm,
            f"/components/{component_id}",
            204,
            json=user_storage,
        )

    async def remove(self, realm: str, id: str) -> Any:
        """Delete a user storage provider."""
        return await self._request("DELETE", realm, f"/components/{id}", 204)

    async def trigger_changed_users_sync(self, realm: str, id: str) -> Any:
        """Synchronize users changed since the last sync; returns the sync summary."""
        return await self._sync(realm, id, "triggerChangedUsersSync")

    async def trigger_full_sync(self, realm: str, id: str) -> Any:
        """Synchronize all users from the provider; returns the sync summary."""
        return await self._sync(realm, id, "triggerFullSync")

    async def remove_imported_users(self, realm: str, id: str) -> Any:
        """Delete the local copies of users imported from the provider."""
        return await self._request(
            "GET", realm, f"/user-storage/{id}/remove-imported-users", 200
        )

    async def unlink_imported_users(self, realm: str, id: str) -> Any:
        """Detach imported users from the provider, keeping them as local users."""
        return await self._request(
            "GET", realm, f"/user-storage/{id}/unlink-users", 200
        )

    async def _sync(self, realm: str, id: str, action: str) -> Any:
        self.logger.info(
            f"Triggering {action} for user storage {id} in realm '{realm}'",
            extra={"operation": action, "realm_name": realm},
        )
        return await self._request(
            "GET",
            realm,
            f"/user-storage/{id}/sync?action={action}",
            200,
        )
