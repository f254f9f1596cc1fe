"""
Keycloak Realm Admin - async client for realm administration endpoints.

Covers:
- User storage providers (find, create, update, remove, sync, unlink)
- Identity provider instances (find, create, update, remove, export)
- Authentication flow executions (find, update)
"""

from keycloak_realm_admin.client import KeycloakRealmAdmin, RealmResources
from keycloak_realm_admin.errors import (
    KeycloakAdminError,
    RemoteApiError,
    TransportError,
)
from keycloak_realm_admin.utils.context import AdminContext

__version__ = "0.1.0"

__all__ = [
    "AdminContext",
    "KeycloakAdminError",
    "KeycloakRealmAdmin",
    "RealmResources",
    "RemoteApiError",
    "TransportError",
]
