"""
Error handling module for the Keycloak realm admin client.

Two failure kinds exist: the HTTP exchange could not complete
(TransportError) or it completed with an unexpected status (RemoteApiError).
"""

from .admin_errors import KeycloakAdminError, RemoteApiError, TransportError

__all__ = [
    "KeycloakAdminError",
    "RemoteApiError",
    "TransportError",
]
