"""
Utils package - the client context and the shared admin request handling.
"""

from keycloak_realm_admin.utils.admin_request import (
    admin_request,
    admin_url,
    location_identifier,
    send_admin_request,
)
from keycloak_realm_admin.utils.context import AdminContext

__all__ = [
    "AdminContext",
    "admin_request",
    "admin_url",
    "location_identifier",
    "send_admin_request",
]
