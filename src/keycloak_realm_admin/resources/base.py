"""
Base class for realm-scoped admin resources.
"""

import logging
from typing import Any

from pydantic import BaseModel

from keycloak_realm_admin.utils.admin_request import (
    admin_request,
    admin_url,
    location_identifier,
    send_admin_request,
)
from keycloak_realm_admin.utils.context import AdminContext


class RealmResource:
    """
    Operations on one family of realm resources, bound to an admin context.

    Subclasses declare their endpoints and call ``_request``; the context is
    held by reference so a token rotated on it applies to the next call.
    """

    def __init__(self, context: AdminContext) -> None:
        self.context = context
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    async def _request(
        self,
        method: str,
        realm: str,
        path: str,
        expected_status: int,
        json: BaseModel | dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await admin_request(
            self.context,
            method,
            admin_url(self.context, realm, path),
            expected_status,
            json=json,
            params=params,
            realm=realm,
        )

    async def _create(
        self, realm: str, path: str, payload: BaseModel | dict[str, Any]
    ) -> str:
        """POST a new resource and return the identifier from its Location header."""
        response = await send_admin_request(
            self.context,
            "POST",
            admin_url(self.context, realm, path),
            201,
            json=payload,
            realm=realm,
        )
        return location_identifier(response)


def payload_field(payload: BaseModel | dict[str, Any] | None, field: str) -> Any:
    """Read a field from a dict payload or a pydantic model."""
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        return getattr(payload, field, None)
    return payload.get(field)
