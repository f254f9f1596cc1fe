"""
Authentication flow execution administration.

Executions are listed and updated per flow; the flow is addressed by its
alias (e.g. "browser") and has no identifier of its own here.
"""

from typing import Any

from keycloak_realm_admin.models.keycloak_api import (
    AuthenticationExecutionInfoRepresentation,
)
from keycloak_realm_admin.resources.base import RealmResource


class AuthenticationFlowResource(RealmResource):
    """Read and update the executions of an authentication flow."""

    def _executions_path(self, flow: str) -> str:
        return f"/authentication/flows/{flow}/executions"

    async def find(
        self, realm: str, flow: str, options: dict[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """
        List the executions of a flow, in flow order.

        Args:
            realm: Realm name (not the realm id), e.g. "master"
            flow: Flow alias, e.g. "browser"
            options: Sent verbatim as query parameters
        """
        return await self._request(
            "GET", realm, self._executions_path(flow), 200, params=options or None
        )

    async def update(
        self,
        realm: str,
        flow: str,
        execution: AuthenticationExecutionInfoRepresentation | dict[str, Any],
    ) -> Any:
        """Update an execution of a flow (typically its requirement)."""
        self.logger.info(
            f"Updating execution of flow '{flow}' in realm '{realm}'",
            extra={"operation": "update", "realm_name": realm},
        )
        return await self._request(
            "PUT", realm, self._executions_path(flow), 204, json=execution
        )
