"""
Admin API error hierarchy.

Every error raised by the resource operations derives from
KeycloakAdminError so callers can catch the whole family at once, or branch
on the transport/application split by catching the subclasses.
"""

import json
from typing import Any


class KeycloakAdminError(Exception):
    """Base exception for Keycloak Admin API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body

    def body_preview(self, limit: int = 2048) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"


class TransportError(KeycloakAdminError):
    """
    The HTTP request could not complete.

    Raised for DNS failures, refused connections, transport timeouts and any
    other httpx error surfaced before a response was received. The original
    exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        super().__init__(f"{method} {url} failed: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class RemoteApiError(KeycloakAdminError):
    """
    The server answered with a status other than the one the operation expects.

    ``body`` is the decoded response body exactly as the server returned it
    (dict, list, str or None); it is never wrapped or normalized.
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        expected_status: int,
        body: Any,
    ) -> None:
        super().__init__(
            f"{method} {url} returned {status_code}, expected {expected_status}",
            status_code=status_code,
            response_body=_render_body(body),
        )
        self.method = method
        self.url = url
        self.expected_status = expected_status
        self.body = body


def _render_body(body: Any) -> str | None:
    if body is None:
        return None
    if isinstance(body, str):
        return body
    return json.dumps(body)
