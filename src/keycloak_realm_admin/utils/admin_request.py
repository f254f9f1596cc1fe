"""
Request/response handling shared by every admin operation.

Each operation follows the same exchange: build the URL and bearer header
from the context, send the request, compare the status code with the single
status the operation expects, and hand back the decoded body. Anything else
is raised as one of the two error kinds in ``keycloak_realm_admin.errors``.
"""

import json as jsonlib
import logging
import time
from typing import Any

import httpx
from pydantic import BaseModel

from keycloak_realm_admin.errors import (
    KeycloakAdminError,
    RemoteApiError,
    TransportError,
)
from keycloak_realm_admin.utils.context import AdminContext

logger = logging.getLogger(__name__)


def admin_url(context: AdminContext, realm: str, path: str = "") -> str:
    """
    Build the admin endpoint URL for a realm.

    Path segments are interpolated verbatim; httpx percent-encodes whatever
    is not valid in a URL path.

    Example:
        >>> admin_url(ctx, "master", "/components/abc")
        "https://keycloak.example.com/admin/realms/master/components/abc"
    """
    return f"{context.base_url}/admin/realms/{realm}{path}"


def serialize_payload(payload: BaseModel | dict[str, Any] | None) -> Any:
    """Convert a pydantic model to its camelCase JSON dict; pass dicts through."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_none=True, by_alias=True)
    return payload


def decode_body(response: httpx.Response) -> Any:
    """
    Decode a response body.

    Empty bodies decode to None. Bodies that are not JSON are returned as
    text, so error pages reach the caller unchanged.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except (jsonlib.JSONDecodeError, UnicodeDecodeError):
        return response.text


def location_identifier(response: httpx.Response) -> str:
    """
    Extract the created resource's identifier from the Location header.

    Keycloak answers a create with an empty body and a header such as
    ``https://host/admin/realms/master/components/<uuid>``; the identifier
    is the final path segment.
    """
    location = response.headers.get("location")
    if not location:
        raise KeycloakAdminError(
            "Create succeeded but the response has no Location header",
            status_code=response.status_code,
        )
    return location.rsplit("/", 1)[-1]


async def send_admin_request(
    context: AdminContext,
    method: str,
    url: str,
    expected_status: int,
    json: BaseModel | dict[str, Any] | None = None,
    params: dict[str, Any] | None = None,
    realm: str | None = None,
) -> httpx.Response:
    """
    Send an authenticated admin request and check its status code.

    Args:
        context: Context supplying the bearer token and httpx client
        method: HTTP method (GET, POST, PUT, DELETE)
        url: Absolute endpoint URL
        expected_status: The only status code treated as success
        json: Request body, serialized as JSON
        params: Query parameters, forwarded verbatim
        realm: Realm name, attached to log records

    Returns:
        The httpx response (body already buffered)

    Raises:
        TransportError: If the request could not complete
        RemoteApiError: If the status code differs from expected_status
        KeycloakAdminError: If the context has no access token
    """
    # Read at call time so token rotation applies to the next request
    access_token = context.access_token
    if not access_token:
        raise KeycloakAdminError("No access token set on the admin context")

    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/json",
    }
    client = context.get_http_client()

    logger.debug(
        f"{method} {url}",
        extra={"http_method": method, "url": url, "realm_name": realm},
    )
    started = time.monotonic()

    try:
        response = await client.request(
            method,
            url,
            json=serialize_payload(json),
            params=params,
            headers=headers,
        )
    except httpx.HTTPError as e:
        logger.error(
            f"Request failed: {method} {url} - {e}",
            extra={
                "http_method": method,
                "url": url,
                "realm_name": realm,
                "error_type": type(e).__name__,
            },
        )
        raise TransportError(method, url, e) from e

    duration = time.monotonic() - started

    if response.status_code != expected_status:
        error = RemoteApiError(
            method,
            url,
            status_code=response.status_code,
            expected_status=expected_status,
            body=decode_body(response),
        )
        logger.error(
            f"Unexpected status: {method} {url} - {response.status_code}",
            extra={
                "http_method": method,
                "url": url,
                "realm_name": realm,
                "http_status": response.status_code,
                "expected_status": expected_status,
                "response_body": error.body_preview(1024),
                "duration": duration,
            },
        )
        raise error

    logger.debug(
        f"{method} {url} - {response.status_code}",
        extra={
            "http_method": method,
            "url": url,
            "realm_name": realm,
            "http_status": response.status_code,
            "duration": duration,
        },
    )
    return response


async def admin_request(
    context: AdminContext,
    method: str,
    url: str,
    expected_status: int,
    json: BaseModel | dict[str, Any] | None = None,
    params: dict[str, Any] | None = None,
    realm: str | None = None,
) -> Any:
    """Send an admin request and return the decoded response body."""
    response = await send_admin_request(
        context,
        method,
        url,
        expected_status,
        json=json,
        params=params,
        realm=realm,
    )
    return decode_body(response)
