"""Unit tests for the shared admin request handling."""

import httpx
import pytest

from keycloak_realm_admin.errors import (
    KeycloakAdminError,
    RemoteApiError,
    TransportError,
)
from keycloak_realm_admin.models import IdentityProviderRepresentation
from keycloak_realm_admin.utils.admin_request import (
    admin_request,
    admin_url,
    decode_body,
    location_identifier,
)
from keycloak_realm_admin.utils.context import AdminContext

URL = "https://keycloak.example.com/admin/realms/master/components"


@pytest.fixture
def context(mock_keycloak):
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(mock_keycloak.handler)
    )
    return AdminContext(
        "https://keycloak.example.com/", "test-token", http_client=http_client
    )


class TestAdminUrl:
    def test_strips_trailing_slash_from_server_url(self, context):
        assert admin_url(context, "master") == (
            "https://keycloak.example.com/admin/realms/master"
        )

    def test_appends_path_verbatim(self, context):
        assert admin_url(context, "master", "/components/abc-123") == URL + "/abc-123"


class TestAdminRequest:
    """Tests for admin_request."""

    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_returns_json(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(200, json=[{"id": "a"}]))

        body = await admin_request(context, "GET", URL, 200)

        assert body == [{"id": "a"}]
        request = mock_keycloak.last_request
        assert request.method == "GET"
        assert request.headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_sends_json_body(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(204))

        await admin_request(context, "PUT", URL + "/abc", 204, json={"name": "ldap"})

        request = mock_keycloak.last_request
        assert mock_keycloak.body(request) == {"name": "ldap"}
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_serializes_models_with_camel_case_aliases(
        self, context, mock_keycloak
    ):
        mock_keycloak.queue(httpx.Response(204))
        provider = IdentityProviderRepresentation(
            alias="github", provider_id="github", trust_email=True
        )

        await admin_request(context, "PUT", URL, 204, json=provider)

        assert mock_keycloak.body(mock_keycloak.last_request) == {
            "alias": "github",
            "providerId": "github",
            "trustEmail": True,
        }

    @pytest.mark.asyncio
    async def test_forwards_params_as_query_string(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(200, json=[]))

        await admin_request(context, "GET", URL, 200, params={"first": 0, "max": 10})

        assert dict(mock_keycloak.last_request.url.params) == {
            "first": "0",
            "max": "10",
        }

    @pytest.mark.asyncio
    async def test_empty_body_decodes_to_none(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(204))

        assert await admin_request(context, "DELETE", URL + "/abc", 204) is None

    @pytest.mark.asyncio
    async def test_status_mismatch_raises_with_raw_body(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(400, json={"error": "invalid"}))

        with pytest.raises(RemoteApiError) as exc_info:
            await admin_request(context, "PUT", URL + "/abc", 204, json={})

        error = exc_info.value
        assert error.body == {"error": "invalid"}
        assert error.status_code == 400
        assert error.expected_status == 204
        assert error.method == "PUT"

    @pytest.mark.asyncio
    async def test_other_success_status_is_still_a_mismatch(
        self, context, mock_keycloak
    ):
        mock_keycloak.queue(httpx.Response(200, json={"id": "abc"}))

        with pytest.raises(RemoteApiError) as exc_info:
            await admin_request(context, "DELETE", URL + "/abc", 204)

        assert exc_info.value.body == {"id": "abc"}

    @pytest.mark.asyncio
    async def test_non_json_error_body_is_returned_as_text(
        self, context, mock_keycloak
    ):
        mock_keycloak.queue(httpx.Response(502, text="<html>Bad Gateway</html>"))

        with pytest.raises(RemoteApiError) as exc_info:
            await admin_request(context, "GET", URL, 200)

        assert exc_info.value.body == "<html>Bad Gateway</html>"
        assert exc_info.value.response_body == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_transport_failure_raises_transport_error(
        self, context, mock_keycloak
    ):
        cause = httpx.ConnectError("Connection refused")

        def refuse(request):
            raise cause

        mock_keycloak.queue(refuse)

        with pytest.raises(TransportError) as exc_info:
            await admin_request(context, "GET", URL, 200)

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert isinstance(exc_info.value, KeycloakAdminError)

    @pytest.mark.asyncio
    async def test_missing_token_fails_before_any_request(self, mock_keycloak):
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(mock_keycloak.handler)
        )
        context = AdminContext("https://keycloak.example.com", http_client=http_client)

        with pytest.raises(KeycloakAdminError, match="No access token"):
            await admin_request(context, "GET", URL, 200)

        assert mock_keycloak.requests == []

    @pytest.mark.asyncio
    async def test_token_is_read_at_call_time(self, context, mock_keycloak):
        mock_keycloak.queue(httpx.Response(200, json=[]), httpx.Response(200, json=[]))

        await admin_request(context, "GET", URL, 200)
        context.set_access_token("rotated-token")
        await admin_request(context, "GET", URL, 200)

        assert [r.headers["Authorization"] for r in mock_keycloak.requests] == [
            "Bearer test-token",
            "Bearer rotated-token",
        ]


class TestLocationIdentifier:
    def test_returns_final_path_segment(self):
        response = httpx.Response(
            201,
            headers={
                "Location": "https://host/admin/realms/master/components/abc-123"
            },
        )

        assert location_identifier(response) == "abc-123"

    def test_missing_header_raises(self):
        with pytest.raises(KeycloakAdminError, match="Location"):
            location_identifier(httpx.Response(201))


class TestDecodeBody:
    def test_decodes_json(self):
        assert decode_body(httpx.Response(200, json={"a": 1})) == {"a": 1}

    def test_empty_is_none(self):
        assert decode_body(httpx.Response(200)) is None


class TestKeycloakAdminError:
    def test_body_preview_truncates(self):
        error = KeycloakAdminError("failed", response_body="x" * 20)

        assert error.body_preview(limit=5) == "xxxxx...<truncated>"
        assert error.body_preview() == "x" * 20

    def test_remote_error_renders_json_body(self):
        error = RemoteApiError("GET", URL, 404, 200, {"error": "not found"})

        assert error.response_body == '{"error": "not found"}'
        assert "404" in str(error)
