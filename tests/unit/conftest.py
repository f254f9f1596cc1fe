"""Shared pytest fixtures for the realm admin client tests."""

import json

import httpx
import pytest

from keycloak_realm_admin import KeycloakRealmAdmin

SERVER_URL = "https://keycloak.example.com"


class MockKeycloak:
    """
    Scripted stand-in for the Keycloak server.

    Responses are served in the order they were queued; a queued callable is
    called with the request and must return the response. Every request the
    client sends is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list = []

    def queue(self, *responses) -> "MockKeycloak":
        self._responses.extend(responses)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if callable(response):
            return response(request)
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content)


@pytest.fixture
def mock_keycloak():
    return MockKeycloak()


@pytest.fixture
def admin(mock_keycloak):
    """Admin client wired to the mock server with a valid token."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(mock_keycloak.handler)
    )
    return KeycloakRealmAdmin(SERVER_URL, "test-token", http_client=http_client)
