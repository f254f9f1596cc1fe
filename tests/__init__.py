"""
Tests package - test suite for the Keycloak realm admin client.

Contains:
- unit/: Unit tests run against an in-process mock transport
"""
