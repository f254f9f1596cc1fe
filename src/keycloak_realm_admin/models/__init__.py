"""
Models package - optional pydantic representations of admin API payloads.
"""

from .keycloak_api import (
    USER_STORAGE_PROVIDER_TYPE,
    AuthenticationExecutionInfoRepresentation,
    ComponentRepresentation,
    IdentityProviderRepresentation,
)

__all__ = [
    "USER_STORAGE_PROVIDER_TYPE",
    "AuthenticationExecutionInfoRepresentation",
    "ComponentRepresentation",
    "IdentityProviderRepresentation",
]
