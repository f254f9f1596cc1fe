"""
Pydantic models for Keycloak Admin API payloads.

These are a typed convenience for building request bodies. They declare the
commonly used fields and accept any other field the server understands
(``extra="allow"``). Responses are never parsed into these models: the
server's JSON is handed back to the caller as-is.
"""

from typing import Any

from pydantic import BaseModel, Field

USER_STORAGE_PROVIDER_TYPE = "org.keycloak.storage.UserStorageProvider"


class ComponentRepresentation(BaseModel):
    """A realm component; user storage providers are one component type."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str | None = Field(None, description="Server-assigned component UUID")
    name: str | None = Field(None, description="Display name of the component")
    provider_id: str | None = Field(
        None, alias="providerId", description="Provider implementation, e.g. ldap"
    )
    provider_type: str | None = Field(
        USER_STORAGE_PROVIDER_TYPE,
        alias="providerType",
        description="Component SPI type",
    )
    parent_id: str | None = Field(
        None, alias="parentId", description="Owning realm id"
    )
    sub_type: str | None = Field(None, alias="subType")
    config: dict[str, list[str]] | None = Field(
        None, description="Provider configuration; every value is a list of strings"
    )


class IdentityProviderRepresentation(BaseModel):
    """An identity provider instance bound to a realm, keyed by alias."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    alias: str | None = Field(None, description="Unique alias within the realm")
    display_name: str | None = Field(None, alias="displayName")
    provider_id: str | None = Field(
        None, alias="providerId", description="Provider type, e.g. oidc or github"
    )
    enabled: bool | None = None
    trust_email: bool | None = Field(None, alias="trustEmail")
    store_token: bool | None = Field(None, alias="storeToken")
    link_only: bool | None = Field(None, alias="linkOnly")
    first_broker_login_flow_alias: str | None = Field(
        None, alias="firstBrokerLoginFlowAlias"
    )
    post_broker_login_flow_alias: str | None = Field(
        None, alias="postBrokerLoginFlowAlias"
    )
    config: dict[str, Any] | None = None


class AuthenticationExecutionInfoRepresentation(BaseModel):
    """One execution step as listed under a flow's executions endpoint."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str | None = None
    requirement: str | None = Field(
        None, description="REQUIRED, ALTERNATIVE, DISABLED or CONDITIONAL"
    )
    display_name: str | None = Field(None, alias="displayName")
    alias: str | None = None
    requirement_choices: list[str] | None = Field(None, alias="requirementChoices")
    configurable: bool | None = None
    authentication_flow: bool | None = Field(None, alias="authenticationFlow")
    provider_id: str | None = Field(None, alias="providerId")
    authentication_config: str | None = Field(None, alias="authenticationConfig")
    flow_id: str | None = Field(None, alias="flowId")
    level: int | None = None
    index: int | None = None
    priority: int | None = None
