"""
Resources package - realm-scoped admin operations, one class per resource family.
"""

from .authentication_flow import AuthenticationFlowResource
from .identity_provider import IdentityProviderResource
from .user_storage import UserStorageResource

__all__ = [
    "AuthenticationFlowResource",
    "IdentityProviderResource",
    "UserStorageResource",
]
