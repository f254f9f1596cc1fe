"""
Observability utilities for the Keycloak realm admin client.

Structured logging with correlation ID tracking.
"""

from .logging import (
    get_correlation_id,
    set_correlation_id,
    setup_logging,
    setup_structured_logging,
)

__all__ = [
    "get_correlation_id",
    "set_correlation_id",
    "setup_logging",
    "setup_structured_logging",
]
