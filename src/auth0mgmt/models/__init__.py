"""Data models for Auth0 Management API resources."""

from auth0mgmt.models.base import UNSET, JSONValue, Maybe, Resource, UnsetType, attr
from auth0mgmt.models.client_grant import ClientGrant
from auth0mgmt.models.connection import (
    CUSTOM_SCRIPT_NAMES,
    STRATEGIES,
    Connection,
    ConnectionOptions,
    ConnectionOptionsTotp,
)

__all__ = [
    # Presence tracking
    "UNSET",
    "UnsetType",
    "Maybe",
    "JSONValue",
    "Resource",
    "attr",
    # Resources
    "ClientGrant",
    "Connection",
    "ConnectionOptions",
    "ConnectionOptionsTotp",
    "STRATEGIES",
    "CUSTOM_SCRIPT_NAMES",
]
