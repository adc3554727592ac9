"""Per-resource managers for the Auth0 Management API."""

from auth0mgmt.management.base import ResourceManager
from auth0mgmt.management.client_grant import ClientGrantManager
from auth0mgmt.management.connection import ConnectionManager

__all__ = [
    "ResourceManager",
    "ClientGrantManager",
    "ConnectionManager",
]
