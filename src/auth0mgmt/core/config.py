"""Configuration utilities for Auth0 Management API access."""

import os
from typing import Any

import dotenv

from auth0mgmt.core.exceptions import AuthConfigError

# Global constants for API configuration
API_RATE_LIMIT = 0.5  # seconds between requests
API_TIMEOUT = 30  # request timeout in seconds

# Remaining-quota threshold below which the client waits for the reset window
RATE_LIMIT_LOW_WATERMARK = 5

SUPPORTED_ENVIRONMENTS = ("dev", "prod")


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def validate_env_var(name: str, value: str | None) -> str:
    """Validate that an environment variable is set and not empty.

    Args:
        name: Environment variable name
        value: Environment variable value

    Returns:
        str: The validated value, stripped of surrounding whitespace

    Raises:
        AuthConfigError: If the environment variable is missing or empty
    """
    if not value or not value.strip():
        raise AuthConfigError(
            f"Environment variable {name} is required but not set or empty"
        )
    return value.strip()


def get_env_config(env: str = "dev") -> dict[str, Any]:
    """Get Auth0 configuration from environment variables.

    Args:
        env: Environment to get config for ('dev' or 'prod')

    Returns:
        Dict[str, Any]: Configuration dictionary

    Raises:
        AuthConfigError: If required environment variables are missing
    """
    if env not in SUPPORTED_ENVIRONMENTS:
        raise AuthConfigError(
            f"Unknown environment '{env}'. Use one of: {', '.join(SUPPORTED_ENVIRONMENTS)}"
        )

    check_env_file()

    # Determine prefix based on environment
    prefix = "DEV_" if env == "dev" else ""

    domain = validate_env_var(
        f"{prefix}AUTH0_DOMAIN", os.getenv(f"{prefix}AUTH0_DOMAIN")
    )
    client_id = validate_env_var(
        f"{prefix}AUTH0_CLIENT_ID", os.getenv(f"{prefix}AUTH0_CLIENT_ID")
    )
    client_secret = validate_env_var(
        f"{prefix}AUTH0_CLIENT_SECRET", os.getenv(f"{prefix}AUTH0_CLIENT_SECRET")
    )

    # Strip a scheme if someone pasted the tenant URL
    domain = domain.removeprefix("https://").rstrip("/")

    if not domain.endswith("auth0.com"):
        raise AuthConfigError(
            f"Invalid Auth0 domain format: {domain}. "
            "Domain should end with .auth0.com (e.g. tenant.eu.auth0.com)"
        )

    if len(client_id) < 10:
        raise AuthConfigError(f"Invalid Auth0 client ID format: {client_id}")

    return {
        "domain": domain,
        "client_id": client_id,
        "client_secret": client_secret,
        "environment": env,
    }


def validate_rate_limit_config(rate_limit: float = API_RATE_LIMIT) -> None:
    """Validate that rate limiting configuration is safe for Auth0 API.

    Auth0 has rate limits of approximately 2 requests per second for Management API.
    This function ensures our configuration respects these limits.

    Raises:
        AuthConfigError: If rate limiting configuration is unsafe
    """
    if rate_limit < 0.5:
        raise AuthConfigError(
            f"API_RATE_LIMIT ({rate_limit}) is too aggressive. "
            "Auth0 Management API allows max 2 requests/second. "
            "Use at least 0.5 seconds between requests."
        )
