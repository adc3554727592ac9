"""Core functionality: configuration, errors, options and transport."""

from auth0mgmt.core.exceptions import (
    Auth0ManagerError,
    AuthConfigError,
    ConnectionLookupError,
    ManagementAPIError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from auth0mgmt.core.config import (
    API_RATE_LIMIT,
    API_TIMEOUT,
    check_env_file,
    get_env_config,
    validate_env_var,
    validate_rate_limit_config,
)
from auth0mgmt.core.options import (
    OptionArg,
    RequestOption,
    build_query,
    exclude_fields,
    include_fields,
    include_totals,
    page,
    parameter,
    per_page,
)
from auth0mgmt.core.auth import doctor, get_access_token, get_management_token
from auth0mgmt.core.client import Management

__all__ = [
    "Auth0ManagerError",
    "AuthConfigError",
    "ConnectionLookupError",
    "ManagementAPIError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
    "API_RATE_LIMIT",
    "API_TIMEOUT",
    "check_env_file",
    "get_env_config",
    "validate_env_var",
    "validate_rate_limit_config",
    "OptionArg",
    "RequestOption",
    "build_query",
    "exclude_fields",
    "include_fields",
    "include_totals",
    "page",
    "parameter",
    "per_page",
    "doctor",
    "get_access_token",
    "get_management_token",
    "Management",
]
