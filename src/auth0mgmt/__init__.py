"""auth0mgmt - Auth0 Management API client for client grants and connections."""

# Core functionality
from .core.auth import doctor, get_access_token, get_management_token
from .core.client import Management
from .core.config import (
    API_RATE_LIMIT,
    API_TIMEOUT,
    get_env_config,
    validate_rate_limit_config,
)
from .core.exceptions import (
    Auth0ManagerError,
    AuthConfigError,
    ConnectionLookupError,
    ManagementAPIError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .core.options import (
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

# Managers
from .management import ClientGrantManager, ConnectionManager

# Models
from .models import (
    UNSET,
    ClientGrant,
    Connection,
    ConnectionOptions,
    ConnectionOptionsTotp,
    JSONValue,
    Resource,
)

__version__ = "1.0.0"

__all__ = [
    # Core
    "Management",
    "get_access_token",
    "get_management_token",
    "doctor",
    "get_env_config",
    "API_RATE_LIMIT",
    "API_TIMEOUT",
    "validate_rate_limit_config",
    # Exceptions
    "Auth0ManagerError",
    "AuthConfigError",
    "ManagementAPIError",
    "NotFoundError",
    "RateLimitError",
    "ConnectionLookupError",
    "ValidationError",
    # Options
    "OptionArg",
    "RequestOption",
    "parameter",
    "page",
    "per_page",
    "include_totals",
    "include_fields",
    "exclude_fields",
    "build_query",
    # Managers
    "ClientGrantManager",
    "ConnectionManager",
    # Models
    "UNSET",
    "JSONValue",
    "Resource",
    "ClientGrant",
    "Connection",
    "ConnectionOptions",
    "ConnectionOptionsTotp",
]
