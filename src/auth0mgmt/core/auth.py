"""Management API token acquisition and credential checks."""

from typing import Any

from auth0.authentication import GetToken

from ..utils.logging_utils import get_logger
from .config import get_env_config
from .exceptions import AuthConfigError

# Auth0 token request timeout in seconds
AUTH0_TOKEN_TIMEOUT = 5

# Module logger
logger = get_logger(__name__)


def get_management_token(config: dict[str, Any]) -> str:
    """Get a Management API access token using client credentials.

    Args:
        config: Configuration dictionary as returned by get_env_config

    Returns:
        str: Access token

    Raises:
        AuthConfigError: If token acquisition fails
    """
    try:
        get_token = GetToken(
            domain=config["domain"],
            client_id=config["client_id"],
            client_secret=config["client_secret"],
            timeout=AUTH0_TOKEN_TIMEOUT,
        )

        # Scopes are granted to the application in the Auth0 dashboard
        token_response = get_token.client_credentials(
            audience=f"https://{config['domain']}/api/v2/",
        )
    except Exception as e:
        logger.error(
            f"Failed to get management token: {e}",
            extra={"operation": "token_request", "error": str(e)},
            exc_info=True,
        )
        raise AuthConfigError(
            "Failed to obtain Auth0 management token", details=str(e)
        ) from e

    if "access_token" not in token_response:
        raise AuthConfigError("Access token not found in Auth0 response")

    logger.info(
        "Successfully obtained management API token",
        extra={"operation": "token_request"},
    )
    return str(token_response["access_token"])


def get_access_token(env: str = "dev") -> str:
    """Get an access token for the given environment.

    Args:
        env: Environment to use ('dev' or 'prod')

    Returns:
        str: Access token for the Management API

    Raises:
        AuthConfigError: If configuration is missing or the token request fails
    """
    config = get_env_config(env)
    return get_management_token(config)


def doctor(env: str = "dev", test_api: bool = False) -> dict[str, Any]:
    """Check that the credentials work and optionally that the API answers.

    Args:
        env: Environment to use ('dev' or 'prod')
        test_api: Whether to list one connection with the obtained token

    Returns:
        Dict[str, Any]: Status information including success status and details
    """
    result: dict[str, Any] = {
        "success": False,
        "environment": env,
        "token_obtained": False,
        "api_tested": False,
    }

    try:
        config = get_env_config(env)
        logger.info(
            f"Checking credentials for {config['domain']}",
            extra={"operation": "doctor_check"},
        )
        token = get_management_token(config)
    except AuthConfigError as e:
        logger.error(
            f"Authentication configuration error: {e}",
            extra={"operation": "doctor_check"},
        )
        result["error"] = str(e)
        result["details"] = "Authentication configuration is invalid"
        return result

    result["token_obtained"] = True
    result["domain"] = config["domain"]
    result["client_id"] = f"{config['client_id'][:8]}..."
    result["success"] = True
    result["details"] = "Credentials are working correctly"

    if test_api:
        from .client import Management
        from .exceptions import Auth0ManagerError
        from .options import per_page

        result["api_tested"] = True
        try:
            Management(config["domain"], token).connection.list(per_page(1))
        except (Auth0ManagerError, OSError) as api_error:
            logger.warning(
                f"API access test failed: {api_error}",
                extra={"operation": "doctor_check"},
            )
            result["success"] = False
            result["api_status"] = "failed"
            result["details"] = f"Token obtained but API access failed: {api_error}"
        else:
            result["api_status"] = "success"
            result["details"] = "Credentials and API access are working correctly"

    return result
