"""HTTP/JSON transport for the Auth0 Management API."""

import time
from collections.abc import Iterable
from typing import Any
from urllib.parse import quote

import requests

from ..management.client_grant import ClientGrantManager
from ..management.connection import ConnectionManager
from ..models.base import JSONValue, Resource
from ..utils.logging_utils import get_logger
from .config import API_RATE_LIMIT, API_TIMEOUT, RATE_LIMIT_LOW_WATERMARK
from .exceptions import ManagementAPIError, NotFoundError, RateLimitError
from .options import OptionArg, build_query

# Module logger
logger = get_logger(__name__)

API_BASE_PATH = "/api/v2/"


class Management:
    """Shared transport for all resource managers.

    Owns the tenant base URL, the bearer token and the pacing policy.
    Each call is a single blocking request; errors are raised, never retried.
    """

    USER_AGENT = "auth0mgmt/1.0.0"

    def __init__(
        self,
        domain: str,
        token: str,
        *,
        timeout: float = API_TIMEOUT,
        rate_limit: float = API_RATE_LIMIT,
    ) -> None:
        """Initialize the transport.

        Args:
            domain: Tenant domain, e.g. ``example.eu.auth0.com``
            token: Management API access token
            timeout: Request timeout in seconds
            rate_limit: Minimum pause after each request in seconds
        """
        self.domain = domain.removeprefix("https://").rstrip("/")
        self.token = token
        self.timeout = timeout
        self.rate_limit = rate_limit
        self.base_url = f"https://{self.domain}{API_BASE_PATH}"

        self.client_grant = ClientGrantManager(self)
        self.connection = ConnectionManager(self)

    @classmethod
    def from_env(cls, env: str = "dev", **kwargs: Any) -> "Management":
        """Build a transport from environment configuration.

        Args:
            env: Environment to use ('dev' or 'prod')
            **kwargs: Passed through to the constructor

        Raises:
            AuthConfigError: If configuration or token acquisition fails, or
                ``rate_limit`` is below what the Management API tolerates
        """
        from .auth import get_management_token
        from .config import get_env_config, validate_rate_limit_config

        validate_rate_limit_config(kwargs.get("rate_limit", API_RATE_LIMIT))
        config = get_env_config(env)
        token = get_management_token(config)
        return cls(config["domain"], token, **kwargs)

    def uri(self, *segments: str) -> str:
        """Build a resource URI from path-escaped segments."""
        return self.base_url + "/".join(quote(str(s), safe="") for s in segments)

    def q(self, options: Iterable[OptionArg]) -> str:
        """Build the query string for request options."""
        return build_query(options)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "User-Agent": self.USER_AGENT,
        }

    @staticmethod
    def _parse_rate_limit_headers(
        response: requests.Response,
    ) -> tuple[int | None, int | None]:
        """Read remaining quota and reset epoch from the response headers."""
        try:
            remaining = int(response.headers["X-RateLimit-Remaining"])
        except (KeyError, ValueError, TypeError):
            remaining = None
        try:
            reset_time = int(response.headers["X-RateLimit-Reset"])
        except (KeyError, ValueError, TypeError):
            reset_time = None
        return remaining, reset_time

    def _apply_rate_limit(self, response: requests.Response | None) -> None:
        """Pause after a request, waiting for the reset window when quota is low."""
        delay = self.rate_limit
        if response is not None:
            remaining, reset_time = self._parse_rate_limit_headers(response)
            if (
                remaining is not None
                and reset_time is not None
                and remaining < RATE_LIMIT_LOW_WATERMARK
            ):
                delay = max(delay, reset_time - time.time() + 0.5)
        if delay > 0:
            time.sleep(delay)

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        if status < 400:
            return

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            error = body.get("error") or response.reason
            message = body.get("message") or body.get("description") or error
        else:
            error = response.reason
            message = response.text or response.reason or f"HTTP {status}"

        if status == 429:
            _, reset_time = self._parse_rate_limit_headers(response)
            retry_after = None
            if reset_time is not None:
                retry_after = max(0, int(reset_time - time.time()))
            raise RateLimitError(str(message), retry_after=retry_after, endpoint=url)
        if status == 404:
            raise NotFoundError(str(message), endpoint=url)
        raise ManagementAPIError(
            str(message), status_code=status, error=error, endpoint=url
        )

    def request(self, method: str, url: str, payload: Any = None) -> JSONValue:
        """Send one request and decode the JSON response.

        Args:
            method: HTTP method
            url: Absolute URL, usually from uri() plus q()
            payload: Resource or JSON-compatible body

        Returns:
            Decoded JSON body, or None for empty responses

        Raises:
            ManagementAPIError: If the API answers with an error status
            requests.RequestException: On network failures
        """
        if isinstance(payload, Resource):
            payload = payload.to_dict()

        start = time.monotonic()
        response = None
        try:
            response = requests.request(
                method=method,
                url=url,
                headers=self._build_headers(),
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(
                f"{method} {url} failed: {e}",
                extra={"method": method, "api_endpoint": url},
            )
            raise
        finally:
            self._apply_rate_limit(response)

        logger.debug(
            f"{method} {url} -> {response.status_code}",
            extra={
                "method": method,
                "api_endpoint": url,
                "status_code": response.status_code,
                "duration": time.monotonic() - start,
            },
        )

        self._raise_for_status(response, url)

        if response.status_code == 204 or not response.text:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ManagementAPIError(
                "Response body is not valid JSON",
                status_code=response.status_code,
                error=response.reason or None,
                endpoint=url,
                details=response.text[:200],
            ) from e

    def get(self, url: str) -> JSONValue:
        return self.request("GET", url)

    def post(self, url: str, payload: Any = None) -> JSONValue:
        return self.request("POST", url, payload)

    def patch(self, url: str, payload: Any = None) -> JSONValue:
        return self.request("PATCH", url, payload)

    def delete(self, url: str) -> JSONValue:
        return self.request("DELETE", url)
