"""Custom exception hierarchy for the auth0mgmt Management API client."""


class Auth0ManagerError(Exception):
    """Base exception for auth0mgmt.

    This is the root exception class for all auth0mgmt-specific errors.
    All other custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class AuthConfigError(Auth0ManagerError):
    """Authentication configuration errors.

    Raised when there are issues with Auth0 authentication configuration,
    such as missing credentials, invalid domains, or token acquisition failures.
    """


class ManagementAPIError(Auth0ManagerError):
    """Error response returned by the Auth0 Management API.

    Carries the HTTP status code, the short error label (``error``) and the
    human readable ``message`` from the Auth0 error body.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
        endpoint: str | None = None,
        details: str | None = None,
    ):
        """Initialize the API error.

        Args:
            message: The error message reported by the API
            status_code: The HTTP status code from the API response
            error: Short error label, e.g. "Bad Request"
            endpoint: The API endpoint that failed
            details: Optional additional details about the error
        """
        self.status_code = status_code
        self.error = error
        self.endpoint = endpoint
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with API context."""
        parts = []
        if self.status_code:
            label = f" {self.error}" if self.error else ""
            parts.append(f"{self.status_code}{label}")
        parts.append(self.message)

        if self.endpoint:
            parts.append(f"Endpoint: {self.endpoint}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class NotFoundError(ManagementAPIError):
    """A requested resource does not exist.

    Raised both for 404 responses and for lookups that scan a collection
    without finding a match.
    """

    def __init__(
        self,
        message: str = "Not found",
        endpoint: str | None = None,
        details: str | None = None,
    ):
        super().__init__(
            message=message,
            status_code=404,
            error="Not Found",
            endpoint=endpoint,
            details=details,
        )


class RateLimitError(ManagementAPIError):
    """Rate limiting errors from Auth0 API.

    Raised when the Auth0 API rate limit is exceeded.
    Contains retry-after information when available.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        endpoint: str | None = None,
        details: str | None = None,
    ):
        """Initialize the rate limit error.

        Args:
            message: The main error message
            retry_after: Seconds to wait before retrying
            endpoint: The API endpoint that was rate limited
            details: Optional additional details
        """
        self.retry_after = retry_after
        super().__init__(
            message=message,
            status_code=429,
            error="Too Many Requests",
            endpoint=endpoint,
            details=details,
        )

    def _format_message(self) -> str:
        """Format the complete error message with retry information."""
        msg = super()._format_message()
        if self.retry_after is not None:
            msg += f" | Retry after: {self.retry_after}s"
        return msg


class ConnectionLookupError(Auth0ManagerError):
    """Resolving a connection by name did not yield exactly one match."""

    def __init__(self, name: str, match_count: int, details: str | None = None):
        """Initialize the lookup error.

        Args:
            name: The connection name that was looked up
            match_count: Number of connections the API returned for the name
            details: Optional additional details
        """
        self.name = name
        self.match_count = match_count
        if match_count == 0:
            message = f"{name} connection does not exist."
        else:
            message = f"{name} matches {match_count} connections, expected one."
        super().__init__(message, details)


class ValidationError(Auth0ManagerError):
    """Input validation errors.

    Raised when arguments passed to a manager fail validation, such as an
    empty resource ID or a payload of the wrong type.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        details: str | None = None,
    ):
        """Initialize the validation error.

        Args:
            message: The main error message
            field: The field that failed validation
            value: The invalid value
            details: Optional additional details about the error
        """
        self.field = field
        self.value = value
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with validation context."""
        parts = [self.message]

        if self.field:
            parts.append(f"Field: {self.field}")

        if self.value:
            parts.append(f"Value: {self.value}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)
