"""Domain-specific exceptions for uber-earnings.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from EarningsError for easy catching.
"""


class EarningsError(Exception):
    """Base exception for all uber-earnings errors.

    Users can catch this exception to handle any error raised by the
    package.
    """

    pass


class ConfigError(EarningsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - No session file can be found
    - The session file cannot be read
    - Invalid configuration values are provided
    """

    pass


class SessionNotFoundError(ConfigError):
    """Raised when no session file exists in any of the expected locations."""

    def __init__(self, searched: list[str] | None = None) -> None:
        self.searched = list(searched or [])
        msg = "Unable to find a session file in expected locations"
        if self.searched:
            msg += f" ({', '.join(self.searched)})"
        super().__init__(msg)


class SessionReadError(ConfigError):
    """Raised when a session file exists but cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read session id from path '{path}': {reason}")


class ExtractionError(EarningsError):
    """Raised when retrieving the activity feed fails.

    This exception is raised when:
    - Network connection to the feed endpoint fails
    - The service returns an unexpected response
    - The service reports a failure
    """

    pass


class TransportError(ExtractionError):
    """Raised on connection failures and non-2xx HTTP statuses."""

    pass


class DecodeError(ExtractionError):
    """Raised when a response body does not match the expected feed shape."""

    pass


class ServiceFailure(ExtractionError):
    """Raised when the service answers with a failure-tagged response.

    Attributes:
        message: Human-readable message sent by the service.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PaginationLimitError(ExtractionError):
    """Raised when the feed keeps reporting more data past the page cap."""

    def __init__(self, max_pages: int) -> None:
        self.max_pages = max_pages
        super().__init__(
            f"Activity feed still reported more data after {max_pages} pages; giving up"
        )
