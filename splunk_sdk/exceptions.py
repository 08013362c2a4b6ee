"""
Custom exceptions for the Splunk Python SDK.

All exceptions inherit from SplunkError for easy exception handling.
"""


class SplunkError(Exception):
    """Base exception for all Splunk client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        event_position: int | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        # Set only for errors raised while sending events. Events are sent in
        # order, so the 0-based position is also the count already delivered.
        self.event_position = event_position
        self.delivered = event_position
        super().__init__(self.message)


class ConfigurationError(SplunkError):
    """Raised when the client is configured without usable credentials."""

    def __init__(self, message: str = "Invalid client configuration") -> None:
        super().__init__(message)


class AuthenticationError(SplunkError):
    """Raised when a request cannot be authenticated for its endpoint."""

    def __init__(self, message: str = "No authentication credentials provided") -> None:
        super().__init__(message)


class ConnectionError(SplunkError):
    """Raised when connection to server fails."""

    def __init__(
        self, message: str = "Connection failed", event_position: int | None = None
    ) -> None:
        super().__init__(message, event_position=event_position)


class ResponseError(SplunkError):
    """Raised when the server answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        reason: str = "",
        body: str = "",
        event_position: int | None = None,
    ) -> None:
        self.reason = reason
        self.body = body
        super().__init__(message, status_code=status_code, event_position=event_position)


class SerializationError(SplunkError):
    """Raised when an event cannot be encoded as JSON."""

    def __init__(
        self, message: str = "Failed to marshal event", event_position: int | None = None
    ) -> None:
        super().__init__(message, event_position=event_position)


class DecodeError(SplunkError):
    """Raised when a response body is not the expected JSON object."""

    def __init__(self, message: str = "Failed to decode response") -> None:
        super().__init__(message)
