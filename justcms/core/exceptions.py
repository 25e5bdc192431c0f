"""Exceptions raised by the JustCMS client."""


class JustCMSError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(JustCMSError, ValueError):
    """Raised when the API token or project id cannot be resolved."""


class APIError(JustCMSError):
    """Raised when the API answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the API
        body: Raw response body text, uninterpreted
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"JustCMS API error {status_code}: {body}")
