"""Custom exceptions for the connector."""


class ConnectorError(Exception):
    """Base exception for connector errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ExternalServiceError(ConnectorError):
    """Errors raised while talking to the upstream image API."""

    def __init__(
        self,
        message: str,
        service: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.service = service
        self.status_code = status_code


class RateLimitError(ExternalServiceError):
    """Rate limit exceeded errors."""

    def __init__(
        self,
        service: str,
        retry_after: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(
            f"Rate limit exceeded for {service}",
            service=service,
            status_code=429,
            details=details,
        )
        self.retry_after = retry_after
