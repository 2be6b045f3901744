"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Transport failures (timeouts, refused connections, DNS) are not wrapped:
they surface as ``httpx.HTTPError`` from the HTTP layer.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class HttpStatusError(ApplicationError):
    """Raised when the server answers with an unexpected HTTP status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(
            f"There is an error occurred: HTTP status code: {status_code}",
            code="HTTP_BAD_STATUS",
        )


class ValidationError(ApplicationError):
    """Raised when local validation fails before any request is made."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when a configuration file is missing keys or has bad values."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIGURATION_ERROR")
