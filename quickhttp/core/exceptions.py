"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure in a single request/response cycle is one of these.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ParseError(ApplicationError):
    """Raised when a URL or a command-line item cannot be parsed."""

    def __init__(self, message: str = "Failed to parse argument") -> None:
        super().__init__(message, code="VAL_PARSE_ERROR")


class HeaderError(ApplicationError):
    """Raised when a header name or value contains illegal characters."""

    def __init__(self, message: str = "Invalid header") -> None:
        super().__init__(message, code="VAL_HEADER_ERROR")


class TransportError(ApplicationError):
    """Raised when the HTTP call fails (DNS, connect, TLS, timeout)."""

    def __init__(self, message: str = "HTTP transport error") -> None:
        super().__init__(message, code="SYS_TRANSPORT_ERROR")


class FormatError(ApplicationError):
    """Raised when a body cannot be pretty-printed for its content type."""

    def __init__(self, message: str = "Failed to format body") -> None:
        super().__init__(message, code="FMT_FORMAT_ERROR")


class ConfigurationError(ApplicationError):
    """Raised when bundled configuration is missing or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="SYS_CONFIG_ERROR")
