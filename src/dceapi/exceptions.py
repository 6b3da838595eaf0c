"""Exceptions for the DCE API client.

All errors raised by the client derive from DCEError so callers can catch
the whole family in one place.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Envelope codes returned by the DCE API"""

    SUCCESS = 200
    PARAM_ERROR = 400
    NO_PERMISSION = 401
    TOKEN_EXPIRED = 402
    SERVER_ERROR = 500
    RATE_LIMIT = 501

    @classmethod
    def from_code(cls, code: int) -> "ErrorCode | None":
        try:
            return cls(code)
        except ValueError:
            return None


class DCEError(Exception):
    """Base exception for DCE client errors"""

    pass


class ConfigError(DCEError):
    """Raised when configuration is invalid or missing"""

    pass


class ParameterError(DCEError):
    """Raised when request parameters fail validation"""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"invalid parameter '{field}': {message}")


class AuthError(DCEError):
    """Raised when the token endpoint fails or returns no usable token"""

    pass


class TransportError(DCEError):
    """Raised on network failures, timeouts and connection errors"""

    pass


class ApiError(DCEError):
    """Raised when the exchange answers with a non-2xx HTTP status"""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(f"API error {status}: {body[:500]}")


class TokenExpiredError(ApiError):
    """Raised when the exchange signals an expired token (402)"""

    def __init__(self, body: str = "") -> None:
        super().__init__(ErrorCode.TOKEN_EXPIRED, body)


class DecodeError(DCEError):
    """Raised when a response body cannot be decoded"""

    def __init__(self, message: str, raw: str = "") -> None:
        self.message = message
        self.raw = raw
        super().__init__(message)


class EnvelopeError(DecodeError):
    """Raised when the response envelope carries a non-success code"""

    def __init__(self, code: int, message: str, raw: str = "") -> None:
        self.code = code
        super().__init__(f"envelope error {code}: {message}", raw)
        self.message = message

    @property
    def error_code(self) -> ErrorCode | None:
        return ErrorCode.from_code(self.code)
