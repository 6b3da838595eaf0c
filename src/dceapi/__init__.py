"""dceapi - async client for the Dalian Commodity Exchange data API"""

from .client import DCEClient
from .config import Compression, Config, Language
from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    DCEError,
    DecodeError,
    EnvelopeError,
    ErrorCode,
    ParameterError,
    TokenExpiredError,
    TransportError,
)
from .results import ApiResult, ErrorKind, Failure, Success
from .token_store import Token, TokenStore
from .transport import RequestOptions

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiResult",
    "AuthError",
    "Compression",
    "Config",
    "ConfigError",
    "DCEClient",
    "DCEError",
    "DecodeError",
    "EnvelopeError",
    "ErrorCode",
    "ErrorKind",
    "Failure",
    "Language",
    "ParameterError",
    "RequestOptions",
    "Success",
    "Token",
    "TokenExpiredError",
    "TokenStore",
    "TransportError",
]
