"""Tagged results for callers that prefer values over exceptions"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .exceptions import (
    ApiError,
    AuthError,
    ConfigError,
    DCEError,
    DecodeError,
    ParameterError,
    TransportError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    CONFIG = "config"
    PARAMETER = "parameter"
    AUTH = "auth"
    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, error: DCEError) -> "ErrorKind":
        for exc_type, kind in _KINDS:
            if isinstance(error, exc_type):
                return kind
        return cls.UNKNOWN


_KINDS: list[tuple[type[DCEError], ErrorKind]] = [
    (ConfigError, ErrorKind.CONFIG),
    (ParameterError, ErrorKind.PARAMETER),
    (AuthError, ErrorKind.AUTH),
    (TransportError, ErrorKind.TRANSPORT),
    (ApiError, ErrorKind.API),
    (DecodeError, ErrorKind.DECODE),
]


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    error: DCEError

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: DCEError) -> "Failure":
        return cls(kind=ErrorKind.of(error), message=str(error), error=error)


ApiResult = Success[T] | Failure
