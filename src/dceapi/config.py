"""Configuration management for the DCE API client"""

import math
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from .exceptions import ConfigError

DEFAULT_BASE_URL = "http://www.dce.com.cn"
DEFAULT_TIMEOUT_SECS = 30.0
DEFAULT_TRADE_TYPE = 1
DEFAULT_TOKEN_REFRESH_MARGIN = 60.0

ENV_API_KEY = "DCE_API_KEY"
ENV_SECRET = "DCE_SECRET"
ENV_BASE_URL = "DCE_BASE_URL"
ENV_TIMEOUT = "DCE_TIMEOUT"
ENV_LANG = "DCE_LANG"
ENV_TRADE_TYPE = "DCE_TRADE_TYPE"
ENV_COMPRESSION = "DCE_COMPRESSION"


class Language(str, Enum):
    """Response language"""

    ZH = "zh"
    EN = "en"


class Compression(str, Enum):
    """Content encodings the client can negotiate"""

    GZIP = "gzip"
    BROTLI = "br"
    DEFLATE = "deflate"

    @classmethod
    def parse(cls, value: "str | Compression") -> "Compression":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "brotli":
            name = "br"
        try:
            return cls(name)
        except ValueError:
            raise ConfigError(f"Unsupported compression: {value!r}") from None


DEFAULT_COMPRESSION = frozenset(
    {Compression.GZIP, Compression.BROTLI, Compression.DEFLATE}
)


def _finite_float(name: str, value: object) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return number


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "***"
    return f"{secret[:2]}***{secret[-2:]}"


@dataclass(frozen=True)
class Config:
    """Immutable client configuration

    api_key and secret are required; every other field has a default that
    matches the public exchange endpoint.
    """

    api_key: str
    secret: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECS
    lang: Language = Language.ZH
    trade_type: int = DEFAULT_TRADE_TYPE
    compression: frozenset[Compression] = field(
        default_factory=lambda: DEFAULT_COMPRESSION
    )
    token_refresh_margin: float = DEFAULT_TOKEN_REFRESH_MARGIN

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigError("api_key is required")
        if not self.secret:
            raise ConfigError("secret is required")

        base_url = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url must be an http(s) URL: {base_url!r}")
        object.__setattr__(self, "base_url", base_url)

        timeout = _finite_float("timeout", self.timeout)
        if timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {timeout}")
        object.__setattr__(self, "timeout", timeout)

        margin = _finite_float("token_refresh_margin", self.token_refresh_margin)
        if margin < 0:
            raise ConfigError("token_refresh_margin must not be negative")
        object.__setattr__(self, "token_refresh_margin", margin)

        try:
            object.__setattr__(self, "lang", Language(self.lang))
        except ValueError:
            raise ConfigError(
                f"lang must be 'zh' or 'en', got {self.lang!r}"
            ) from None

        if self.trade_type not in (1, 2):
            raise ConfigError(
                f"trade_type must be 1 (futures) or 2 (options), got {self.trade_type!r}"
            )

        compression = frozenset(Compression.parse(c) for c in self.compression)
        object.__setattr__(self, "compression", compression)

    @property
    def accept_encoding(self) -> str:
        """Accept-Encoding header value built from the compression preference"""
        if not self.compression:
            return "identity"
        order = [Compression.GZIP, Compression.DEFLATE, Compression.BROTLI]
        return ", ".join(c.value for c in order if c in self.compression)

    def __repr__(self) -> str:
        return (
            f"Config(api_key={_mask(self.api_key)!r}, secret='***', "
            f"base_url={self.base_url!r}, timeout={self.timeout}, "
            f"lang={self.lang.value!r}, trade_type={self.trade_type}, "
            f"compression={sorted(c.value for c in self.compression)})"
        )

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """Load configuration from environment variables

        Args:
            env_file: Optional .env file loaded before reading the environment

        Returns:
            Config instance with values from environment

        Raises:
            ConfigError: If required variables are missing or values are invalid
        """
        if env_file is not None:
            load_dotenv(env_file)

        timeout_raw = os.getenv(ENV_TIMEOUT)
        trade_type_raw = os.getenv(ENV_TRADE_TYPE)
        compression_raw = os.getenv(ENV_COMPRESSION)

        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECS
            trade_type = (
                int(trade_type_raw) if trade_type_raw else DEFAULT_TRADE_TYPE
            )
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        if compression_raw is None:
            compression = DEFAULT_COMPRESSION
        else:
            compression = frozenset(
                Compression.parse(part)
                for part in compression_raw.split(",")
                if part.strip()
            )

        config = cls(
            api_key=os.getenv(ENV_API_KEY, ""),
            secret=os.getenv(ENV_SECRET, ""),
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=timeout,
            lang=os.getenv(ENV_LANG) or Language.ZH,
            trade_type=trade_type,
            compression=compression,
        )

        logger.info("Configuration loaded:")
        logger.info(f"  API Key: {_mask(config.api_key)}")
        logger.info(f"  Base URL: {config.base_url}")
        logger.info(f"  Timeout: {config.timeout}s")
        logger.info(f"  Language: {config.lang.value}")
        logger.info(f"  Trade Type: {config.trade_type}")
        logger.info(f"  Accept-Encoding: {config.accept_encoding}")

        return config
