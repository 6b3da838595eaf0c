"""Transport - HTTP exchange, content-encoding negotiation and envelope decoding"""

import gzip
import zlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, get_origin

import brotli
import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .config import Config
from .exceptions import (
    DecodeError,
    EnvelopeError,
    ErrorCode,
    TokenExpiredError,
    TransportError,
)
from .logging_bridge import install_logging_bridge
from .models.envelope import Envelope

USER_AGENT = "dceapi-python/0.1.0"


@dataclass(frozen=True)
class RequestOptions:
    """Per-request trade type and language

    Sets the tradeType and lang headers, and fills the matching body fields
    unless the request sets them itself.
    """

    trade_type: int | None = None
    lang: str | None = None


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to issue one request, minus the token"""

    path: str
    method: str = "GET"
    query: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, Any] | None = None
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and still-encoded body of one HTTP exchange"""

    status_code: int
    headers: Mapping[str, str]
    body: bytes
    url: str = ""

    @property
    def content_encoding(self) -> str:
        return self.headers.get("content-encoding", "identity")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def text(self) -> str:
        """Decompressed body as text, for error reporting"""
        try:
            return decompress(self.body, self.content_encoding).decode(
                "utf-8", errors="replace"
            )
        except DecodeError:
            return self.body.decode("utf-8", errors="replace")


def decompress(body: bytes, content_encoding: str | None) -> bytes:
    """Undo the content encodings of a response body

    Stacked encodings ("gzip, br") are removed in reverse order.

    Raises:
        DecodeError: On unsupported encodings or corrupt compressed data
    """
    encodings = [
        e.strip().lower()
        for e in (content_encoding or "").split(",")
        if e.strip()
    ]
    for encoding in reversed(encodings):
        try:
            if encoding == "identity":
                continue
            elif encoding in ("gzip", "x-gzip"):
                body = gzip.decompress(body)
            elif encoding == "deflate":
                # Servers disagree on zlib-wrapped vs raw deflate
                try:
                    body = zlib.decompress(body)
                except zlib.error:
                    body = zlib.decompress(body, -zlib.MAX_WBITS)
            elif encoding == "br":
                body = brotli.decompress(body)
            else:
                raise DecodeError(f"Unsupported content-encoding: {encoding}")
        except (OSError, EOFError, zlib.error, brotli.error) as e:
            raise DecodeError(f"Failed to decompress {encoding} body: {e}") from e
    return body


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class Transport:
    """Stateless HTTP sender built from a Config

    Responsibilities:
    - Request building (URL, headers, query, JSON body, timeout)
    - Content-encoding negotiation and decompression
    - Envelope decoding into typed records

    Retries are not done here.
    """

    def __init__(
        self,
        config: Config,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        install_logging_bridge()
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
                "Accept-Encoding": config.accept_encoding,
                "apikey": config.api_key,
            },
            event_hooks={
                "request": [self._log_request],
                "response": [self._log_response],
            },
        )

    @property
    def config(self) -> Config:
        return self._config

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _log_request(self, request: httpx.Request) -> None:
        """Log outbound requests with credentials masked"""
        headers = {
            k: ("***" if k.lower() in ("authorization", "apikey") else v)
            for k, v in request.headers.items()
        }
        logger.debug(f"HTTPX request: {request.method} {request.url} {headers}")

    async def _log_response(self, response: httpx.Response) -> None:
        # Body is streamed raw, so only the status line is logged here
        logger.debug(
            f"HTTPX response: status={response.status_code} url={response.url} "
            f"encoding={response.headers.get('content-encoding', 'identity')}"
        )

    async def send(
        self, descriptor: RequestDescriptor, token: str | None = None
    ) -> RawResponse:
        """Issue one request and return the undecoded response

        Args:
            descriptor: Request to send
            token: Bearer token to attach, if any

        Returns:
            RawResponse with the body exactly as received

        Raises:
            TransportError: On timeouts and network failures
        """
        headers = dict(descriptor.headers)
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        if descriptor.body is not None:
            headers.setdefault("Content-Type", "application/json")

        request = self._client.build_request(
            descriptor.method,
            descriptor.path,
            params=dict(descriptor.query) or None,
            json=dict(descriptor.body) if descriptor.body is not None else None,
            headers=headers,
        )

        try:
            response = await self._client.send(request, stream=True)
            try:
                body = b"".join([chunk async for chunk in response.aiter_raw()])
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            logger.warning(
                f"{descriptor.method} {descriptor.path} timed out after {self._config.timeout}s"
            )
            raise TransportError(
                f"{descriptor.method} {descriptor.path} timed out after {self._config.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"Network error on {descriptor.method} {descriptor.path}: {e}")
            raise TransportError(
                f"{descriptor.method} {descriptor.path} failed: {e}"
            ) from e

        return RawResponse(
            status_code=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=body,
            url=str(response.url),
        )

    def decode(self, raw: RawResponse, result_type: Any) -> Any:
        """Decompress, unwrap the envelope and validate the payload

        Args:
            raw: Response returned by send()
            result_type: Type the envelope data is validated into

        Returns:
            Instance of result_type

        Raises:
            TokenExpiredError: If the envelope code is 402
            EnvelopeError: If the envelope code is any other non-success code
            DecodeError: If the body is malformed or does not match result_type
        """
        body = decompress(raw.body, raw.content_encoding)
        text = body.decode("utf-8", errors="replace")

        try:
            envelope = Envelope.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Malformed response envelope from {raw.url or 'server'}: {e.errors()[0]['msg']}",
                text[:1000],
            ) from e

        if envelope.code == ErrorCode.TOKEN_EXPIRED:
            raise TokenExpiredError(envelope.msg)
        if envelope.code != ErrorCode.SUCCESS:
            raise EnvelopeError(envelope.code, envelope.msg, text[:1000])

        data = envelope.data
        if data is None and get_origin(result_type) is list:
            data = []

        try:
            return _adapter(result_type).validate_python(data)
        except ValidationError as e:
            raise DecodeError(
                f"Response data does not match {getattr(result_type, '__name__', result_type)}: {e}",
                text[:1000],
            ) from e
