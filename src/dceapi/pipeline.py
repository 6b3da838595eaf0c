"""AuthenticatedRequestPipeline - token attachment and retry-on-expiry"""

from typing import Any

from loguru import logger

from .exceptions import ApiError, DCEError, TokenExpiredError
from .results import ApiResult, Failure, Success
from .token_store import Token, TokenStore
from .transport import RequestDescriptor, RequestOptions, Transport


class AuthenticatedRequestPipeline:
    """Runs requests with a valid token attached

    A 402 (HTTP status or envelope code) triggers one forced token refresh
    and one resend. Every other failure is raised as-is.
    """

    def __init__(self, transport: Transport, token_store: TokenStore) -> None:
        self._transport = transport
        self._token_store = token_store

    def _with_headers(
        self, descriptor: RequestDescriptor, options: RequestOptions | None
    ) -> RequestDescriptor:
        config = self._transport.config
        options = options or RequestOptions()
        headers = {
            "tradeType": str(options.trade_type or config.trade_type),
            "lang": options.lang or config.lang.value,
            **descriptor.headers,
        }
        return RequestDescriptor(
            path=descriptor.path,
            method=descriptor.method,
            query=descriptor.query,
            body=descriptor.body,
            headers=headers,
        )

    async def _attempt(
        self, descriptor: RequestDescriptor, token: Token, result_type: Any
    ) -> Any:
        raw = await self._transport.send(descriptor, token.value)
        if raw.status_code == 402:
            raise TokenExpiredError(raw.text())
        if not raw.is_success:
            body = raw.text()
            logger.error(
                f"{descriptor.method} {descriptor.path} failed with {raw.status_code}: {body[:200]}"
            )
            raise ApiError(raw.status_code, body)
        return self._transport.decode(raw, result_type)

    async def execute(
        self,
        descriptor: RequestDescriptor,
        result_type: Any,
        options: RequestOptions | None = None,
    ) -> Any:
        """Send a request and decode its payload

        Args:
            descriptor: Request built by a service method
            result_type: Type the envelope data is decoded into
            options: Per-request trade type and language overrides

        Returns:
            Decoded payload

        Raises:
            AuthError: If no token can be obtained
            TokenExpiredError: If the retried request is rejected again
            ApiError: On any other non-2xx status
            TransportError: On network failures and timeouts
            DecodeError: On malformed bodies and envelope error codes
        """
        descriptor = self._with_headers(descriptor, options)
        token = await self._token_store.get_or_refresh()

        logger.debug(f"{descriptor.method} {descriptor.path} (attempt 1)")
        try:
            return await self._attempt(descriptor, token, result_type)
        except TokenExpiredError as e:
            logger.warning(
                f"Token rejected on {descriptor.path} ({e.body or 'expired'}) - refreshing and retrying once"
            )

        token = await self._token_store.force_refresh(stale=token)

        logger.debug(f"{descriptor.method} {descriptor.path} (attempt 2)")
        try:
            return await self._attempt(descriptor, token, result_type)
        except TokenExpiredError:
            logger.error(f"Token rejected again on {descriptor.path} after refresh")
            raise

    async def execute_result(
        self,
        descriptor: RequestDescriptor,
        result_type: Any,
        options: RequestOptions | None = None,
    ) -> ApiResult:
        """Like execute(), but returns Success or Failure instead of raising"""
        try:
            value = await self.execute(descriptor, result_type, options)
        except DCEError as e:
            return Failure.from_error(e)
        return Success(value)
