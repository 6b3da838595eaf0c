"""Authenticator - calls the exchange token endpoint"""

from datetime import datetime, timedelta, timezone

from loguru import logger

from .exceptions import (
    ApiError,
    AuthError,
    DCEError,
    EnvelopeError,
    ErrorCode,
    TransportError,
)
from .models.envelope import TokenPayload
from .token_store import Token
from .transport import RequestDescriptor, Transport

AUTH_ENDPOINT = "/dceapi/cms/auth/accessToken"

# Lifetime assumed when the server omits expiresIn
TOKEN_EXPIRY_SECONDS = 3600

_AUTH_FAILURES = {
    ErrorCode.PARAM_ERROR: "invalid parameters",
    ErrorCode.NO_PERMISSION: "permission denied",
    ErrorCode.SERVER_ERROR: "server error",
    ErrorCode.RATE_LIMIT: "rate limited",
}


class Authenticator:
    """Exchanges the api key and secret for a bearer token

    Every failure, including timeouts, surfaces as AuthError.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    async def authenticate(self) -> Token:
        """Request a new access token

        Returns:
            Freshly issued Token

        Raises:
            AuthError: If the call fails or returns no usable token
        """
        config = self._transport.config
        descriptor = RequestDescriptor(
            path=AUTH_ENDPOINT,
            method="POST",
            body={"secret": config.secret},
        )

        logger.info("Requesting new access token...")
        issued_at = datetime.now(timezone.utc)

        try:
            raw = await self._transport.send(descriptor)
            if not raw.is_success:
                raise ApiError(raw.status_code, raw.text())
            payload = self._transport.decode(raw, TokenPayload)
        except EnvelopeError as e:
            reason = _AUTH_FAILURES.get(e.error_code, f"authentication failed (code {e.code})")
            logger.error(f"Authentication rejected: {reason}: {e.message}")
            raise AuthError(f"{reason}: {e.message}") from e
        except TransportError as e:
            logger.error(f"Authentication request failed: {e}")
            raise AuthError(f"failed to send auth request: {e}") from e
        except DCEError as e:
            logger.error(f"Authentication failed: {e}")
            raise AuthError(f"authentication failed: {e}") from e

        if not payload.access_token:
            raise AuthError("received empty access token")

        expires_in = (
            payload.expires_in if payload.expires_in > 0 else TOKEN_EXPIRY_SECONDS
        )
        token = Token(
            value=payload.access_token,
            token_type=payload.token_type or "Bearer",
            issued_at=issued_at,
            expires_at=issued_at + timedelta(seconds=expires_in),
        )
        logger.info(f"Access token acquired, expires at {token.expires_at.isoformat()}")
        return token
