"""TokenStore - bearer token caching with single-flight refresh"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from loguru import logger


@dataclass(frozen=True)
class Token:
    """Bearer credential issued by the token endpoint"""

    value: str
    issued_at: datetime
    expires_at: datetime
    token_type: str = "Bearer"

    def is_expiring(self, margin_seconds: float = 0.0) -> bool:
        """True if the token expires within margin_seconds from now"""
        now = datetime.now(timezone.utc)
        return self.expires_at <= now + timedelta(seconds=margin_seconds)

    def __repr__(self) -> str:
        return (
            f"Token(value='***', issued_at={self.issued_at.isoformat()}, "
            f"expires_at={self.expires_at.isoformat()})"
        )


class TokenStore:
    """Holds the current token for one client

    Responsibilities:
    - Hand out a token that is not within the refresh margin of expiry
    - Re-authenticate on demand after the server rejects a token
    - Keep at most one authentication call in flight; concurrent callers
      await the same refresh

    A refresh runs as its own task and callers await it through
    asyncio.shield, so cancelling a caller never cancels the refresh.
    """

    def __init__(
        self,
        authenticate: Callable[[], Awaitable[Token]],
        refresh_margin: float = 60.0,
    ) -> None:
        self._authenticate = authenticate
        self._refresh_margin = refresh_margin
        self._token: Token | None = None
        self._lock = asyncio.Lock()
        self._inflight: asyncio.Task[Token] | None = None

    @property
    def cached(self) -> Token | None:
        """Current token without triggering a refresh"""
        return self._token

    @property
    def refresh_margin(self) -> float:
        return self._refresh_margin

    def is_expired(self) -> bool:
        """True if there is no token or it is within the refresh margin"""
        return self._token is None or self._token.is_expiring(self._refresh_margin)

    def clear(self) -> None:
        """Drop the cached token so the next call re-authenticates"""
        self._token = None

    async def get_or_refresh(self) -> Token:
        """Return a valid token, authenticating first if needed

        Raises:
            AuthError: If authentication fails; any prior token is kept
        """
        token = self._token
        if token is not None and not token.is_expiring(self._refresh_margin):
            return token
        if token is not None:
            logger.info("Access token expiring soon - refreshing before request")
        return await self._refresh(force=False)

    async def force_refresh(self, stale: Token | None = None) -> Token:
        """Re-authenticate unconditionally

        Args:
            stale: The token the server just rejected. If another caller has
                already replaced it with a fresh token, that token is
                returned without a second authentication call.

        Raises:
            AuthError: If authentication fails; any prior token is kept
        """
        return await self._refresh(force=True, stale=stale)

    async def _refresh(self, force: bool, stale: Token | None = None) -> Token:
        async with self._lock:
            if self._inflight is None:
                current = self._token
                if current is not None and not current.is_expiring(
                    self._refresh_margin
                ):
                    if not force or (stale is not None and current != stale):
                        return current
                self._inflight = asyncio.ensure_future(self._run_refresh())
                self._inflight.add_done_callback(_consume_exception)
            else:
                logger.debug("Joining in-flight token refresh")
            task = self._inflight

        return await asyncio.shield(task)

    async def _run_refresh(self) -> Token:
        try:
            token = await self._authenticate()
            self._token = token
            return token
        finally:
            self._inflight = None


def _consume_exception(task: "asyncio.Task[Token]") -> None:
    # Every waiter may have been cancelled; retrieve the error so asyncio
    # does not report it as never retrieved.
    if not task.cancelled() and task.exception() is not None:
        logger.debug(f"Token refresh failed: {task.exception()}")
