"""DCEClient - one entry point exposing every service façade"""

from pathlib import Path

import httpx
from loguru import logger

from .auth import Authenticator
from .config import Config
from .pipeline import AuthenticatedRequestPipeline
from .services import (
    CommonService,
    DeliveryService,
    MarketService,
    MemberService,
    NewsService,
    SettleService,
    TradeService,
)
from .token_store import TokenStore
from .transport import Transport


class DCEClient:
    """Async client for the DCE public data API

    Example:
        async with DCEClient.from_env() as client:
            date = await client.common.get_curr_trade_date()
            quotes = await client.market.get_day_quotes(
                variety_id="m", trade_date=date.date
            )
    """

    def __init__(
        self,
        config: Config,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Wire the transport, token store, pipeline and façades

        Args:
            config: Validated client configuration
            transport: Optional httpx transport, used by tests to stub the network
        """
        self._config = config
        self._transport = Transport(config, transport=transport)
        self._authenticator = Authenticator(self._transport)
        self._token_store = TokenStore(
            self._authenticator.authenticate,
            refresh_margin=config.token_refresh_margin,
        )
        self._pipeline = AuthenticatedRequestPipeline(
            self._transport, self._token_store
        )

        self.news = NewsService(self._pipeline)
        self.common = CommonService(self._pipeline)
        self.market = MarketService(self._pipeline)
        self.trade = TradeService(self._pipeline)
        self.settle = SettleService(self._pipeline)
        self.member = MemberService(self._pipeline)
        self.delivery = DeliveryService(self._pipeline)

        logger.debug(f"DCEClient created for {config.base_url}")

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "DCEClient":
        """Build a client from DCE_* environment variables

        Raises:
            ConfigError: If required variables are missing or invalid
        """
        return cls(Config.from_env(env_file), transport=transport)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def token_store(self) -> TokenStore:
        return self._token_store

    @property
    def pipeline(self) -> AuthenticatedRequestPipeline:
        return self._pipeline

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool"""
        await self._transport.aclose()
        logger.debug("DCEClient closed")

    async def __aenter__(self) -> "DCEClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
