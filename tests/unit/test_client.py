"""Test DCEClient wiring end to end against a fake exchange"""

import json

import pytest

from dceapi import DCEClient, RequestOptions
from dceapi.exceptions import ConfigError, EnvelopeError
from dceapi.services import (
    CommonService,
    DeliveryService,
    MarketService,
    MemberService,
    NewsService,
    SettleService,
    TradeService,
)
from tests.factories import envelope_response

QUOTES_PATH = "/dceapi/forward/publicweb/dailystat/dayQuotes"
TRADE_DATE_PATH = "/dceapi/forward/publicweb/maxTradeDate"


@pytest.mark.unit
def test_client_exposes_seven_services(config):
    client = DCEClient(config)

    assert isinstance(client.news, NewsService)
    assert isinstance(client.common, CommonService)
    assert isinstance(client.market, MarketService)
    assert isinstance(client.trade, TradeService)
    assert isinstance(client.settle, SettleService)
    assert isinstance(client.member, MemberService)
    assert isinstance(client.delivery, DeliveryService)
    assert client.config is config
    assert client.token_store.cached is None
    assert client.token_store.refresh_margin == config.token_refresh_margin


@pytest.mark.unit
def test_from_env_requires_credentials(clean_env):
    with pytest.raises(ConfigError):
        DCEClient.from_env()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_from_env_builds_working_client(clean_env, fake_exchange):
    clean_env.setenv("DCE_API_KEY", "env-key")
    clean_env.setenv("DCE_SECRET", "env-secret")
    clean_env.setenv("DCE_BASE_URL", "http://dce.test")
    fake_exchange.queue(TRADE_DATE_PATH, envelope_response({"tradeDate": "20240102"}))

    async with DCEClient.from_env(transport=fake_exchange.transport) as client:
        trade_date = await client.common.get_curr_trade_date()

    assert trade_date.date == "20240102"
    auth = fake_exchange.auth_requests[0]
    assert auth.headers["apikey"] == "env-key"
    assert json.loads(auth.content) == {"secret": "env-secret"}


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("encoding", ["gzip", "deflate", "br"])
async def test_quotes_round_trip_through_compressed_response(
    config, fake_exchange, encoding
):
    rows = [
        {"variety": "豆粕", "contractId": "m2405", "close": "3200", "volumn": 1200},
        {"variety": "豆粕小计", "contractId": "", "volumn": 1200},
    ]
    fake_exchange.queue(QUOTES_PATH, envelope_response(rows, encoding=encoding))

    async with DCEClient(config, transport=fake_exchange.transport) as client:
        quotes = await client.market.get_day_quotes(
            variety_id="m", trade_date="20240102"
        )

    assert [q.contract_id for q in quotes] == ["m2405", ""]
    assert quotes[0].volume == 1200
    assert [q.is_total_row for q in quotes] == [False, True]
    request = fake_exchange.data_requests[0]
    assert request.headers["Authorization"] == "Bearer token-1"
    assert json.loads(request.content) == {
        "varietyId": "m",
        "tradeDate": "20240102",
        "tradeType": "1",
    }


@pytest.mark.unit
@pytest.mark.asyncio
async def test_token_is_reused_across_services(config, fake_exchange):
    async with DCEClient(config, transport=fake_exchange.transport) as client:
        await client.common.get_variety_list(options=RequestOptions(trade_type=2))
        await client.trade.get_trading_param(lang="en")
        await client.delivery.get_bonded_delivery(variety_id="m", trade_date="20240102")

    assert len(fake_exchange.auth_requests) == 1
    assert len(fake_exchange.data_requests) == 3
    assert fake_exchange.data_requests[0].headers["tradeType"] == "2"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_expired_token_recovers_transparently(config, fake_exchange):
    fake_exchange.queue(
        QUOTES_PATH,
        envelope_response(code=402, msg="token expired"),
        envelope_response([{"contractId": "m2405"}]),
    )

    async with DCEClient(config, transport=fake_exchange.transport) as client:
        quotes = await client.market.get_day_quotes(
            variety_id="m", trade_date="20240102"
        )
        assert client.token_store.cached.value == "token-2"

    assert quotes[0].contract_id == "m2405"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_envelope_error_reaches_caller(config, fake_exchange):
    fake_exchange.queue(QUOTES_PATH, envelope_response(code=400, msg="bad variety"))

    async with DCEClient(config, transport=fake_exchange.transport) as client:
        with pytest.raises(EnvelopeError, match="bad variety"):
            await client.market.get_day_quotes(variety_id="x", trade_date="20240102")
