"""Pytest fixtures for dceapi tests"""

import pytest

from dceapi.config import Config
from tests.factories import FakeExchange


@pytest.fixture
def config() -> Config:
    """Config pointed at a fake host"""
    return Config(
        api_key="test-api-key",
        secret="test-secret",
        base_url="http://dce.test",
        timeout=5.0,
    )


@pytest.fixture
def fake_exchange() -> FakeExchange:
    return FakeExchange()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove DCE_* variables; anything set later is undone on teardown"""
    for key in (
        "DCE_API_KEY",
        "DCE_SECRET",
        "DCE_BASE_URL",
        "DCE_TIMEOUT",
        "DCE_LANG",
        "DCE_TRADE_TYPE",
        "DCE_COMPRESSION",
    ):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
