"""Test that stdlib logging from httpx lands in loguru"""

import logging

import pytest
from loguru import logger

from dceapi.logging_bridge import install_logging_bridge


@pytest.fixture
def captured():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.mark.unit
def test_httpx_records_are_forwarded_to_loguru(captured):
    install_logging_bridge()

    logging.getLogger("httpx").info("HTTP Request: GET http://dce.test")

    assert any("HTTP Request: GET http://dce.test" in m for m in captured)


@pytest.mark.unit
def test_install_is_idempotent():
    install_logging_bridge()
    install_logging_bridge()

    handlers = logging.getLogger("httpx").handlers
    assert sum(type(h).__name__ == "_LoguruHandler" for h in handlers) == 1
