"""Test the transport: request building, decompression and envelope decoding"""

import json
import zlib

import httpx
import pytest

from dceapi.exceptions import (
    DecodeError,
    EnvelopeError,
    ErrorCode,
    TokenExpiredError,
    TransportError,
)
from dceapi.models import TradeDate, Variety
from dceapi.transport import RawResponse, RequestDescriptor, Transport, decompress
from tests.factories import compress, envelope_response, raw_response


def _raw(payload: dict, encoding: str | None = None) -> RawResponse:
    body = compress(json.dumps(payload).encode(), encoding)
    headers = {"content-encoding": encoding} if encoding else {}
    return RawResponse(status_code=200, headers=headers, body=body)


@pytest.fixture
def transport(config) -> Transport:
    return Transport(config, transport=httpx.MockTransport(lambda r: envelope_response()))


# =============================================================================
# decompress
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("encoding", ["gzip", "deflate", "br", "identity", None])
def test_decompress_supported_encodings(encoding):
    body = '{"code": 200, "msg": "成功"}'.encode()

    assert decompress(compress(body, encoding), encoding) == body


@pytest.mark.unit
def test_decompress_raw_deflate_without_zlib_header():
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    body = compressor.compress(b"payload") + compressor.flush()

    assert decompress(body, "deflate") == b"payload"


@pytest.mark.unit
def test_decompress_stacked_encodings_in_reverse_order():
    body = compress(compress(b"payload", "gzip"), "br")

    assert decompress(body, "gzip, br") == b"payload"


@pytest.mark.unit
def test_decompress_corrupt_or_unknown_encoding_raises():
    with pytest.raises(DecodeError, match="gzip"):
        decompress(b"not gzip", "gzip")
    with pytest.raises(DecodeError, match="Unsupported"):
        decompress(b"payload", "zstd")


# =============================================================================
# send
# =============================================================================


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_builds_headers_and_json_body(config):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return envelope_response([])

    transport = Transport(config, transport=httpx.MockTransport(handler))
    try:
        raw = await transport.send(
            RequestDescriptor(
                path="/dceapi/forward/publicweb/dailystat/dayQuotes",
                method="POST",
                body={"varietyId": "a"},
                headers={"tradeType": "1", "lang": "zh"},
            ),
            token="tok",
        )
    finally:
        await transport.aclose()

    request = seen[0]
    assert raw.status_code == 200
    assert request.url == "http://dce.test/dceapi/forward/publicweb/dailystat/dayQuotes"
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.headers["apikey"] == "test-api-key"
    assert request.headers["tradeType"] == "1"
    assert request.headers["lang"] == "zh"
    assert request.headers["Accept-Encoding"] == "gzip, deflate, br"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"varietyId": "a"}


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_without_token_or_body(config):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return envelope_response({"tradeDate": "20240102"})

    transport = Transport(config, transport=httpx.MockTransport(handler))
    try:
        await transport.send(
            RequestDescriptor(path="/dceapi/forward/publicweb/maxVolume/getCurrTradeDate")
        )
    finally:
        await transport.aclose()

    assert seen[0].method == "GET"
    assert "Authorization" not in seen[0].headers
    assert seen[0].content == b""


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_keeps_body_compressed_until_decode(config):
    payload = json.dumps({"code": 200, "msg": "", "data": {"tradeDate": "20240102"}})
    transport = Transport(
        config,
        transport=httpx.MockTransport(
            lambda r: raw_response(payload.encode(), encoding="br")
        ),
    )
    try:
        raw = await transport.send(RequestDescriptor(path="/x"))
    finally:
        await transport.aclose()

    assert raw.content_encoding == "br"
    assert raw.body != payload.encode()
    assert transport.decode(raw, TradeDate).date == "20240102"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_maps_timeout_to_transport_error(config):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = Transport(config, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(TransportError, match="timed out"):
            await transport.send(RequestDescriptor(path="/x"))
    finally:
        await transport.aclose()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_send_maps_connection_error_to_transport_error(config):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    transport = Transport(config, transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(TransportError, match="refused"):
            await transport.send(RequestDescriptor(path="/x"))
    finally:
        await transport.aclose()


# =============================================================================
# decode
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("encoding", ["gzip", "deflate", "br", None])
def test_decode_compressed_envelope(transport, encoding):
    raw = _raw(
        {"code": 200, "msg": "", "data": [{"varietyId": "a", "varietyName": "豆一"}]},
        encoding,
    )

    varieties = transport.decode(raw, list[Variety])

    assert [v.code for v in varieties] == ["a"]


@pytest.mark.unit
def test_decode_null_data_as_empty_list(transport):
    assert transport.decode(_raw({"code": 200, "msg": "", "data": None}), list[Variety]) == []


@pytest.mark.unit
def test_decode_envelope_402_is_token_expired(transport):
    with pytest.raises(TokenExpiredError) as exc_info:
        transport.decode(_raw({"code": 402, "msg": "token expired"}), list[Variety])

    assert exc_info.value.status == 402


@pytest.mark.unit
@pytest.mark.parametrize(
    "code,error_code",
    [
        (400, ErrorCode.PARAM_ERROR),
        (401, ErrorCode.NO_PERMISSION),
        (500, ErrorCode.SERVER_ERROR),
        (501, ErrorCode.RATE_LIMIT),
        (999, None),
    ],
)
def test_decode_envelope_error_codes(transport, code, error_code):
    with pytest.raises(EnvelopeError) as exc_info:
        transport.decode(_raw({"code": code, "message": "nope"}), list[Variety])

    assert exc_info.value.code == code
    assert exc_info.value.error_code == error_code
    assert exc_info.value.message == "nope"


@pytest.mark.unit
def test_decode_malformed_body_raises_decode_error(transport):
    raw = RawResponse(status_code=200, headers={}, body=b"<html>gateway</html>")

    with pytest.raises(DecodeError, match="Malformed") as exc_info:
        transport.decode(raw, TradeDate)

    assert "gateway" in exc_info.value.raw


@pytest.mark.unit
def test_decode_type_mismatch_raises_decode_error(transport):
    raw = _raw({"code": 200, "msg": "", "data": "not a list"})

    with pytest.raises(DecodeError, match="does not match"):
        transport.decode(raw, list[Variety])
