"""Settlement parameter models"""

from pydantic import field_validator

from .base import (
    NullableStr,
    RequestModel,
    ResponseModel,
    TradeType,
    validate_trade_date,
)


class SettleParam(ResponseModel):
    """Settlement prices, fees and margin rates for a contract"""

    variety: NullableStr = ""
    variety_order: NullableStr = ""
    contract_id: NullableStr = ""
    clear_price: NullableStr = ""
    open_fee: NullableStr = ""
    offset_fee: NullableStr = ""
    short_open_fee: NullableStr = ""
    short_offset_fee: NullableStr = ""
    style: NullableStr = ""
    spec_buy_rate: NullableStr = ""
    spec_sell_rate: NullableStr = ""
    hedge_buy_rate: NullableStr = ""
    hedge_sell_rate: NullableStr = ""


class SettleParamRequest(RequestModel):
    variety_id: str
    trade_date: str
    trade_type: TradeType = "1"
    lang: str = "zh"

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)
