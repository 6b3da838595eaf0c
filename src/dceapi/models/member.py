"""Member ranking models"""

from pydantic import Field, field_validator

from .base import (
    NullableFloat,
    NullableInt,
    NullableStr,
    RequestModel,
    ResponseModel,
    TradeType,
    validate_trade_date,
    validate_trade_month,
)


class Ranking(ResponseModel):
    """One row of the volume, buy or sell ranking"""

    rank: NullableStr = ""
    qty_abbr: NullableStr = ""
    today_qty: NullableInt = 0
    qty_sub: NullableInt = 0
    buy_abbr: NullableStr = ""
    today_buy_qty: NullableInt = 0
    buy_sub: NullableInt = 0
    sell_abbr: NullableStr = ""
    today_sell_qty: NullableInt = 0
    sell_sub: NullableInt = 0


class DailyRanking(ResponseModel):
    contract_id: NullableStr = ""
    today_qty: NullableInt = 0
    qty_sub: NullableInt = 0
    today_buy_qty: NullableInt = 0
    buy_sub: NullableInt = 0
    today_sell_qty: NullableInt = 0
    sell_sub: NullableInt = 0
    qty_future_list: list[Ranking] = Field(default_factory=list)
    buy_future_list: list[Ranking] = Field(default_factory=list)
    sell_future_list: list[Ranking] = Field(default_factory=list)


class DailyRankingRequest(RequestModel):
    variety_id: str
    contract_id: str
    trade_date: str
    trade_type: TradeType = "1"

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)


class PhaseRanking(ResponseModel):
    seq: NullableStr = ""
    member_id: NullableStr = ""
    member_name: NullableStr = ""
    month_qty: NullableFloat = 0.0
    qty_ratio: NullableFloat = 0.0
    month_amt: NullableFloat = 0.0
    amt_ratio: NullableFloat = 0.0


class PhaseRankingRequest(RequestModel):
    variety: str
    start_month: str
    end_month: str
    trade_type: TradeType = "1"

    @field_validator("start_month", "end_month")
    @classmethod
    def check_month(cls, v):
        return validate_trade_month(v)
