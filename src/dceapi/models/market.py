"""Quote and market statistics models"""

from typing import Literal

from pydantic import Field, field_validator, model_validator

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


class Quote(ResponseModel):
    """Quote row for a contract (day, night, week or month)"""

    variety: NullableStr = ""
    contract_id: NullableStr = ""
    deliv_month: NullableStr = ""
    open: NullableStr = ""
    high: NullableStr = ""
    low: NullableStr = ""
    close: NullableStr = ""
    last_clear: NullableStr = ""
    last_price: NullableStr = ""
    clear_price: NullableStr = ""
    diff: NullableStr = ""
    diff1: NullableStr = ""
    volume: NullableInt = Field(0, alias="volumn")
    open_interest: NullableInt = 0
    diff_i: NullableInt = Field(0, alias="diffI")
    turnover: NullableStr = ""

    @property
    def is_total_row(self) -> bool:
        """Subtotal and total rows carry no contract id"""
        return not (self.contract_id or self.deliv_month) or "计" in self.variety


class QuotesRequest(RequestModel):
    variety_id: str | None = None
    variety: str | None = None
    trade_date: str
    trade_type: TradeType = "1"
    lang: str | None = None
    statistics_type: int | None = Field(None, ge=0, le=2)

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)


class ContractMonthMaxBase(ResponseModel):
    contract_id: NullableStr = ""
    variety: NullableStr = ""


class ContractMonthMaxVolume(ContractMonthMaxBase):
    sum_amount: NullableFloat = 0.0
    max_amount: NullableFloat = 0.0
    max_amount_date: NullableStr = ""
    min_amount: NullableFloat = 0.0
    min_amount_date: NullableStr = ""
    avg_amount: NullableFloat = 0.0


class ContractMonthMaxTurnover(ContractMonthMaxBase):
    sum_turnover: NullableFloat = 0.0
    max_turnover: NullableFloat = 0.0
    max_turnover_date: NullableStr = ""
    min_turnover: NullableFloat = 0.0
    min_turnover_date: NullableStr = ""
    avg_turnover: NullableFloat = 0.0


class ContractMonthMaxOpeni(ContractMonthMaxBase):
    max_openi: NullableFloat = 0.0
    max_openi_date: NullableStr = ""
    min_openi: NullableFloat = 0.0
    min_openi_date: NullableStr = ""
    avg_openi: NullableFloat = 0.0


class ContractMonthMaxPrice(ContractMonthMaxBase):
    open: NullableFloat = 0.0
    close: NullableFloat = 0.0
    high: NullableFloat = 0.0
    high_date: NullableStr = ""
    low: NullableFloat = 0.0
    low_date: NullableStr = ""
    clear_price: NullableFloat = 0.0


class ContractMonthMaxRequest(RequestModel):
    """Monthly extremes per contract

    stat_content selects the statistic: 0 volume, 1 turnover,
    2 open interest, 3 price. The service methods set it.
    """

    variety_id: str
    start_month: str
    end_month: str
    trade_type: TradeType = "1"
    stat_content: Literal["0", "1", "2", "3"] = "0"
    lang: str = "zh"

    @field_validator("start_month", "end_month")
    @classmethod
    def check_month(cls, v):
        return validate_trade_month(v)

    @model_validator(mode="after")
    def check_range(self):
        if self.start_month > self.end_month:
            raise ValueError("start_month must not be after end_month")
        return self


class RiseFallEvent(ResponseModel):
    """Day on which a contract hit its price limit"""

    trade_date: NullableStr = ""
    contract_id: NullableStr = ""
    direction: NullableStr = ""
    times: NullableInt = 0


class RiseFallEventRequest(RequestModel):
    start_date: str
    end_date: str
    variety_id: str = "all"
    lang: str = "zh"

    @field_validator("start_date", "end_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)

    @model_validator(mode="after")
    def check_range(self):
        if self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class DivisionPriceInfo(ResponseModel):
    """Settlement reference price by time division"""

    trade_date: NullableStr = ""
    contract_id: NullableStr = ""
    calc_time: NullableStr = ""
    price: NullableFloat = 0.0


class DivisionPriceInfoRequest(RequestModel):
    variety_id: str
    trade_date: str
    trade_type: TradeType = "1"
    lang: str = "zh"

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)


class WarehouseReceiptEntry(ResponseModel):
    variety: NullableStr = ""
    wh_abbr: NullableStr = ""
    delivery_abbr: NullableStr = ""
    last_wbill_qty: NullableInt = 0
    reg_wbill_qty: NullableInt = 0
    logout_wbill_qty: NullableInt = 0
    wbill_qty: NullableInt = 0
    diff: NullableInt = 0


class WarehouseReceipt(ResponseModel):
    """Daily warehouse receipt report"""

    trade_date: NullableStr = ""
    entity_list: list[WarehouseReceiptEntry] = Field(default_factory=list)


class WarehouseReceiptRequest(RequestModel):
    variety_id: str
    trade_date: str

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)
