"""Trade date and variety models"""

from pydantic import Field, field_validator

from .base import (
    NullableFloat,
    NullableStr,
    RequestModel,
    ResponseModel,
    validate_trade_month,
)


class TradeDate(ResponseModel):
    """Latest trade date published by the exchange"""

    date: NullableStr = Field("", alias="tradeDate")


class Variety(ResponseModel):
    """Commodity variety"""

    code: NullableStr = Field("", alias="varietyId")
    name: NullableStr = Field("", alias="varietyName")
    english_name: NullableStr = Field("", alias="varietyEnglishName")
    pic: NullableStr = ""
    variety_type: NullableStr = ""


class VarietyMonthYearStat(ResponseModel):
    """Monthly and yearly trading statistics for a variety"""

    variety: NullableStr = ""
    variety_id: NullableStr = ""
    this_month_volumn: NullableFloat = 0.0
    this_year_volumn: NullableFloat = 0.0
    volumn_chain: NullableStr = ""
    volumn_year_on_year: NullableStr = ""
    this_month_turnover: NullableFloat = 0.0
    this_year_turnover: NullableFloat = 0.0
    turnover_chain: NullableStr = ""
    turnover_year_on_year: NullableStr = ""
    this_month_openi: NullableFloat = 0.0
    openi_chain: NullableStr = ""
    openi_year_on_year: NullableStr = ""


class VarietyMonthYearStatRequest(RequestModel):
    trade_month: str
    trade_type: str = "1"
    lang: str = "zh"

    @field_validator("trade_month")
    @classmethod
    def check_trade_month(cls, v):
        return validate_trade_month(v)
