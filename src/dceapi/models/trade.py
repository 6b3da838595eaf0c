"""Trading parameter and contract models"""

from pydantic import Field

from .base import (
    NullableFloat,
    NullableInt,
    NullableStr,
    RequestModel,
    ResponseModel,
    TradeType,
)


class TradeParam(ResponseModel):
    """Daily margin and price limit parameters for a contract"""

    contract_id: NullableStr = ""
    spec_buy_rate: NullableFloat = 0.0
    spec_buy: NullableFloat = 0.0
    hedge_buy_rate: NullableFloat = 0.0
    hedge_buy: NullableFloat = 0.0
    rise_limit_rate: NullableFloat = 0.0
    rise_limit: NullableFloat = 0.0
    fall_limit: NullableFloat = 0.0
    trade_date: NullableStr = ""


class DayTradeParamRequest(RequestModel):
    variety_id: str
    trade_type: TradeType = "1"
    lang: str = "zh"


class MonthTradeParamRequest(RequestModel):
    pass


class ContractInfo(ResponseModel):
    contract_id: NullableStr = ""
    variety: NullableStr = ""
    variety_order: NullableStr = ""
    unit: NullableInt = 0
    tick: NullableStr = ""
    start_trade_date: NullableStr = ""
    end_trade_date: NullableStr = ""
    end_delivery_date: NullableStr = ""
    trade_type: NullableStr = ""


class ContractInfoRequest(RequestModel):
    variety_id: str
    trade_type: TradeType = "1"
    lang: str = "zh"


class ArbitrageContract(ResponseModel):
    arbi_name: NullableStr = ""
    variety_name: NullableStr = ""
    arbi_contract_id: NullableStr = ""
    max_hand: NullableInt = 0
    tick: NullableFloat = 0.0


class LangRequest(RequestModel):
    """Body for endpoints that only take a language"""

    lang: str = "zh"


class TradingParam(ResponseModel):
    """Per-variety trading parameters (margins, fees, limits)"""

    variety_id: NullableStr = ""
    variety_name: NullableStr = ""
    trading_margin_rate_speculation: NullableStr = ""
    trading_margin_rate_hedging: NullableStr = ""
    settlement_margin_rate_speculation: NullableStr = ""
    settlement_margin_rate_hedging: NullableStr = ""
    price_limit_existing_contract: NullableStr = ""
    price_limit_new_contract: NullableStr = ""
    trading_limit: NullableStr = ""
    open_fee: NullableStr = ""
    offset_fee: NullableStr = ""
    short_open_fee: NullableStr = ""
    short_offset_fee: NullableStr = ""


class MarginArbiPerfPara(ResponseModel):
    """Margin and fee parameters for arbitrage strategies"""

    arbi_name: NullableStr = ""
    variety_name: NullableStr = ""
    arbi_contract_id: NullableStr = ""
    perf_sh_margin: NullableFloat = 0.0
    perf_sp_margin: NullableFloat = 0.0
    perf_sh_fee: NullableFloat = 0.0
    perf_sp_fee: NullableFloat = 0.0


class MarginArbiPerfParaRequest(RequestModel):
    variety_id: str = "all"
    lang: str = "zh"


class NewContractInfo(ResponseModel):
    trade_date: NullableStr = ""
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    trade_type: NullableStr = ""
    start_trade_date: NullableStr = ""
    end_trade_date: NullableStr = ""
    ref_price: NullableFloat = 0.0


class NewContractInfoRequest(RequestModel):
    variety_id: str = "all"
    trade_type: TradeType = "1"
    contract_month: str | None = None
    lang: str = "zh"


class MainSeriesInfo(ResponseModel):
    """Contracts designated for market maker continuous quoting"""

    trade_date: NullableStr = ""
    variety: NullableStr = ""
    series_id: NullableStr = ""
    contract_id: NullableStr = ""


class MainSeriesInfoRequest(RequestModel):
    variety_id: str = "all"
    trade_type: TradeType = "1"
    trade_date: str | None = Field(None, pattern=r"^\d{8}$")
    lang: str = "zh"
