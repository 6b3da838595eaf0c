"""Trade service - trading parameters and contract information"""

from typing import Any

from ..models.trade import (
    ArbitrageContract,
    ContractInfo,
    ContractInfoRequest,
    DayTradeParamRequest,
    LangRequest,
    MainSeriesInfo,
    MainSeriesInfoRequest,
    MarginArbiPerfPara,
    MarginArbiPerfParaRequest,
    MonthTradeParamRequest,
    NewContractInfo,
    NewContractInfoRequest,
    TradeParam,
    TradingParam,
)
from .base import BaseService, Endpoint

PATH_GET_DAY_TRADE_PARAM = "/dceapi/forward/publicweb/tradepara/dayTradPara"
PATH_GET_MONTH_TRADE_PARAM = "/dceapi/forward/publicweb/tradepara/monthTradPara"
PATH_GET_CONTRACT_INFO = "/dceapi/forward/publicweb/tradepara/contractInfo"
PATH_GET_ARBITRAGE_CONTRACT = "/dceapi/forward/publicweb/tradepara/arbitrageContract"
PATH_GET_TRADING_PARAM = "/dceapi/forward/publicweb/tradepara/tradingParam"
PATH_GET_MARGIN_ARBI_PERF_PARA = "/dceapi/forward/publicweb/tradepara/marginArbiPerfPara"
PATH_GET_NEW_CONTRACT_INFO = "/dceapi/forward/publicweb/tradepara/newContractInfo"
PATH_GET_MAIN_SERIES_INFO = "/dceapi/forward/publicweb/tradepara/mainSeriesInfo"


class TradeService(BaseService):
    get_day_trade_param = Endpoint(
        PATH_GET_DAY_TRADE_PARAM,
        list[TradeParam],
        DayTradeParamRequest,
        doc="Daily margin rates and price limits for a variety.",
    )
    get_month_trade_param = Endpoint(
        PATH_GET_MONTH_TRADE_PARAM,
        dict[str, Any],
        MonthTradeParamRequest,
        doc="Monthly trading parameters, returned as the raw mapping.",
    )
    get_contract_info = Endpoint(
        PATH_GET_CONTRACT_INFO,
        list[ContractInfo],
        ContractInfoRequest,
        doc="Contract details: trading dates, unit, tick.",
    )
    get_arbitrage_contract = Endpoint(
        PATH_GET_ARBITRAGE_CONTRACT,
        list[ArbitrageContract],
        LangRequest,
        doc="Spread and arbitrage contracts; lang defaults to zh.",
    )
    get_trading_param = Endpoint(
        PATH_GET_TRADING_PARAM,
        list[TradingParam],
        LangRequest,
        doc="Margins, fees and limits for all varieties; lang defaults to zh.",
    )
    get_margin_arbi_perf_para = Endpoint(
        PATH_GET_MARGIN_ARBI_PERF_PARA,
        list[MarginArbiPerfPara],
        MarginArbiPerfParaRequest,
        doc="Margin and fee parameters for arbitrage strategies.",
    )
    get_new_contract_info = Endpoint(
        PATH_GET_NEW_CONTRACT_INFO,
        list[NewContractInfo],
        NewContractInfoRequest,
        doc="Recently listed futures and options contracts.",
    )
    get_main_series_info = Endpoint(
        PATH_GET_MAIN_SERIES_INFO,
        list[MainSeriesInfo],
        MainSeriesInfoRequest,
        doc="Contracts designated for market maker continuous quoting.",
    )
