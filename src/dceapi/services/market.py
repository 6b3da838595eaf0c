"""Market service - quotes and market statistics"""

from ..models.market import (
    ContractMonthMaxOpeni,
    ContractMonthMaxPrice,
    ContractMonthMaxRequest,
    ContractMonthMaxTurnover,
    ContractMonthMaxVolume,
    DivisionPriceInfo,
    DivisionPriceInfoRequest,
    Quote,
    QuotesRequest,
    RiseFallEvent,
    RiseFallEventRequest,
    WarehouseReceipt,
    WarehouseReceiptRequest,
)
from .base import BaseService, Endpoint

PATH_GET_NIGHT_QUOTES = "/dceapi/forward/publicweb/dailystat/tiNightQuotes"
PATH_GET_DAY_QUOTES = "/dceapi/forward/publicweb/dailystat/dayQuotes"
PATH_GET_WEEK_QUOTES = "/dceapi/forward/publicweb/dailystat/weekQuotes"
PATH_GET_MONTH_QUOTES = "/dceapi/forward/publicweb/dailystat/monthQuotes"
PATH_GET_CONTRACT_MONTH_MAX = "/dceapi/forward/publicweb/phasestat/contractMonthMax"
PATH_GET_RISE_FALL_EVENT = "/dceapi/forward/publicweb/phasestat/riseFallEvent"
PATH_GET_DIVISION_PRICE_INFO = "/dceapi/forward/publicweb/dailystat/divisionPriceInfo"
PATH_GET_WAREHOUSE_RECEIPT = "/dceapi/forward/publicweb/dailystat/wbillWeeklyQuotes"


class MarketService(BaseService):
    get_night_quotes = Endpoint(
        PATH_GET_NIGHT_QUOTES,
        list[Quote],
        QuotesRequest,
        doc="Night session quotes; pass variety rather than variety_id.",
    )
    get_day_quotes = Endpoint(
        PATH_GET_DAY_QUOTES, list[Quote], QuotesRequest, doc="Day session quotes."
    )
    get_week_quotes = Endpoint(
        PATH_GET_WEEK_QUOTES, list[Quote], QuotesRequest, doc="Weekly quotes."
    )
    get_month_quotes = Endpoint(
        PATH_GET_MONTH_QUOTES, list[Quote], QuotesRequest, doc="Monthly quotes."
    )

    # One path, statistic chosen by statContent
    get_contract_month_max_volume = Endpoint(
        PATH_GET_CONTRACT_MONTH_MAX,
        list[ContractMonthMaxVolume],
        ContractMonthMaxRequest,
        fixed={"stat_content": "0"},
        doc="Monthly volume extremes per contract.",
    )
    get_contract_month_max_turnover = Endpoint(
        PATH_GET_CONTRACT_MONTH_MAX,
        list[ContractMonthMaxTurnover],
        ContractMonthMaxRequest,
        fixed={"stat_content": "1"},
        doc="Monthly turnover extremes per contract.",
    )
    get_contract_month_max_openi = Endpoint(
        PATH_GET_CONTRACT_MONTH_MAX,
        list[ContractMonthMaxOpeni],
        ContractMonthMaxRequest,
        fixed={"stat_content": "2"},
        doc="Monthly open interest extremes per contract.",
    )
    get_contract_month_max_price = Endpoint(
        PATH_GET_CONTRACT_MONTH_MAX,
        list[ContractMonthMaxPrice],
        ContractMonthMaxRequest,
        fixed={"stat_content": "3"},
        doc="Monthly price extremes per contract.",
    )

    get_rise_fall_event = Endpoint(
        PATH_GET_RISE_FALL_EVENT,
        list[RiseFallEvent],
        RiseFallEventRequest,
        doc="Price limit occurrences in a date range.",
    )
    get_division_price_info = Endpoint(
        PATH_GET_DIVISION_PRICE_INFO,
        list[DivisionPriceInfo],
        DivisionPriceInfoRequest,
        doc="Settlement reference price by time division.",
    )
    get_warehouse_receipt = Endpoint(
        PATH_GET_WAREHOUSE_RECEIPT,
        WarehouseReceipt,
        WarehouseReceiptRequest,
        doc="Warehouse receipt daily report.",
    )
