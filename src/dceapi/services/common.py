"""Common service - trade dates and varieties"""

from ..models.common import (
    TradeDate,
    Variety,
    VarietyMonthYearStat,
    VarietyMonthYearStatRequest,
)
from .base import BaseService, Endpoint

PATH_GET_CURR_TRADE_DATE = "/dceapi/forward/publicweb/maxTradeDate"
PATH_GET_VARIETY_LIST = "/dceapi/forward/publicweb/variety"
PATH_GET_VARIETY_MONTH_YEAR_STAT = (
    "/dceapi/forward/publicweb/phasestat/varietyMonthYearStat"
)


class CommonService(BaseService):
    get_curr_trade_date = Endpoint(
        PATH_GET_CURR_TRADE_DATE,
        TradeDate,
        method="GET",
        doc="Current (latest) trade date.",
    )
    get_variety_list = Endpoint(
        PATH_GET_VARIETY_LIST,
        list[Variety],
        method="GET",
        doc="Listed varieties; RequestOptions.trade_type selects futures or options.",
    )
    get_variety_month_year_stat = Endpoint(
        PATH_GET_VARIETY_MONTH_YEAR_STAT,
        list[VarietyMonthYearStat],
        VarietyMonthYearStatRequest,
        doc="Monthly and yearly statistics per variety.",
    )
