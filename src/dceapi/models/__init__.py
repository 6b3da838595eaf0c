"""Request and response models"""

from .common import TradeDate, Variety, VarietyMonthYearStat, VarietyMonthYearStatRequest
from .delivery import (
    BondedDelivery,
    DeliveryCost,
    DeliveryCostRequest,
    DeliveryData,
    DeliveryDataRequest,
    DeliveryMatch,
    DeliveryMatchRequest,
    FactorySpotAgio,
    PlywoodDeliveryCommodity,
    RollDeliverySellerIntention,
    TcCongregateDelivery,
    TdBondedDelivery,
    VarietyDateRequest,
    VarietyRequest,
    WarehousePremium,
    WarehousePremiumRequest,
    WarehousePremiumResponse,
)
from .envelope import Envelope, TokenPayload
from .market import (
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
    WarehouseReceiptEntry,
    WarehouseReceiptRequest,
)
from .member import (
    DailyRanking,
    DailyRankingRequest,
    PhaseRanking,
    PhaseRankingRequest,
    Ranking,
)
from .news import (
    ARTICLE_COLUMNS,
    Article,
    ArticleByPageRequest,
    ArticleDetail,
    ArticleDetailRequest,
    ArticlePage,
    is_valid_column_id,
)
from .settle import SettleParam, SettleParamRequest
from .trade import (
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

__all__ = [
    "ARTICLE_COLUMNS",
    "ArbitrageContract",
    "Article",
    "ArticleByPageRequest",
    "ArticleDetail",
    "ArticleDetailRequest",
    "ArticlePage",
    "BondedDelivery",
    "ContractInfo",
    "ContractInfoRequest",
    "ContractMonthMaxOpeni",
    "ContractMonthMaxPrice",
    "ContractMonthMaxRequest",
    "ContractMonthMaxTurnover",
    "ContractMonthMaxVolume",
    "DailyRanking",
    "DailyRankingRequest",
    "DayTradeParamRequest",
    "DeliveryCost",
    "DeliveryCostRequest",
    "DeliveryData",
    "DeliveryDataRequest",
    "DeliveryMatch",
    "DeliveryMatchRequest",
    "DivisionPriceInfo",
    "DivisionPriceInfoRequest",
    "Envelope",
    "FactorySpotAgio",
    "LangRequest",
    "MainSeriesInfo",
    "MainSeriesInfoRequest",
    "MarginArbiPerfPara",
    "MarginArbiPerfParaRequest",
    "MonthTradeParamRequest",
    "NewContractInfo",
    "NewContractInfoRequest",
    "PhaseRanking",
    "PhaseRankingRequest",
    "PlywoodDeliveryCommodity",
    "Quote",
    "QuotesRequest",
    "Ranking",
    "RiseFallEvent",
    "RiseFallEventRequest",
    "RollDeliverySellerIntention",
    "SettleParam",
    "SettleParamRequest",
    "TcCongregateDelivery",
    "TdBondedDelivery",
    "TokenPayload",
    "TradeDate",
    "TradeParam",
    "TradingParam",
    "Variety",
    "VarietyDateRequest",
    "VarietyMonthYearStat",
    "VarietyMonthYearStatRequest",
    "VarietyRequest",
    "WarehousePremium",
    "WarehousePremiumRequest",
    "WarehousePremiumResponse",
    "WarehouseReceipt",
    "WarehouseReceiptEntry",
    "WarehouseReceiptRequest",
    "is_valid_column_id",
]
