"""Service façades, one per endpoint group"""

from .base import BaseService, Endpoint
from .common import CommonService
from .delivery import DeliveryService
from .market import MarketService
from .member import MemberService
from .news import NewsService
from .settle import SettleService
from .trade import TradeService

__all__ = [
    "BaseService",
    "CommonService",
    "DeliveryService",
    "Endpoint",
    "MarketService",
    "MemberService",
    "NewsService",
    "SettleService",
    "TradeService",
]
