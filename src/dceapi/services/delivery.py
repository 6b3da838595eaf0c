"""Delivery service - delivery statistics and delivery parameters"""

from ..models.delivery import (
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
    WarehousePremiumRequest,
    WarehousePremiumResponse,
)
from .base import BaseService, Endpoint

PATH_GET_DELIVERY_DATA = "/dceapi/forward/publicweb/deliverystat/delivery"
PATH_GET_DELIVERY_MATCH = "/dceapi/forward/publicweb/deliverystat/deliveryMatch"
PATH_GET_DELIVERY_COST = "/dceapi/forward/publicweb/deliverypara/deliveryCosts"
PATH_GET_WAREHOUSE_PREMIUM = "/dceapi/forward/publicweb/deliverypara/floatingAgio"
PATH_GET_TC_CONGREGATE_DELIVERY = (
    "/dceapi/forward/publicweb/DeliveryStatistics/tcCongregateDeliveryQuotes"
)
PATH_GET_ROLL_DELIVERY_SELLER_INTENTION = (
    "/dceapi/forward/publicweb/DeliveryStatistics/rollDeliverySellerIntention"
)
PATH_GET_BONDED_DELIVERY = "/dceapi/forward/publicweb/quotesdata/bondedDelivery"
PATH_GET_TD_BONDED_DELIVERY = "/dceapi/forward/publicweb/quotesdata/tdBondedDelivery"
PATH_GET_FACTORY_SPOT_AGIO = (
    "/dceapi/forward/publicweb/quotesdata/queryFactorySpotAgioQuotes"
)
PATH_GET_PLYWOOD_DELIVERY_COMMODITY = (
    "/dceapi/forward/publicweb/deliverystat/queryPlywoodDeliveryCommodity"
)


class DeliveryService(BaseService):
    get_delivery_data = Endpoint(
        PATH_GET_DELIVERY_DATA,
        list[DeliveryData],
        DeliveryDataRequest,
        doc="Delivery volumes and amounts over a month range.",
    )
    get_delivery_match = Endpoint(
        PATH_GET_DELIVERY_MATCH,
        list[DeliveryMatch],
        DeliveryMatchRequest,
        doc="Delivery matching results.",
    )
    get_delivery_cost = Endpoint(
        PATH_GET_DELIVERY_COST,
        list[DeliveryCost],
        DeliveryCostRequest,
        doc="Delivery, inspection and storage fees; variety_id 'all' for every variety.",
    )
    get_warehouse_premium = Endpoint(
        PATH_GET_WAREHOUSE_PREMIUM,
        WarehousePremiumResponse,
        WarehousePremiumRequest,
        doc="Floating warehouse premiums for a variety on a trade date.",
    )
    get_tc_congregate_delivery = Endpoint(
        PATH_GET_TC_CONGREGATE_DELIVERY,
        list[TcCongregateDelivery],
        VarietyDateRequest,
        doc="Aggregated two-way delivery quotes.",
    )
    get_roll_delivery_seller_intention = Endpoint(
        PATH_GET_ROLL_DELIVERY_SELLER_INTENTION,
        list[RollDeliverySellerIntention],
        VarietyDateRequest,
        doc="Seller intentions for rolling delivery contracts.",
    )
    get_bonded_delivery = Endpoint(
        PATH_GET_BONDED_DELIVERY,
        list[BondedDelivery],
        VarietyDateRequest,
        doc="Bonded warehouse delivery settlement prices.",
    )
    get_td_bonded_delivery = Endpoint(
        PATH_GET_TD_BONDED_DELIVERY,
        list[TdBondedDelivery],
        VarietyDateRequest,
        doc="Two-day bonded delivery settlement prices.",
    )
    get_factory_spot_agio = Endpoint(
        PATH_GET_FACTORY_SPOT_AGIO,
        list[FactorySpotAgio],
        VarietyRequest,
        doc="Factory spot price against the futures price.",
    )
    get_plywood_delivery_commodity = Endpoint(
        PATH_GET_PLYWOOD_DELIVERY_COMMODITY,
        list[PlywoodDeliveryCommodity],
        VarietyRequest,
        doc="Plywood delivery commodity specifications.",
    )
