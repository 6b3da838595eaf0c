"""Delivery statistics and delivery parameter models"""

from typing import Literal

from pydantic import Field, field_validator

from .base import (
    NullableFloat,
    NullableInt,
    NullableStr,
    RequestModel,
    ResponseModel,
    validate_required,
    validate_trade_date,
    validate_trade_month,
)


class DeliveryData(ResponseModel):
    variety_code: NullableStr = ""
    variety_name: NullableStr = ""
    contract_id: NullableStr = ""
    delivery_month: NullableStr = ""
    delivery_date: NullableStr = ""
    delivery_volume: NullableInt = Field(0, alias="deliveryQty")
    delivery_amount: NullableFloat = Field(0.0, alias="deliveryAmt")


class DeliveryDataRequest(RequestModel):
    variety_id: str = "all"
    start_month: str
    end_month: str
    delivery_type: Literal["0", "1", "2"] = "0"

    @field_validator("start_month", "end_month")
    @classmethod
    def check_month(cls, v):
        return validate_trade_month(v)


class DeliveryMatch(ResponseModel):
    contract_id: NullableStr = ""
    match_date: NullableStr = ""
    buy_member_id: NullableStr = ""
    sell_member_id: NullableStr = ""
    delivery_price: NullableFloat = 0.0
    delivery_qty: NullableInt = 0


class DeliveryMatchRequest(RequestModel):
    variety_id: str
    contract_id: str = "all"
    start_month: str
    end_month: str

    @field_validator("start_month", "end_month")
    @classmethod
    def check_month(cls, v):
        return validate_trade_month(v)


class DeliveryCost(ResponseModel):
    variety_id: NullableStr = ""
    variety_name: NullableStr = ""
    delivery_fee: NullableFloat = 0.0
    inspection_fee: NullableFloat = 0.0
    storage_fee: NullableFloat = 0.0


class DeliveryCostRequest(RequestModel):
    """variety_type: 0 physical delivery, 1 average price delivery"""

    variety_id: str
    variety_type: Literal["0", "1"] = "0"
    lang: str = "zh"

    @field_validator("variety_id")
    @classmethod
    def check_variety_id(cls, v):
        return validate_required(v)


class WarehousePremium(ResponseModel):
    variety_id: NullableStr = ""
    variety_name: NullableStr = ""
    wh_name: NullableStr = ""
    wh_type: NullableStr = ""
    avg_agio: NullableFloat = 0.0
    agio: NullableFloat = 0.0


class WarehousePremiumResponse(ResponseModel):
    entity_list: list[WarehousePremium] = Field(default_factory=list)


class WarehousePremiumRequest(RequestModel):
    variety_id: str
    trade_date: str

    @field_validator("variety_id")
    @classmethod
    def check_variety_id(cls, v):
        return validate_required(v)

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)


class TcCongregateDelivery(ResponseModel):
    """Aggregated two-way delivery quotes"""

    variety: NullableStr = ""
    contract_id: NullableStr = ""
    wh_name: NullableStr = ""
    delivery_qty: NullableInt = 0
    delivery_price: NullableFloat = 0.0


class RollDeliverySellerIntention(ResponseModel):
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    wh_name: NullableStr = ""
    intention_qty: NullableInt = 0
    trade_date: NullableStr = ""


class BondedDelivery(ResponseModel):
    variety: NullableStr = ""
    contract_id: NullableStr = ""
    trade_date: NullableStr = ""
    delivery_price: NullableFloat = 0.0
    bonded_price: NullableFloat = 0.0


class TdBondedDelivery(BondedDelivery):
    pass


class VarietyDateRequest(RequestModel):
    """Body shared by the delivery statistics endpoints"""

    variety_id: str
    trade_date: str

    @field_validator("trade_date")
    @classmethod
    def check_trade_date(cls, v):
        return validate_trade_date(v)


class FactorySpotAgio(ResponseModel):
    """Factory spot price against the futures price (fiberboard)"""

    variety: NullableStr = ""
    factory_name: NullableStr = ""
    spot_price: NullableFloat = 0.0
    agio: NullableFloat = 0.0
    trade_date: NullableStr = ""


class PlywoodDeliveryCommodity(ResponseModel):
    variety: NullableStr = ""
    commodity_name: NullableStr = ""
    spec: NullableStr = ""
    factory_name: NullableStr = ""
    brand: NullableStr = ""


class VarietyRequest(RequestModel):
    variety_id: str

    @field_validator("variety_id")
    @classmethod
    def check_variety_id(cls, v):
        return validate_required(v)
