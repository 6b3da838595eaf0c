"""Settle service - settlement parameters"""

from ..models.settle import SettleParam, SettleParamRequest
from .base import BaseService, Endpoint

PATH_GET_SETTLE_PARAM = "/dceapi/forward/publicweb/tradepara/futAndOptSettle"


class SettleService(BaseService):
    get_settle_param = Endpoint(
        PATH_GET_SETTLE_PARAM,
        list[SettleParam],
        SettleParamRequest,
        doc="Settlement prices, fees and margin rates per contract.",
    )
