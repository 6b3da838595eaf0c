"""Member service - member rankings"""

from ..models.member import (
    DailyRanking,
    DailyRankingRequest,
    PhaseRanking,
    PhaseRankingRequest,
)
from .base import BaseService, Endpoint

PATH_GET_DAILY_RANKING = "/dceapi/forward/publicweb/dailystat/memberDealPosi"
PATH_GET_PHASE_RANKING = "/dceapi/forward/publicweb/phasestat/memberDealCh"


class MemberService(BaseService):
    get_daily_ranking = Endpoint(
        PATH_GET_DAILY_RANKING,
        DailyRanking,
        DailyRankingRequest,
        doc="Volume, buy and sell position rankings for a contract on one day.",
    )
    get_phase_ranking = Endpoint(
        PATH_GET_PHASE_RANKING,
        list[PhaseRanking],
        PhaseRankingRequest,
        doc="Member rankings over a month range.",
    )
