"""
Tournament - 锦标赛计分

- aggregator: 交易历史解析、过滤、聚合
- scorer: 参与者计分与排名
"""

from src.business.tournament.aggregator import (
    aggregate_score_inputs,
    filter_relevant_trades,
    parse_history,
)
from src.business.tournament.models import ParticipantScore
from src.business.tournament.scorer import TournamentScorer, rank_participants

__all__ = [
    "ParticipantScore",
    "TournamentScorer",
    "aggregate_score_inputs",
    "filter_relevant_trades",
    "parse_history",
    "rank_participants",
]
