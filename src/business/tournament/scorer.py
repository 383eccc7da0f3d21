"""
Tournament Scorer - 锦标赛计分

对每个参与者：解析结算历史 → 过滤 → 聚合 → 计算得分，然后统一排名。

使用方式：
    scorer = TournamentScorer(start, end, config)
    leaderboard = rank_participants(scorer.score_all(histories))

历史数据的获取（索引器 HTTP 请求）和结果持久化不在本模块范围内。
"""

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional

from src.business.config.tournament_config import TournamentConfig
from src.business.tournament.aggregator import (
    aggregate_score_inputs,
    filter_relevant_trades,
    parse_history,
)
from src.business.tournament.models import ParticipantScore
from src.engine.tournament.score import calc_tournament_score

logger = logging.getLogger(__name__)

Timestamp = datetime | int | float


def _to_unix(value: Timestamp) -> float:
    """datetime 或 unix 秒 → unix 秒"""
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


class TournamentScorer:
    """锦标赛计分器

    Attributes:
        start_ts: 锦标赛开始时间 (unix 秒)
        end_ts: 锦标赛结束时间 (unix 秒)
        config: 计分配置
    """

    def __init__(
        self,
        start: Timestamp,
        end: Timestamp,
        config: Optional[TournamentConfig] = None,
    ) -> None:
        """初始化计分器

        Args:
            start: 锦标赛开始时间（datetime 或 unix 秒）
            end: 锦标赛结束时间
            config: 计分配置，如果为 None 则加载默认配置

        Raises:
            ValueError: 结束时间早于开始时间
        """
        self.start_ts = _to_unix(start)
        self.end_ts = _to_unix(end)
        if self.end_ts < self.start_ts:
            raise ValueError(f"Tournament ends before it starts: {start} > {end}")
        self.config = config or TournamentConfig.load()

    def score_participant(
        self,
        wallet: str,
        history: Iterable[dict[str, Any]],
    ) -> ParticipantScore:
        """计算单个参与者得分

        Args:
            wallet: 钱包地址
            history: 索引器返回的交易历史（JSON 对象列表）

        Returns:
            ParticipantScore（rank 未填充）
        """
        trades, skipped = parse_history(history, self.config.collateral_decimals)
        relevant = filter_relevant_trades(
            trades, self.config.referrer_address, self.start_ts, self.end_ts
        )
        inputs = aggregate_score_inputs(relevant, self.config.day_length_hours)
        score = calc_tournament_score(
            inputs.total_premium,
            inputs.total_profit,
            inputs.trade_count,
            inputs.streak_days,
        )

        logger.debug(
            f"{wallet}: {inputs.trade_count}/{len(trades)} trades counted, "
            f"premium={inputs.total_premium:.2f}, profit={inputs.total_profit:.2f}, "
            f"streak={inputs.streak_days}, score={score:.2f}"
        )

        return ParticipantScore(
            wallet=wallet.lower(),
            inputs=inputs,
            score=score,
            skipped_records=skipped,
        )

    def score_all(
        self,
        histories: Mapping[str, Iterable[dict[str, Any]]],
    ) -> list[ParticipantScore]:
        """计算所有参与者得分

        单个参与者失败时记录错误并跳过，不影响其他参与者。
        """
        results = []
        for wallet, history in histories.items():
            try:
                results.append(self.score_participant(wallet, history))
            except (TypeError, ValueError, AttributeError) as e:
                logger.error(f"Failed to process {wallet}: {e}")

        logger.info(f"Scored {len(results)}/{len(histories)} participants")
        return results


def rank_participants(scores: Iterable[ParticipantScore]) -> list[ParticipantScore]:
    """按得分降序排名（同分保持输入顺序），rank 从 1 开始"""
    ranked = sorted(scores, key=lambda s: s.score, reverse=True)
    for i, participant in enumerate(ranked, start=1):
        participant.rank = i
    return ranked
