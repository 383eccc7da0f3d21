"""
Trade Aggregator - 交易聚合

把钱包的已结算交易历史聚合成计分输入：
1. 过滤：本平台 referrer、已结算、到期时间在锦标赛区间内
2. 汇总：权利金、赔付、盈亏、交易笔数
3. 连续交易天数：按 UTC 开仓日期计算
"""

import logging
from typing import Any, Iterable

from src.data.models.trade import SettledTrade, TradeRecordError
from src.data.utils.units import USDC_DECIMALS
from src.engine.models.result import ScoreInputs
from src.engine.tournament.streak import DAY_LENGTH_HOURS, calc_streak_days

logger = logging.getLogger(__name__)


def parse_history(
    history: Iterable[dict[str, Any]],
    default_decimals: int = USDC_DECIMALS,
) -> tuple[list[SettledTrade], int]:
    """解析索引器返回的交易历史

    无法解析的记录记录警告后跳过，不影响其余记录。

    Returns:
        (解析成功的交易, 跳过的记录数)
    """
    trades = []
    skipped = 0
    for record in history:
        try:
            trades.append(SettledTrade.from_dict(record, default_decimals=default_decimals))
        except TradeRecordError as e:
            skipped += 1
            logger.warning(f"Skipping malformed trade record: {e}")
    return trades, skipped


def filter_relevant_trades(
    trades: Iterable[SettledTrade],
    referrer: str,
    start_ts: float,
    end_ts: float,
) -> list[SettledTrade]:
    """筛选计入锦标赛的交易

    条件：
    - referrer 与平台地址一致（不区分大小写）
    - 状态为 settled 且有结算记录
    - 到期（结算）时间在 [start_ts, end_ts] 之内
    """
    referrer = referrer.lower()
    return [
        t
        for t in trades
        if t.referrer.lower() == referrer
        and t.is_settled
        and start_ts <= t.expiry_timestamp <= end_ts
    ]


def aggregate_score_inputs(
    trades: Iterable[SettledTrade],
    day_length_hours: float = DAY_LENGTH_HOURS,
) -> ScoreInputs:
    """聚合已结算交易为计分输入

    Args:
        trades: 已过滤的已结算交易
        day_length_hours: 连续天数计算使用的"天"长度

    Returns:
        ScoreInputs（total_profit = 总赔付 - 总权利金）
    """
    total_premium = 0.0
    total_payout = 0.0
    trade_count = 0
    trade_dates = set()

    for trade in trades:
        total_premium += trade.premium
        total_payout += trade.payout
        trade_count += 1
        trade_dates.add(trade.entry_date)

    return ScoreInputs(
        total_premium=total_premium,
        total_profit=total_payout - total_premium,
        trade_count=trade_count,
        streak_days=calc_streak_days(trade_dates, day_length_hours),
    )
