"""Tournament score calculation.

Score = premium (40%) + profit ratio (30%) + trade count (20%) + streak (10%),
each sub-score normalized to 0-100 before weighting.
"""

import math

from src.engine.models.result import ScoreBreakdown

PREMIUM_PAID_WEIGHT = 0.4
PROFIT_RATIO_WEIGHT = 0.3
TRADE_COUNT_WEIGHT = 0.2
STREAK_DAYS_WEIGHT = 0.1

SCORING_WEIGHTS = {
    "premium_paid": PREMIUM_PAID_WEIGHT,
    "profit_ratio": PROFIT_RATIO_WEIGHT,
    "trade_count": TRADE_COUNT_WEIGHT,
    "streak_days": STREAK_DAYS_WEIGHT,
}

MAX_SUB_SCORE = 100.0
FULL_PREMIUM = 1000  # premium (USD) that earns the full 100 points


def normalize_premium(total_premium: float) -> float:
    """Linear up to $1000 of premium (100 points), capped."""
    return min(max(total_premium, 0.0) / FULL_PREMIUM * MAX_SUB_SCORE, MAX_SUB_SCORE)


def normalize_profit(total_profit: float, total_premium: float) -> float:
    """Profit ratio in percent, clamped to [0, 100].

    A losing participant scores 0 on this axis, never below.
    """
    profit_ratio = total_profit / total_premium if total_premium > 0 else 0.0
    return max(0.0, min(profit_ratio * 100, MAX_SUB_SCORE))


def normalize_trades(trade_count: int) -> float:
    """sqrt(trades) * 5, capped at 100 (diminishing returns)."""
    return min(math.sqrt(max(trade_count, 0)) * 5, MAX_SUB_SCORE)


def normalize_streak(streak_days: int) -> float:
    """sqrt(streak) * 10, capped at 100 (diminishing returns)."""
    return min(math.sqrt(max(streak_days, 0)) * 10, MAX_SUB_SCORE)


def calc_score_breakdown(
    total_premium: float,
    total_profit: float,
    trade_count: int,
    streak_days: int,
) -> ScoreBreakdown:
    """Calculate every normalized sub-score and the final score.

    Args:
        total_premium: Premium paid across settled trades (>= 0).
        total_profit: Payout minus premium (may be negative).
        trade_count: Number of settled trades (>= 0).
        streak_days: Longest consecutive-day trading streak (>= 0).

    Returns:
        ScoreBreakdown with the final score rounded to 2 decimals.
    """
    premium = normalize_premium(total_premium)
    profit = normalize_profit(total_profit, total_premium)
    trades = normalize_trades(trade_count)
    streak = normalize_streak(streak_days)

    score = (
        premium * PREMIUM_PAID_WEIGHT
        + profit * PROFIT_RATIO_WEIGHT
        + trades * TRADE_COUNT_WEIGHT
        + streak * STREAK_DAYS_WEIGHT
    )

    return ScoreBreakdown(
        normalized_premium=premium,
        normalized_profit=profit,
        normalized_trades=trades,
        normalized_streak=streak,
        score=round(score, 2),
    )


def calc_tournament_score(
    total_premium: float,
    total_profit: float,
    trade_count: int,
    streak_days: int,
) -> float:
    """Calculate a participant's tournament score (0-100).

    Example:
        >>> calc_tournament_score(1000, 500, 16, 9)
        62.0
    """
    return calc_score_breakdown(total_premium, total_profit, trade_count, streak_days).score
