"""Tournament scoring calculations.

- score: weighted composite score and its normalized components
- streak: consecutive trading-day streaks
"""

from src.engine.tournament.score import (
    PREMIUM_PAID_WEIGHT,
    PROFIT_RATIO_WEIGHT,
    SCORING_WEIGHTS,
    STREAK_DAYS_WEIGHT,
    TRADE_COUNT_WEIGHT,
    calc_score_breakdown,
    calc_tournament_score,
)
from src.engine.tournament.streak import (
    DAY_LENGTH_HOURS,
    LEGACY_DAY_LENGTH_HOURS,
    advance_streak,
    calc_day_gap,
    calc_streak_days,
    to_trade_date,
)

__all__ = [
    # Score
    "PREMIUM_PAID_WEIGHT",
    "PROFIT_RATIO_WEIGHT",
    "TRADE_COUNT_WEIGHT",
    "STREAK_DAYS_WEIGHT",
    "SCORING_WEIGHTS",
    "calc_score_breakdown",
    "calc_tournament_score",
    # Streak
    "DAY_LENGTH_HOURS",
    "LEGACY_DAY_LENGTH_HOURS",
    "advance_streak",
    "calc_day_gap",
    "calc_streak_days",
    "to_trade_date",
]
