"""Consecutive trading-day streaks.

A streak is the number of consecutive calendar days with at least one trade.
Day gaps are measured as ``floor(elapsed / day_length)``; only a gap of
exactly one day extends a streak.
"""

import math
from datetime import date, datetime, timedelta
from typing import Iterable

DAY_LENGTH_HOURS = 24
# Divisor used by the legacy score recalculation job. With 26-hour "days"
# adjacent dates measure 0 apart and dates two days apart measure 1.
LEGACY_DAY_LENGTH_HOURS = 26

TradeDate = date | datetime | str


def to_trade_date(value: TradeDate) -> date:
    """Normalize a date, datetime or ISO string (YYYY-MM-DD...) to a date.

    Raises:
        ValueError: If a string is not an ISO date.
        TypeError: For any other type.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported trade date: {value!r}")


def calc_day_gap(earlier: date, later: date, day_length_hours: float = DAY_LENGTH_HOURS) -> int:
    """Whole "days" between two dates for a given day length.

    Example:
        >>> calc_day_gap(date(2025, 1, 1), date(2025, 1, 2))
        1
        >>> calc_day_gap(date(2025, 1, 1), date(2025, 1, 2), LEGACY_DAY_LENGTH_HOURS)
        0
    """
    if day_length_hours <= 0:
        raise ValueError(f"day_length_hours must be positive, got {day_length_hours}")
    elapsed = (later - earlier).total_seconds()
    return math.floor(elapsed / timedelta(hours=day_length_hours).total_seconds())


def calc_streak_days(
    trade_dates: Iterable[TradeDate],
    day_length_hours: float = DAY_LENGTH_HOURS,
) -> int:
    """Calculate the longest run of consecutive trading days.

    Dates are de-duplicated and sorted. Walking them in order, a gap of
    exactly one day extends the current streak; any other gap resets it to 1.

    Args:
        trade_dates: Trade dates (date, datetime or ISO date strings).
        day_length_hours: Hours per "day" when measuring gaps. Pass
            LEGACY_DAY_LENGTH_HOURS to reproduce the legacy job.

    Returns:
        Longest streak, 0 if there are no trades.

    Example:
        >>> calc_streak_days(["2025-01-01", "2025-01-02", "2025-01-03", "2025-01-05"])
        3
    """
    if day_length_hours <= 0:
        raise ValueError(f"day_length_hours must be positive, got {day_length_hours}")

    sorted_dates = sorted({to_trade_date(d) for d in trade_dates})

    longest = 0
    current = 0
    for i, current_date in enumerate(sorted_dates):
        if i == 0:
            current = 1
        elif calc_day_gap(sorted_dates[i - 1], current_date, day_length_hours) == 1:
            current += 1
        else:
            current = 1
        longest = max(longest, current)

    return longest


def advance_streak(
    current_streak: int,
    last_trade_date: TradeDate | None,
    trade_date: TradeDate,
) -> int:
    """Update a running streak when a new trade is recorded.

    - First trade: 1
    - Next calendar day: streak + 1
    - Same day: unchanged
    - Gap of more than one day: reset to 1

    Example:
        >>> advance_streak(3, "2025-01-02", "2025-01-03")
        4
        >>> advance_streak(3, "2025-01-02", "2025-01-05")
        1
    """
    if last_trade_date is None:
        return 1

    gap = calc_day_gap(to_trade_date(last_trade_date), to_trade_date(trade_date))
    if gap == 1:
        return current_streak + 1
    if gap > 1:
        return 1
    return current_streak
