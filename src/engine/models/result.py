"""Result models for payoff previews and tournament scoring."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class PayoffPoint:
    """One sample of the payoff chart.

    Attributes:
        price: Hypothetical settlement price.
        payout: Gross payout at that price.
        profit: Payout minus the investment.
        profit_percent: Profit as a percentage of the investment (ROI).
    """

    price: float
    payout: float
    profit: float
    profit_percent: float


@dataclass
class ProfitScenario:
    """One row of the profit scenario table.

    Attributes:
        price: Settlement price the row is evaluated at.
        price_delta: Short description of the price (e.g. "Strike +2%").
        profit: Net profit at that price.
        profit_percent: ROI in percent.
        is_profit: Whether the row is a winning scenario.
        label: Row label ("Max Loss", "Breakeven", "+3% Move", ...).
    """

    price: float
    price_delta: str
    profit: float
    profit_percent: float
    is_profit: bool
    label: str


@dataclass
class ProfitTarget:
    """Settlement price where a structure pays the most, with a display label."""

    price: float
    label: str


@dataclass
class ScoreInputs:
    """Aggregated tournament inputs for one participant.

    Attributes:
        total_premium: Premium paid across settled trades.
        total_profit: Total payout minus total premium (may be negative).
        trade_count: Number of settled trades.
        streak_days: Longest run of consecutive trading days.
    """

    total_premium: float = 0.0
    total_profit: float = 0.0
    trade_count: int = 0
    streak_days: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ScoreBreakdown:
    """Normalized sub-scores (each 0-100) and the weighted final score."""

    normalized_premium: float
    normalized_profit: float
    normalized_trades: float
    normalized_streak: float
    score: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)
