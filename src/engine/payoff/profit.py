"""Profit, breakeven and trade-preview calculations built on the payout.

Net profit is always ``payout - investment``; the investment buys
``investment / price_per_contract`` contracts.
"""

from typing import Sequence

import numpy as np
from scipy.optimize import brentq

from src.engine.models.result import PayoffPoint, ProfitScenario, ProfitTarget
from src.engine.payoff.payout import calc_payout_at_price, calc_payout_curve

DEFAULT_SCENARIO_OFFSETS = (0.01, 0.02, 0.03, 0.04, 0.05)
DEFAULT_CHART_RANGE = 0.2  # +/-20% around the strike
DEFAULT_CHART_STEPS = 100
DEFAULT_VANILLA_TARGET_MOVE = 0.05


def calc_num_contracts(investment: float, price_per_contract: float) -> float:
    """Contracts bought with ``investment`` at ``price_per_contract``.

    Returns:
        investment / price_per_contract, or 0 if the price is not positive.

    Example:
        >>> calc_num_contracts(100, 25)
        4.0
    """
    if price_per_contract is None or price_per_contract <= 0:
        return 0.0
    return investment / price_per_contract


def calc_profit_percent(profit: float, investment: float) -> float:
    """ROI in percent, 0 when nothing was invested."""
    if investment <= 0:
        return 0.0
    return profit / investment * 100


def calc_net_profit(
    strikes: Sequence[float],
    is_call: bool,
    contracts: float,
    settlement_price: float,
    investment: float,
) -> float:
    """Net profit at settlement: payout minus the premium paid."""
    return calc_payout_at_price(strikes, is_call, contracts, settlement_price) - investment


def calc_vanilla_breakeven(strike: float, premium_per_contract: float, is_call: bool) -> float:
    """Closed-form breakeven for a single-strike option.

    Formula: K + premium (call), K - premium (put).
    Only valid for vanilla options; use find_breakevens for other structures.

    Example:
        >>> calc_vanilla_breakeven(100, 4, True)
        104
        >>> calc_vanilla_breakeven(100, 4, False)
        96
    """
    if is_call:
        return strike + premium_per_contract
    return strike - premium_per_contract


def find_breakevens(
    strikes: Sequence[float],
    is_call: bool,
    contracts: float,
    investment: float,
    low: float,
    high: float,
    samples: int = 400,
) -> list[float]:
    """Find every settlement price in [low, high] where net profit is zero.

    Net profit is sampled on an evenly spaced grid; each sign change is
    refined with Brent's method. Grid points that hit zero exactly are
    reported as-is (once per run of zeros).

    Args:
        strikes: Strike prices in ascending order.
        is_call: Call or put.
        contracts: Number of contracts.
        investment: Premium paid for the position.
        low: Lower end of the price range.
        high: Upper end of the price range.
        samples: Number of grid points.

    Returns:
        Sorted breakeven prices. Empty if nothing was invested or the
        position never crosses zero inside the range.

    Raises:
        ValueError: If the range is empty or fewer than 2 samples are requested.
    """
    if high <= low:
        raise ValueError(f"Invalid price range: [{low}, {high}]")
    if samples < 2:
        raise ValueError(f"samples must be >= 2, got {samples}")
    if investment <= 0:
        return []

    strikes = list(strikes)
    prices = np.linspace(low, high, samples)
    profits = calc_payout_curve(strikes, is_call, contracts, prices) - investment

    def objective(price: float) -> float:
        return calc_net_profit(strikes, is_call, contracts, price, investment)

    roots: list[float] = []
    for i, profit in enumerate(profits):
        if profit == 0 and (i == 0 or profits[i - 1] != 0):
            roots.append(float(prices[i]))
    for i in range(len(prices) - 1):
        if profits[i] * profits[i + 1] < 0:
            roots.append(float(brentq(objective, prices[i], prices[i + 1], xtol=1e-9)))

    return sorted(roots)


def calc_optimal_profit_price(
    strikes: Sequence[float],
    is_call: bool,
    spot_price: float,
    vanilla_move: float = DEFAULT_VANILLA_TARGET_MOVE,
) -> ProfitTarget:
    """Settlement price where the structure pays best, for the "profit if" hint.

    - Vanilla: ``vanilla_move`` beyond the strike (no bounded maximum)
    - Spread: upper strike for calls, lower strike for puts
    - Butterfly: middle strike
    - Condor: midpoint of the plateau (K2 + K3) / 2
    - Otherwise: current spot price

    Example:
        >>> calc_optimal_profit_price([90, 100, 110], True, 95)
        ProfitTarget(price=100.0, label='at $100 (sweet spot)')
    """
    k = [float(s) for s in strikes]

    if len(k) == 1:
        direction = "up" if is_call else "down"
        price = k[0] * (1 + vanilla_move) if is_call else k[0] * (1 - vanilla_move)
        return ProfitTarget(price=price, label=f"at {vanilla_move * 100:.0f}% {direction}")

    if len(k) == 2:
        price = k[1] if is_call else k[0]
        return ProfitTarget(price=price, label=f"at ${_format_price(price)}")

    if len(k) == 3:
        return ProfitTarget(price=k[1], label=f"at ${_format_price(k[1])} (sweet spot)")

    if len(k) == 4:
        sweet_spot = (k[1] + k[2]) / 2
        return ProfitTarget(price=sweet_spot, label=f"at ${_format_price(sweet_spot)} (sweet spot)")

    return ProfitTarget(price=spot_price, label="at current price")


def build_payoff_curve(
    strikes: Sequence[float],
    is_call: bool,
    contracts: float,
    investment: float,
    center_price: float,
    range_pct: float = DEFAULT_CHART_RANGE,
    steps: int = DEFAULT_CHART_STEPS,
) -> list[PayoffPoint]:
    """Sample payout and profit across ``center_price * (1 +/- range_pct)``.

    Returns:
        ``steps + 1`` evenly spaced points, empty if the center price or
        step count is not positive.
    """
    if center_price <= 0 or steps <= 0:
        return []

    prices = np.linspace(center_price * (1 - range_pct), center_price * (1 + range_pct), steps + 1)
    payouts = calc_payout_curve(strikes, is_call, contracts, prices)

    points = []
    for price, payout in zip(prices, payouts):
        profit = float(payout) - investment
        points.append(
            PayoffPoint(
                price=float(price),
                payout=float(payout),
                profit=profit,
                profit_percent=calc_profit_percent(profit, investment),
            )
        )
    return points


def build_profit_scenarios(
    strikes: Sequence[float],
    is_call: bool,
    investment: float,
    price_per_contract: float,
    strike: float | None = None,
    offsets: Sequence[float] = DEFAULT_SCENARIO_OFFSETS,
) -> list[ProfitScenario]:
    """Build the profit scenario table for a prospective trade.

    Rows:
        1. "Max Loss" at the strike
        2. "Breakeven" at strike +/- premium per contract
        3. One "+N% Move" (call) or "-N% Move" (put) row per offset

    Args:
        strikes: Strike prices in ascending order.
        is_call: Call or put.
        investment: Amount the user is about to spend.
        price_per_contract: Quoted premium per contract.
        strike: Reference strike, defaults to the first strike.
        offsets: Strike moves as decimals (0.01 = 1%).

    Returns:
        Scenario rows, empty if investment or price per contract is not positive.
    """
    strikes = list(strikes)
    if not strikes or investment <= 0 or price_per_contract <= 0:
        return []

    contracts = calc_num_contracts(investment, price_per_contract)
    if strike is None:
        strike = strikes[0]

    def profit_at(price: float) -> tuple[float, float]:
        profit = calc_net_profit(strikes, is_call, contracts, price, investment)
        return profit, calc_profit_percent(profit, investment)

    scenarios = []

    loss, loss_pct = profit_at(strike)
    scenarios.append(
        ProfitScenario(
            price=strike,
            price_delta="At or below" if is_call else "At or above",
            profit=loss,
            profit_percent=loss_pct,
            is_profit=False,
            label="Max Loss",
        )
    )

    premium = investment / contracts
    breakeven = calc_vanilla_breakeven(strike, premium, is_call)
    be_profit, be_pct = profit_at(breakeven)
    scenarios.append(
        ProfitScenario(
            price=breakeven,
            price_delta="Breakeven",
            profit=be_profit,
            profit_percent=be_pct,
            is_profit=False,
            label="Breakeven",
        )
    )

    sign = "+" if is_call else "-"
    for offset in offsets:
        price = strike * (1 + offset) if is_call else strike * (1 - offset)
        profit, profit_pct = profit_at(price)
        scenarios.append(
            ProfitScenario(
                price=price,
                price_delta=f"Strike {sign}{offset * 100:.0f}%",
                profit=profit,
                profit_percent=profit_pct,
                is_profit=profit > 0,
                label=f"{sign}{offset * 100:.0f}% Move",
            )
        )

    return scenarios


def _format_price(price: float) -> str:
    """3000.0 -> '3,000', 2999.5 -> '2,999.5'."""
    return f"{price:,.2f}".rstrip("0").rstrip(".")
