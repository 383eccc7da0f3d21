"""Option payoff calculations.

- structure: classification, strike width, max payout, strict validation
- payout: payout at settlement per structure (core evaluator)
- profit: net profit, breakevens, payoff chart and scenario table
"""

from src.engine.payoff.payout import calc_payout_at_price, calc_payout_curve
from src.engine.payoff.profit import (
    DEFAULT_SCENARIO_OFFSETS,
    build_payoff_curve,
    build_profit_scenarios,
    calc_net_profit,
    calc_num_contracts,
    calc_optimal_profit_price,
    calc_profit_percent,
    calc_vanilla_breakeven,
    find_breakevens,
)
from src.engine.payoff.structure import (
    calc_max_payout,
    calc_strike_width,
    classify_structure,
    validate_strikes,
)

__all__ = [
    # Structure
    "classify_structure",
    "calc_strike_width",
    "calc_max_payout",
    "validate_strikes",
    # Payout
    "calc_payout_at_price",
    "calc_payout_curve",
    # Profit
    "DEFAULT_SCENARIO_OFFSETS",
    "calc_num_contracts",
    "calc_net_profit",
    "calc_profit_percent",
    "calc_vanilla_breakeven",
    "find_breakevens",
    "calc_optimal_profit_price",
    "build_payoff_curve",
    "build_profit_scenarios",
]
