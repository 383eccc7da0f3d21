"""Calculation Engine Layer.

Pure, stateless calculations for the options game: nothing here performs I/O,
logs, or keeps state between calls.

Architecture:
- models/: Value types (StrikeSet, OptionStructure, result models, enums)
- payoff/: Option payoff calculations
    - structure: Structure classification, strike width, max payout
    - payout: Payout at settlement (vanilla, spread, butterfly, condor)
    - profit: Net profit, breakevens, payoff chart, scenario table
- tournament/: Tournament scoring
    - score: Weighted composite score
    - streak: Consecutive trading-day streaks
"""

# Base types (from models)
from src.engine.models import (
    InvalidStructureError,
    OptionStructure,
    OptionType,
    PayoffPoint,
    ProfitScenario,
    ProfitTarget,
    ScoreBreakdown,
    ScoreInputs,
    StrikeSet,
    StructureType,
)

# ===== Payoff =====
from src.engine.payoff import (
    build_payoff_curve,
    build_profit_scenarios,
    calc_max_payout,
    calc_net_profit,
    calc_num_contracts,
    calc_optimal_profit_price,
    calc_payout_at_price,
    calc_payout_curve,
    calc_profit_percent,
    calc_strike_width,
    calc_vanilla_breakeven,
    classify_structure,
    find_breakevens,
    validate_strikes,
)

# ===== Tournament =====
from src.engine.tournament import (
    SCORING_WEIGHTS,
    advance_streak,
    calc_score_breakdown,
    calc_streak_days,
    calc_tournament_score,
)

__all__ = [
    # Base types
    "InvalidStructureError",
    "OptionStructure",
    "OptionType",
    "PayoffPoint",
    "ProfitScenario",
    "ProfitTarget",
    "ScoreBreakdown",
    "ScoreInputs",
    "StrikeSet",
    "StructureType",
    # Payoff
    "classify_structure",
    "calc_strike_width",
    "calc_max_payout",
    "validate_strikes",
    "calc_payout_at_price",
    "calc_payout_curve",
    "calc_num_contracts",
    "calc_net_profit",
    "calc_profit_percent",
    "calc_vanilla_breakeven",
    "find_breakevens",
    "calc_optimal_profit_price",
    "build_payoff_curve",
    "build_profit_scenarios",
    # Tournament
    "SCORING_WEIGHTS",
    "calc_score_breakdown",
    "calc_tournament_score",
    "calc_streak_days",
    "advance_streak",
]
