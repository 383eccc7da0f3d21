"""Engine layer data models.

Models:
    StrikeSet: Validated strike list (1-4 strictly increasing strikes)
    OptionStructure: Strikes plus call/put direction
    PayoffPoint: One sample of the payoff chart
    ProfitScenario: One row of the profit scenario table
    ProfitTarget: Best-case settlement price with label
    ScoreInputs: Aggregated tournament scoring inputs
    ScoreBreakdown: Normalized tournament sub-scores

Enums:
    StructureType: Vanilla / Spread / Butterfly / Condor / Unknown
    OptionType: Call or Put (from data layer)
"""

from src.data.models.option import OptionType  # 统一使用 data 层定义
from src.engine.models.enums import StructureType
from src.engine.models.result import (
    PayoffPoint,
    ProfitScenario,
    ProfitTarget,
    ScoreBreakdown,
    ScoreInputs,
)
from src.engine.models.structure import (
    MAX_STRIKES,
    InvalidStructureError,
    OptionStructure,
    StrikeSet,
)

__all__ = [
    # Enums
    "OptionType",
    "StructureType",
    # Structure
    "MAX_STRIKES",
    "InvalidStructureError",
    "OptionStructure",
    "StrikeSet",
    # Results
    "PayoffPoint",
    "ProfitScenario",
    "ProfitTarget",
    "ScoreBreakdown",
    "ScoreInputs",
]
