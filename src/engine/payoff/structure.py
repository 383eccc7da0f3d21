"""Structure classification and width.

Position-level helpers shared by the payoff evaluator and the trade card.
"""

from typing import Sequence

from src.engine.models.enums import StructureType
from src.engine.models.structure import StrikeSet


def classify_structure(strike_count: int) -> StructureType:
    """Classify an option structure by its number of strikes.

    Args:
        strike_count: Number of strikes in the order.

    Returns:
        VANILLA, SPREAD, BUTTERFLY or CONDOR for 1-4 strikes.
        UNKNOWN for any other count (never raises).

    Example:
        >>> classify_structure(3).value
        'Butterfly'
        >>> classify_structure(5).value
        'Unknown'
    """
    return StructureType.from_strike_count(strike_count)


def calc_strike_width(strikes: Sequence[float]) -> float:
    """Calculate the width of a structure.

    - 1 strike: the strike itself (display reference, not a real width)
    - 2 strikes: distance between the strikes
    - 3 strikes: M - L (lower wing of the butterfly)
    - 4 strikes: K2 - K1 (lower ramp of the condor)

    Args:
        strikes: Strike prices in ascending order.

    Returns:
        Structure width, 0 for unsupported strike counts.
    """
    k = list(strikes)

    if len(k) == 1:
        return k[0]
    if len(k) == 2:
        return abs(k[1] - k[0])
    if len(k) in (3, 4):
        return k[1] - k[0]
    return 0.0


def calc_max_payout(strike_width: float, contracts: float) -> float:
    """Max payout of a bounded structure: width x contracts."""
    return strike_width * contracts


def validate_strikes(strikes: Sequence[float]) -> StrikeSet:
    """Validate a strike list before pricing.

    Raises:
        InvalidStructureError: If the count is not 1-4, or strikes are not
            strictly increasing positive prices.
    """
    if isinstance(strikes, StrikeSet):
        return strikes
    return StrikeSet.of(strikes)
