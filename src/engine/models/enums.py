"""Engine layer enumerations.

Centralized location for all enums used in the engine layer.
"""

from enum import Enum


class StructureType(Enum):
    """Option structure, determined by the number of strikes."""

    VANILLA = "Vanilla"  # 1 strike
    SPREAD = "Spread"  # 2 strikes
    BUTTERFLY = "Butterfly"  # 3 strikes
    CONDOR = "Condor"  # 4 strikes
    UNKNOWN = "Unknown"

    @classmethod
    def from_strike_count(cls, strike_count: int) -> "StructureType":
        """Map a strike count to its structure, UNKNOWN for unsupported counts."""
        return _STRUCTURE_BY_COUNT.get(strike_count, cls.UNKNOWN)

    @property
    def strike_count(self) -> int | None:
        for count, structure in _STRUCTURE_BY_COUNT.items():
            if structure is self:
                return count
        return None


_STRUCTURE_BY_COUNT = {
    1: StructureType.VANILLA,
    2: StructureType.SPREAD,
    3: StructureType.BUTTERFLY,
    4: StructureType.CONDOR,
}
