"""Option structure models."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from src.data.models.option import OptionType  # 统一使用 data 层定义
from src.engine.models.enums import StructureType

MAX_STRIKES = 4


class InvalidStructureError(ValueError):
    """Strike list that does not describe a supported option structure."""


@dataclass(frozen=True)
class StrikeSet:
    """Validated, strictly increasing list of 1-4 positive strikes.

    The payoff functions accept plain sequences and never validate; build a
    StrikeSet when malformed input must be rejected instead of priced at zero.

    Example:
        >>> StrikeSet((90, 100, 110)).structure_type
        <StructureType.BUTTERFLY: 'Butterfly'>
        >>> StrikeSet((110, 100))
        Traceback (most recent call last):
        ...
        InvalidStructureError: Strikes must be strictly increasing: [110.0, 100.0]
    """

    strikes: tuple[float, ...]

    def __post_init__(self) -> None:
        try:
            values = tuple(float(s) for s in self.strikes)
        except (TypeError, ValueError) as e:
            raise InvalidStructureError(f"Strikes must be numeric: {self.strikes!r}") from e

        if not 1 <= len(values) <= MAX_STRIKES:
            raise InvalidStructureError(
                f"Expected 1-{MAX_STRIKES} strikes, got {len(values)}"
            )
        if any(not math.isfinite(v) or v <= 0 for v in values):
            raise InvalidStructureError(f"Strikes must be positive: {list(values)}")
        if any(lo >= hi for lo, hi in zip(values, values[1:])):
            raise InvalidStructureError(
                f"Strikes must be strictly increasing: {list(values)}"
            )

        object.__setattr__(self, "strikes", values)

    @classmethod
    def of(cls, strikes: Iterable[float]) -> "StrikeSet":
        return cls(tuple(strikes))

    def __len__(self) -> int:
        return len(self.strikes)

    def __iter__(self) -> Iterator[float]:
        return iter(self.strikes)

    def __getitem__(self, index: int) -> float:
        return self.strikes[index]

    @property
    def structure_type(self) -> StructureType:
        return StructureType.from_strike_count(len(self.strikes))

    @property
    def width(self) -> float:
        """Structure width (see calc_strike_width)."""
        from src.engine.payoff.structure import calc_strike_width

        return calc_strike_width(self.strikes)


@dataclass
class OptionStructure:
    """A priced-out option: validated strikes plus call/put direction.

    Attributes:
        strikes: Validated strike set.
        option_type: Call or Put. Ignored by butterfly and condor payoffs.
    """

    strikes: StrikeSet
    option_type: OptionType

    @property
    def is_call(self) -> bool:
        return self.option_type.is_call

    @property
    def structure_type(self) -> StructureType:
        return self.strikes.structure_type

    def payout_at(self, contracts: float, settlement_price: float) -> float:
        """Gross payout of ``contracts`` units if settled at ``settlement_price``."""
        from src.engine.payoff.payout import calc_payout_at_price

        return calc_payout_at_price(self.strikes, self.is_call, contracts, settlement_price)

    def max_payout(self, contracts: float) -> float:
        """Width-based max payout shown on the trade card.

        For vanilla options this is strike * contracts, a display reference
        rather than a bound.
        """
        from src.engine.payoff.structure import calc_max_payout

        return calc_max_payout(self.strikes.width, contracts)
