"""Fixed-point unit conversion for on-chain values.

Order books and the settlement indexer report prices, strikes, premiums and
contract sizes as integers scaled by a per-field number of decimals. The
engine layer works in plain floats, so every value crosses this module once.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable

STRIKE_DECIMALS = 8  # Chainlink price feed standard
PRICE_DECIMALS = 8
USDC_DECIMALS = 6
CONTRACT_DECIMALS = 8

RawAmount = int | str | float | Decimal


def from_fixed_point(raw: RawAmount, decimals: int) -> float:
    """Convert a fixed-point integer to a float.

    Args:
        raw: Raw on-chain integer (int, or a decimal string as returned by JSON APIs).
        decimals: Number of decimal places the integer is scaled by.

    Returns:
        The decimal value as a float.

    Raises:
        ValueError: If ``decimals`` is negative or ``raw`` is not an integer amount.

    Example:
        >>> from_fixed_point("10000000000", 8)
        100.0
        >>> from_fixed_point(1_500_000, 6)
        1.5
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    if isinstance(raw, bool):
        raise ValueError(f"Invalid fixed-point amount: {raw!r}")

    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid fixed-point amount: {raw!r}") from e

    if not value.is_finite() or value != value.to_integral_value():
        raise ValueError(f"Fixed-point amount must be an integer: {raw!r}")

    return float(value.scaleb(-decimals))


def strikes_from_raw(
    raw_strikes: Iterable[RawAmount],
    decimals: int = STRIKE_DECIMALS,
) -> list[float]:
    """Convert a raw strike list from an order payload to decimal prices."""
    return [from_fixed_point(s, decimals) for s in raw_strikes]
