"""Data utilities package."""

from .units import (
    CONTRACT_DECIMALS,
    PRICE_DECIMALS,
    STRIKE_DECIMALS,
    USDC_DECIMALS,
    from_fixed_point,
    strikes_from_raw,
)

__all__ = [
    "CONTRACT_DECIMALS",
    "PRICE_DECIMALS",
    "STRIKE_DECIMALS",
    "USDC_DECIMALS",
    "from_fixed_point",
    "strikes_from_raw",
]
