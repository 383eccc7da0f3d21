"""Data layer module for decoding indexer records and on-chain units."""

from src.data.models import OptionType, Settlement, SettledTrade, TradeRecordError
from src.data.utils.units import from_fixed_point, strikes_from_raw

__all__ = [
    "OptionType",
    "Settlement",
    "SettledTrade",
    "TradeRecordError",
    "from_fixed_point",
    "strikes_from_raw",
]
