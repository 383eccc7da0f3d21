"""Data models for the data layer."""

from src.data.models.option import OptionType
from src.data.models.trade import Settlement, SettledTrade, TradeRecordError

__all__ = [
    "OptionType",
    "Settlement",
    "SettledTrade",
    "TradeRecordError",
]
