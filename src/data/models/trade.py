"""Settled trade models decoded from the settlement indexer history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from src.data.utils.units import PRICE_DECIMALS, USDC_DECIMALS, from_fixed_point


class TradeRecordError(ValueError):
    """Indexer history entry that cannot be decoded."""


@dataclass
class Settlement:
    """Settlement outcome of a position.

    Attributes:
        payout_buyer: Amount paid to the option buyer, in collateral units.
        settlement_price: Oracle price at expiry, if reported.
    """

    payout_buyer: float = 0.0
    settlement_price: float | None = None


@dataclass
class SettledTrade:
    """A single position from a wallet's indexer history.

    Amounts are decoded from fixed-point integers on construction via
    ``from_dict``; timestamps stay in unix seconds.
    """

    address: str
    premium: float
    entry_timestamp: int
    expiry_timestamp: int
    referrer: str = ""
    status: str = ""
    collateral_decimals: int = USDC_DECIMALS
    num_contracts: str | None = None  # raw on-chain integer
    settlement: Settlement | None = None

    @property
    def is_settled(self) -> bool:
        return self.status == "settled" and self.settlement is not None

    @property
    def payout(self) -> float:
        """Buyer payout, 0 for positions without a settlement record."""
        if self.settlement is None:
            return 0.0
        return self.settlement.payout_buyer

    @property
    def entry_date(self) -> date:
        """UTC calendar date the position was opened."""
        return datetime.fromtimestamp(self.entry_timestamp, tz=timezone.utc).date()

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        default_decimals: int = USDC_DECIMALS,
    ) -> "SettledTrade":
        """Create instance from an indexer history entry.

        Args:
            data: JSON object as returned by ``/user/{wallet}/history``.
            default_decimals: Collateral decimals used when the entry omits
                ``collateralDecimals`` (or reports 0).

        Raises:
            TradeRecordError: If a required field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise TradeRecordError(f"Trade record must be an object, got {type(data).__name__}")

        try:
            decimals = int(data.get("collateralDecimals") or default_decimals)
            premium = from_fixed_point(data["entryPremium"], decimals)
            entry_ts = int(data["entryTimestamp"])
            datetime.fromtimestamp(entry_ts, tz=timezone.utc)  # range check for entry_date
            expiry_ts = int(data["expiryTimestamp"])
            settlement = cls._parse_settlement(data.get("settlement"), decimals)
        except KeyError as e:
            raise TradeRecordError(f"Trade record missing field {e}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise TradeRecordError(f"Malformed trade record: {e}") from e
        except (OverflowError, OSError) as e:
            raise TradeRecordError(f"Entry timestamp out of range: {data['entryTimestamp']!r}") from e

        num_contracts = data.get("numContracts")
        return cls(
            address=str(data.get("address", "")),
            premium=premium,
            entry_timestamp=entry_ts,
            expiry_timestamp=expiry_ts,
            referrer=str(data.get("referrer") or ""),
            status=str(data.get("status") or ""),
            collateral_decimals=decimals,
            num_contracts=str(num_contracts) if num_contracts is not None else None,
            settlement=settlement,
        )

    @staticmethod
    def _parse_settlement(raw: Any, decimals: int) -> Settlement | None:
        if raw is None:
            return None
        payout_raw = raw.get("payoutBuyer")
        price_raw = raw.get("settlementPrice")
        return Settlement(
            payout_buyer=from_fixed_point(payout_raw, decimals) if payout_raw else 0.0,
            settlement_price=(
                from_fixed_point(price_raw, PRICE_DECIMALS) if price_raw else None
            ),
        )
