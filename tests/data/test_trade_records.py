"""Tests for fixed-point conversion and indexer trade records."""

from datetime import date

import pytest

from src.data.models.trade import SettledTrade, TradeRecordError
from src.data.utils.units import from_fixed_point, strikes_from_raw


def _record(**overrides) -> dict:
    record = {
        "address": "0xposition",
        "entryPremium": "25000000",  # 25 USDC
        "numContracts": "400000000",
        "collateralDecimals": 6,
        "expiryTimestamp": 1736150400,  # 2025-01-06 08:00 UTC
        "entryTimestamp": 1735776000,  # 2025-01-02 00:00 UTC
        "referrer": "0xREF",
        "status": "settled",
        "settlement": {
            "payoutBuyer": "40000000",
            "settlementPrice": "310000000000",
        },
    }
    record.update(overrides)
    return record


class TestFromFixedPoint:
    """Tests for from_fixed_point."""

    def test_strike_decimals(self):
        assert from_fixed_point("10000000000", 8) == 100.0

    def test_usdc_decimals(self):
        assert from_fixed_point(1_500_000, 6) == 1.5

    def test_zero(self):
        assert from_fixed_point("0", 6) == 0.0

    def test_zero_decimals(self):
        assert from_fixed_point(42, 0) == 42.0

    def test_large_amount(self):
        # 18-decimal contract sizes exceed float precision as integers
        assert from_fixed_point("1234500000000000000", 18) == pytest.approx(1.2345)

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", True, float("inf")])
    def test_invalid_amount(self, raw):
        with pytest.raises(ValueError):
            from_fixed_point(raw, 6)

    def test_negative_decimals(self):
        with pytest.raises(ValueError):
            from_fixed_point(100, -1)

    def test_strikes_from_raw(self):
        assert strikes_from_raw(["300000000000", 310000000000]) == [3000.0, 3100.0]

    def test_strikes_from_raw_custom_decimals(self):
        assert strikes_from_raw(["3000000000"], decimals=6) == [3000.0]


class TestSettledTrade:
    """Tests for SettledTrade.from_dict."""

    def test_from_dict(self):
        trade = SettledTrade.from_dict(_record())
        assert trade.address == "0xposition"
        assert trade.premium == 25.0
        assert trade.payout == 40.0
        assert trade.settlement.settlement_price == 3100.0
        assert trade.num_contracts == "400000000"
        assert trade.referrer == "0xREF"
        assert trade.is_settled
        assert trade.entry_date == date(2025, 1, 2)
        assert trade.expiry_timestamp == 1736150400

    @pytest.mark.parametrize("decimals", [None, 0])
    def test_default_decimals(self, decimals):
        record = _record(collateralDecimals=decimals)
        assert SettledTrade.from_dict(record).premium == 25.0
        assert SettledTrade.from_dict(record, default_decimals=8).premium == 0.25

    def test_missing_collateral_decimals(self):
        record = _record()
        del record["collateralDecimals"]
        assert SettledTrade.from_dict(record).collateral_decimals == 6

    def test_without_settlement(self):
        trade = SettledTrade.from_dict(_record(settlement=None))
        assert trade.payout == 0.0
        assert not trade.is_settled

    def test_empty_settlement_counts_as_settled(self):
        trade = SettledTrade.from_dict(_record(settlement={}))
        assert trade.is_settled
        assert trade.payout == 0.0
        assert trade.settlement.settlement_price is None

    def test_open_position(self):
        trade = SettledTrade.from_dict(_record(status="open"))
        assert not trade.is_settled

    def test_settlement_without_payout(self):
        trade = SettledTrade.from_dict(_record(settlement={"settlementPrice": "290000000000"}))
        assert trade.payout == 0.0
        assert trade.settlement.settlement_price == 2900.0
        assert trade.is_settled

    def test_string_timestamps(self):
        trade = SettledTrade.from_dict(_record(entryTimestamp="1735776000"))
        assert trade.entry_timestamp == 1735776000

    def test_missing_premium(self):
        record = _record()
        del record["entryPremium"]
        with pytest.raises(TradeRecordError, match="entryPremium"):
            SettledTrade.from_dict(record)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"entryTimestamp": "soon"},
            {"entryPremium": "25.5"},
            {"settlement": {"payoutBuyer": "lots"}},
            {"expiryTimestamp": None},
        ],
    )
    def test_malformed(self, overrides):
        with pytest.raises(TradeRecordError):
            SettledTrade.from_dict(_record(**overrides))

    @pytest.mark.parametrize("entry_ts", [10**20, -(10**20)])
    def test_entry_timestamp_out_of_range(self, entry_ts):
        with pytest.raises(TradeRecordError, match="out of range"):
            SettledTrade.from_dict(_record(entryTimestamp=entry_ts))

    def test_not_an_object(self):
        with pytest.raises(TradeRecordError):
            SettledTrade.from_dict(["not", "a", "record"])
