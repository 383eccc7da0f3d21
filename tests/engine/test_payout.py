"""Tests for payout at settlement across option structures."""

import numpy as np
import pytest

from src.engine.models import StrikeSet
from src.engine.payoff.payout import calc_payout_at_price, calc_payout_curve


class TestVanillaPayout:
    """Tests for single-strike options."""

    def test_call_in_the_money(self):
        assert calc_payout_at_price([100], True, 2, 110) == 20

    def test_call_at_and_below_strike(self):
        assert calc_payout_at_price([100], True, 2, 100) == 0
        assert calc_payout_at_price([100], True, 2, 90) == 0

    def test_put_in_the_money(self):
        assert calc_payout_at_price([100], False, 2, 90) == 20

    def test_put_at_and_above_strike(self):
        assert calc_payout_at_price([100], False, 2, 100) == 0
        assert calc_payout_at_price([100], False, 2, 110) == 0

    def test_fractional_contracts(self):
        assert calc_payout_at_price([3000], True, 0.25, 3100) == pytest.approx(25.0)

    @pytest.mark.parametrize("d", [0, 0.5, 5, 37.25, 99])
    def test_call_put_mirror(self, d):
        """Call at K+d pays the same as put at K-d."""
        call = calc_payout_at_price([100], True, 3, 100 + d)
        put = calc_payout_at_price([100], False, 3, 100 - d)
        assert call == pytest.approx(put)

    def test_call_non_decreasing(self):
        payouts = calc_payout_curve([100], True, 1.5, np.linspace(0, 200, 401))
        assert np.all(np.diff(payouts) >= 0)

    def test_put_non_increasing(self):
        payouts = calc_payout_curve([100], False, 1.5, np.linspace(0, 200, 401))
        assert np.all(np.diff(payouts) <= 0)

    def test_call_upside_unbounded(self):
        assert calc_payout_at_price([100], True, 1, 1_000_000) == 999_900


class TestSpreadPayout:
    """Tests for two-strike spreads."""

    def test_call_spread_ramp(self):
        assert calc_payout_at_price([100, 110], True, 5, 105) == 25

    def test_call_spread_capped(self):
        assert calc_payout_at_price([100, 110], True, 5, 115) == 50
        assert calc_payout_at_price([100, 110], True, 5, 110) == 50

    def test_call_spread_below_lower(self):
        assert calc_payout_at_price([100, 110], True, 5, 100) == 0
        assert calc_payout_at_price([100, 110], True, 5, 50) == 0

    def test_put_spread(self):
        assert calc_payout_at_price([100, 110], False, 5, 95) == 50
        assert calc_payout_at_price([100, 110], False, 5, 100) == 50
        assert calc_payout_at_price([100, 110], False, 5, 105) == 25
        assert calc_payout_at_price([100, 110], False, 5, 110) == 0
        assert calc_payout_at_price([100, 110], False, 5, 120) == 0

    @pytest.mark.parametrize("is_call", [True, False])
    def test_bounded(self, is_call):
        """Payout stays within [0, (U-L)*n] for every price."""
        payouts = calc_payout_curve([100, 110], is_call, 5, np.linspace(0, 300, 601))
        assert payouts.min() >= 0
        assert payouts.max() <= 50

    @pytest.mark.parametrize("is_call", [True, False])
    @pytest.mark.parametrize("boundary", [100, 110])
    def test_continuous_at_strikes(self, is_call, boundary):
        eps = 1e-9
        at = calc_payout_at_price([100, 110], is_call, 5, boundary)
        below = calc_payout_at_price([100, 110], is_call, 5, boundary - eps)
        above = calc_payout_at_price([100, 110], is_call, 5, boundary + eps)
        assert below == pytest.approx(at, abs=1e-6)
        assert above == pytest.approx(at, abs=1e-6)


class TestButterflyPayout:
    """Tests for three-strike butterflies."""

    def test_peak_at_middle(self):
        assert calc_payout_at_price([90, 100, 110], True, 2, 100) == 20

    def test_peak_ignores_direction(self):
        assert calc_payout_at_price([90, 100, 110], False, 2, 100) == 20

    def test_wings(self):
        assert calc_payout_at_price([90, 100, 110], True, 2, 95) == pytest.approx(10)
        assert calc_payout_at_price([90, 100, 110], True, 2, 105) == pytest.approx(10)

    @pytest.mark.parametrize("price", [0, 80, 90, 110, 120, 500])
    def test_zero_at_and_beyond_wings(self, price):
        assert calc_payout_at_price([90, 100, 110], True, 2, price) == 0

    def test_asymmetric_upper_leg_uses_lower_width(self):
        """Upper leg pays (U - S) * n; it is NOT normalized by U - M.

        With [90, 100, 130] the payout above the middle strike can exceed the
        peak. This mirrors the listed-structure formula and is kept on purpose
        until asymmetric butterflies are priced differently.
        """
        assert calc_payout_at_price([90, 100, 130], True, 1, 100) == 10
        assert calc_payout_at_price([90, 100, 130], True, 1, 105) == pytest.approx(25)
        assert calc_payout_at_price([90, 100, 130], True, 1, 120) == pytest.approx(10)
        assert calc_payout_at_price([90, 100, 105], True, 1, 102) == pytest.approx(3)

    def test_continuous_at_middle(self):
        eps = 1e-9
        peak = calc_payout_at_price([90, 100, 110], True, 2, 100)
        assert calc_payout_at_price([90, 100, 110], True, 2, 100 - eps) == pytest.approx(peak)
        assert calc_payout_at_price([90, 100, 110], True, 2, 100 + eps) == pytest.approx(peak)


class TestCondorPayout:
    """Tests for four-strike condors."""

    @pytest.mark.parametrize("price", np.linspace(100, 110, 21))
    def test_plateau(self, price):
        assert calc_payout_at_price([90, 100, 110, 120], True, 2, price) == 20

    def test_ramps(self):
        assert calc_payout_at_price([90, 100, 110, 120], True, 2, 95) == pytest.approx(10)
        assert calc_payout_at_price([90, 100, 110, 120], True, 2, 115) == pytest.approx(10)

    @pytest.mark.parametrize("price", [50, 90, 120, 200])
    def test_zero_outside(self, price):
        assert calc_payout_at_price([90, 100, 110, 120], True, 2, price) == 0

    def test_asymmetric_height_from_lower_pair(self):
        """Plateau height is (K2 - K1) * n even when the upper ramp is wider."""
        strikes = [90, 95, 110, 130]
        assert calc_payout_at_price(strikes, True, 1, 100) == 5
        assert calc_payout_at_price(strikes, True, 1, 92) == pytest.approx(2)
        assert calc_payout_at_price(strikes, True, 1, 120) == pytest.approx(2.5)

    def test_put_same_as_call(self):
        for price in [92, 100, 115, 125]:
            assert calc_payout_at_price([90, 100, 110, 120], False, 2, price) == (
                calc_payout_at_price([90, 100, 110, 120], True, 2, price)
            )


class TestUnsupportedStructures:
    """Unsupported strike counts pay zero instead of raising."""

    def test_no_strikes(self):
        assert calc_payout_at_price([], True, 5, 100) == 0

    def test_five_strikes(self):
        assert calc_payout_at_price([90, 95, 100, 105, 110], True, 5, 100) == 0


class TestPayoutInputs:
    """Tests for accepted input types."""

    def test_strike_set(self):
        assert calc_payout_at_price(StrikeSet((100, 110)), True, 5, 105) == 25

    def test_tuple(self):
        assert calc_payout_at_price((100,), False, 1, 40) == 60

    def test_payout_curve(self):
        curve = calc_payout_curve([90, 100, 110], True, 2, [95, 100, 105])
        np.testing.assert_allclose(curve, [10, 20, 10])
