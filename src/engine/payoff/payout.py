"""Payout at settlement for vanilla options, spreads, butterflies and condors.

All payoffs are piecewise linear in the settlement price S and scaled by the
number of contracts n. Payouts are gross (never negative); net profit is the
payout minus the premium paid.

Note:
    Butterflies and condors take their height from the LOWER pair of strikes
    only. For a butterfly the down-leg is normalized by w = M - L as well, so
    an asymmetric triple (U - M != M - L) does not produce the textbook
    payoff above M. Structures are listed symmetrically by the order book.
"""

from typing import Sequence

import numpy as np


def calc_payout_at_price(
    strikes: Sequence[float],
    is_call: bool,
    contracts: float,
    settlement_price: float,
) -> float:
    """Calculate the payout at settlement for a given price.

    Args:
        strikes: Strike prices in ascending order (1-4 strikes).
        is_call: Call (True) or put (False). Only used by vanilla and spread.
        contracts: Number of contracts (fractional allowed).
        settlement_price: Underlying price at settlement.

    Returns:
        Gross payout. 0 for unsupported strike counts.

    Example:
        >>> calc_payout_at_price([100, 110], True, 5, 105)
        25.0
        >>> calc_payout_at_price([90, 100, 110], True, 2, 100)
        20.0
    """
    k = [float(s) for s in strikes]
    s = float(settlement_price)
    n = contracts

    # Vanilla
    if len(k) == 1:
        strike = k[0]
        if is_call:
            return max(s - strike, 0.0) * n
        return max(strike - s, 0.0) * n

    # Spread
    if len(k) == 2:
        lower, upper = k
        if is_call:
            if s <= lower:
                return 0.0
            if s >= upper:
                return (upper - lower) * n
            return (s - lower) * n
        if s >= upper:
            return 0.0
        if s <= lower:
            return (upper - lower) * n
        return (upper - s) * n

    # Butterfly
    if len(k) == 3:
        lower, middle, upper = k
        w = middle - lower
        if s <= lower or s >= upper:
            return 0.0
        if s == middle:
            return w * n
        if s < middle:
            return ((s - lower) / w) * w * n
        # same lower-wing width on the way down
        return ((upper - s) / w) * w * n

    # Condor
    if len(k) == 4:
        k1, k2, k3, k4 = k
        max_payout = (k2 - k1) * n
        if s <= k1 or s >= k4:
            return 0.0
        if k2 <= s <= k3:
            return max_payout
        if s < k2:
            return ((s - k1) / (k2 - k1)) * max_payout
        return ((k4 - s) / (k4 - k3)) * max_payout

    return 0.0


def calc_payout_curve(
    strikes: Sequence[float],
    is_call: bool,
    contracts: float,
    prices: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Evaluate calc_payout_at_price over an array of settlement prices."""
    strikes = list(strikes)
    return np.array(
        [calc_payout_at_price(strikes, is_call, contracts, p) for p in np.asarray(prices, dtype=float)],
        dtype=float,
    )
