"""Stock trading with at most k transactions, solved by Lagrangian relaxation (Aliens trick)."""

from __future__ import annotations

from collections.abc import Sequence


def _calc(prices: Sequence[int], penalty: int) -> tuple[int, int]:
    sell = (0, 0)
    hold = (-prices[0], 0)
    for price in prices[1:]:
        cand = (hold[0] + price - penalty, hold[1] + 1)
        if sell[0] > cand[0]:
            new_sell = sell
        elif sell[0] < cand[0]:
            new_sell = cand
        else:
            new_sell = (sell[0], min(sell[1], cand[1]))
        buy = sell[0] - price
        if buy > hold[0]:
            new_hold = (buy, sell[1])
        elif buy < hold[0]:
            new_hold = hold
        else:
            new_hold = (hold[0], min(sell[1], hold[1]))
        sell, hold = new_sell, new_hold
    return sell


def max_profit(prices: Sequence[int], k: int) -> int:
    """Largest profit from at most ``k`` non-overlapping buy-then-sell trades."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if not prices:
        return 0
    value, count = _calc(prices, 0)
    if count <= k:
        return value
    lo, hi = 0, max(prices) - min(prices) + 1
    while lo < hi:
        mid = (lo + hi) // 2
        if _calc(prices, mid)[1] <= k:
            hi = mid
        else:
            lo = mid + 1
    return _calc(prices, lo)[0] + k * lo