"""Sliding window exercises."""

from __future__ import annotations

from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        return 0
    best = 0
    peak = 0
    low = prices[0]
    for price in prices[1:]:
        if low <= price:
            peak = max(peak, price)
        else:
            peak = 0
            low = price
        if peak > best:
            best = peak - low
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best