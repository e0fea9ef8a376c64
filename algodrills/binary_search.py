"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence


def search(nums: Sequence[int], target: int) -> int:
    """Return the index of target in ascending nums, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1