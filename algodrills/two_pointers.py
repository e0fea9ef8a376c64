"""Two-pointer exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the largest water area held between two of the given lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        width = right - left
        if height[left] >= height[right]:
            best = max(best, height[right] * width)
            right -= 1
        else:
            best = max(best, height[left] * width)
            left += 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of values that sums to zero."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i in range(count - 2):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total == 0:
                result.append([values[i], values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
                while left < right and values[right] == values[right + 1]:
                    right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map traps."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    trapped = 0
    while left < right:
        if height[left] < height[right]:
            left_max = max(left_max, height[left])
            trapped += left_max - height[left]
            left += 1
        else:
            right_max = max(right_max, height[right])
            trapped += right_max - height[right]
            right -= 1
    return trapped


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two values in ascending numbers summing to target, or []."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def is_palindrome(s: str) -> bool:
    """Return True if s reads the same both ways, ignoring case and non-alphanumerics."""
    kept = [char.lower() for char in s if char.isalpha() or char.isdecimal()]
    return kept == kept[::-1]