"""Array and hashing exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

DELIMITER = ":;"

_SUDOKU_DIGITS = frozenset("123456789")


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def encode(strs: Iterable[str]) -> str:
    """Join strings into one, each followed by the delimiter."""
    return "".join(f"{item}{DELIMITER}" for item in strs)


def decode(s: str) -> list[str]:
    """Split a string produced by :func:`encode` back into its parts."""
    return s.split(DELIMITER)[:-1]


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = sorted(set(nums))
    if not values:
        return 0
    best = current = 1
    for previous, value in zip(values, values[1:]):
        if value == previous + 1:
            current += 1
            best = max(best, current)
        else:
            current = 1
    return best


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the k most frequent values, most frequent first."""
    if k <= 0:
        return []
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError(f"k={k} exceeds the number of distinct values ({len(counts)})")
    return [value for value, _ in counts.most_common(k)]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices [i, j], i < j, of two values summing to target, or []."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    return []


def two_sum_improved(nums: Iterable[int], target: int) -> list[int]:
    """Single-pass two-sum; returns [later index, earlier index], or []."""
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [i, partner]
        seen[value] = i
    return []


def is_anagram(s: str, t: str) -> bool:
    """Return True if t is a rearrangement of the characters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def _has_repeated_digit(cells: Iterable[str]) -> bool:
    digits = [cell for cell in cells if cell.isascii() and cell.isdigit()]
    return len(digits) != len(set(digits))


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Check that no row, column or 3x3 box of a 9x9 board repeats a digit."""
    rows = [list(row) for row in board]
    columns = [list(column) for column in zip(*rows)]
    boxes: list[list[str]] = [[] for _ in rows]
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            boxes[(i // 3) * 3 + j // 3].append(cell)
    return not any(_has_repeated_digit(unit) for unit in (*rows, *columns, *boxes))


def is_valid_sudoku_optimized(board: Sequence[Sequence[str]]) -> bool:
    """Single-pass Sudoku check; cells must be '.' or '1'-'9'."""
    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    boxes: list[set[str]] = [set() for _ in range(9)]
    for i, row in enumerate(board[:9]):
        for j, cell in enumerate(row[:9]):
            if cell == ".":
                continue
            if cell not in _SUDOKU_DIGITS:
                raise ValueError(f"invalid Sudoku cell {cell!r} at ({i}, {j})")
            box = (i // 3) * 3 + j // 3
            if cell in rows[i] or cell in cols[j] or cell in boxes[box]:
                return False
            rows[i].add(cell)
            cols[j].add(cell)
            boxes[box].add(cell)
    return True