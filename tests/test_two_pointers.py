import pytest

from algodrills.two_pointers import (
    is_palindrome,
    max_area,
    three_sum,
    trap,
    two_sum_sorted,
)


@pytest.mark.parametrize(
    ("height", "expected"),
    [
        ([1, 8, 6, 2, 5, 4, 8, 3, 7], 49),
        ([1, 1], 1),
        ([4, 3, 2, 1, 4], 16),
        ([1, 2, 1], 2),
        ([2, 3, 10, 5, 7, 8, 9], 36),
        ([1, 2, 4, 3], 4),
    ],
)
def test_max_area(height, expected):
    assert max_area(height) == expected


def test_max_area_too_few_lines():
    assert max_area([7]) == 0


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([-2, 0, 1, 1, 2], [[-2, 0, 2], [-2, 1, 1]]),
        ([0, 1, 1], []),
        ([0, 0, 0], [[0, 0, 0]]),
        ([1, 2, 3], []),
        ([0, 0, 0, 0], [[0, 0, 0]]),
    ],
)
def test_three_sum(nums, expected):
    assert sorted(three_sum(nums)) == sorted(expected)


def test_three_sum_leaves_input_untouched():
    nums = [2, -1, 0, 1, -1, -4]
    three_sum(nums)
    assert nums == [2, -1, 0, 1, -1, -4]


def test_three_sum_triplets_sum_to_zero_and_are_distinct():
    result = three_sum([-1, 0, 1, 2, -1, -4, -2, -3, 3, 0, 4])
    assert all(sum(triplet) == 0 for triplet in result)
    assert len({tuple(triplet) for triplet in result}) == len(result)


@pytest.mark.parametrize(
    ("height", "expected"),
    [
        ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6),
        ([4, 2, 0, 3, 2, 5], 9),
        ([1, 2, 3, 4, 5], 0),
        ([0, 0, 0, 0], 0),
        ([5], 0),
    ],
)
def test_trap(height, expected):
    assert trap(height) == expected


@pytest.mark.parametrize(
    ("numbers", "target", "expected"),
    [
        ([2, 7, 11, 15], 9, [1, 2]),
        ([2, 3, 4], 6, [1, 3]),
        ([-1, 0], -1, [1, 2]),
        ([1, 2, 3, 4, 4, 9, 56, 90], 8, [4, 5]),
    ],
)
def test_two_sum_sorted(numbers, target, expected):
    assert two_sum_sorted(numbers, target) == expected


def test_two_sum_sorted_no_pair():
    assert two_sum_sorted([1, 2, 3], 100) == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("A man, a plan, a canal: Panama", True),
        ("race a car", False),
        (" ", True),
        ("a", True),
        ("12321", True),
        ("No 'x' in Nixon", True),
        ("hello", False),
    ],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected