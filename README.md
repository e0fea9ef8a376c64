# algodrills

Small, dependency-free solutions to well-known algorithm exercises, grouped by technique.
Every function is plain Python and leaves its input sequences unchanged, except the
linked-list functions, which relink the nodes they are given.

## Installation

```
pip install algodrills
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.arrays` | `contains_duplicate`, `encode`, `decode`, `group_anagrams`, `longest_consecutive`, `top_k_frequent`, `two_sum`, `two_sum_improved`, `is_anagram`, `is_valid_sudoku`, `is_valid_sudoku_optimized`, `DELIMITER` |
| `algodrills.binary_search` | `search` |
| `algodrills.linked_list` | `ListNode`, `has_cycle`, `merge_two_lists`, `reverse_list` |
| `algodrills.sliding_window` | `max_profit`, `length_of_longest_substring` |
| `algodrills.stacks` | `is_valid` |
| `algodrills.two_pointers` | `max_area`, `three_sum`, `trap`, `two_sum_sorted`, `is_palindrome` |

## Examples

```python
from algodrills.arrays import contains_duplicate, encode, decode, two_sum
from algodrills.binary_search import search
from algodrills.stacks import is_valid
from algodrills.two_pointers import trap, is_palindrome, three_sum

contains_duplicate([1, 2, 3, 1])           # True
decode(encode(["neet", "code"]))           # ["neet", "code"]
two_sum([2, 7, 11, 15], 9)                 # [0, 1]
search([-1, 0, 3, 5, 9, 12], 9)            # 4
is_valid("([{}])")                         # True
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) # 6
three_sum([-2, 0, 1, 1, 2])                # [[-2, 0, 2], [-2, 1, 1]]
is_palindrome("A man, a plan, a canal: Panama")  # True
```

Linked-list functions take and return `ListNode` chains (`None` is the empty list):

```python
from algodrills.linked_list import ListNode, reverse_list

head = ListNode(1, ListNode(2, ListNode(3)))
head = reverse_list(head)   # 3 -> 2 -> 1
```

## Details worth knowing

- `encode` appends `DELIMITER` (`":;"`) after every string; `decode` splits on it, so a
  string that itself contains `":;"` does not survive the round trip.
- `two_sum` returns `[i, j]` with `i < j`; `two_sum_improved` returns `[later, earlier]`.
  Both return `[]` when no pair exists. `two_sum_sorted` expects ascending input and
  returns 1-based indices.
- `top_k_frequent` returns the values most frequent first, `[]` for `k <= 0`, and raises
  `ValueError` when `k` exceeds the number of distinct values.
- `group_anagrams` returns groups in the order their first word appears.
- `is_valid_sudoku` ignores any cell that is not a digit; `is_valid_sudoku_optimized`
  accepts only `"."` and `"1"`–`"9"` and raises `ValueError` for anything else.
- `is_valid` ignores characters other than `()[]{}`.
- `ListNode` instances compare by identity, so `has_cycle` detects a revisited node,
  not a repeated value.

## What this package does not do

It is a library of functions only: there is no command-line tool, and nothing is read
from or written to files.