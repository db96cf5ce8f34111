# algodrills

Classic algorithm exercises written as plain Python functions. It uses only
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.arrays`

Functions on lists of integers and on strings. `remove_duplicates`,
`set_zeroes`, `rotate` and `move_zeroes` change their argument in place.

- `two_sum(nums, target)` – indices of every pair `i < j` summing to
  `target`, flattened into one list in the order found.
- `remove_duplicates(nums)` – moves the distinct values of a sorted list to
  the front and returns how many there are.
- `set_zeroes(matrix)` – zeroes every row and column that holds a zero.
- `single_number(nums)` – the value that appears once when all others appear
  twice.
- `rotate(nums, k)` – rotates `k` steps to the right; raises `ValueError`
  unless `0 <= k <= len(nums)`.
- `missing_number(nums)` – the value of `1..n` absent from `nums`, or 0 when
  none is.
- `move_zeroes(nums)` – moves zeros to the end, keeping the other values in
  order.
- `find_duplicate(nums)` – the repeated value among `n + 1` values drawn from
  `1..n`.
- `max_consecutive_ones(nums)` – length of the longest run of ones.
- `subarrays_div_by_k(nums, k)` – number of non-empty contiguous slices whose
  sum is divisible by `k`.
- `score_of_string(s)` – sum of absolute differences of adjacent code points.

### `algodrills.searching`

Binary search on sorted or rotated sequences.

- `binary_search(nums, target)` – an index of `target`, or -1.
- `search_range(nums, target)` – `[first, last]` positions, or `[-1, -1]`.
- `search_insert(nums, target)` – an index of `target`, or where it would be
  inserted.
- `find_min(nums)` – smallest value of a rotated sorted list; raises
  `ValueError` for an empty list.
- `find_peak_element(nums)` – index of a value larger than its neighbours;
  raises `ValueError` for an empty list.
- `single_non_duplicate(nums)` – the lone value in a sorted list of pairs, or
  -1 for an empty list.

### `algodrills.backtracking`

- `combination_sum2(candidates, target)` – distinct combinations summing to
  `target`, each candidate used at most once.
- `subsets_with_dup(nums)` – every distinct subset, each sorted, in
  lexicographic order.
- `is_palindrome(s)` – whether `s` reads the same backwards.
- `palindrome_partitions(s)` – every way to cut `s` into palindromes.

### `algodrills.dynamic`

- `climb_stairs(n)` – ways to climb `n` steps one or two at a time
  (`climb_stairs(0) == 0`); raises `ValueError` for negative `n`.
- `fib(n)` – the `n`-th Fibonacci number; raises `ValueError` for negative
  `n`.
- `coin_change(coins, amount)` – fewest coins making `amount`, or -1; raises
  `ValueError` for non-positive coin values.
- `get_money_amount(n)` – money needed to be sure of guessing a number in
  `1..n`.
- `can_partition(nums)` – whether `nums` splits into two parts with equal
  sums.

### `algodrills.trees`

`TreeNode` is a dataclass with `val`, `left` and `right`. `tree_from_list`
builds a tree from level-order values in which `None` marks a missing child.

- `is_same_tree(p, q)`
- `max_depth(root)`
- `is_balanced(root)`
- `path_sum(root, target_sum)` – values of every root-to-leaf path summing to
  `target_sum`.
- `binary_tree_paths(root)` – every root-to-leaf path as `"a->b->c"`.
- `diameter_of_binary_tree(root)` – edges on the longest path between two
  nodes.

## Example

```python
from algodrills.arrays import two_sum
from algodrills.searching import search_range
from algodrills.dynamic import coin_change
from algodrills.trees import tree_from_list, binary_tree_paths

two_sum([2, 7, 11, 15], 9)               # [0, 1]
search_range([5, 7, 7, 8, 8, 10], 8)     # [3, 4]
coin_change([1, 2, 5], 11)               # 3
binary_tree_paths(tree_from_list([1, 2, 3, None, 5]))  # ['1->2->5', '1->3']
```

## What it does not do

This is a library of functions only. It has no command-line tool, and it does
not read or validate problem input beyond the checks listed above.