"""Array and string exercises: pair sums, in-place rearrangements, counting."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import combinations, groupby
from operator import xor


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of every pair ``i < j`` with ``nums[i] + nums[j] == target``.

    The pairs are flattened into one list in the order they are found,
    so a single matching pair gives ``[i, j]``.
    """
    return [
        index
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a + b == target
        for index in (i, j)
    ]


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of a sorted list to its front, in place.

    Returns how many distinct values there are; the remaining slots hold
    the displaced duplicates.
    """
    if not nums:
        return 0
    last = 0
    for m, value in enumerate(nums):
        if value != nums[last]:
            last += 1
            nums[last], nums[m] = value, nums[last]
    return last + 1


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
            continue
        for j in zero_cols:
            if j < len(row):
                row[j] = 0


def single_number(nums: list[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list ``k`` steps to the right, in place.

    ``k`` must lie between 0 and ``len(nums)``.
    """
    if not 0 <= k <= len(nums):
        raise ValueError(f"rotation {k} is outside 0..{len(nums)}")
    nums.reverse()
    nums[:k] = nums[k - 1::-1] if k else []
    nums[k:] = nums[:k - 1:-1] if k else nums[::-1]


def missing_number(nums: list[int]) -> int:
    """Return the value of ``0..n`` absent from ``nums`` (``n = len(nums)``).

    When none of ``1..n`` is missing the answer is 0.
    """
    seen = set(nums)
    return next((value for value in range(1, len(nums) + 1) if value not in seen), 0)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end, in place, keeping the other values in order."""
    try:
        slot = nums.index(0)
    except ValueError:
        return
    for i, value in enumerate(nums[slot + 1:], start=slot + 1):
        if value != 0:
            nums[i], nums[slot] = nums[slot], value
            slot += 1


def find_duplicate(nums: list[int]) -> int:
    """Return the repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def max_consecutive_ones(nums: list[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def subarrays_div_by_k(nums: list[int], k: int) -> int:
    """Count the non-empty contiguous slices whose sum is divisible by ``k``."""
    remainders = Counter({0: 1})
    total = 0
    running = 0
    for value in nums:
        running = (running + value) % k
        total += remainders[running]
        remainders[running] += 1
    return total


def score_of_string(s: str) -> int:
    """Sum the absolute differences of the code points of adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in zip(s, s[1:]))