"""Binary-search exercises over sorted and rotated sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right


def binary_search(nums: list[int], target: int) -> int:
    """Return an index of ``target`` in the sorted list, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_range(nums: list[int], target: int) -> list[int]:
    """Return ``[first, last]`` positions of ``target`` in a sorted list, or ``[-1, -1]``."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: list[int], target: int) -> int:
    """Return an index of ``target``, or where it would be inserted to keep order."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return low


def find_min(nums: list[int]) -> int:
    """Return the smallest value of a rotated sorted list of distinct values."""
    if not nums:
        raise ValueError("find_min() needs a non-empty list")
    low, high = 0, len(nums) - 1
    smallest = nums[0]
    while low <= high:
        mid = (low + high) // 2
        if nums[low] <= nums[mid] <= nums[high]:
            smallest = min(smallest, nums[low])
            break
        if nums[mid] >= nums[low]:
            smallest = min(smallest, nums[low])
            low = mid + 1
        elif nums[mid] <= nums[high]:
            smallest = min(smallest, nums[mid])
            high = mid - 1
        else:
            raise ValueError("list is not a rotated sorted sequence")
    return smallest


def find_peak_element(nums: list[int]) -> int:
    """Return the index of a value larger than its neighbours, or -1 if none is found."""
    if not nums:
        raise ValueError("find_peak_element() needs a non-empty list")
    if len(nums) == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return len(nums) - 1
    low, high = 1, len(nums) - 2
    while low <= high:
        mid = (low + high) // 2
        rising = nums[mid - 1] < nums[mid]
        if rising and nums[mid] > nums[mid + 1]:
            return mid
        if rising:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def single_non_duplicate(nums: list[int]) -> int:
    """Return the lone value in a sorted list where every other value appears twice.

    Returns -1 for an empty list.
    """
    start, end = 0, len(nums) - 1
    while start <= end:
        if start == end:
            return nums[start]
        mid = (start + end) // 2
        if mid % 2 == 0:
            if nums[mid] == nums[mid + 1]:
                start = mid + 2
            else:
                end = mid
        elif nums[mid] == nums[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    return -1