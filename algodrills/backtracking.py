"""Backtracking exercises: combination sums, subsets and palindrome partitions."""

from __future__ import annotations

from collections.abc import Iterator


def combination_sum2(candidates: list[int], target: int) -> list[list[int]]:
    """Return every distinct combination of ``candidates`` summing to ``target``.

    Each candidate is used at most once. Combinations come out sorted, and in
    lexicographic order of the sorted candidates.
    """
    pool = sorted(candidates)

    def search(start: int, remaining: int, chosen: tuple[int, ...]) -> Iterator[list[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        if remaining < 0:
            return
        previous = None
        for offset, value in enumerate(pool[start:]):
            if offset > 0 and value == previous:
                continue
            previous = value
            yield from search(start + offset + 1, remaining - value, (*chosen, value))

    return list(search(0, target, ()))


def subsets_with_dup(nums: list[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each sorted, in lexicographic order."""
    pool = sorted(nums)
    found: set[tuple[int, ...]] = {()}
    for value in pool:
        found |= {(*subset, value) for subset in found}
    return [list(subset) for subset in sorted(found)]


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same backwards."""
    return s == s[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into pieces that are all palindromes.

    Partitions are listed with shorter first pieces before longer ones.
    """

    def split(start: int, pieces: tuple[str, ...]) -> Iterator[list[str]]:
        if start == len(s):
            yield list(pieces)
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                yield from split(end, (*pieces, piece))

    return list(split(0, ()))