"""Dynamic-programming exercises: stairs, coins, guessing games, partitions."""

from __future__ import annotations


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time.

    Zero steps give 0 ways, as do the base cases of the recurrence.
    """
    if n < 0:
        raise ValueError(f"number of steps must not be negative, got {n}")
    if n <= 2:
        return n
    before, current = 1, 2
    for _ in range(n - 2):
        before, current = current, before + current
    return current


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError(f"index must not be negative, got {n}")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def coin_change(coins: list[int], amount: int) -> int:
    """Return the fewest coins adding up to ``amount``, or -1 when it cannot be made."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return -1
    fewest: list[int | None] = [0] + [None] * amount
    for value in range(1, amount + 1):
        options = [
            fewest[value - coin] + 1
            for coin in coins
            if coin <= value and fewest[value - coin] is not None
        ]
        fewest[value] = min(options, default=None)
    result = fewest[amount]
    return -1 if result is None else result


def get_money_amount(n: int) -> int:
    """Return the money needed to be sure of guessing a number in ``1..n``.

    A wrong guess ``g`` costs ``g``; the guesser plays to minimise the worst case.
    """
    if n <= 1:
        return 0
    cost = [[0] * (n + 2) for _ in range(n + 2)]
    for length in range(2, n + 1):
        for start in range(1, n - length + 2):
            end = start + length - 1
            cost[start][end] = min(
                guess + max(cost[start][guess - 1], cost[guess + 1][end])
                for guess in range(start, end + 1)
            )
    return cost[1][n]


def can_partition(nums: list[int]) -> bool:
    """Tell whether ``nums`` splits into two parts with equal sums."""
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    reachable = {0}
    for value in nums:
        reachable |= {r + value for r in reachable if r + value <= target}
        if target in reachable:
            return True
    return target in reachable