"""
Three ways to sum the integers 1..n.

All three agree for every integer n, returning 0 when n <= 0.
"""


def sum_to_n_a(n: int) -> int:
    """Iterative loop. O(n) time, O(1) space."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Arithmetic series closed form n(n+1)/2. O(1) time and space."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def sum_to_n_c(n: int) -> int:
    """Closed form with a right shift in place of the division. O(1)."""
    if n <= 0:
        return 0
    # n(n+1) is always even, so shifting by one is exact
    return (n * (n + 1)) >> 1
