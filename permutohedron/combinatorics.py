from functools import reduce
from operator import mul


def factorial(n: int) -> int:
    """number of permutations of n distinct elements; 1 for any n < 1"""
    return reduce(mul, range(1, n + 1), 1)
